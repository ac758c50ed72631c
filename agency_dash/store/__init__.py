from .collection import EntityCollection, ProjectCollection
from .memory import MemoryStore
from .seed import seed_sample_data

__all__ = ["EntityCollection", "ProjectCollection", "MemoryStore", "seed_sample_data"]
