"""
Entity Collection Module

This module provides the CRUD contract shared by every entity kind in the store.
Each EntityCollection holds the records of one kind keyed by id and validates
incoming payloads with the entity's SQLModel classes:

- create payloads are validated against the create model (required fields, enums)
- update payloads are validated against the update model and merged field by field,
  then the merged record is validated again so a partial update can never leave a
  record in a state create would have refused

Lookups that miss are not errors: get/update return None and delete returns False.
"""
import logging
import threading
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlmodel import SQLModel

from agency_dash.models.project import Project, ProjectCreate, ProjectStatus, ProjectUpdate

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=SQLModel)

# A payload is either a plain mapping (e.g. a parsed JSON body) or one of the entity models
Payload = Union[Mapping[str, Any], BaseModel]


def _payload_fields(payload: Payload) -> Dict[str, Any]:
    """Return only the fields the caller actually supplied."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_unset=True)
    return dict(payload)


class EntityCollection(Generic[RecordT]):
    """
    In-memory CRUD over a single entity kind.

    All collections of a store share one re-entrant lock, so every mutation is
    applied atomically with respect to the others and concurrent request threads
    cannot lose updates.

    Args:
        name: Human readable entity name used in log messages
        record_model: Model of the stored record (with id and created_at)
        create_model: Model validating create payloads
        update_model: Model validating partial update payloads
        lock: Lock guarding the store
        clock: Callable returning the current timezone-aware datetime
    """

    def __init__(
        self,
        name: str,
        record_model: Type[RecordT],
        create_model: Type[SQLModel],
        update_model: Type[SQLModel],
        lock: threading.RLock,
        clock: Callable[[], datetime],
    ):
        self.name = name
        self.record_model = record_model
        self.create_model = create_model
        self.update_model = update_model
        self._lock = lock
        self._clock = clock
        self._records: Dict[str, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[RecordT]:
        """Return every record in insertion order."""
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records.values()]

    def get(self, record_id: str) -> Optional[RecordT]:
        """Return the record with the given id, or None if there is none."""
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def find(self, **criteria: Any) -> List[RecordT]:
        """Return the records whose attributes equal all of the given values."""
        with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._records.values()
                if self._matches(record, criteria)
            ]

    def count(self, **criteria: Any) -> int:
        with self._lock:
            return sum(1 for record in self._records.values() if self._matches(record, criteria))

    def create(self, data: Payload) -> RecordT:
        """
        Validate and store a new record.

        Args:
            data: Create payload; id and created_at are ignored if present

        Returns:
            The stored record with its generated id and creation timestamp

        Raises:
            pydantic.ValidationError: If a required field is missing or a value is invalid
        """
        fields = self.create_model.model_validate(_payload_fields(data)).model_dump()

        with self._lock:
            record_id = self._new_id()
            record = self.record_model.model_validate(
                {**fields, "id": record_id, "created_at": self._clock()}
            )
            self._records[record_id] = record

        logger.info("Created %s %s", self.name, record_id)
        return record.model_copy(deep=True)

    def update(self, record_id: str, changes: Payload) -> Optional[RecordT]:
        """
        Merge the supplied fields onto an existing record.

        Fields absent from the payload are left untouched. If validation fails the
        stored record is not modified.

        Args:
            record_id: Id of the record to update
            changes: Partial update payload

        Returns:
            The merged record, or None if no record has this id

        Raises:
            pydantic.ValidationError: If a supplied value is invalid
        """
        patch = self.update_model.model_validate(_payload_fields(changes)).model_dump(exclude_unset=True)

        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                logger.debug("Update skipped, %s %s not found", self.name, record_id)
                return None

            merged = {**current.model_dump(), **patch}
            self._apply_rules(current, patch, merged)
            record = self.record_model.model_validate(merged)
            self._records[record_id] = record

        logger.debug("Updated %s %s fields=%s", self.name, record_id, sorted(patch))
        return record.model_copy(deep=True)

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns whether a record was actually removed."""
        with self._lock:
            removed = self._records.pop(record_id, None)

        if removed is None:
            logger.debug("Delete skipped, %s %s not found", self.name, record_id)
            return False
        logger.info("Deleted %s %s", self.name, record_id)
        return True

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def _apply_rules(self, current: RecordT, patch: Dict[str, Any], merged: Dict[str, Any]) -> None:
        """Hook for entity specific side effects of an update. Mutates merged in place."""

    def _new_id(self) -> str:
        # Must be called with the lock held
        record_id = str(uuid.uuid4())
        while record_id in self._records:
            record_id = str(uuid.uuid4())
        return record_id

    @staticmethod
    def _matches(record: RecordT, criteria: Dict[str, Any]) -> bool:
        return all(getattr(record, key) == value for key, value in criteria.items())


class ProjectCollection(EntityCollection[Project]):
    """
    Project collection with client lookup and completion stamping.

    The first time an update sets status to "completed" while completed_at is unset,
    completed_at is stamped with the current time. Later status changes, including a
    reopen followed by another completion, keep the original timestamp.
    """

    def __init__(self, lock: threading.RLock, clock: Callable[[], datetime]):
        super().__init__("project", Project, ProjectCreate, ProjectUpdate, lock, clock)

    def list_by_client(self, client_id: str) -> List[Project]:
        """Return the projects belonging to a client. The client id itself is not validated."""
        return self.find(client_id=client_id)

    def _apply_rules(self, current: Project, patch: Dict[str, Any], merged: Dict[str, Any]) -> None:
        if patch.get("status") == ProjectStatus.completed and current.completed_at is None:
            merged["completed_at"] = self._clock()
            logger.info("Project %s completed at %s", current.id, merged["completed_at"].isoformat())
