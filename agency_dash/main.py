import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from agency_dash.core.config import Settings, settings as default_settings
from agency_dash.core.logging_config import setup_logging
from agency_dash.api.v1.api import api_router
from agency_dash.store import MemoryStore, seed_sample_data

logger = logging.getLogger(__name__)


def create_app(store: Optional[MemoryStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application around a store.

    A fresh MemoryStore is created (and seeded when SEED_SAMPLE_DATA is set) unless
    one is passed in. The store is closed when the application shuts down.
    """
    settings = settings or default_settings
    setup_logging(settings)

    if store is None:
        store = MemoryStore()
        if settings.SEED_SAMPLE_DATA:
            seed_sample_data(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s %s starting", settings.PROJECT_NAME, settings.VERSION)
        yield
        app.state.store.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )
    app.state.store = store

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Merged partial updates are re-validated inside the store
    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=422,
            content={"detail": jsonable_encoder(exc.errors(include_url=False, include_context=False))},
        )

    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
