"""Application factory for the URL batch service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api import router
from .clients import TaskAPIClient
from .config import Settings, get_settings
from .logging import configure_logging, get_logger
from .storage import PendingTaskStorage
from .submission import SubmissionService


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[TaskAPIClient] = None,
    storage: Optional[PendingTaskStorage] = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    client = client or TaskAPIClient(settings=settings)
    submission_service = SubmissionService(client, storage=storage, settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("URL batch service starting", version=settings.version)
        yield
        try:
            await submission_service.wait_for_reconciliation()
        finally:
            await client.close()

    app = FastAPI(
        title=settings.service_name,
        description="Normalises pasted URL batches, prices them and gates task submission",
        version=settings.version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.submission_service = submission_service

    app.include_router(router)

    return app


__all__ = ["create_app"]
