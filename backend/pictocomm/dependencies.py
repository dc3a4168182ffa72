from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends

from pictocomm.config import settings
from pictocomm.core.repositories.implementations.memory.pictogram_repository import (
    InMemoryPictogramRepository,
)
from pictocomm.core.repositories.implementations.memory.sentence_repository import (
    InMemorySentenceRepository,
)
from pictocomm.core.repositories.pictogram_repository import PictogramRepository  # noqa: TCH001
from pictocomm.core.repositories.sentence_repository import SentenceRepository  # noqa: TCH001
from pictocomm.core.services.pictogram_service import PictogramService
from pictocomm.core.services.sentence_service import SentenceService
from pictocomm.core.services.session_service import SessionService
from pictocomm.data.demo_catalog import load_demo_catalog
from pictocomm.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_pictogram_repository() -> PictogramRepository:
    """Return the process-wide pictogram store, seeded with the demo catalog if enabled."""
    seed = load_demo_catalog() if settings.seed_demo_catalog else []
    logger.debug("Initializing pictogram store", extra={"seeded": len(seed)})
    return InMemoryPictogramRepository(seed)


@lru_cache(maxsize=1)
def get_sentence_repository() -> SentenceRepository:
    """Return the process-wide saved-sentence store."""
    return InMemorySentenceRepository()


@lru_cache(maxsize=1)
def get_session_service() -> SessionService:
    """Return the session registry shared by all requests."""
    return SessionService(
        get_pictogram_repository(),
        page_size=settings.page_size,
        max_sessions=settings.max_sessions,
        include_unapproved=not settings.restricted_viewer,
        idle_timeout=timedelta(minutes=settings.session_idle_minutes),
    )


def get_sentence_service(
    repo: SentenceRepository = Depends(get_sentence_repository),
    sessions: SessionService = Depends(get_session_service),
) -> SentenceService:
    """Get a request-scoped sentence service instance."""
    return SentenceService(repo, sessions)


def get_pictogram_service(repo: PictogramRepository = Depends(get_pictogram_repository)) -> PictogramService:
    """Get a request-scoped pictogram service for the configured viewer."""
    return PictogramService(repo, include_unapproved=not settings.restricted_viewer)


def get_favorite_policy() -> bool:
    """Whether favorite toggles are written back to the pictogram store."""
    return settings.persist_favorites
