from __future__ import annotations

from typing import TYPE_CHECKING

from pictocomm.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from pictocomm.core.repositories.pictogram_repository import PictogramRepository
    from pictocomm.core.schemas.save import FavoriteChanged


async def persist_favorite(*, repo: PictogramRepository, change: FavoriteChanged) -> None:
    """Store a favorite toggle emitted by a board session. No-ops on errors."""
    try:
        found = await repo.set_favorite(change.pictogram_id, change.favorite)
    except Exception as err:  # pragma: no cover - store errors
        logger.error("Favorite persistence failed for pictogram %s: %s", change.pictogram_id, err)
        return
    if not found:
        logger.warning("Favorite not persisted, pictogram %s is unknown to the store", change.pictogram_id)
