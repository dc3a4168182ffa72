from __future__ import annotations

from typing import TYPE_CHECKING

from pictocomm.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pictocomm.core.repositories.pictogram_repository import PictogramRepository


async def increment_pictogram_usage(*, repo: PictogramRepository, pictogram_ids: Sequence[str]) -> None:
    """Bump the usage counter of every token of a saved sentence as background work.

    A pictogram used twice in one sentence is counted twice. No-ops on errors.
    """
    for pictogram_id in pictogram_ids:
        try:
            found = await repo.increment_usage(pictogram_id)
        except Exception as err:  # pragma: no cover - store errors
            logger.error("Usage increment failed for pictogram %s: %s", pictogram_id, err)
            continue
        if not found:
            logger.warning("Usage increment skipped for unknown pictogram %s", pictogram_id)
