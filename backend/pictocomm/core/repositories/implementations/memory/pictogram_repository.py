from __future__ import annotations

from typing import TYPE_CHECKING

from pictocomm.core.repositories.pictogram_repository import PictogramRepository
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pictocomm.core.models.pictogram import Pictogram

logger = get_logger(__name__)


class InMemoryPictogramRepository(PictogramRepository):
    """Process-local pictogram store.

    Entries keep insertion order, which doubles as creation order when usage
    counters tie. Methods never await, so each call is atomic on the event loop.
    """

    def __init__(self, pictograms: Iterable[Pictogram] = ()) -> None:
        self._items: dict[str, Pictogram] = {}
        for pictogram in pictograms:
            self._items[pictogram.id] = pictogram

    async def list_catalog(self, *, include_unapproved: bool = True) -> Sequence[Pictogram]:
        items = [p for p in self._items.values() if include_unapproved or p.approved]
        # sorted() is stable, so equal counters keep creation order
        return sorted(items, key=lambda p: p.usage_count, reverse=True)

    async def get(self, pictogram_id: str) -> Pictogram | None:
        return self._items.get(pictogram_id)

    async def add(self, pictogram: Pictogram) -> Pictogram:
        if pictogram.id in self._items:
            raise ValueError(f"Pictogram {pictogram.id} already exists")
        self._items[pictogram.id] = pictogram
        return pictogram

    async def set_favorite(self, pictogram_id: str, favorite: bool) -> bool:
        return self._update(pictogram_id, favorite=favorite)

    async def increment_usage(self, pictogram_id: str) -> bool:
        current = self._items.get(pictogram_id)
        if current is None:
            return False
        return self._update(pictogram_id, usage_count=current.usage_count + 1)

    async def list_pending(self) -> Sequence[Pictogram]:
        return [p for p in self._items.values() if p.is_pending_approval()]

    async def approve(self, pictogram_id: str) -> bool:
        return self._update(pictogram_id, approved=True)

    async def reject(self, pictogram_id: str) -> bool:
        current = self._items.get(pictogram_id)
        if current is None or not current.is_pending_approval():
            return False
        del self._items[pictogram_id]
        return True

    def _update(self, pictogram_id: str, **changes) -> bool:
        current = self._items.get(pictogram_id)
        if current is None:
            logger.debug("Update for unknown pictogram ignored", extra={"pictogram_id": pictogram_id})
            return False
        self._items[pictogram_id] = current.model_copy(update=changes)
        return True
