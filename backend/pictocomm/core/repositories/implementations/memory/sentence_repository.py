from __future__ import annotations

from typing import TYPE_CHECKING

from pictocomm.core.repositories.sentence_repository import SentenceRepository

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from pictocomm.core.models.saved_sentence import SavedSentence


class InMemorySentenceRepository(SentenceRepository):
    """Process-local store for saved sentences."""

    def __init__(self) -> None:
        self._items: dict[UUID, SavedSentence] = {}

    async def create(self, sentence: SavedSentence) -> SavedSentence:
        stored = sentence.model_copy(deep=True)
        self._items[stored.id] = stored
        return stored

    async def get(self, sentence_id: UUID) -> SavedSentence | None:
        return self._items.get(sentence_id)

    async def list_recent(self, *, limit: int = 10) -> Sequence[SavedSentence]:
        return self._newest_first(self._items.values())[:limit]

    async def list_most_used(self, *, limit: int = 10) -> Sequence[SavedSentence]:
        ordered = sorted(self._newest_first(self._items.values()), key=lambda s: s.times_used, reverse=True)
        return ordered[:limit]

    async def increment_use(self, sentence_id: UUID) -> SavedSentence | None:
        current = self._items.get(sentence_id)
        if current is None:
            return None
        updated = current.model_copy(update={"times_used": current.times_used + 1})
        self._items[sentence_id] = updated
        return updated

    async def delete(self, sentence_id: UUID) -> bool:
        return self._items.pop(sentence_id, None) is not None

    async def search(self, text: str, *, limit: int = 10) -> Sequence[SavedSentence]:
        needle = text.strip().lower()
        matches = [s for s in self._items.values() if needle in s.text.lower()]
        return self._newest_first(matches)[:limit]

    @staticmethod
    def _newest_first(items) -> list[SavedSentence]:
        # Insertion order breaks timestamp ties so equal clocks stay deterministic
        indexed = list(enumerate(items))
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [s for _, s in indexed]
