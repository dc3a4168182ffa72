from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from pictocomm.core.models.saved_sentence import SavedSentence


class SentenceRepository(ABC):
    """Abstract repository interface for saved sentences."""

    @abstractmethod
    async def create(self, sentence: SavedSentence) -> SavedSentence:  # pragma: no cover - interface only
        """Persist a new sentence and return the stored entity."""

    @abstractmethod
    async def get(self, sentence_id: UUID) -> SavedSentence | None:  # pragma: no cover
        """Fetch a sentence by id or return None if not found."""

    @abstractmethod
    async def list_recent(self, *, limit: int = 10) -> Sequence[SavedSentence]:  # pragma: no cover
        """Return sentences ordered by creation time descending."""

    @abstractmethod
    async def list_most_used(self, *, limit: int = 10) -> Sequence[SavedSentence]:  # pragma: no cover
        """Return sentences ordered by ``times_used`` descending, newest first on ties."""

    @abstractmethod
    async def increment_use(self, sentence_id: UUID) -> SavedSentence | None:  # pragma: no cover
        """Add one to ``times_used`` and return the updated entity, or None if missing."""

    @abstractmethod
    async def delete(self, sentence_id: UUID) -> bool:  # pragma: no cover
        """Delete a sentence by id. Return True if a row was removed, False otherwise."""

    @abstractmethod
    async def search(self, text: str, *, limit: int = 10) -> Sequence[SavedSentence]:  # pragma: no cover
        """Case-insensitive substring search over the sentence text, newest first."""
