from __future__ import annotations

from typing import TYPE_CHECKING

from pictocomm.core.errors import SentenceNotFoundError, SentenceNotSaveableError
from pictocomm.core.models.saved_sentence import SavedSentence
from pictocomm.core.schemas.save import NotSaveable
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from pictocomm.core.repositories.sentence_repository import SentenceRepository
    from pictocomm.core.schemas.view_state import ViewSnapshot
    from pictocomm.core.services.session_service import SessionService

logger = get_logger(__name__)


class SentenceService:
    """Saves board sentences and serves the saved-sentence history."""

    def __init__(self, repo: SentenceRepository, sessions: SessionService) -> None:
        self._repo = repo
        self._sessions = sessions

    async def save(self, session_id: str) -> SavedSentence:
        """Store the session's sentence and clear it once the store accepted it.

        Only the saved tokens are cleared: tiles tapped while the store was
        writing stay on the board. If the saved tokens were edited meanwhile,
        the board is left as it is.

        Raises:
            SentenceNotSaveableError: the sentence has fewer than two pictograms.
        """
        coordinator = self._sessions.get(session_id).coordinator
        outcome = coordinator.save_requested()
        if isinstance(outcome, NotSaveable):
            raise SentenceNotSaveableError(outcome.reason, outcome.token_count)

        saved = await self._repo.create(
            SavedSentence(pictogram_ids=list(outcome.pictogram_ids), text=outcome.text)
        )
        # The board may have changed while the store was writing
        current = coordinator.state.sentence
        saved_count = len(outcome.pictogram_ids)
        if current.pictogram_ids == list(outcome.pictogram_ids):
            coordinator.clear_tapped()
        elif tuple(current.pictogram_ids[:saved_count]) == outcome.pictogram_ids:
            coordinator.load_sentence(current.tokens[saved_count:])
        else:
            logger.info(
                "Board edited during save, leaving it untouched",
                extra={"session_id": session_id, "tokens": len(current)},
            )
        logger.info(
            "Sentence saved",
            extra={"session_id": session_id, "sentence_id": str(saved.id), "tokens": len(saved.pictogram_ids)},
        )
        return saved

    async def list_recent(self, limit: int = 10) -> Sequence[SavedSentence]:
        return await self._repo.list_recent(limit=limit)

    async def list_most_used(self, limit: int = 10) -> Sequence[SavedSentence]:
        return await self._repo.list_most_used(limit=limit)

    async def search(self, text: str, limit: int = 10) -> Sequence[SavedSentence]:
        return await self._repo.search(text, limit=limit)

    async def delete(self, sentence_id: UUID) -> bool:
        return await self._repo.delete(sentence_id)

    async def reuse(self, sentence_id: UUID, session_id: str) -> ViewSnapshot:
        """Load a saved sentence back into a session's board.

        Tokens are rebuilt from the session catalog; ids that are no longer in
        the catalog are skipped.
        """
        session = self._sessions.get(session_id)
        saved = await self._repo.increment_use(sentence_id)
        if saved is None:
            raise SentenceNotFoundError(sentence_id)

        tokens = []
        for pictogram_id in saved.pictogram_ids:
            pictogram = session.state.find(pictogram_id)
            if pictogram is None:
                logger.warning(
                    "Saved sentence references a pictogram missing from the catalog",
                    extra={"sentence_id": str(sentence_id), "pictogram_id": pictogram_id},
                )
                continue
            tokens.append(pictogram)
        return session.coordinator.load_sentence(tokens)
