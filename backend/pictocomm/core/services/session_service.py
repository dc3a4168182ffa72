from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING
from uuid import uuid4

from pictocomm.core.errors import PictogramNotFoundError, SessionLimitReachedError, SessionNotFoundError
from pictocomm.core.schemas.view_state import DEFAULT_PAGE_SIZE
from pictocomm.core.services.coordinator import InteractionCoordinator
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from pictocomm.core.models.category import Category
    from pictocomm.core.models.pictogram import Pictogram
    from pictocomm.core.repositories.pictogram_repository import PictogramRepository
    from pictocomm.core.schemas.save import FavoriteChanged
    from pictocomm.core.schemas.view_state import ViewSnapshot
    from pictocomm.core.services.suggestion_service import SuggestionEngine

logger = get_logger(__name__)


@dataclass
class BoardSession:
    id: str
    coordinator: InteractionCoordinator
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    last_used_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def state(self) -> ViewSnapshot:
        return self.coordinator.state


class SessionService:
    """Registry of board sessions, one coordinator per open board.

    The service is the host around the engine: it loads catalogs from the
    pictogram store, resolves tile ids to pictograms and forwards events. It is
    meant to be driven from a single event loop, which serializes the
    synchronous coordinator calls.

    Sessions left untouched for longer than ``idle_timeout`` are dropped, so
    abandoned boards free their slot under ``max_sessions``.
    """

    def __init__(
        self,
        repo: PictogramRepository,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_sessions: int = 1000,
        include_unapproved: bool = True,
        idle_timeout: timedelta | None = timedelta(hours=1),
        engine: SuggestionEngine | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repo = repo
        self._page_size = page_size
        self._max_sessions = max_sessions
        self._include_unapproved = include_unapproved
        self._engine = engine
        self._idle_timeout = idle_timeout
        self._clock = clock or (lambda: datetime.now(UTC))
        self._sessions: dict[str, BoardSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    async def create_session(self) -> BoardSession:
        self.expire_idle()
        if len(self._sessions) >= self._max_sessions:
            logger.warning("Session limit reached", extra={"limit": self._max_sessions})
            raise SessionLimitReachedError(self._max_sessions)
        catalog = await self._repo.list_catalog(include_unapproved=self._include_unapproved)
        coordinator = InteractionCoordinator(catalog, page_size=self._page_size, engine=self._engine)
        now = self._clock()
        session = BoardSession(id=uuid4().hex, coordinator=coordinator, created_at=now, last_used_at=now)
        self._sessions[session.id] = session
        logger.info("Board session created", extra={"session_id": session.id, "catalog_size": len(catalog)})
        return session

    def get(self, session_id: str) -> BoardSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        now = self._clock()
        if self._is_idle(session, now):
            self._drop(session_id, reason="idle")
            raise SessionNotFoundError(session_id)
        session.last_used_at = now
        return session

    def expire_idle(self) -> int:
        """Drop every session idle for longer than the timeout; return how many went."""
        now = self._clock()
        expired = [sid for sid, session in self._sessions.items() if self._is_idle(session, now)]
        for session_id in expired:
            self._drop(session_id, reason="idle")
        return len(expired)

    def close(self, session_id: str) -> bool:
        return self._drop(session_id, reason="closed")

    def _drop(self, session_id: str, *, reason: str) -> bool:
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info("Board session closed", extra={"session_id": session_id, "reason": reason})
        return removed

    def _is_idle(self, session: BoardSession, now: datetime) -> bool:
        return self._idle_timeout is not None and now - session.last_used_at > self._idle_timeout

    async def refresh_catalog(self, session_id: str) -> ViewSnapshot:
        """Push the store's current catalog into the session, keeping its filter."""
        session = self.get(session_id)
        catalog = await self._repo.list_catalog(include_unapproved=self._include_unapproved)
        return session.coordinator.replace_catalog(catalog)

    def resolve(self, session_id: str, pictogram_id: str) -> Pictogram:
        pictogram = self.get(session_id).state.find(pictogram_id)
        if pictogram is None:
            raise PictogramNotFoundError(pictogram_id)
        return pictogram

    def tap(self, session_id: str, pictogram_id: str) -> ViewSnapshot:
        pictogram = self.resolve(session_id, pictogram_id)
        return self.get(session_id).coordinator.tile_tapped(pictogram)

    def long_press(self, session_id: str, pictogram_id: str) -> FavoriteChanged:
        pictogram = self.resolve(session_id, pictogram_id)
        change = self.get(session_id).coordinator.tile_long_pressed(pictogram)
        if change is None:  # pragma: no cover - resolve() guarantees the id exists
            raise PictogramNotFoundError(pictogram_id)
        return change

    def remove(self, session_id: str, index: int) -> ViewSnapshot:
        return self.get(session_id).coordinator.remove_tapped(index)

    def choose_category(self, session_id: str, category: Category | None) -> ViewSnapshot:
        return self.get(session_id).coordinator.category_chosen(category)

    def choose_favorites(self, session_id: str) -> ViewSnapshot:
        return self.get(session_id).coordinator.favorites_chosen()

    def clear(self, session_id: str) -> ViewSnapshot:
        return self.get(session_id).coordinator.clear_tapped()
