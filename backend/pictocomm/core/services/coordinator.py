from __future__ import annotations

from typing import TYPE_CHECKING

from pictocomm.core.schemas.events import (
    CatalogReplaced,
    CategoryChosen,
    ClearTapped,
    FavoritesChosen,
    RemoveTapped,
    SentenceLoaded,
    TileLongPressed,
    TileTapped,
)
from pictocomm.core.schemas.save import FavoriteChanged, NotSaveable, SentenceDraft
from pictocomm.core.schemas.view_state import DEFAULT_PAGE_SIZE, FilterState, ViewSnapshot
from pictocomm.core.services import catalog_service
from pictocomm.core.services.sentence_builder import Sentence
from pictocomm.core.services.suggestion_service import SuggestionEngine, default_engine
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pictocomm.core.models.category import Category
    from pictocomm.core.models.pictogram import Pictogram
    from pictocomm.core.schemas.events import Event
    from pictocomm.core.schemas.save import SaveOutcome

    Listener = Callable[[ViewSnapshot], None]
    FavoriteListener = Callable[[FavoriteChanged], None]

logger = get_logger(__name__)


def _with_filter(state: ViewSnapshot, active_filter: FilterState) -> dict:
    return {
        "active_filter": active_filter,
        "available_pictograms": catalog_service.filter_catalog(state.full_catalog, active_filter, state.page_size),
    }


def reduce(state: ViewSnapshot, event: Event, engine: SuggestionEngine | None = None) -> ViewSnapshot:
    """Apply one event to a snapshot and return the next snapshot.

    Pure: ``state`` is never modified and no collaborator is called.
    """
    engine = engine or default_engine

    if isinstance(event, TileTapped):
        sentence = state.sentence.append(event.pictogram)
        changes: dict = {"sentence": sentence}
        suggested = engine.suggest(sentence.tokens)
        if suggested is not None:
            changes.update(_with_filter(state, FilterState.of_category(suggested)))
        return state.model_copy(update=changes)

    if isinstance(event, TileLongPressed):
        catalog, view, _flag = catalog_service.toggle_favorite(
            state.full_catalog, state.available_pictograms, event.pictogram.id
        )
        return state.model_copy(update={"full_catalog": catalog, "available_pictograms": view})

    if isinstance(event, RemoveTapped):
        return state.model_copy(update={"sentence": state.sentence.remove_at(event.index)})

    if isinstance(event, CategoryChosen):
        return state.model_copy(update=_with_filter(state, FilterState.of_category(event.category)))

    if isinstance(event, FavoritesChosen):
        return state.model_copy(update=_with_filter(state, FilterState.favorites()))

    if isinstance(event, ClearTapped):
        changes = {"sentence": state.sentence.clear()}
        changes.update(_with_filter(state, FilterState.most_used()))
        return state.model_copy(update=changes)

    if isinstance(event, CatalogReplaced):
        catalog, view = catalog_service.replace_catalog(event.pictograms, state.active_filter, state.page_size)
        return state.model_copy(update={"full_catalog": catalog, "available_pictograms": view})

    if isinstance(event, SentenceLoaded):
        return state.model_copy(update={"sentence": Sentence.of(event.tokens)})

    raise TypeError(f"Unsupported event: {type(event).__name__}")


def initial_state(catalog: Iterable[Pictogram] = (), page_size: int = DEFAULT_PAGE_SIZE) -> ViewSnapshot:
    """Empty sentence, default view over ``catalog``."""
    full, view = catalog_service.replace_catalog(catalog, FilterState.most_used(), page_size)
    return ViewSnapshot(full_catalog=full, available_pictograms=view, page_size=page_size)


class InteractionCoordinator:
    """Owns the current snapshot and publishes a new one after every event.

    Events are processed synchronously and to completion. Hosts that receive
    input on several threads must serialize calls before they get here;
    dispatching from inside a listener is rejected.
    """

    def __init__(
        self,
        catalog: Iterable[Pictogram] = (),
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        engine: SuggestionEngine | None = None,
        on_favorite_changed: FavoriteListener | None = None,
    ) -> None:
        self._engine = engine or default_engine
        self._state = initial_state(catalog, page_size)
        self._listeners: list[Listener] = []
        self._on_favorite_changed = on_favorite_changed
        self._dispatching = False

    @property
    def state(self) -> ViewSnapshot:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for every published snapshot; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> ViewSnapshot:
        if self._dispatching:
            raise RuntimeError("Coordinator events must not be dispatched re-entrantly")
        self._dispatching = True
        try:
            self._state = reduce(self._state, event, self._engine)
            for listener in list(self._listeners):
                listener(self._state)
        finally:
            self._dispatching = False
        return self._state

    # Event helpers

    def tile_tapped(self, pictogram: Pictogram) -> ViewSnapshot:
        return self.dispatch(TileTapped(pictogram=pictogram))

    def tile_long_pressed(self, pictogram: Pictogram) -> FavoriteChanged | None:
        """Toggle the favorite flag and return the change, or None for an unknown tile."""
        state = self.dispatch(TileLongPressed(pictogram=pictogram))
        updated = state.find(pictogram.id)
        if updated is None:
            return None
        change = FavoriteChanged(pictogram_id=updated.id, favorite=updated.favorite)
        logger.debug("Favorite toggled", extra={"pictogram_id": updated.id, "favorite": updated.favorite})
        if self._on_favorite_changed is not None:
            self._on_favorite_changed(change)
        return change

    def remove_tapped(self, index: int) -> ViewSnapshot:
        return self.dispatch(RemoveTapped(index=index))

    def category_chosen(self, category: Category | None) -> ViewSnapshot:
        return self.dispatch(CategoryChosen(category=category))

    def favorites_chosen(self) -> ViewSnapshot:
        return self.dispatch(FavoritesChosen())

    def clear_tapped(self) -> ViewSnapshot:
        return self.dispatch(ClearTapped())

    def replace_catalog(self, pictograms: Iterable[Pictogram]) -> ViewSnapshot:
        return self.dispatch(CatalogReplaced(pictograms=tuple(pictograms)))

    def load_sentence(self, tokens: Iterable[Pictogram]) -> ViewSnapshot:
        return self.dispatch(SentenceLoaded(tokens=tuple(tokens)))

    def save_requested(self) -> SaveOutcome:
        """Hand back what should be stored; performs no I/O and does not clear the sentence."""
        sentence = self._state.sentence
        if not sentence.can_save:
            return NotSaveable(token_count=len(sentence))
        return SentenceDraft(pictogram_ids=tuple(sentence.pictogram_ids), text=sentence.display_text)
