"""
Test suite for the interaction coordinator.

Tests the pure reducer, the published snapshots, favorite signalling and
the save hand-off.
"""

import pytest

from pictocomm.core.models.category import Category
from pictocomm.core.schemas.events import CategoryChosen, ClearTapped, TileTapped
from pictocomm.core.schemas.save import FavoriteChanged, NotSaveable, SentenceDraft
from pictocomm.core.schemas.view_state import FilterKind, FilterState
from pictocomm.core.services.coordinator import InteractionCoordinator, initial_state, reduce
from pictocomm.core.services.suggestion_service import SuggestionEngine


@pytest.fixture
def coordinator(demo_catalog):
    return InteractionCoordinator(demo_catalog)


class TestInitialState:
    def test_starts_with_default_view(self, coordinator, demo_catalog):
        state = coordinator.state

        assert len(state.sentence) == 0
        assert state.active_filter == FilterState.most_used()
        assert len(state.full_catalog) == len(demo_catalog) == 51
        assert [p.id for p in state.available_pictograms] == [p.id for p in demo_catalog[:20]]

    def test_custom_page_size(self, demo_catalog):
        coordinator = InteractionCoordinator(demo_catalog, page_size=6)
        assert len(coordinator.state.available_pictograms) == 6

    def test_empty_catalog(self):
        coordinator = InteractionCoordinator()
        assert coordinator.state.available_pictograms == ()
        assert coordinator.favorites_chosen().available_pictograms == ()
        assert coordinator.category_chosen(Category.THING).available_pictograms == ()


class TestTileTapped:
    def test_yo_quiero_helado_scenario(self, coordinator, by_text):
        state = coordinator.tile_tapped(by_text["Yo"])
        assert state.selected_category is Category.ACTION
        assert all(p.category is Category.ACTION for p in state.available_pictograms)

        state = coordinator.tile_tapped(by_text["Quiero"])
        assert state.selected_category is Category.THING

        state = coordinator.tile_tapped(by_text["Helado"])
        assert state.selected_category is Category.TIME
        assert [p.text for p in state.available_pictograms] == ["Ahora", "Despues", "Manana", "Hoy", "Ayer"]
        assert state.display_text == "Yo Quiero Helado"

    def test_no_suggestion_leaves_filter_unchanged(self, coordinator, by_text):
        coordinator.favorites_chosen()
        state = coordinator.tile_tapped(by_text["Ahora"])

        assert state.active_filter.kind is FilterKind.FAVORITES
        assert state.display_text == "Ahora"

    def test_emotion_after_person_keeps_filter(self, coordinator, by_text):
        coordinator.tile_tapped(by_text["Yo"])
        coordinator.category_chosen(Category.QUALITY)
        state = coordinator.tile_tapped(by_text["Feliz"])

        assert state.selected_category is Category.QUALITY

    def test_uses_injected_engine(self, demo_catalog, by_text):
        engine = SuggestionEngine(word_rules={"yo": Category.TIME})
        coordinator = InteractionCoordinator(demo_catalog, engine=engine)

        assert coordinator.tile_tapped(by_text["Yo"]).selected_category is Category.TIME


class TestRemoveTapped:
    def test_removal_does_not_rerun_suggestion(self, coordinator, by_text):
        coordinator.tile_tapped(by_text["Yo"])
        coordinator.tile_tapped(by_text["Quiero"])
        before = coordinator.state

        state = coordinator.remove_tapped(1)

        assert state.display_text == "Yo"
        assert state.active_filter == before.active_filter
        assert state.available_pictograms == before.available_pictograms

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_out_of_range_removal_is_ignored(self, coordinator, by_text, index):
        coordinator.tile_tapped(by_text["Yo"])
        coordinator.tile_tapped(by_text["Quiero"])

        assert coordinator.remove_tapped(index).display_text == "Yo Quiero"


class TestFilters:
    def test_category_then_favorites_are_exclusive(self, coordinator):
        state = coordinator.category_chosen(Category.PLACE)
        assert state.active_filter == FilterState.of_category(Category.PLACE)

        state = coordinator.favorites_chosen()
        assert state.active_filter.kind is FilterKind.FAVORITES
        assert state.selected_category is None

    def test_choosing_no_category_shows_default_view(self, coordinator, demo_catalog):
        coordinator.category_chosen(Category.PLACE)
        state = coordinator.category_chosen(None)

        assert state.active_filter == FilterState.most_used()
        assert len(state.available_pictograms) == 20

    def test_clear_resets_sentence_and_filter(self, coordinator, by_text):
        coordinator.tile_tapped(by_text["Yo"])
        coordinator.tile_tapped(by_text["Voy"])

        state = coordinator.clear_tapped()

        assert len(state.sentence) == 0
        assert state.active_filter == FilterState.most_used()
        assert len(state.available_pictograms) == 20


class TestFavorites:
    def test_long_press_toggles_everywhere(self, coordinator, by_text):
        coordinator.category_chosen(Category.THING)

        change = coordinator.tile_long_pressed(by_text["Helado"])

        assert change == FavoriteChanged(pictogram_id="21", favorite=True)
        assert coordinator.state.find("21").favorite is True
        visible = next(p for p in coordinator.state.available_pictograms if p.id == "21")
        assert visible.favorite is True

    def test_double_long_press_is_an_involution(self, coordinator, by_text):
        coordinator.category_chosen(Category.THING)
        before = coordinator.state

        coordinator.tile_long_pressed(by_text["Agua"])
        change = coordinator.tile_long_pressed(by_text["Agua"])

        def flags(items):
            return [(p.id, p.favorite) for p in items]

        assert change.favorite is False
        assert flags(coordinator.state.full_catalog) == flags(before.full_catalog)
        assert flags(coordinator.state.available_pictograms) == flags(before.available_pictograms)

    def test_favorites_view_lists_toggled_tiles(self, coordinator, by_text):
        coordinator.tile_long_pressed(by_text["Agua"])
        coordinator.tile_long_pressed(by_text["Casa"])

        state = coordinator.favorites_chosen()

        assert [p.text for p in state.available_pictograms] == ["Agua", "Casa"]

    def test_callback_receives_change(self, demo_catalog, by_text):
        received = []
        coordinator = InteractionCoordinator(demo_catalog, on_favorite_changed=received.append)

        coordinator.tile_long_pressed(by_text["Yo"])

        assert received == [FavoriteChanged(pictogram_id="1", favorite=True)]

    def test_unknown_pictogram_returns_none(self, coordinator, make_pictogram):
        assert coordinator.tile_long_pressed(make_pictogram("Fantasma", id="nope")) is None


class TestReplaceCatalog:
    def test_keeps_filter_and_drops_stale_entries(self, coordinator, make_pictogram):
        coordinator.category_chosen(Category.THING)
        fresh = [
            make_pictogram("Tren", Category.THING, id="n1"),
            make_pictogram("Playa", Category.PLACE, id="n2"),
        ]

        state = coordinator.replace_catalog(fresh)

        assert state.selected_category is Category.THING
        assert [p.id for p in state.available_pictograms] == ["n1"]
        assert state.find("21") is None

    def test_sentence_survives_replacement(self, coordinator, by_text):
        coordinator.tile_tapped(by_text["Yo"])
        assert coordinator.replace_catalog([]).display_text == "Yo"


class TestSaveRequested:
    def test_single_token_is_not_saveable(self, coordinator, by_text):
        coordinator.tile_tapped(by_text["Yo"])

        outcome = coordinator.save_requested()

        assert isinstance(outcome, NotSaveable)
        assert outcome.ok is False
        assert outcome.token_count == 1

    def test_draft_carries_ids_and_text(self, coordinator, by_text):
        for word in ["Yo", "Quiero", "Agua"]:
            coordinator.tile_tapped(by_text[word])

        outcome = coordinator.save_requested()

        assert outcome == SentenceDraft(pictogram_ids=("1", "9", "22"), text="Yo Quiero Agua")
        # Saving is a hand-off only; the collaborator clears after storing
        assert coordinator.state.display_text == "Yo Quiero Agua"


class TestPublishing:
    def test_listeners_receive_every_snapshot(self, coordinator, by_text):
        seen = []
        unsubscribe = coordinator.subscribe(seen.append)

        coordinator.tile_tapped(by_text["Yo"])
        coordinator.remove_tapped(5)
        unsubscribe()
        coordinator.clear_tapped()

        assert len(seen) == 2
        assert seen[-1].display_text == "Yo"

    def test_reentrant_dispatch_is_rejected(self, coordinator, by_text):
        coordinator.subscribe(lambda state: coordinator.clear_tapped())

        with pytest.raises(RuntimeError):
            coordinator.tile_tapped(by_text["Yo"])


class TestReducer:
    def test_reduce_does_not_mutate_input(self, demo_catalog, by_text):
        start = initial_state(demo_catalog)

        after = reduce(start, TileTapped(pictogram=by_text["Yo"]))

        assert len(start.sentence) == 0
        assert start.active_filter == FilterState.most_used()
        assert after.display_text == "Yo"

    def test_reduce_chain(self, demo_catalog, by_text):
        state = initial_state(demo_catalog)
        for event in [
            TileTapped(pictogram=by_text["Yo"]),
            CategoryChosen(category=Category.PLACE),
            ClearTapped(),
        ]:
            state = reduce(state, event)

        assert len(state.sentence) == 0
        assert state.active_filter == FilterState.most_used()

    def test_unknown_event_type(self, demo_catalog):
        with pytest.raises(TypeError):
            reduce(initial_state(demo_catalog), object())
