"""
Unit tests for the sentence under construction.
"""

import pytest

from pictocomm.core.models.category import Category
from pictocomm.core.services.sentence_builder import Sentence


@pytest.fixture
def yo_quiero_helado(by_text):
    return Sentence.of([by_text["Yo"], by_text["Quiero"], by_text["Helado"]])


class TestAppend:
    def test_display_text_follows_tap_order(self, by_text):
        sentence = Sentence()
        for word in ["Yo", "Quiero", "Comer", "Helado"]:
            sentence = sentence.append(by_text[word])

        assert sentence.display_text == "Yo Quiero Comer Helado"
        assert len(sentence) == 4

    def test_duplicates_are_kept(self, by_text):
        sentence = Sentence().append(by_text["Agua"]).append(by_text["Agua"])
        assert sentence.display_text == "Agua Agua"
        assert sentence.pictogram_ids == ["22", "22"]

    def test_append_returns_new_sentence(self, by_text):
        empty = Sentence()
        grown = empty.append(by_text["Yo"])

        assert len(empty) == 0
        assert len(grown) == 1

    def test_multi_word_labels_joined_with_single_space(self, make_pictogram):
        sentence = Sentence().append(make_pictogram("Me gusta", Category.ACTION)).append(make_pictogram("Pelota"))
        assert sentence.display_text == "Me gusta Pelota"


class TestFlags:
    @pytest.mark.parametrize(
        "size, can_play, can_save",
        [(0, False, False), (1, True, False), (2, True, True), (5, True, True)],
    )
    def test_play_and_save_thresholds(self, demo_catalog, size, can_play, can_save):
        sentence = Sentence.of(demo_catalog[:size])
        assert sentence.can_play is can_play
        assert sentence.can_save is can_save

    def test_empty_sentence(self):
        sentence = Sentence()
        assert sentence.display_text == ""


class TestRemoveAt:
    def test_removes_token_at_index(self, yo_quiero_helado):
        assert yo_quiero_helado.remove_at(1).display_text == "Yo Helado"
        assert yo_quiero_helado.remove_at(0).display_text == "Quiero Helado"
        assert yo_quiero_helado.remove_at(2).display_text == "Yo Quiero"

    @pytest.mark.parametrize("index", [-1, -3, 3, 99])
    def test_out_of_range_is_a_noop(self, yo_quiero_helado, index):
        result = yo_quiero_helado.remove_at(index)
        assert result == yo_quiero_helado
        assert result.display_text == "Yo Quiero Helado"

    def test_remove_on_empty_sentence(self):
        assert len(Sentence().remove_at(0)) == 0

    def test_removes_only_one_duplicate(self, by_text):
        sentence = Sentence.of([by_text["Agua"], by_text["Agua"]])
        assert sentence.remove_at(0).display_text == "Agua"


class TestClear:
    def test_clear_empties(self, yo_quiero_helado):
        cleared = yo_quiero_helado.clear()
        assert len(cleared) == 0
        assert not cleared.can_play
