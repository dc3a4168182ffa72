from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from pictocomm.core.models.base import FrozenModel
from pictocomm.core.models.category import Category  # noqa: TCH001
from pictocomm.core.models.pictogram import Pictogram  # noqa: TCH001


class TileTapped(FrozenModel):
    type: Literal["tile_tapped"] = "tile_tapped"
    pictogram: Pictogram


class TileLongPressed(FrozenModel):
    type: Literal["tile_long_pressed"] = "tile_long_pressed"
    pictogram: Pictogram


class RemoveTapped(FrozenModel):
    type: Literal["remove_tapped"] = "remove_tapped"
    index: int


class CategoryChosen(FrozenModel):
    type: Literal["category_chosen"] = "category_chosen"
    category: Category | None = None


class FavoritesChosen(FrozenModel):
    type: Literal["favorites_chosen"] = "favorites_chosen"


class ClearTapped(FrozenModel):
    type: Literal["clear_tapped"] = "clear_tapped"


class CatalogReplaced(FrozenModel):
    type: Literal["catalog_replaced"] = "catalog_replaced"
    pictograms: tuple[Pictogram, ...] = ()


class SentenceLoaded(FrozenModel):
    """Replace the sentence wholesale, e.g. when reusing a saved sentence."""

    type: Literal["sentence_loaded"] = "sentence_loaded"
    tokens: tuple[Pictogram, ...] = ()


Event = Annotated[
    Union[
        TileTapped,
        TileLongPressed,
        RemoveTapped,
        CategoryChosen,
        FavoritesChosen,
        ClearTapped,
        CatalogReplaced,
        SentenceLoaded,
    ],
    Field(discriminator="type"),
]
