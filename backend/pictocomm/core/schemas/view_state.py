from __future__ import annotations

from enum import Enum

from pydantic import Field, model_validator

from pictocomm.core.models.base import FrozenModel
from pictocomm.core.models.category import Category
from pictocomm.core.models.pictogram import Pictogram
from pictocomm.core.services.sentence_builder import Sentence

DEFAULT_PAGE_SIZE = 20


class FilterKind(str, Enum):
    MOST_USED = "most_used"
    CATEGORY = "category"
    FAVORITES = "favorites"


class FilterState(FrozenModel):
    """The single active view discriminator.

    ``category`` is set only for ``FilterKind.CATEGORY``; build instances through
    the class constructors so the combination is always valid.
    """

    kind: FilterKind = FilterKind.MOST_USED
    category: Category | None = None

    @model_validator(mode="after")
    def check_category_matches_kind(self) -> FilterState:
        if (self.kind is FilterKind.CATEGORY) != (self.category is not None):
            raise ValueError("category must be set exactly when kind is 'category'")
        return self

    @classmethod
    def most_used(cls) -> FilterState:
        return cls()

    @classmethod
    def favorites(cls) -> FilterState:
        return cls(kind=FilterKind.FAVORITES)

    @classmethod
    def of_category(cls, category: Category | None) -> FilterState:
        """Category filter, or the default view when ``category`` is None."""
        if category is None:
            return cls.most_used()
        return cls(kind=FilterKind.CATEGORY, category=category)


class ViewSnapshot(FrozenModel):
    """Everything the board needs to render, recomputed after every event."""

    sentence: Sentence = Field(default_factory=Sentence)
    available_pictograms: tuple[Pictogram, ...] = Field(default_factory=tuple)
    full_catalog: tuple[Pictogram, ...] = Field(default_factory=tuple)
    active_filter: FilterState = Field(default_factory=FilterState.most_used)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)

    @property
    def display_text(self) -> str:
        return self.sentence.display_text

    @property
    def can_play(self) -> bool:
        return self.sentence.can_play

    @property
    def can_save(self) -> bool:
        return self.sentence.can_save

    @property
    def selected_category(self) -> Category | None:
        return self.active_filter.category

    def find(self, pictogram_id: str) -> Pictogram | None:
        """Look up a pictogram in the full catalog."""
        for pictogram in self.full_catalog:
            if pictogram.id == pictogram_id:
                return pictogram
        return None
