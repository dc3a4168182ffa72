from __future__ import annotations

from datetime import datetime  # noqa: TCH003

from pydantic import Field, field_validator

from pictocomm.core.models.base import AppBaseModel
from pictocomm.core.models.category import Category
from pictocomm.core.models.pictogram import ImageType, Pictogram  # noqa: TCH001
from pictocomm.core.schemas.view_state import FilterKind, ViewSnapshot  # noqa: TCH001


class CategoryRead(AppBaseModel):
    value: Category
    label: str
    color: str

    @classmethod
    def from_category(cls, category: Category) -> CategoryRead:
        return cls(value=category, label=category.label, color=category.color)


class PictogramRead(AppBaseModel):
    id: str
    text: str
    category: Category
    favorite: bool
    approved: bool
    creator_id: str
    usage_count: int
    image_resource: str
    image_type: ImageType
    image_url: str
    created_at: datetime


class FilterRead(AppBaseModel):
    kind: FilterKind
    category: Category | None = None


class SessionRead(AppBaseModel):
    """Public view of a board snapshot."""

    session_id: str
    sentence: list[PictogramRead]
    display_text: str
    can_play: bool
    can_save: bool
    available_pictograms: list[PictogramRead]
    active_filter: FilterRead
    catalog: list[PictogramRead]

    @classmethod
    def from_snapshot(cls, session_id: str, snapshot: ViewSnapshot) -> SessionRead:
        def read(items: tuple[Pictogram, ...]) -> list[PictogramRead]:
            return [PictogramRead.model_validate(p) for p in items]

        return cls(
            session_id=session_id,
            sentence=read(snapshot.sentence.tokens),
            display_text=snapshot.display_text,
            can_play=snapshot.can_play,
            can_save=snapshot.can_save,
            available_pictograms=read(snapshot.available_pictograms),
            active_filter=FilterRead.model_validate(snapshot.active_filter),
            catalog=read(snapshot.full_catalog),
        )


class TileRequest(AppBaseModel):
    pictogram_id: str = Field(min_length=1, description="Id of the tapped tile")

    @field_validator("pictogram_id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        return v.strip()


class RemoveRequest(AppBaseModel):
    index: int = Field(description="Position of the token to remove; out-of-range values are ignored")


class CategoryRequest(AppBaseModel):
    category: Category | None = Field(default=None, description="Category to show, or null for the default view")


class FavoriteChangedRead(AppBaseModel):
    pictogram_id: str
    favorite: bool
    persisted: bool = Field(description="Whether the toggle is being written to the pictogram store")
    session: SessionRead
