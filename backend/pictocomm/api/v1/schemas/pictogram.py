from __future__ import annotations

from pydantic import Field, field_validator

from pictocomm.core.models.base import AppBaseModel
from pictocomm.core.models.category import Category
from pictocomm.core.models.pictogram import ImageType


class PictogramCreate(AppBaseModel):
    """A pictogram drawn or photographed by a family member."""

    text: str = Field(min_length=1, max_length=100)
    category: Category
    creator_id: str = Field(min_length=1)
    created_by_parent: bool = Field(default=False, description="Parents' pictograms skip the approval queue")
    image_resource: str = ""
    image_type: ImageType = ImageType.ICON
    image_url: str = ""

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Text must not be blank")
        return v
