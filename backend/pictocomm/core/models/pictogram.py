from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator

from .base import FrozenModel
from .category import Category

if TYPE_CHECKING:
    from collections.abc import Mapping


class ImageType(str, Enum):
    """How a pictogram's picture is sourced."""

    ICON = "icon"
    PHOTO = "photo"


class Pictogram(FrozenModel):
    """A symbol tile with a label and a grammatical category.

    Instances are immutable; the catalog flips ``favorite`` by replacing the
    entry with ``model_copy(update={"favorite": ...})``.
    """

    id: str = Field(min_length=1, description="Opaque identifier, unique within a catalog")
    text: str = Field(description="Display label, also the spoken word")
    category: Category = Field(default_factory=Category.default)
    favorite: bool = False
    approved: bool = Field(default=True, description="Visible to restricted viewers")
    creator_id: str = Field(default="", description="Empty for system pictograms")
    usage_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    image_resource: str = ""
    image_type: ImageType = ImageType.ICON
    image_url: str = ""
    parent_id: str = Field(default="", description="Owning family, used by the store to scope catalogs")

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> Category:
        """Unknown or corrupt categories fall back to the default instead of failing."""
        return Category.from_value(v)

    @field_validator("image_type", mode="before")
    @classmethod
    def coerce_image_type(cls, v: Any) -> ImageType:
        if isinstance(v, ImageType):
            return v
        if isinstance(v, str):
            try:
                return ImageType(v.strip().lower())
            except ValueError:
                pass
        return ImageType.ICON

    @property
    def normalized_text(self) -> str:
        return self.text.strip().lower()

    def is_system(self) -> bool:
        return not self.creator_id

    def is_pending_approval(self) -> bool:
        return not self.approved and bool(self.creator_id)

    def uses_custom_photo(self) -> bool:
        return self.image_type is ImageType.PHOTO and bool(self.image_url)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Pictogram:
        """Build a pictogram from a loosely typed store record.

        Unknown keys are dropped, missing optional fields take their defaults and
        a negative usage counter is clamped to zero.
        """
        data = {k: v for k, v in record.items() if k in cls.model_fields and v is not None}
        if "id" in data:
            data["id"] = str(data["id"])
        usage = data.get("usage_count")
        if isinstance(usage, int) and usage < 0:
            data["usage_count"] = 0
        data.setdefault("text", "")
        return cls.model_validate(data)
