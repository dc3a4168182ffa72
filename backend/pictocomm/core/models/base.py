from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, Field


class AppBaseModel(PydanticBaseModel):
    """Base model for all domain models."""

    model_config = ConfigDict(
        from_attributes=True,
        extra="forbid",
        populate_by_name=True,
    )


class FrozenModel(AppBaseModel):
    """Immutable value object; updates go through ``model_copy(update=...)``."""

    model_config = ConfigDict(
        from_attributes=True,
        extra="forbid",
        populate_by_name=True,
        frozen=True,
    )


class TimestampedModel(AppBaseModel):
    """Base model with a creation timestamp."""

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
