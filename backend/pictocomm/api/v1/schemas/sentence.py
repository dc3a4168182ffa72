from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

from pydantic import Field

from pictocomm.core.models.base import AppBaseModel


class SentenceRead(AppBaseModel):
    id: UUID
    pictogram_ids: list[str]
    text: str
    times_used: int
    created_at: datetime


class SaveRequest(AppBaseModel):
    session_id: str = Field(min_length=1)


class ReuseRequest(AppBaseModel):
    session_id: str = Field(min_length=1, description="Board session that receives the sentence")
