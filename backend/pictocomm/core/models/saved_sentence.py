from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import Field, field_validator

from .base import TimestampedModel


class SavedSentence(TimestampedModel):
    """A sentence stored by the persistence collaborator.

    Only the ordered pictogram ids and the display text are kept; the tokens are
    rebuilt from the catalog when the sentence is reused.
    """

    id: UUID = Field(default_factory=uuid4, description="Storage identifier")
    pictogram_ids: list[str] = Field(min_length=2, description="Pictogram ids in tap order")
    text: str = Field(min_length=1, description="Display text, e.g. 'Yo Quiero Helado'")
    times_used: int = Field(default=0, ge=0)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Sentence text must be non-empty")
        return stripped
