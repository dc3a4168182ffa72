from __future__ import annotations

from typing import Literal, Union

from pydantic import Field

from pictocomm.core.models.base import FrozenModel


class SentenceDraft(FrozenModel):
    """What the persistence collaborator needs to store a sentence."""

    ok: Literal[True] = True
    pictogram_ids: tuple[str, ...] = Field(min_length=2)
    text: str


class NotSaveable(FrozenModel):
    ok: Literal[False] = False
    reason: str = "A sentence needs at least two pictograms to be saved"
    token_count: int = Field(ge=0)


SaveOutcome = Union[SentenceDraft, NotSaveable]


class FavoriteChanged(FrozenModel):
    """Emitted after a long press so collaborators can notify or persist."""

    pictogram_id: str
    favorite: bool
