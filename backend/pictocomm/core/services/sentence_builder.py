from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from pictocomm.core.models.base import FrozenModel
from pictocomm.core.models.pictogram import Pictogram
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)

MIN_SAVEABLE_TOKENS = 2


class Sentence(FrozenModel):
    """The sentence under construction: pictograms in tap order.

    Every mutation returns a new ``Sentence``. Derived values are properties so
    they always reflect the current tokens.
    """

    tokens: tuple[Pictogram, ...] = Field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def display_text(self) -> str:
        return " ".join(token.text for token in self.tokens)

    @property
    def can_play(self) -> bool:
        return len(self.tokens) >= 1

    @property
    def can_save(self) -> bool:
        return len(self.tokens) >= MIN_SAVEABLE_TOKENS

    @property
    def pictogram_ids(self) -> list[str]:
        return [token.id for token in self.tokens]

    def append(self, pictogram: Pictogram) -> Sentence:
        return Sentence(tokens=(*self.tokens, pictogram))

    def remove_at(self, index: int) -> Sentence:
        """Drop the token at ``index``; indices outside ``[0, len)`` leave it unchanged."""
        if not 0 <= index < len(self.tokens):
            logger.debug("Ignoring removal of out-of-range token", extra={"index": index, "length": len(self.tokens)})
            return self
        return Sentence(tokens=self.tokens[:index] + self.tokens[index + 1:])

    def clear(self) -> Sentence:
        return Sentence()

    @classmethod
    def of(cls, pictograms: Iterable[Pictogram]) -> Sentence:
        return cls(tokens=tuple(pictograms))
