from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pictocomm.core.models.pictogram import Pictogram


class PictogramRepository(ABC):
    """Abstract repository interface for the pictogram store.

    This is the catalog source the board reads from. Implementations perform
    I/O and therefore expose async methods; the engine itself never calls them.
    """

    @abstractmethod
    async def list_catalog(self, *, include_unapproved: bool = True) -> Sequence[Pictogram]:  # pragma: no cover - interface only
        """Return the full catalog, most used first (ties keep creation order).

        Args:
            include_unapproved: False when the viewer is restricted and must only
                see approved pictograms.
        """

    @abstractmethod
    async def get(self, pictogram_id: str) -> Pictogram | None:  # pragma: no cover
        """Fetch a pictogram by id or return None if not found."""

    @abstractmethod
    async def add(self, pictogram: Pictogram) -> Pictogram:  # pragma: no cover
        """Persist a new pictogram and return the stored entity."""

    @abstractmethod
    async def set_favorite(self, pictogram_id: str, favorite: bool) -> bool:  # pragma: no cover
        """Store the favorite flag. Return False if the pictogram does not exist."""

    @abstractmethod
    async def increment_usage(self, pictogram_id: str) -> bool:  # pragma: no cover
        """Add one to the usage counter. Return False if the pictogram does not exist."""

    @abstractmethod
    async def list_pending(self) -> Sequence[Pictogram]:  # pragma: no cover
        """Return user-created pictograms waiting for approval."""

    @abstractmethod
    async def approve(self, pictogram_id: str) -> bool:  # pragma: no cover
        """Mark a pending pictogram as approved."""

    @abstractmethod
    async def reject(self, pictogram_id: str) -> bool:  # pragma: no cover
        """Remove a pending pictogram. Return True if a row was removed."""
