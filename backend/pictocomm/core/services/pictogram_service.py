from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from pictocomm.core.errors import PictogramNotFoundError, PictogramNotPendingError
from pictocomm.core.models.pictogram import ImageType, Pictogram
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pictocomm.core.models.category import Category
    from pictocomm.core.repositories.pictogram_repository import PictogramRepository

logger = get_logger(__name__)


class PictogramService:
    """User-created pictograms and the parent approval workflow.

    Pictograms created by a parent are visible right away. Pictograms created
    by a child wait in the pending list until a parent approves or rejects them;
    restricted viewers never see them before approval.
    """

    def __init__(self, repo: PictogramRepository, *, include_unapproved: bool = True) -> None:
        self._repo = repo
        self._include_unapproved = include_unapproved

    async def list_catalog(self) -> Sequence[Pictogram]:
        return await self._repo.list_catalog(include_unapproved=self._include_unapproved)

    async def create(
        self,
        *,
        text: str,
        category: Category,
        creator_id: str,
        created_by_parent: bool = False,
        image_resource: str = "",
        image_type: ImageType = ImageType.ICON,
        image_url: str = "",
    ) -> Pictogram:
        pictogram = Pictogram(
            id=uuid4().hex,
            text=text,
            category=category,
            approved=created_by_parent,
            creator_id=creator_id,
            image_resource=image_resource,
            image_type=image_type,
            image_url=image_url,
        )
        stored = await self._repo.add(pictogram)
        logger.info(
            "Pictogram created",
            extra={"pictogram_id": stored.id, "creator_id": creator_id, "approved": stored.approved},
        )
        return stored

    async def list_pending(self) -> Sequence[Pictogram]:
        return await self._repo.list_pending()

    async def approve(self, pictogram_id: str) -> Pictogram:
        if not await self._repo.approve(pictogram_id):
            raise PictogramNotFoundError(pictogram_id)
        approved = await self._repo.get(pictogram_id)
        if approved is None:  # pragma: no cover - removed between the two calls
            raise PictogramNotFoundError(pictogram_id)
        logger.info("Pictogram approved", extra={"pictogram_id": pictogram_id})
        return approved

    async def reject(self, pictogram_id: str) -> None:
        """Remove a pending pictogram.

        Raises:
            PictogramNotFoundError: no pictogram has this id.
            PictogramNotPendingError: the pictogram is already approved or is a system one.
        """
        current = await self._repo.get(pictogram_id)
        if current is None:
            raise PictogramNotFoundError(pictogram_id)
        if not await self._repo.reject(pictogram_id):
            raise PictogramNotPendingError(pictogram_id)
        logger.info("Pictogram rejected", extra={"pictogram_id": pictogram_id})
