from __future__ import annotations

from fastapi import APIRouter

from pictocomm.api.v1.schemas.session import CategoryRead
from pictocomm.core.services.catalog_service import list_categories

router = APIRouter()


@router.get("/categories", response_model=list[CategoryRead])
async def get_categories() -> list[CategoryRead]:
    """Return every category in selector order with its label and color."""
    return [CategoryRead.from_category(c) for c in list_categories()]
