"""Pictogram catalog endpoints: user-created tiles and their approval."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from pictocomm.api.v1.errors import http_error
from pictocomm.api.v1.schemas.pictogram import PictogramCreate
from pictocomm.api.v1.schemas.session import PictogramRead
from pictocomm.core.errors import PictoCommError
from pictocomm.core.services.pictogram_service import PictogramService  # noqa: TCH001
from pictocomm.dependencies import get_pictogram_service

router = APIRouter()


@router.get("/", response_model=list[PictogramRead])
async def list_pictograms(service: PictogramService = Depends(get_pictogram_service)):
    """Return the catalog as the configured viewer sees it, most used first."""
    return [PictogramRead.model_validate(p) for p in await service.list_catalog()]


@router.post("/", response_model=PictogramRead, status_code=status.HTTP_201_CREATED)
async def create_pictogram(payload: PictogramCreate, service: PictogramService = Depends(get_pictogram_service)):
    """Add a custom pictogram. Open boards pick it up on their next refresh."""
    created = await service.create(**payload.model_dump())
    return PictogramRead.model_validate(created)


@router.get("/pending", response_model=list[PictogramRead])
async def list_pending(service: PictogramService = Depends(get_pictogram_service)):
    return [PictogramRead.model_validate(p) for p in await service.list_pending()]


@router.post("/{pictogram_id}/approve", response_model=PictogramRead)
async def approve_pictogram(pictogram_id: str, service: PictogramService = Depends(get_pictogram_service)):
    try:
        approved = await service.approve(pictogram_id)
    except PictoCommError as err:
        raise http_error(err) from err
    return PictogramRead.model_validate(approved)


@router.delete("/{pictogram_id}", status_code=status.HTTP_204_NO_CONTENT)
async def reject_pictogram(pictogram_id: str, service: PictogramService = Depends(get_pictogram_service)):
    """Reject a pending pictogram. Approved and system pictograms cannot be removed."""
    try:
        await service.reject(pictogram_id)
    except PictoCommError as err:
        raise http_error(err) from err
    return None
