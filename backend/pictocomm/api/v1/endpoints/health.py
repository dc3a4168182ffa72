from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pictocomm import __version__
from pictocomm.config import settings
from pictocomm.core.repositories.pictogram_repository import PictogramRepository  # noqa: TCH001
from pictocomm.core.services.session_service import SessionService  # noqa: TCH001
from pictocomm.dependencies import get_pictogram_repository, get_session_service

router = APIRouter()


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "service": "pictocomm-api",
            "version": __version__,
        }
    )


@router.get("/ready")
async def readiness_check(
    repo: PictogramRepository = Depends(get_pictogram_repository),
    sessions: SessionService = Depends(get_session_service),
):
    """Readiness check endpoint."""
    store_status = "connected"
    catalog_size = 0
    try:
        catalog = await repo.list_catalog()
        catalog_size = len(catalog)
    except Exception as e:
        store_status = f"error: {str(e)}"

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ready",
            "pictogram_store": store_status,
            "catalog_size": catalog_size,
            "open_sessions": len(sessions),
            "api_prefix": settings.api_prefix,
        }
    )
