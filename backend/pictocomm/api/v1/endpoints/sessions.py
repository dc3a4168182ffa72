"""Board session endpoints.

Every handler is ``async`` and calls the synchronous coordinator directly, so
all events for all sessions are applied one at a time on the event loop.
"""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from pictocomm.api.v1.errors import http_error
from pictocomm.api.v1.schemas.session import (
    CategoryRequest,
    FavoriteChangedRead,
    RemoveRequest,
    SessionRead,
    TileRequest,
)
from pictocomm.background import persist_favorite
from pictocomm.core.errors import PictoCommError
from pictocomm.core.repositories.pictogram_repository import PictogramRepository  # noqa: TCH001
from pictocomm.core.services.session_service import SessionService  # noqa: TCH001
from pictocomm.dependencies import get_favorite_policy, get_pictogram_repository, get_session_service

router = APIRouter()


def _read(service: SessionService, session_id: str) -> SessionRead:
    return SessionRead.from_snapshot(session_id, service.get(session_id).state)


@router.post("/", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
async def create_session(service: SessionService = Depends(get_session_service)):
    try:
        session = await service.create_session()
    except PictoCommError as err:
        raise http_error(err) from err
    return SessionRead.from_snapshot(session.id, session.state)


@router.get("/{session_id}", response_model=SessionRead)
async def get_session(session_id: str, service: SessionService = Depends(get_session_service)):
    try:
        return _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(session_id: str, service: SessionService = Depends(get_session_service)):
    if not service.close(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return None


@router.post("/{session_id}/tap", response_model=SessionRead)
async def tap_tile(
    session_id: str,
    payload: TileRequest,
    service: SessionService = Depends(get_session_service),
):
    """Append the tile to the sentence and foreground the suggested category."""
    try:
        service.tap(session_id, payload.pictogram_id)
        return _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err


@router.post("/{session_id}/long-press", response_model=FavoriteChangedRead)
async def long_press_tile(
    session_id: str,
    payload: TileRequest,
    background_tasks: BackgroundTasks,
    service: SessionService = Depends(get_session_service),
    repo: PictogramRepository = Depends(get_pictogram_repository),
    persist: bool = Depends(get_favorite_policy),
):
    """Toggle the tile's favorite flag; optionally write it back to the store."""
    try:
        change = service.long_press(session_id, payload.pictogram_id)
        session = _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err
    if persist:
        background_tasks.add_task(persist_favorite, repo=repo, change=change)
    return FavoriteChangedRead(
        pictogram_id=change.pictogram_id,
        favorite=change.favorite,
        persisted=persist,
        session=session,
    )


@router.post("/{session_id}/remove", response_model=SessionRead)
async def remove_token(
    session_id: str,
    payload: RemoveRequest,
    service: SessionService = Depends(get_session_service),
):
    try:
        service.remove(session_id, payload.index)
        return _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err


@router.post("/{session_id}/category", response_model=SessionRead)
async def choose_category(
    session_id: str,
    payload: CategoryRequest,
    service: SessionService = Depends(get_session_service),
):
    try:
        service.choose_category(session_id, payload.category)
        return _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err


@router.post("/{session_id}/favorites", response_model=SessionRead)
async def choose_favorites(session_id: str, service: SessionService = Depends(get_session_service)):
    try:
        service.choose_favorites(session_id)
        return _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err


@router.post("/{session_id}/clear", response_model=SessionRead)
async def clear_sentence(session_id: str, service: SessionService = Depends(get_session_service)):
    try:
        service.clear(session_id)
        return _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err


@router.post("/{session_id}/refresh", response_model=SessionRead)
async def refresh_catalog(session_id: str, service: SessionService = Depends(get_session_service)):
    """Reload the catalog from the store, keeping the sentence and active filter."""
    try:
        await service.refresh_catalog(session_id)
        return _read(service, session_id)
    except PictoCommError as err:
        raise http_error(err) from err
