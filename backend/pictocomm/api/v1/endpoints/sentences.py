from __future__ import annotations

from uuid import UUID  # noqa: TCH003

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status

from pictocomm.api.v1.errors import http_error
from pictocomm.api.v1.schemas.sentence import ReuseRequest, SaveRequest, SentenceRead
from pictocomm.api.v1.schemas.session import SessionRead
from pictocomm.background import increment_pictogram_usage
from pictocomm.core.errors import PictoCommError
from pictocomm.core.repositories.pictogram_repository import PictogramRepository  # noqa: TCH001
from pictocomm.core.services.sentence_service import SentenceService  # noqa: TCH001
from pictocomm.dependencies import get_pictogram_repository, get_sentence_service

router = APIRouter()


@router.post("/", response_model=SentenceRead, status_code=status.HTTP_201_CREATED)
async def save_sentence(
    payload: SaveRequest,
    background_tasks: BackgroundTasks,
    service: SentenceService = Depends(get_sentence_service),
    repo: PictogramRepository = Depends(get_pictogram_repository),
):
    """Store the session's sentence and clear the board.

    Usage counters of the pictograms are bumped after the response is sent.
    """
    try:
        saved = await service.save(payload.session_id)
    except PictoCommError as err:
        raise http_error(err) from err
    background_tasks.add_task(increment_pictogram_usage, repo=repo, pictogram_ids=list(saved.pictogram_ids))
    return SentenceRead.model_validate(saved)


@router.get("/recent", response_model=list[SentenceRead])
async def list_recent(
    limit: int = Query(default=10, ge=1, le=100),
    service: SentenceService = Depends(get_sentence_service),
):
    sentences = await service.list_recent(limit=limit)
    return [SentenceRead.model_validate(s) for s in sentences]


@router.get("/most-used", response_model=list[SentenceRead])
async def list_most_used(
    limit: int = Query(default=10, ge=1, le=100),
    service: SentenceService = Depends(get_sentence_service),
):
    sentences = await service.list_most_used(limit=limit)
    return [SentenceRead.model_validate(s) for s in sentences]


@router.get("/search", response_model=list[SentenceRead])
async def search_sentences(
    q: str = Query(min_length=1, max_length=200),
    limit: int = Query(default=10, ge=1, le=100),
    service: SentenceService = Depends(get_sentence_service),
):
    sentences = await service.search(q, limit=limit)
    return [SentenceRead.model_validate(s) for s in sentences]


@router.delete("/{sentence_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sentence(
    sentence_id: UUID,
    service: SentenceService = Depends(get_sentence_service),
):
    deleted = await service.delete(sentence_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Sentence not found")
    return None


@router.post("/{sentence_id}/reuse", response_model=SessionRead)
async def reuse_sentence(
    sentence_id: UUID,
    payload: ReuseRequest,
    service: SentenceService = Depends(get_sentence_service),
):
    """Load a saved sentence into a board session."""
    try:
        snapshot = await service.reuse(sentence_id, payload.session_id)
    except PictoCommError as err:
        raise http_error(err) from err
    return SessionRead.from_snapshot(payload.session_id, snapshot)
