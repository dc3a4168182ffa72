from __future__ import annotations

from fastapi import HTTPException, status

from pictocomm.core.errors import (
    PictoCommError,
    PictogramNotFoundError,
    PictogramNotPendingError,
    SentenceNotFoundError,
    SentenceNotSaveableError,
    SessionLimitReachedError,
    SessionNotFoundError,
)

_STATUS_BY_ERROR: dict[type[PictoCommError], int] = {
    SessionNotFoundError: status.HTTP_404_NOT_FOUND,
    PictogramNotFoundError: status.HTTP_404_NOT_FOUND,
    PictogramNotPendingError: status.HTTP_409_CONFLICT,
    SentenceNotFoundError: status.HTTP_404_NOT_FOUND,
    SentenceNotSaveableError: 422,  # Unprocessable content
    SessionLimitReachedError: status.HTTP_429_TOO_MANY_REQUESTS,
}


def http_error(err: PictoCommError) -> HTTPException:
    """Translate a service error into the HTTP error returned to the client."""
    code = _STATUS_BY_ERROR.get(type(err), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=code, detail=str(err))
