from __future__ import annotations


class PictoCommError(Exception):
    """Base class for service-level errors."""


class SessionNotFoundError(PictoCommError):
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id


class SessionLimitReachedError(PictoCommError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"Session limit of {limit} reached")
        self.limit = limit


class PictogramNotFoundError(PictoCommError):
    def __init__(self, pictogram_id: str) -> None:
        super().__init__(f"Pictogram {pictogram_id} not found in catalog")
        self.pictogram_id = pictogram_id


class SentenceNotFoundError(PictoCommError):
    def __init__(self, sentence_id: object) -> None:
        super().__init__(f"Saved sentence {sentence_id} not found")
        self.sentence_id = sentence_id


class SentenceNotSaveableError(PictoCommError):
    """Raised by the save flow when the coordinator reports a not-saveable sentence."""

    def __init__(self, reason: str, token_count: int) -> None:
        super().__init__(reason)
        self.reason = reason
        self.token_count = token_count


class PictogramNotPendingError(PictoCommError):
    def __init__(self, pictogram_id: str) -> None:
        super().__init__(f"Pictogram {pictogram_id} is not waiting for approval")
        self.pictogram_id = pictogram_id
