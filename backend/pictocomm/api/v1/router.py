from __future__ import annotations

from fastapi import APIRouter

from .endpoints import health, metadata, pictograms, sentences, sessions

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(sentences.router, prefix="/sentences", tags=["sentences"])
api_router.include_router(pictograms.router, prefix="/pictograms", tags=["pictograms"])
api_router.include_router(metadata.router, prefix="/metadata", tags=["metadata"])
