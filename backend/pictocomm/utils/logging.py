from __future__ import annotations

import logging
import sys

from pictocomm.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once for the API process.

    The engine modules log suggestions and ignored events at DEBUG; turning on
    ``PICTOCOMM_DEBUG`` surfaces them without touching uvicorn's verbosity.
    """
    resolved = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if settings.debug:
        logging.getLogger("pictocomm").setLevel(logging.DEBUG)

    logging.info("Logging configured successfully", extra={"level": resolved})


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
