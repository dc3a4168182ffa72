from .favorites import persist_favorite
from .usage import increment_pictogram_usage

__all__ = [
    "increment_pictogram_usage",
    "persist_favorite",
]
