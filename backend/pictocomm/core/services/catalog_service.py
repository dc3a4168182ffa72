from __future__ import annotations

from typing import TYPE_CHECKING

from pictocomm.core.models.category import Category
from pictocomm.core.schemas.view_state import FilterKind
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pictocomm.core.models.pictogram import Pictogram
    from pictocomm.core.schemas.view_state import FilterState

logger = get_logger(__name__)

Catalog = tuple["Pictogram", ...]


def list_categories() -> list[Category]:
    """All categories in selector order."""
    return list(Category)


def filter_catalog(catalog: Sequence[Pictogram], active_filter: FilterState, page_size: int) -> Catalog:
    """Compute the visible tiles for ``active_filter``.

    Category and favorites views keep catalog order and are not truncated. The
    default view is the catalog as delivered (the source already orders it by
    usage) cut to ``page_size``.
    """
    if active_filter.kind is FilterKind.CATEGORY:
        return tuple(p for p in catalog if p.category == active_filter.category)
    if active_filter.kind is FilterKind.FAVORITES:
        return tuple(p for p in catalog if p.favorite)
    return tuple(catalog[:page_size])


def toggle_favorite(
    catalog: Sequence[Pictogram],
    view: Sequence[Pictogram],
    pictogram_id: str,
) -> tuple[Catalog, Catalog, bool | None]:
    """Flip ``favorite`` for ``pictogram_id`` in the catalog and the visible view.

    Both sequences are rebuilt from the same flipped value so they can never
    disagree. The view is not re-filtered: a tile un-favorited while the
    favorites view is showing stays visible until the filter changes.

    Returns the new catalog, the new view and the post-toggle flag, or None for
    the flag when the id is unknown (both sequences are then returned as-is).
    """
    current = next((p for p in catalog if p.id == pictogram_id), None)
    if current is None:
        logger.debug("Favorite toggle for unknown pictogram ignored", extra={"pictogram_id": pictogram_id})
        return tuple(catalog), tuple(view), None

    flipped = current.model_copy(update={"favorite": not current.favorite})
    new_catalog = _replace_entries(catalog, flipped)
    new_view = _replace_entries(view, flipped)
    return new_catalog, new_view, flipped.favorite


def replace_catalog(
    entries: Iterable[Pictogram],
    active_filter: FilterState,
    page_size: int,
) -> tuple[Catalog, Catalog]:
    """Swap in a fresh catalog and re-apply the active filter to it."""
    catalog = tuple(entries)
    return catalog, filter_catalog(catalog, active_filter, page_size)


def _replace_entries(entries: Sequence[Pictogram], replacement: Pictogram) -> Catalog:
    return tuple(replacement if p.id == replacement.id else p for p in entries)
