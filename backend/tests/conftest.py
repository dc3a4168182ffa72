"""Shared fixtures for the PictoComm test suite."""

from __future__ import annotations

import itertools

import pytest

from pictocomm.core.models.category import Category
from pictocomm.core.models.pictogram import Pictogram
from pictocomm.data.demo_catalog import load_demo_catalog


@pytest.fixture
def make_pictogram():
    """Factory for ad-hoc pictograms with unique ids."""
    counter = itertools.count(1000)

    def _make(text: str, category: Category = Category.THING, **fields) -> Pictogram:
        fields.setdefault("id", f"p{next(counter)}")
        return Pictogram(text=text, category=category, **fields)

    return _make


@pytest.fixture
def demo_catalog() -> list[Pictogram]:
    return load_demo_catalog()


@pytest.fixture
def by_text(demo_catalog) -> dict[str, Pictogram]:
    """Demo pictograms keyed by their label."""
    return {p.text: p for p in demo_catalog}
