from __future__ import annotations

from enum import Enum
from typing import Any


class Category(str, Enum):
    """Grammatical grouping of pictograms.

    Declaration order is the order used when a selector lists every category.
    """

    PERSON = "person"
    ACTION = "action"
    THING = "thing"
    QUALITY = "quality"
    PLACE = "place"
    TIME = "time"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        """Display color as ``#RRGGBB``."""
        return _COLORS[self]

    @classmethod
    def default(cls) -> Category:
        return cls.THING

    @classmethod
    def from_value(cls, value: Any) -> Category:
        """Resolve a stored category value, falling back to the default.

        Accepts enum members, values (``"person"``), names (``"PERSON"``) and
        the Spanish names older stores wrote (``"PERSONAS"``), in any case. Anything else maps to
        :meth:`default`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            try:
                return cls(key.lower())
            except ValueError:
                member = cls.__members__.get(key.upper()) or _LEGACY_NAMES.get(key.upper())
                if member is not None:
                    return member
        return cls.default()


_LEGACY_NAMES: dict[str, Category] = {
    "PERSONAS": Category.PERSON,
    "ACCIONES": Category.ACTION,
    "COSAS": Category.THING,
    "CUALIDADES": Category.QUALITY,
    "LUGARES": Category.PLACE,
    "TIEMPO": Category.TIME,
}

_LABELS: dict[Category, str] = {
    Category.PERSON: "People",
    Category.ACTION: "Actions",
    Category.THING: "Things",
    Category.QUALITY: "Qualities",
    Category.PLACE: "Places",
    Category.TIME: "Time",
}

_COLORS: dict[Category, str] = {
    Category.PERSON: "#4CAF50",
    Category.ACTION: "#2196F3",
    Category.THING: "#FFC107",
    Category.QUALITY: "#FF5722",
    Category.PLACE: "#9C27B0",
    Category.TIME: "#00BCD4",
}
