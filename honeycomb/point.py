"""Planar pixel-space point used for hex origins, centres and corners."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .utils import is_number, unsign_negative_zero

__all__ = ["Point"]


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable ``(x, y)`` pair in pixel space."""

    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", unsign_negative_zero(self.x))
        object.__setattr__(self, "y", unsign_negative_zero(self.y))

    @classmethod
    def from_any(cls, value: Any = None, y: Any = None) -> Point:
        """Normalise the accepted input forms into a :class:`Point`.

        Accepts nothing (the zero point), one number (used for both axes), two
        numbers, a sequence, a mapping with ``x``/``y`` keys, or any object with
        ``x``/``y`` attributes such as another point or a hex. Missing axes fall
        back to the other axis, or to zero when neither is given.
        """

        if isinstance(value, cls) and y is None:
            return value
        if isinstance(value, Mapping):
            x, y = value.get("x"), value.get("y")
        elif isinstance(value, Sequence) and not isinstance(value, str):
            items = list(value)[:2]
            x = items[0] if items else None
            y = items[1] if len(items) > 1 else None
        elif hasattr(value, "x") or hasattr(value, "y"):
            x, y = getattr(value, "x", None), getattr(value, "y", None)
        else:
            x = value

        if not is_number(x) and not is_number(y):
            return cls(0, 0)
        if not is_number(x):
            x = y
        if not is_number(y):
            y = x
        return cls(x, y)

    def coordinates(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def add(self, other: Any = None, y: Any = None) -> Point:
        other = Point.from_any(other, y)
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: Any = None, y: Any = None) -> Point:
        other = Point.from_any(other, y)
        return Point(self.x - other.x, self.y - other.y)

    def multiply(self, other: Any = None, y: Any = None) -> Point:
        other = Point.from_any(other, y)
        return Point(self.x * other.x, self.y * other.y)

    def divide(self, other: Any = None, y: Any = None) -> Point:
        other = Point.from_any(other, y)
        return Point(self.x / other.x, self.y / other.y)

    def __add__(self, other: Any) -> Point:
        return self.add(other)

    def __sub__(self, other: Any) -> Point:
        return self.subtract(other)

    def __iter__(self):
        yield self.x
        yield self.y
