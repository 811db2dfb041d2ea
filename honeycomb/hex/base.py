"""Hex value type: cube coordinates plus arithmetic and pixel geometry.

Hex classes are not instantiated from :class:`BaseHex` directly in client
code; :func:`honeycomb.extend_hex` builds a subclass carrying the orientation,
origin, size and any custom members shared by all of its hexes.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, ClassVar, Iterator

from ..point import Point
from .constants import (
    CUBE_DIRECTIONS,
    EPSILON,
    ORIENTATION_MATRICES,
    HexOrientation,
    OrientationMatrix,
)
from .coordinates import (
    COORDINATE_NAMES,
    CoordinateInput,
    extract_input,
    infer_coordinates,
    is_coordinate_source,
    third_coordinate,
)

__all__ = ["BaseHex"]

_SQRT3 = math.sqrt(3)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class BaseHex:
    """A hex in cube coordinates, always satisfying ``x + y + z == 0``."""

    orientation: ClassVar[HexOrientation] = HexOrientation.POINTY
    origin: ClassVar[Point] = Point(0, 0)
    size: ClassVar[float] = 1.0
    strict: ClassVar[bool] = False

    third_coordinate = staticmethod(third_coordinate)

    x: float
    y: float
    z: float

    def __init__(self, x_or_props: Any = None, y: Any = None, z: Any = None, /, **custom_props: Any) -> None:
        source = extract_input(x_or_props, y, z, custom_props)
        x, y, z = infer_coordinates(source, strict=self.strict)
        for name, value in source.custom.items():
            setattr(self, name, value)
        self.x, self.y, self.z = x, y, z

    # --- construction helpers -------------------------------------------------

    def _custom_properties(self) -> dict[str, Any]:
        return {key: value for key, value in vars(self).items() if key not in COORDINATE_NAMES}

    def _spawn(self, x: float, y: float) -> BaseHex:
        """Build a hex of the receiver's class carrying its custom properties."""

        return type(self)({"x": x, "y": y, **self._custom_properties()})

    def _coerce(self, other: Any) -> BaseHex:
        if isinstance(other, BaseHex):
            return other
        if not is_coordinate_source(other):
            raise TypeError(f"expected a hex or hex-like coordinates, got {type(other).__name__}")
        return type(self)(other)

    # --- arithmetic and comparison --------------------------------------------

    def coordinates(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    def add(self, other: Any) -> BaseHex:
        other = self._coerce(other)
        return self._spawn(self.x + other.x, self.y + other.y)

    def subtract(self, other: Any) -> BaseHex:
        other = self._coerce(other)
        return self._spawn(self.x - other.x, self.y - other.y)

    def equals(self, other: Any) -> bool:
        if not is_coordinate_source(other):
            return False
        other = self._coerce(other)
        return self.x == other.x and self.y == other.y and self.z == other.z

    def set(self, x_or_props: Any = None, y: Any = None, z: Any = None, /, **fields: Any) -> BaseHex:
        """Overwrite coordinates and properties in place and return ``self``.

        Takes the same arguments as the constructor. Coordinates that are not
        given keep their current values; ``z`` is always rederived so the cube
        invariant holds afterwards.
        """

        updates: dict[str, Any] = {}
        if isinstance(x_or_props, Mapping):
            updates.update(x_or_props)
        elif isinstance(x_or_props, BaseHex):
            updates.update(vars(x_or_props))
        else:
            extracted = extract_input(x_or_props, y, z)
            updates.update(
                (name, getattr(extracted, name))
                for name in COORDINATE_NAMES
                if getattr(extracted, name) is not None
            )
        updates.update(fields)

        source = CoordinateInput(
            updates.get("x", self.x),
            updates.get("y", self.y),
            updates.get("z"),
        )
        x, y, z = infer_coordinates(source, strict=self.strict)
        for name, value in updates.items():
            if name not in COORDINATE_NAMES:
                setattr(self, name, value)
        self.x, self.y, self.z = x, y, z
        return self

    # --- rounding, interpolation, distance ------------------------------------

    def round(self) -> BaseHex:
        """Snap to the nearest hex with integer coordinates."""

        rounded_x = _round_half_up(self.x)
        rounded_y = _round_half_up(self.y)
        rounded_z = _round_half_up(self.z)
        diff_x = abs(self.x - rounded_x)
        diff_y = abs(self.y - rounded_y)
        diff_z = abs(self.z - rounded_z)

        # Reset the component with the largest change to satisfy the constraint
        if diff_x > diff_y and diff_x > diff_z:
            rounded_x = -rounded_y - rounded_z
        elif diff_y > diff_z:
            rounded_y = -rounded_x - rounded_z

        return self._spawn(rounded_x, rounded_y)

    def lerp(self, other: Any, t: float) -> BaseHex:
        """Interpolate towards ``other``; the result is not rounded."""

        other = self._coerce(other)
        return self._spawn(
            self.x * (1 - t) + other.x * t,
            self.y * (1 - t) + other.y * t,
        )

    def nudge(self) -> BaseHex:
        return self.add(EPSILON)

    def distance(self, other: Any) -> float:
        other = self._coerce(other)
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))

    def line_to(self, other: Any) -> list[BaseHex]:
        """Hexes on the straight line to ``other``, both ends included."""

        other = self._coerce(other)
        steps = int(self.distance(other))
        if steps == 0:
            return [self.round()]

        start, end = self.nudge(), other.nudge()
        return [start.lerp(end, step / steps).round() for step in range(steps + 1)]

    def neighbor(self, direction: int) -> BaseHex:
        if not 0 <= direction < len(CUBE_DIRECTIONS):
            raise ValueError(f"direction must be between 0 and {len(CUBE_DIRECTIONS) - 1}")
        dx, dy, _ = CUBE_DIRECTIONS[direction]
        return self._spawn(self.x + dx, self.y + dy)

    def neighbors(self) -> list[BaseHex]:
        return [self.neighbor(direction) for direction in range(len(CUBE_DIRECTIONS))]

    # --- geometry -------------------------------------------------------------

    def is_pointy(self) -> bool:
        return self.orientation == HexOrientation.POINTY

    def is_flat(self) -> bool:
        return self.orientation == HexOrientation.FLAT

    def width(self) -> float:
        return self.size * _SQRT3 if self.is_pointy() else self.size * 2

    def height(self) -> float:
        return self.size * 2 if self.is_pointy() else self.size * _SQRT3

    def opposite_corner_distance(self) -> float:
        return self.height() if self.is_pointy() else self.width()

    def opposite_side_distance(self) -> float:
        return self.width() if self.is_pointy() else self.height()

    def _matrix(self) -> OrientationMatrix:
        return ORIENTATION_MATRICES[HexOrientation(self.orientation)]

    def corners(self) -> list[Point]:
        """The six corner points, relative to the hex centre."""

        start_angle = self._matrix().start_angle
        corners = []
        for corner in range(6):
            angle = 2.0 * math.pi * (corner - start_angle) / 6
            corners.append(Point(self.size * math.cos(angle), self.size * math.sin(angle)))
        return corners

    def to_point(self) -> Point:
        """Pixel position of the hex centre, relative to ``origin``."""

        matrix = self._matrix()
        q, r = self.x, self.z
        pixel = Point(
            (matrix.f0 * q + matrix.f1 * r) * self.size,
            (matrix.f2 * q + matrix.f3 * r) * self.size,
        )
        return pixel.subtract(self.origin)

    @classmethod
    def from_point(cls, point: Any = None, y: Any = None) -> BaseHex:
        """Return the hex containing the pixel ``point``."""

        matrix = ORIENTATION_MATRICES[HexOrientation(cls.orientation)]
        pixel = Point.from_any(point, y).add(cls.origin)
        px, py = pixel.x / cls.size, pixel.y / cls.size
        q = matrix.b0 * px + matrix.b1 * py
        r = matrix.b2 * px + matrix.b3 * py
        return cls(q, third_coordinate(q, r)).round()

    # --- dunder protocol ------------------------------------------------------

    def to_string(self) -> str:
        return f"{self.x},{self.y}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseHex):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Any) -> BaseHex:
        return self.add(other)

    def __sub__(self, other: Any) -> BaseHex:
        return self.subtract(other)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
