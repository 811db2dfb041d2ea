"""Coordinate inference for hex construction.

Every accepted input shape is first reduced to a :class:`CoordinateInput`
(``x``, ``y``, an optional explicit ``z`` and the custom properties that ride
along) and then completed by :func:`infer_coordinates`, so the inference rules
live in one place:

* two numeric coordinates are kept as given,
* one numeric coordinate is used for both ``x`` and ``y``,
* no numeric coordinate yields the origin hex,
* ``z`` is always derived as ``-(x + y)``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..errors import InconsistentCoordinatesError
from ..utils import is_number, unsign_negative_zero

__all__ = [
    "COORDINATE_NAMES",
    "CoordinateInput",
    "extract_input",
    "infer_coordinates",
    "is_coordinate_source",
    "third_coordinate",
]

COORDINATE_NAMES = ("x", "y", "z")

_SUM_TOLERANCE = 1e-9


@dataclass(frozen=True)
class CoordinateInput:
    x: Any = None
    y: Any = None
    z: Any = None
    custom: dict[str, Any] = field(default_factory=dict)


def is_coordinate_source(value: Any) -> bool:
    """Mappings, sequences and objects with ``x`` or ``y`` attributes carry coordinates."""

    if isinstance(value, (Mapping, Sequence)):
        return not isinstance(value, (str, bytes))
    return hasattr(value, "x") or hasattr(value, "y")


def third_coordinate(first: float, second: float) -> float:
    """Return the cube coordinate that makes the three sum to zero."""

    return unsign_negative_zero(-first - second)


def _custom_from_mapping(source: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key): value for key, value in source.items() if key not in COORDINATE_NAMES}


def _custom_from_object(source: Any) -> dict[str, Any]:
    # Hexes keep their per-instance custom properties in ``__dict__``.
    state = getattr(source, "__dict__", None)
    if not isinstance(state, dict):
        return {}
    return {key: value for key, value in state.items() if key not in COORDINATE_NAMES}


def extract_input(
    x_or_props: Any = None,
    y: Any = None,
    z: Any = None,
    custom_props: Mapping[str, Any] | None = None,
) -> CoordinateInput:
    """Reduce the constructor arguments to a :class:`CoordinateInput`.

    Objects (mappings, hexes, points) contribute ``x`` and ``y`` plus their
    non-coordinate fields. Sequences contribute their first two items and drop
    every custom property. Anything else is taken as a bare ``x``. Coordinates
    passed only as keywords are read as a mapping.

    An explicit ``z`` (positional, keyword or mapping key) is carried along for
    the strict consistency check only; the ``z`` of a hex or point is never
    consulted.
    """

    extra = dict(custom_props or {})
    if x_or_props is None and y is None and z is None and any(name in extra for name in COORDINATE_NAMES):
        x_or_props, extra = extra, {}

    if isinstance(x_or_props, Mapping):
        custom = _custom_from_mapping(x_or_props)
        custom.update(extra)
        explicit_z = extra.get("z", x_or_props.get("z"))
        return CoordinateInput(x_or_props.get("x"), x_or_props.get("y"), explicit_z, custom=custom)

    if isinstance(x_or_props, Sequence) and not isinstance(x_or_props, (str, bytes)):
        items = list(x_or_props)
        first = items[0] if items else None
        second = items[1] if len(items) > 1 else None
        third = items[2] if len(items) > 2 else None
        return CoordinateInput(first, second, third)

    if hasattr(x_or_props, "x") or hasattr(x_or_props, "y"):
        custom = _custom_from_object(x_or_props)
        custom.update(extra)
        return CoordinateInput(
            getattr(x_or_props, "x", None),
            getattr(x_or_props, "y", None),
            custom=custom,
        )

    explicit_z = z if z is not None else extra.get("z")
    return CoordinateInput(x_or_props, y, explicit_z, custom=extra)


def infer_coordinates(source: CoordinateInput, *, strict: bool = False) -> tuple[Any, Any, Any]:
    """Complete ``source`` into ``(x, y, z)`` satisfying ``x + y + z == 0``.

    With ``strict`` an explicit numeric ``z`` must agree with the inferred one,
    otherwise :class:`InconsistentCoordinatesError` is raised.
    """

    x = unsign_negative_zero(source.x)
    y = unsign_negative_zero(source.y)

    x_is_number, y_is_number = is_number(x), is_number(y)
    if x_is_number and not y_is_number:
        y = x
    elif y_is_number and not x_is_number:
        x = y
    elif not (x_is_number or y_is_number):
        x = y = 0

    z = third_coordinate(x, y)

    if strict and is_number(source.z) and not math.isclose(x + y + source.z, 0, abs_tol=_SUM_TOLERANCE):
        raise InconsistentCoordinatesError(x, y, source.z)

    return x, y, z
