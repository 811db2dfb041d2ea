"""Hexagonal grid coordinates in cube form, with pixel geometry for pointy and flat hexes."""

from .errors import HoneycombError, InconsistentCoordinatesError
from .hex import (
    EPSILON,
    BaseHex,
    HexOrientation,
    HexSettings,
    extend_hex,
)
from .point import Point

__version__ = "0.1.0"

__all__ = [
    "BaseHex",
    "EPSILON",
    "HexOrientation",
    "HexSettings",
    "HoneycombError",
    "InconsistentCoordinatesError",
    "Point",
    "__version__",
    "extend_hex",
]
