from .base import BaseHex
from .constants import CUBE_DIRECTIONS, EPSILON, HexOrientation
from .coordinates import infer_coordinates, third_coordinate
from .factory import extend_hex
from .settings import HexSettings

__all__ = [
    "BaseHex",
    "CUBE_DIRECTIONS",
    "EPSILON",
    "HexOrientation",
    "HexSettings",
    "extend_hex",
    "infer_coordinates",
    "third_coordinate",
]
