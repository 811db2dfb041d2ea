"""Orientations, the pixel transform matrices for each, and cube direction offsets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import sqrt

__all__ = [
    "CUBE_DIRECTIONS",
    "EPSILON",
    "HexOrientation",
    "OrientationMatrix",
    "ORIENTATION_MATRICES",
]


class HexOrientation(str, Enum):
    """The two ways a hexagon can be drawn."""

    POINTY = "pointy"
    FLAT = "flat"

    @classmethod
    def _missing_(cls, value: object) -> HexOrientation | None:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


# Forward (f) and inverse (b) axial-to-pixel matrices per orientation
@dataclass(frozen=True)
class OrientationMatrix:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # for polygon corners, in sixths of a turn


ORIENTATION_MATRICES: dict[HexOrientation, OrientationMatrix] = {
    HexOrientation.POINTY: OrientationMatrix(
        f0 =  sqrt(3.0), f1 =  sqrt(3.0)/2.0,
        f2 =  0.0,       f3 =  3.0/2.0,
        b0 =  sqrt(3.0)/3.0, b1 = -1.0/3.0,
        b2 =  0.0,            b3 =  2.0/3.0,
        start_angle = 0.5,  # 30°
    ),
    HexOrientation.FLAT: OrientationMatrix(
        f0 =  3.0/2.0,  f1 = 0.0,
        f2 =  sqrt(3.0)/2.0, f3 = sqrt(3.0),
        b0 =  2.0/3.0,  b1 = 0.0,
        b2 = -1.0/3.0,  b3 = sqrt(3.0)/3.0,
        start_angle = 0.0,
    ),
}

# Offset added by nudge() so points on a hex edge round to the same side.
EPSILON: dict[str, float] = {"x": 1e-6, "y": 1e-6, "z": -2e-6}

CUBE_DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (+1, -1, 0),
    (+1, 0, -1),
    (0, +1, -1),
    (-1, +1, 0),
    (-1, 0, +1),
    (0, -1, +1),
)
