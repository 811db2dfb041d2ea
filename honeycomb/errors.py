"""Exception types raised by the honeycomb package."""

from __future__ import annotations

__all__ = ["HoneycombError", "InconsistentCoordinatesError"]


class HoneycombError(Exception):
    """Base class for all honeycomb errors."""


class InconsistentCoordinatesError(HoneycombError, ValueError):
    """Raised when explicit cube coordinates do not sum to zero."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self.x = x
        self.y = y
        self.z = z
        super().__init__(
            f"For cube coords, x + y + z must be 0 (got x={x}, y={y}, z={z})"
        )
