"""Small numeric helpers shared by the hex and point value types."""

from __future__ import annotations

from numbers import Real
from typing import Any

__all__ = ["is_number", "unsign_negative_zero"]


def is_number(value: Any) -> bool:
    """Return ``True`` for real numbers, excluding booleans."""

    return isinstance(value, Real) and not isinstance(value, bool)


def unsign_negative_zero(value: Any) -> Any:
    """Replace ``-0.0`` with ``0.0``; every other value passes through."""

    if is_number(value) and value == 0:
        return abs(value)
    return value
