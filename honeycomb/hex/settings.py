"""Configuration model shared by every hex produced from one factory."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from ..point import Point
from .constants import HexOrientation

__all__ = ["HexSettings"]


class HexSettings(BaseModel):
    """Defaults and custom members bound to a hex factory.

    Unknown keys are kept as extras: they become custom attributes (or methods,
    for callables) of every hex the factory builds. Values are coerced into
    their types but not range checked, so a zero or negative ``size`` is
    accepted as given.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    orientation: HexOrientation = Field(default=HexOrientation.POINTY)
    origin: InstanceOf[Point] = Field(default_factory=Point)
    size: float = Field(default=1.0)
    strict: bool = Field(default=False)

    @field_validator("origin", mode="before")
    @classmethod
    def _coerce_origin(cls, value: Any) -> Point:
        return Point.from_any(value)

    @field_validator("orientation", mode="before")
    @classmethod
    def _coerce_orientation(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, HexOrientation):
            return HexOrientation(value)
        return value

    @property
    def custom_members(self) -> dict[str, Any]:
        """Custom attributes and methods, in declaration order."""

        return dict(self.model_extra or {})

    def class_namespace(self) -> dict[str, Any]:
        """Return the attributes installed on the generated hex class."""

        namespace: dict[str, Any] = {
            "orientation": self.orientation,
            "origin": self.origin,
            "size": self.size,
            "strict": self.strict,
        }
        namespace.update(self.custom_members)
        return namespace
