"""Factory producing hex classes that share orientation, origin, size and custom members."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .base import BaseHex
from .settings import HexSettings

__all__ = ["extend_hex"]

logger = logging.getLogger(__name__)


def extend_hex(prototype: Mapping[str, Any] | None = None, /, **overrides: Any) -> type[BaseHex]:
    """Build a hex class whose instances all share one set of defaults.

    ``prototype`` and ``overrides`` are merged (keywords last) over the
    defaults ``orientation=POINTY``, ``origin=Point(0, 0)``, ``size=1`` and
    ``strict=False``. Any other key becomes a custom attribute, or a method
    when it is a plain function. Keys that collide with a default attribute or
    method replace it silently.

    Example::

        Hex = extend_hex(
            size=50,
            orientation=HexOrientation.FLAT,
            custom_property="I'm custom",
            custom_method=lambda hex: f"{hex.custom_property} and called from a method",
        )

        hex = Hex(5, -1, -4)
        hex.coordinates()    # {'x': 5, 'y': -1, 'z': -4}
        hex.size             # 50.0
        hex.custom_method()  # "I'm custom and called from a method"

        # hexes returned from methods keep the custom properties
        hex.add(Hex(3, -1)).custom_property  # "I'm custom"
    """

    members = dict(prototype or {})
    members.update(overrides)
    settings = HexSettings.model_validate(members)

    namespace = settings.class_namespace()
    namespace["settings"] = settings
    namespace["__module__"] = __name__
    factory = type("Hex", (BaseHex,), namespace)

    overridden = sorted(name for name in settings.custom_members if hasattr(BaseHex, name))
    logger.debug(
        "Built hex factory orientation=%s size=%s origin=%s custom=%s overridden=%s",
        settings.orientation.value,
        settings.size,
        settings.origin,
        sorted(settings.custom_members),
        overridden,
    )
    return factory
