from __future__ import annotations

from .geometry import (
    OVERLAY_KINDS,
    OverlayFunction,
    Rectangle,
    bar,
    full_size,
    overlay_function,
    proportional,
    text_size,
)
from .style import OverlayStyle

__all__ = [
    "OVERLAY_KINDS",
    "OverlayFunction",
    "OverlayStyle",
    "Rectangle",
    "bar",
    "full_size",
    "overlay_function",
    "proportional",
    "text_size",
]
