from __future__ import annotations

from typing import Callable, Dict, TypeAlias

from pydantic import BaseModel, ConfigDict


class Rectangle(BaseModel):
    """Screen-space rectangle in pixels."""

    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


# (text height in pixels, target rectangle) -> overlay rectangle
OverlayFunction: TypeAlias = Callable[[int, Rectangle], Rectangle]


def full_size(text_height: int, rect: Rectangle) -> Rectangle:
    """Overlay covering the whole target."""

    return rect


def proportional(fraction: float) -> OverlayFunction:
    """Overlay a fraction of the target's size, centred on it."""

    def _overlay(text_height: int, rect: Rectangle) -> Rectangle:
        width = round(fraction * rect.width)
        height = round(fraction * rect.height)
        return Rectangle(
            x=rect.x + (rect.width - width) // 2,
            y=rect.y + (rect.height - height) // 2,
            width=width,
            height=height,
        )

    return _overlay


def text_size(text_height: int, rect: Rectangle) -> Rectangle:
    """Smallest square overlay that fits the chord text, centred on the target."""

    return Rectangle(
        x=rect.x + (rect.width - text_height) // 2,
        y=rect.y + (rect.height - text_height) // 2,
        width=text_height,
        height=text_height,
    )


def bar(fraction: float) -> OverlayFunction:
    """Full-width bar one text line high, ``fraction`` of the way down the target."""

    # values outside [0, 1] would place the bar off the target
    fraction = max(0.0, min(fraction, 1.0))

    def _overlay(text_height: int, rect: Rectangle) -> Rectangle:
        return Rectangle(
            x=rect.x,
            y=rect.y + round(fraction * (rect.height - text_height)),
            width=rect.width,
            height=text_height,
        )

    return _overlay


_FACTORIES: Dict[str, Callable[[float], OverlayFunction]] = {
    "full_size": lambda _fraction: full_size,
    "proportional": proportional,
    "text_size": lambda _fraction: text_size,
    "bar": bar,
}

OVERLAY_KINDS = tuple(_FACTORIES)


def overlay_function(kind: str, fraction: float = 0.3) -> OverlayFunction:
    """Look up a named overlay strategy."""

    try:
        factory = _FACTORIES[kind]
    except KeyError:
        raise ValueError(f"unknown overlay kind: {kind!r}") from None
    return factory(fraction)
