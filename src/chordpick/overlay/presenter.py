from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from chordpick.selection.ir import KeySymbol, Overlay

from .style import OverlayStyle

logger = logging.getLogger(__name__)


class RecordingPresenter:
    """Presenter that keeps every rendered frame instead of drawing it."""

    def __init__(self, *, line_height: int = 20) -> None:
        self._line_height = line_height
        self.style = OverlayStyle()
        self.frames: List[Tuple[Overlay, ...]] = []
        self.disposed: List[Tuple[Overlay, ...]] = []
        self.text_height_calls = 0

    def apply_style(self, style: OverlayStyle) -> None:
        self.style = style

    def text_height(self, symbols: Sequence[KeySymbol]) -> int:
        self.text_height_calls += 1
        return self._line_height

    def render(self, overlays: Sequence[Overlay]) -> None:
        self.frames.append(tuple(overlays))

    def dispose(self, overlays: Sequence[Overlay]) -> None:
        self.disposed.append(tuple(overlays))


class LoggingPresenter(RecordingPresenter):
    """Recording presenter that also logs each frame at debug level."""

    def render(self, overlays: Sequence[Overlay]) -> None:
        super().render(overlays)
        style = self.style
        for overlay in overlays:
            logger.debug(
                "%r at %s: %s [%s on %s, border %dpx %s, %s]",
                overlay.target.handle,
                _format_rect(overlay),
                "".join(overlay.chord) or "-",
                style.text_color,
                style.bg_color,
                style.border_px,
                style.border_color,
                style.font,
            )


def _format_rect(overlay: Overlay) -> str:
    r = overlay.rect
    return f"{r.width}x{r.height}+{r.x}+{r.y}"
