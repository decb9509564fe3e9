from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from chordpick.overlay.style import OverlayStyle

from .ir import Exit, KeyEvent, KeySymbol, Outcome, Overlay, Selected

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    """Blocking source of raw key events."""

    def next_key_event(self) -> KeyEvent: ...


class Presenter(Protocol):
    """Draws overlays; must treat them as read-only."""

    def apply_style(self, style: OverlayStyle) -> None: ...

    def text_height(self, symbols: Sequence[KeySymbol]) -> int: ...

    def render(self, overlays: Sequence[Overlay]) -> None: ...

    def dispose(self, overlays: Sequence[Overlay]) -> None: ...


class SelectionEngine:
    """Narrow a set of overlays one key press at a time."""

    def __init__(
        self,
        overlays: Iterable[Overlay],
        *,
        cancel_key: KeySymbol,
        backspace_key: Optional[KeySymbol] = None,
    ) -> None:
        self._overlays: List[Overlay] = list(overlays)
        self._cancel_key = cancel_key
        self._backspace_key = backspace_key

    @property
    def overlays(self) -> Tuple[Overlay, ...]:
        return tuple(self._overlays)

    def run(self, source: KeySource, presenter: Presenter) -> Outcome:
        """Redraw, read one event, repeat until a terminal outcome."""

        while True:
            presenter.render(self.overlays)
            outcome = self.feed(source.next_key_event())
            if outcome is not None:
                return outcome

    def feed(self, event: KeyEvent) -> Optional[Outcome]:
        """Process one event; return the outcome if it ends the session."""

        if not event.is_press:
            return None

        if event.symbol == self._cancel_key:
            return Exit()

        # Backspace only forces a redraw; consumed symbols are not restored.
        if self._backspace_key is not None and event.symbol == self._backspace_key:
            logger.debug("backspace pressed; state unchanged")
            return None

        matching, rest = _partition(self._overlays, event.symbol)
        if not matching:
            return None
        if len(matching) == 1:
            return Selected(target=matching[0].target)

        logger.debug("%r narrows to %d overlay(s)", event.symbol, len(matching))
        self._overlays = [
            *(o.model_copy(update={"chord": o.chord[1:]}) for o in matching),
            *(o.model_copy(update={"chord": ()}) for o in rest),
        ]
        return None


def _partition(
    overlays: Iterable[Overlay], symbol: KeySymbol
) -> Tuple[List[Overlay], List[Overlay]]:
    matching: List[Overlay] = []
    rest: List[Overlay] = []
    for overlay in overlays:
        if overlay.selectable and overlay.chord[0] == symbol:
            matching.append(overlay)
        else:
            rest.append(overlay)
    return matching, rest
