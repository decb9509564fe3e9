from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Protocol, Sequence, Tuple

from chordpick.overlay.geometry import OverlayFunction

from .assigner import ChordAssigner
from .config import SelectionConfig
from .engine import KeySource, Presenter, SelectionEngine
from .ir import Chord, KeySymbol, Overlay, Screen, Selected, Target

logger = logging.getLogger(__name__)


class InputGrab(Protocol):
    """Exclusive keyboard input, held for the duration of a session."""

    def acquire(self) -> bool: ...

    def release(self) -> None: ...


class NoGrab:
    """Grab that always succeeds and holds nothing."""

    def acquire(self) -> bool:
        return True

    def release(self) -> None:
        return None


@contextmanager
def grabbed(grab: InputGrab) -> Iterator[bool]:
    """Acquire ``grab`` for the ``with`` block; release it on every exit path."""

    acquired = grab.acquire()
    try:
        yield acquired
    finally:
        if acquired:
            grab.release()


def group_targets(
    key_groups: Sequence[Sequence[KeySymbol]], screens: Sequence[Screen]
) -> List[Tuple[Sequence[KeySymbol], List[Target]]]:
    """Match key groups to targets.

    A single key group gets every target. Several key groups are paired,
    in order, with the screens sorted left-to-right then top-to-bottom;
    targets on a screen without a key group are left out.
    """

    if not key_groups:
        return []
    if len(key_groups) == 1:
        return [(key_groups[0], [t for screen in screens for t in screen.targets])]

    ordered = sorted(screens, key=lambda s: (s.rect.x, s.rect.y))
    return [(keys, list(screen.targets)) for keys, screen in zip(key_groups, ordered)]


def assign_chords(
    config: SelectionConfig, screens: Sequence[Screen]
) -> List[Tuple[Target, Chord]]:
    assigner = ChordAssigner(max_chord_length=config.max_chord_length)
    return assigner.assign(group_targets(config.key_groups, screens))


def build_overlays(
    config: SelectionConfig,
    pairs: Sequence[Tuple[Target, Chord]],
    *,
    text_height: int,
    overlay_fn: Optional[OverlayFunction] = None,
) -> List[Overlay]:
    overlay_fn = overlay_fn or config.overlay_function()
    return [
        Overlay(target=target, chord=chord, rect=overlay_fn(text_height, target.rect))
        for target, chord in pairs
    ]


def select_target(
    config: SelectionConfig,
    *,
    source: KeySource,
    presenter: Presenter,
    grab: InputGrab,
    targets: Sequence[Target] = (),
    screens: Sequence[Screen] = (),
    overlay_fn: Optional[OverlayFunction] = None,
) -> Any:
    """Run one selection session.

    Targets may be given flat (``targets``) or per screen (``screens``).
    Returns the chosen target's handle, or ``None`` when the user cancelled,
    the input grab failed or there was nothing to select.
    """

    if targets:
        screens = [Screen(targets=tuple(targets)), *screens]
    if not config.key_groups or not any(screen.targets for screen in screens):
        return None

    pairs = assign_chords(config, screens)
    if not pairs:
        return None

    presenter.apply_style(config.style())
    overlays = build_overlays(
        config,
        pairs,
        text_height=presenter.text_height(config.all_keys),
        overlay_fn=overlay_fn,
    )

    engine = SelectionEngine(
        overlays,
        cancel_key=config.cancel_key,
        backspace_key=config.backspace_key,
    )
    try:
        with grabbed(grab) as acquired:
            if not acquired:
                logger.warning("could not grab keyboard; selection aborted")
                return None
            outcome = engine.run(source, presenter)
    finally:
        presenter.dispose(engine.overlays)

    if isinstance(outcome, Selected):
        logger.info("selected %r", outcome.target.handle)
        return outcome.target.handle
    logger.info("selection cancelled")
    return None
