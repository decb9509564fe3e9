from __future__ import annotations

from .assigner import ChordAssigner, chord_length
from .config import OverlayConfig, SelectionConfig, load_config
from .engine import KeySource, Presenter, SelectionEngine
from .ir import Chord, Exit, KeyEvent, KeySymbol, Outcome, Overlay, Screen, Selected, Target
from .session import (
    InputGrab,
    NoGrab,
    assign_chords,
    build_overlays,
    grabbed,
    group_targets,
    select_target,
)

__all__ = [
    "Chord",
    "ChordAssigner",
    "Exit",
    "InputGrab",
    "KeyEvent",
    "KeySource",
    "KeySymbol",
    "NoGrab",
    "Outcome",
    "Overlay",
    "OverlayConfig",
    "Presenter",
    "Screen",
    "Selected",
    "SelectionConfig",
    "SelectionEngine",
    "Target",
    "assign_chords",
    "build_overlays",
    "chord_length",
    "grabbed",
    "group_targets",
    "load_config",
    "select_target",
]
