from __future__ import annotations

from .overlay import Rectangle
from .selection import (
    ChordAssigner,
    Exit,
    KeyEvent,
    Screen,
    Selected,
    SelectionConfig,
    SelectionEngine,
    Target,
    load_config,
    select_target,
)

__all__ = [
    "ChordAssigner",
    "Exit",
    "KeyEvent",
    "Rectangle",
    "Screen",
    "Selected",
    "SelectionConfig",
    "SelectionEngine",
    "Target",
    "load_config",
    "select_target",
]
