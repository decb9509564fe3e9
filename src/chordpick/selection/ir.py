from __future__ import annotations

from typing import Any, Tuple, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field

from chordpick.overlay.geometry import Rectangle


KeySymbol: TypeAlias = str
Chord: TypeAlias = Tuple[KeySymbol, ...]


class Target(BaseModel):
    """Selectable item: an opaque caller handle plus its on-screen geometry."""

    model_config = ConfigDict(frozen=True)

    handle: Any
    rect: Rectangle = Field(default_factory=Rectangle)


class Screen(BaseModel):
    """One partition of targets, matched against one key group."""

    model_config = ConfigDict(frozen=True)

    rect: Rectangle = Field(default_factory=Rectangle)
    targets: Tuple[Target, ...] = ()


class Overlay(BaseModel):
    """Working record of one target during a session.

    ``chord`` holds the symbols still to be typed; an empty chord marks a
    target that has been ruled out.
    """

    model_config = ConfigDict(frozen=True)

    target: Target
    chord: Chord
    rect: Rectangle = Field(default_factory=Rectangle)

    @property
    def selectable(self) -> bool:
        return bool(self.chord)


class KeyEvent(BaseModel):
    """One raw key event as delivered by a key source."""

    model_config = ConfigDict(frozen=True)

    symbol: KeySymbol
    is_press: bool = True


class Selected(BaseModel):
    """Terminal outcome: a target was chosen."""

    model_config = ConfigDict(frozen=True)

    target: Target


class Exit(BaseModel):
    """Terminal outcome: the cancel key was pressed."""

    model_config = ConfigDict(frozen=True)


Outcome: TypeAlias = Union[Selected, Exit]
