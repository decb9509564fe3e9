from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List
import tomllib

from pydantic import BaseModel, Field, field_validator

from chordpick.overlay.geometry import OVERLAY_KINDS, OverlayFunction, overlay_function
from chordpick.overlay.style import OverlayStyle

from .ir import KeySymbol


class OverlayConfig(BaseModel):
    kind: str = "proportional"
    fraction: float = 0.3

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, value: str) -> str:
        if value not in OVERLAY_KINDS:
            raise ValueError(f"unknown overlay kind: {value!r}")
        return value


class SelectionConfig(BaseModel):
    """Selection options; every field has a default.

    Key groups are taken as given: each should hold at least two distinct
    symbols, and groups should not share symbols if chords must be unique
    across groups.
    """

    key_groups: List[List[KeySymbol]] = Field(
        default_factory=lambda: [["s", "d", "f", "j", "k", "l"]]
    )
    cancel_key: KeySymbol = "q"
    backspace_key: KeySymbol | None = "BackSpace"
    max_chord_length: int = 0

    text_color: str = "#ffffff"
    bg_color: str = "#000000"
    border_color: str = "#ffffff"
    border_px: int = 1
    font: str = "xft: Sans-100"
    overlay: OverlayConfig = Field(default_factory=OverlayConfig)

    def overlay_function(self) -> OverlayFunction:
        return overlay_function(self.overlay.kind, self.overlay.fraction)

    def style(self) -> OverlayStyle:
        return OverlayStyle(
            text_color=self.text_color,
            bg_color=self.bg_color,
            border_color=self.border_color,
            border_px=self.border_px,
            font=self.font,
        )

    @property
    def all_keys(self) -> List[KeySymbol]:
        return [key for group in self.key_groups for key in group]


def load_toml(path: str | Path) -> Dict[str, Any]:
    """Load a TOML config file into a dict."""

    path = Path(path)
    return tomllib.loads(path.read_text(encoding="utf-8"))


def load_config(path: str | Path) -> SelectionConfig:
    return SelectionConfig.model_validate(load_toml(path))
