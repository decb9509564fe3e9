from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from chordpick.overlay.geometry import OVERLAY_KINDS, Rectangle
from chordpick.overlay.style import OverlayStyle
from chordpick.selection.config import SelectionConfig, load_config


def test_defaults() -> None:
    config = SelectionConfig()

    assert config.key_groups == [["s", "d", "f", "j", "k", "l"]]
    assert config.cancel_key == "q"
    assert config.backspace_key == "BackSpace"
    assert config.max_chord_length == 0
    assert config.overlay.kind == "proportional"
    assert config.overlay.fraction == 0.3


def test_load_config() -> None:
    path = Path(__file__).with_name("test_selection.toml")
    config = load_config(path)

    assert config.cancel_key == "Escape"
    assert config.max_chord_length == 2
    assert config.key_groups == [["a", "s", "d"], ["j", "k", "l"]]
    assert config.all_keys == ["a", "s", "d", "j", "k", "l"]
    assert config.font == "xft: Sans-40"
    # untouched fields keep their defaults
    assert config.bg_color == "#000000"

    overlay_fn = config.overlay_function()
    assert overlay_fn(10, Rectangle(width=50, height=50)) == Rectangle(
        x=0, y=20, width=50, height=10
    )


def test_key_groups_are_not_validated() -> None:
    config = SelectionConfig.model_validate({"key_groups": [[], ["a"]]})

    assert config.key_groups == [[], ["a"]]


def test_unknown_overlay_kind_rejected() -> None:
    with pytest.raises(ValidationError):
        SelectionConfig.model_validate({"overlay": {"kind": "circle"}})


def test_every_overlay_kind_accepted() -> None:
    for kind in OVERLAY_KINDS:
        config = SelectionConfig.model_validate({"overlay": {"kind": kind}})
        assert config.overlay_function() is not None


def test_style_collects_display_fields() -> None:
    config = load_config(Path(__file__).with_name("test_selection.toml"))

    assert config.style() == OverlayStyle(font="xft: Sans-40")
