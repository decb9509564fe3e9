from __future__ import annotations

import logging

import pytest

from chordpick.overlay.geometry import Rectangle
from chordpick.overlay.presenter import LoggingPresenter
from chordpick.overlay.style import OverlayStyle
from chordpick.selection.ir import Overlay, Target


def test_logging_presenter_logs_style(caplog: pytest.LogCaptureFixture) -> None:
    presenter = LoggingPresenter()
    presenter.apply_style(OverlayStyle(text_color="#00ff00", bg_color="#202020", border_px=3))
    overlay = Overlay(
        target=Target(handle="t1"),
        chord=("a", "s"),
        rect=Rectangle(x=5, y=6, width=30, height=20),
    )

    with caplog.at_level(logging.DEBUG, logger="chordpick.overlay.presenter"):
        presenter.render([overlay])

    assert presenter.frames == [(overlay,)]
    message = caplog.records[-1].getMessage()
    assert "'t1' at 30x20+5+6: as" in message
    assert "#00ff00 on #202020" in message
    assert "border 3px" in message
