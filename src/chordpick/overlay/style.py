from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OverlayStyle(BaseModel):
    """Colours and font a presenter draws overlays with."""

    model_config = ConfigDict(frozen=True)

    text_color: str = "#ffffff"
    bg_color: str = "#000000"
    border_color: str = "#ffffff"
    border_px: int = 1
    font: str = "xft: Sans-100"
