"""
Colors for the two wallpaper variants.

Query strings carry colors as bare hex ("7d95b2", no leading '#'). Anything
Pillow can't parse falls back to the variant's default, so a bad color
never stops an image from rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from PIL import ImageColor

from dot_calendar.progress import DayState

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


def parse_hex(value: Optional[str], default: str) -> Color:
    """Parse a bare hex color, falling back to ``default`` (also bare hex)."""
    if value:
        try:
            return ImageColor.getrgb("#" + value)[:3]
        except ValueError:
            logger.debug("Ignoring unparseable color %r", value)
    return ImageColor.getrgb("#" + default)[:3]


def to_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


@dataclass(frozen=True)
class Palette:
    """
    Five-color scheme for a wallpaper.

    background: Canvas fill.
    past:       Dots for elapsed days.
    today:      The current day's dot, and the bottom caption.
    future:     Dots for upcoming days, drawn at ``future_alpha``.
    text:       Month labels.
    """
    background: Color
    past: Color
    today: Color
    future: Color
    text: Color
    future_alpha: float = 1.0

    def dot_fill(self, state: DayState) -> ColorRGBA:
        """RGBA fill for a dot in the given state."""
        if state is DayState.TODAY:
            return (*self.today, 255)
        if state is DayState.PAST:
            return (*self.past, 255)
        return (*self.future, round(255 * self.future_alpha))

    def to_dict(self) -> dict:
        return {
            "background": to_hex(self.background),
            "past": to_hex(self.past),
            "today": to_hex(self.today),
            "future": to_hex(self.future),
            "text": to_hex(self.text),
            "future_alpha": self.future_alpha,
        }


# ─────────────────────────── Variants ─────────────────────────

FUTURE_ALPHA = 0.3

WALLPAPER_DEFAULTS = {"bg": "2a2a2a", "dot": "7d95b2", "today": "d8cec6", "text": "f3ede8"}
DAYS_DEFAULTS = {
    "bg": "f6f3ef",
    "dot": "cfcac4",
    "passed": "0e151f",
    "today": "d06b4a",
    "text": "0e151f",
}


def wallpaper_palette(params: Mapping[str, Optional[str]]) -> Palette:
    """Month mosaic: past and future share the dot color, future is dimmed."""
    d = WALLPAPER_DEFAULTS
    dot = parse_hex(params.get("dot"), d["dot"])
    return Palette(
        background=parse_hex(params.get("bg"), d["bg"]),
        past=dot,
        today=parse_hex(params.get("today"), d["today"]),
        future=dot,
        text=parse_hex(params.get("text"), d["text"]),
        future_alpha=FUTURE_ALPHA,
    )


def days_palette(params: Mapping[str, Optional[str]]) -> Palette:
    """Year grid: elapsed days get their own color, everything is opaque."""
    d = DAYS_DEFAULTS
    return Palette(
        background=parse_hex(params.get("bg"), d["bg"]),
        past=parse_hex(params.get("passed"), d["passed"]),
        today=parse_hex(params.get("today"), d["today"]),
        future=parse_hex(params.get("dot"), d["dot"]),
        text=parse_hex(params.get("text"), d["text"]),
    )
