"""Tests for color parsing and per-variant palettes."""

import pytest

from dot_calendar.palette import (
    days_palette,
    parse_hex,
    to_hex,
    wallpaper_palette,
)
from dot_calendar.progress import DayState


class TestParseHex:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("7d95b2", (0x7D, 0x95, 0xB2)),
            ("FFF", (255, 255, 255)),
            (None, (0x2A, 0x2A, 0x2A)),
            ("", (0x2A, 0x2A, 0x2A)),
            ("not-a-color", (0x2A, 0x2A, 0x2A)),
            ("12345", (0x2A, 0x2A, 0x2A)),
        ],
    )
    def test_parse_hex(self, value, expected):
        assert parse_hex(value, "2a2a2a") == expected

    def test_alpha_is_dropped(self):
        assert parse_hex("11223344", "000000") == (0x11, 0x22, 0x33)

    def test_to_hex(self):
        assert to_hex((0x7D, 0x95, 0xB2)) == "#7d95b2"


class TestWallpaperPalette:
    def test_defaults(self):
        palette = wallpaper_palette({})

        assert to_hex(palette.background) == "#2a2a2a"
        assert to_hex(palette.past) == "#7d95b2"
        assert palette.future == palette.past
        assert to_hex(palette.today) == "#d8cec6"
        assert to_hex(palette.text) == "#f3ede8"

    def test_future_is_dimmed(self):
        palette = wallpaper_palette({})

        assert palette.dot_fill(DayState.PAST) == (0x7D, 0x95, 0xB2, 255)
        assert palette.dot_fill(DayState.TODAY) == (0xD8, 0xCE, 0xC6, 255)
        r, g, b, a = palette.dot_fill(DayState.FUTURE)
        assert (r, g, b) == (0x7D, 0x95, 0xB2)
        assert 0 < a < 255

    def test_overrides(self):
        palette = wallpaper_palette({"dot": "ff0000", "bg": None, "today": "bogus"})

        assert palette.past == (255, 0, 0)
        assert to_hex(palette.background) == "#2a2a2a"
        assert to_hex(palette.today) == "#d8cec6"


class TestDaysPalette:
    def test_defaults_are_opaque(self):
        palette = days_palette({})

        assert palette.dot_fill(DayState.PAST) == (0x0E, 0x15, 0x1F, 255)
        assert palette.dot_fill(DayState.TODAY) == (0xD0, 0x6B, 0x4A, 255)
        assert palette.dot_fill(DayState.FUTURE) == (0xCF, 0xCA, 0xC4, 255)

    def test_passed_overrides_past(self):
        assert days_palette({"passed": "000000"}).past == (0, 0, 0)

    def test_text_defaults_to_verse_ink(self):
        assert days_palette({}).text == (0x0E, 0x15, 0x1F)

    def test_to_dict(self):
        assert days_palette({}).to_dict()["future"] == "#cfcac4"
