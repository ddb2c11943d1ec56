"""Tests for the on-disk wallpaper generator."""

import json
from unittest.mock import patch

from PIL import Image

from dot_calendar.generate import export_progress, generate, main
from dot_calendar.layout import GridSpec


class TestGenerate:
    def test_writes_all_outputs(self, tmp_path, fonts, render_time):
        written = generate(render_time, tmp_path / "out", fonts)

        assert set(written) == {"wallpaper", "days", "progress"}
        for path in written.values():
            assert path.exists()
        with Image.open(written["wallpaper"]) as img:
            assert img.size == (1170, 2532)
        with Image.open(written["days"]) as img:
            assert img.size == (1170, 2532)

    def test_custom_canvas(self, tmp_path, fonts, render_time):
        spec = GridSpec(canvas_width=600, canvas_height=1300, top_padding=400, bottom_padding=100)
        written = generate(render_time, tmp_path, fonts, spec)

        with Image.open(written["wallpaper"]) as img:
            assert img.size == (600, 1300)

    def test_export_progress(self, tmp_path, render_time):
        meta = json.loads(export_progress(render_time, tmp_path).read_text())

        assert meta["generated_at"] == "2024-03-15T09:30:00"
        assert meta["day_of_year"] == 75
        assert meta["days_left"] == 291
        assert meta["percentage"] == 20


def test_main_uses_output_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))
    monkeypatch.delenv("DOT_CALENDAR_FONT_DIR", raising=False)

    with patch("logging.basicConfig"):
        main()

    assert (tmp_path / "wallpaper.png").exists()
    assert (tmp_path / "days.png").exists()
    assert (tmp_path / "progress.json").exists()
