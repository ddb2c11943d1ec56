"""Render today's wallpapers to disk (for cron jobs and static hosting)."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from dot_calendar.config import Settings
from dot_calendar.fonts import FontRegistry
from dot_calendar.layout import GridSpec
from dot_calendar.palette import days_palette, wallpaper_palette
from dot_calendar.progress import compute_progress
from dot_calendar.renderer import GridRenderer, MosaicRenderer

logger = logging.getLogger(__name__)


def export_progress(now: datetime, output_dir: Path) -> Path:
    """Save the year progress as JSON. Returns the written path."""
    meta = {
        "generated_at": now.isoformat(),
        **compute_progress(now).to_dict(),
    }
    meta_path = output_dir / "progress.json"
    meta_path.write_text(json.dumps(meta, indent=2))
    logger.info("Metadata: %s", meta_path)
    return meta_path


def generate(
    now: datetime,
    output_dir: Path,
    fonts: FontRegistry,
    spec: Optional[GridSpec] = None,
) -> Dict[str, Path]:
    """
    Write ``wallpaper.png``, ``days.png`` and ``progress.json``.

    Both images use their default colors; ``spec`` sizes the year grid
    and its canvas size is shared with the mosaic.
    """
    spec = spec or GridSpec()
    output_dir.mkdir(parents=True, exist_ok=True)
    written = {}

    mosaic = MosaicRenderer(spec.canvas_width, spec.canvas_height, wallpaper_palette({}), fonts)
    path = output_dir / "wallpaper.png"
    mosaic.render(now).save(path, format="PNG", optimize=True)
    logger.info("Wrote: %s", path)
    written["wallpaper"] = path

    grid = GridRenderer(spec, days_palette({}), fonts)
    path = output_dir / "days.png"
    grid.render(now).save(path, format="PNG", optimize=True)
    logger.info("Wrote: %s", path)
    written["days"] = path

    written["progress"] = export_progress(now, output_dir)
    return written


def main() -> None:
    """
    Entry point. Generates three files in OUTPUT_DIR:
      - wallpaper.png  (twelve-month mosaic)
      - days.png       (year grid with verse)
      - progress.json  (day of year, days left, percentage)
    """
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    now = settings.now()
    progress = compute_progress(now)
    logger.info(
        "Day %d of %d: %d left (%d%%)",
        progress.day_of_year, progress.total_days, progress.days_left, progress.percentage,
    )

    fonts = FontRegistry.load(settings.font_dir)
    generate(now, settings.output_dir, fonts)
    logger.info("Done.")


if __name__ == "__main__":
    main()
