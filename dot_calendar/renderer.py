"""
Draws the wallpapers onto Pillow images.

Separated from layout and palette so each piece can be tested on its own.
A renderer owns nothing between calls: every ``render`` makes a fresh
canvas and hands it back to the caller.

    MosaicRenderer - twelve month blocks + "<n>d left" caption (/wallpaper)
    GridRenderer   - verse + 15x25 year grid + "<n> days left" caption (/days)
"""

from __future__ import annotations

import io
import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple

from PIL import Image, ImageDraw

from dot_calendar.fonts import Face, FontRegistry
from dot_calendar.layout import (
    DotPosition,
    GridSpec,
    MonthBlock,
    MosaicSpec,
    layout_grid,
    layout_mosaic,
)
from dot_calendar.palette import Color, ColorRGBA, Palette
from dot_calendar.progress import (
    DayState,
    YearProgress,
    as_date,
    classify_day,
    classify_ordinal,
    compute_progress,
)
from dot_calendar.text import wrap_text

logger = logging.getLogger(__name__)

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

Dot = Tuple[DotPosition, DayState]


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


class _Renderer:
    """Canvas handling shared by both wallpapers."""

    def __init__(self, width: int, height: int, palette: Palette, fonts: FontRegistry):
        self.width = width
        self.height = height
        self.palette = palette
        self.fonts = fonts

    def _new_canvas(self, fill: Color) -> Image.Image:
        return Image.new("RGBA", (self.width, self.height), (*fill, 255))

    def _draw_dots(self, img: Image.Image, dots: Iterable[Dot]) -> Image.Image:
        """
        Draw every dot on a transparent layer, then composite it.

        Drawing straight onto the canvas would replace pixels instead of
        blending, so dimmed dots would punch holes through the background.
        """
        overlay = Image.new("RGBA", img.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        for pos, state in dots:
            if pos.diameter <= 0:
                continue
            draw.ellipse(pos.bounds, fill=self.palette.dot_fill(state))
        return Image.alpha_composite(img, overlay)

    def _draw_caption(self, img: Image.Image, text: str, face: Face, size: int,
                      baseline: int) -> None:
        """Centered caption on an alphabetic baseline."""
        draw = ImageDraw.Draw(img)
        draw.text(
            (self.width / 2, baseline),
            text,
            fill=self.palette.today,
            font=self.fonts.get(face, size),
            anchor="ms",
        )


# ─────────────────────────── Month Mosaic ─────────────────────

class MosaicRenderer(_Renderer):
    """Twelve Sunday-first month blocks over a flat or photographic background."""

    LABEL_SIZE = 27
    CAPTION_SIZE = 35
    CAPTION_BOTTOM_OFFSET = 575
    SHADE: ColorRGBA = (0, 0, 0, 102)    # darkens photo backgrounds (40%)

    def __init__(
        self,
        width: int,
        height: int,
        palette: Palette,
        fonts: FontRegistry,
        mosaic: Optional[MosaicSpec] = None,
    ):
        super().__init__(width, height, palette, fonts)
        self.mosaic = mosaic or MosaicSpec(canvas_width=width)

    def render(self, now: datetime, background: Optional[Image.Image] = None) -> Image.Image:
        """
        Produce the mosaic wallpaper.

        Args:
            now:        Render time; its calendar date is "today".
            background: Optional image stretched over the canvas. None means
                        a flat background fill.

        Returns:
            PIL Image in RGB mode
        """
        today = as_date(now)
        progress = compute_progress(today)
        blocks = layout_mosaic(today.year, self.mosaic)

        img = self._draw_background(background)
        img = self._draw_dots(img, self._dots(blocks, today))
        self._draw_labels(img, blocks)
        self._draw_caption(
            img,
            f"{progress.days_left}d left · {progress.percentage}%",
            Face.TEXT,
            self.CAPTION_SIZE,
            self.height - self.CAPTION_BOTTOM_OFFSET,
        )
        return img.convert("RGB")

    def _draw_background(self, background: Optional[Image.Image]) -> Image.Image:
        if background is None:
            return self._new_canvas(self.palette.background)

        img = background.convert("RGBA").resize((self.width, self.height))
        shade = Image.new("RGBA", img.size, self.SHADE)
        return Image.alpha_composite(img, shade)

    def _dots(self, blocks: List[MonthBlock], today: date) -> Iterable[Dot]:
        for block in blocks:
            for pos in block.days():
                day = date(today.year, block.month, pos.index)
                yield pos, classify_day(day, today)

    def _draw_labels(self, img: Image.Image, blocks: List[MonthBlock]) -> None:
        draw = ImageDraw.Draw(img)
        font = self.fonts.get(Face.DISPLAY, self.LABEL_SIZE)
        for block in blocks:
            draw.text(
                (block.left, block.top),
                MONTH_LABELS[block.month - 1],
                fill=self.palette.text,
                font=font,
                anchor="lt",
            )


# ─────────────────────────── Year Grid ────────────────────────

VERSE_REFERENCE = "Isaiah 40"
VERSE_TEXT = (
    "³⁰ Even youths shall faint and be weary,\n"
    "     and young men shall fall exhausted;\n"
    "³¹ but they who wait for the Lord shall renew their strength,\n"
    "     they shall mount up with wings like eagles,\n"
    "   they shall run and not be weary,\n"
    "     they shall walk and not faint."
)


class GridRenderer(_Renderer):
    """A verse, then one dot per day of the year in a fixed-shape grid."""

    VERSE_TOP = 660
    VERSE_SIDE_MARGIN = 120
    VERSE_REFERENCE_SIZE = 32
    VERSE_REFERENCE_GAP = 40
    VERSE_SIZE = 25
    VERSE_LINE_HEIGHT = 22
    CAPTION_SIZE = 32
    CAPTION_BOTTOM_OFFSET = 270

    def __init__(self, spec: GridSpec, palette: Palette, fonts: FontRegistry):
        super().__init__(spec.canvas_width, spec.canvas_height, palette, fonts)
        self.spec = spec

    def render(self, now: datetime) -> Image.Image:
        progress = compute_progress(now)

        img = self._new_canvas(self.palette.background)
        self._draw_verse(img)
        img = self._draw_dots(img, self._dots(progress))
        self._draw_caption(
            img,
            f"{progress.days_left} days left · {progress.percentage}%",
            Face.DISPLAY,
            self.CAPTION_SIZE,
            self.height - self.CAPTION_BOTTOM_OFFSET,
        )
        return img.convert("RGB")

    def _dots(self, progress: YearProgress) -> Iterable[Dot]:
        grid = layout_grid(self.spec, count=progress.total_days)
        if grid.is_degenerate:
            logger.debug("Degenerate grid (diameter %d), no dots drawn", grid.diameter)
        for pos in grid.positions:
            yield pos, classify_ordinal(pos.index, progress.day_of_year)

    def _draw_verse(self, img: Image.Image) -> int:
        """Draw the reference and the wrapped verse; returns the y below it."""
        draw = ImageDraw.Draw(img)
        x = self.width / 2
        y = self.VERSE_TOP

        draw.text(
            (x, y),
            VERSE_REFERENCE,
            fill=self.palette.text,
            font=self.fonts.get(Face.ITALIC, self.VERSE_REFERENCE_SIZE),
            anchor="mt",
        )
        y += self.VERSE_REFERENCE_GAP

        font = self.fonts.get(Face.DISPLAY, self.VERSE_SIZE)

        def emit(line: str, line_y: int) -> None:
            draw.text((x, line_y), line, fill=self.palette.text, font=font, anchor="mt")

        return wrap_text(
            VERSE_TEXT,
            self.width - 2 * self.VERSE_SIDE_MARGIN,
            lambda s: draw.textlength(s, font=font),
            self.VERSE_LINE_HEIGHT,
            y=y,
            emit=emit,
        )
