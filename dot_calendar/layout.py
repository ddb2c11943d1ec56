"""
Layout engine.

Turns a handful of spacing knobs into exact pixel centers for every dot.
Two layouts exist:

    GridSpec / layout_grid     - fixed-shape row-major grid sized to fit
                                 the padded canvas (the year grid)
    MosaicSpec / layout_month  - twelve Sunday-first month blocks, three
                                 per row, with a fixed dot size (the mosaic)

Centers are floats (an odd diameter puts them on half pixels); diameters
and origins are whole pixels so neighbouring dots never show seams.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from dot_calendar.progress import days_in_month, month_start_weekday, round_half_up

# ─────────────────────────── Types ────────────────────────────

Point = Tuple[float, float]

WEEK_COLUMNS = 7
MAX_WEEK_ROWS = 6


@dataclass(frozen=True)
class DotPosition:
    """One dot in a row-major grid."""
    index: int          # 1-based ordinal (day of year, or day of month)
    column: int
    row: int
    center_x: float
    center_y: float
    diameter: int

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box in Pillow's (left, top, right, bottom) order."""
        r = self.radius
        return (self.center_x - r, self.center_y - r, self.center_x + r, self.center_y + r)


def cell_of(index: int, columns: int) -> Tuple[int, int]:
    """Row-major (column, row) of a 1-based ordinal."""
    return (index - 1) % columns, (index - 1) // columns


def cell_center(origin_x: float, origin_y: float, diameter: int, pitch: int,
                column: int, row: int) -> Point:
    radius = diameter / 2
    return origin_x + radius + column * pitch, origin_y + radius + row * pitch


# ─────────────────────────── Year Grid ────────────────────────

@dataclass(frozen=True)
class GridSpec:
    """
    Canvas size plus spacing for a fixed-shape dot grid.

    Nothing here is validated. Padding that leaves no room for a dot gives
    a zero or negative diameter, and the caller gets exactly that back.
    """
    canvas_width: int = 1170
    canvas_height: int = 2532
    columns: int = 15
    rows: int = 25
    side_padding: int = 50
    top_padding: int = 900
    bottom_padding: int = 310
    gap: int = 13

    @property
    def available_width(self) -> int:
        return self.canvas_width - 2 * self.side_padding

    @property
    def available_height(self) -> int:
        return self.canvas_height - self.top_padding - self.bottom_padding


@dataclass(frozen=True)
class GridLayout:
    """Computed geometry of a grid: one shared diameter, one shared pitch."""
    diameter: int
    pitch: int
    origin_x: int       # left edge of the first dot
    origin_y: int       # top edge of the first dot
    width: int          # edge to edge, from the floored diameter
    height: int
    positions: List[DotPosition] = field(default_factory=list)

    @property
    def is_degenerate(self) -> bool:
        return self.diameter <= 0


def layout_grid(spec: GridSpec, count: Optional[int] = None) -> GridLayout:
    """
    Fit ``spec.columns`` x ``spec.rows`` dots into the padded canvas.

    The diameter is bounded by whichever axis is tighter and floored to a
    whole pixel. The grid is then centered horizontally on the full canvas
    and vertically inside the padded band only.

    Args:
        spec:  Canvas and spacing knobs.
        count: Number of positions to produce (ordinals 1..count).
               Defaults to every cell of the grid.

    Returns:
        GridLayout with ``count`` positions in ordinal order.
    """
    cols, rows, gap = spec.columns, spec.rows, spec.gap

    diameter_from_width = (spec.available_width - (cols - 1) * gap) / cols
    diameter_from_height = (spec.available_height - (rows - 1) * gap) / rows
    diameter = math.floor(min(diameter_from_width, diameter_from_height))

    pitch = diameter + gap
    grid_width = cols * diameter + (cols - 1) * gap
    grid_height = rows * diameter + (rows - 1) * gap

    origin_x = round_half_up((spec.canvas_width - grid_width) / 2)
    origin_y = round_half_up(spec.top_padding + (spec.available_height - grid_height) / 2)

    if count is None:
        count = cols * rows

    positions = []
    for index in range(1, count + 1):
        col, row = cell_of(index, cols)
        cx, cy = cell_center(origin_x, origin_y, diameter, pitch, col, row)
        positions.append(DotPosition(index, col, row, cx, cy, diameter))

    return GridLayout(
        diameter=diameter,
        pitch=pitch,
        origin_x=origin_x,
        origin_y=origin_y,
        width=grid_width,
        height=grid_height,
        positions=positions,
    )


# ─────────────────────────── Month Mosaic ─────────────────────

@dataclass(frozen=True)
class MosaicSpec:
    """
    Fixed measurements of the twelve-month mosaic.

    Every month row is tall enough for six week rows, so all rows share one
    vertical pitch no matter how many weeks each month actually spans.
    """
    canvas_width: int = 1170
    label_top: int = 875        # top of the "Jan" label
    month_pitch: int = 240      # left edge of one month to the next
    dot_diameter: int = 15
    dot_gap: int = 15
    label_gap: int = 30         # top of label -> top of first dot row
    vertical_gap: int = 60      # bottom of a month row -> next label
    months_per_row: int = 3

    @property
    def pitch(self) -> int:
        return self.dot_diameter + self.dot_gap

    @property
    def month_width(self) -> int:
        """First dot's left edge to the last dot's right edge in one week."""
        return WEEK_COLUMNS * self.dot_diameter + (WEEK_COLUMNS - 1) * self.dot_gap

    @property
    def row_span(self) -> int:
        return (self.months_per_row - 1) * self.month_pitch + self.month_width

    @property
    def row_pitch(self) -> int:
        return self.label_gap + MAX_WEEK_ROWS * self.pitch + self.vertical_gap

    @property
    def start_x(self) -> int:
        return round_half_up((self.canvas_width - self.row_span) / 2)


@dataclass(frozen=True)
class MonthBlock:
    """One month of the mosaic, positioned by its label's top-left corner."""
    month: int          # 1-12
    left: int
    top: int
    start_weekday: int  # 0 = Sunday .. 6 = Saturday
    days_in_month: int
    dot_diameter: int
    pitch: int
    label_gap: int

    @property
    def week_rows(self) -> int:
        return (self.start_weekday + self.days_in_month + WEEK_COLUMNS - 1) // WEEK_COLUMNS

    def day_position(self, day: int) -> DotPosition:
        # day 1 sits after start_weekday empty cells
        col, row = cell_of(self.start_weekday + day, WEEK_COLUMNS)
        cx, cy = cell_center(
            self.left, self.top + self.label_gap, self.dot_diameter, self.pitch, col, row
        )
        return DotPosition(day, col, row, cx, cy, self.dot_diameter)

    def days(self) -> Iterator[DotPosition]:
        for day in range(1, self.days_in_month + 1):
            yield self.day_position(day)


def layout_month(month: int, year: int, mosaic: MosaicSpec) -> MonthBlock:
    """Place ``month`` (1-12) of ``year`` in the mosaic."""
    col = (month - 1) % mosaic.months_per_row
    row = (month - 1) // mosaic.months_per_row
    return MonthBlock(
        month=month,
        left=mosaic.start_x + col * mosaic.month_pitch,
        top=mosaic.label_top + row * mosaic.row_pitch,
        start_weekday=month_start_weekday(year, month),
        days_in_month=days_in_month(year, month),
        dot_diameter=mosaic.dot_diameter,
        pitch=mosaic.pitch,
        label_gap=mosaic.label_gap,
    )


def layout_mosaic(year: int, mosaic: MosaicSpec) -> List[MonthBlock]:
    """All twelve months in reading order."""
    return [layout_month(m, year, mosaic) for m in range(1, 13)]
