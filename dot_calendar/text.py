"""Greedy multi-paragraph text wrapping against a pixel width."""

from __future__ import annotations

import math
from typing import Callable, List, Optional

Measure = Callable[[str], float]
Emit = Callable[[str, int], None]

PARAGRAPH_GAP_RATIO = 0.35


def wrap_paragraph(paragraph: str, max_width: float, measure: Measure) -> List[str]:
    """
    Break one paragraph into lines no wider than ``max_width``.

    Words are split on single spaces, so runs of spaces (verse indentation)
    survive as part of the line. A word that is wider than ``max_width`` on
    its own is kept whole on its own line. An empty paragraph yields one
    empty line.
    """
    lines: List[str] = []
    line = ""
    for n, word in enumerate(paragraph.split(" ")):
        candidate = f"{line} {word}" if n else word
        if line.strip() and measure(candidate.rstrip()) > max_width:
            lines.append(line.rstrip())
            line = word
        else:
            line = candidate
    lines.append(line.rstrip())
    return lines


def wrap_text(
    text: str,
    max_width: float,
    measure: Measure,
    line_height: int,
    y: int = 0,
    emit: Optional[Emit] = None,
) -> int:
    """
    Wrap ``text`` paragraph by paragraph, starting at ``y``.

    Each line is handed to ``emit(line, y)`` before the cursor moves down
    by ``line_height``. Paragraphs are separated by an extra
    ``floor(0.35 * line_height)``.

    Returns:
        The y cursor just below the last emitted line.
    """
    paragraph_gap = math.floor(line_height * PARAGRAPH_GAP_RATIO)
    for i, paragraph in enumerate(str(text).split("\n")):
        if i:
            y += paragraph_gap
        for line in wrap_paragraph(paragraph, max_width, measure):
            if emit is not None:
                emit(line, y)
            y += line_height
    return y
