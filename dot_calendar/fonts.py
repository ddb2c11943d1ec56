"""
Process-wide font registry.

Fonts are registered once at startup and never change afterwards. With a
font directory configured, every face must load or startup fails. Without
one, Pillow's bundled scalable font stands in for all three faces.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from PIL import ImageFont
from PIL.ImageFont import FreeTypeFont

logger = logging.getLogger(__name__)

AnyFont = Union[FreeTypeFont, ImageFont.ImageFont]


class Face(Enum):
    """Typefaces used by the renderer, keyed to their font files."""
    TEXT = "SF-Pro-Text-Regular.otf"
    DISPLAY = "SF-Pro-Display-Regular.otf"
    ITALIC = "SF-Pro-Display-RegularItalic.otf"


class FontLoadError(RuntimeError):
    """A configured font file is missing or unreadable."""


@dataclass(frozen=True)
class FontRegistry:
    font_dir: Optional[Path] = None

    @classmethod
    def load(cls, font_dir: Optional[Path] = None) -> "FontRegistry":
        """
        Build the registry, opening every face once to prove it loads.

        Raises:
            FontLoadError: If ``font_dir`` is set and any face fails to load.
        """
        registry = cls(font_dir)
        if font_dir is None:
            logger.info("No font directory configured, using Pillow's default font")
            return registry

        for face in Face:
            path = font_dir / face.value
            try:
                ImageFont.truetype(str(path), 12)
            except OSError as e:
                raise FontLoadError(f"Cannot load font {path}: {e}") from e
        logger.info("Registered %d fonts from %s", len(Face), font_dir)
        return registry

    def paths(self) -> Dict[Face, Optional[Path]]:
        if self.font_dir is None:
            return {face: None for face in Face}
        return {face: self.font_dir / face.value for face in Face}

    def get(self, face: Face, size: int) -> AnyFont:
        """Font object for ``face`` at ``size`` pixels."""
        return _load_font(self.font_dir, face, size)


@functools.lru_cache(maxsize=None)
def _load_font(font_dir: Optional[Path], face: Face, size: int) -> AnyFont:
    if font_dir is None:
        return ImageFont.load_default(size)
    return ImageFont.truetype(str(font_dir / face.value), size)
