"""Optional remote background image for the month mosaic."""

from __future__ import annotations

import io
import logging
from typing import Optional

import httpx
from PIL import Image

logger = logging.getLogger(__name__)


async def fetch_background(url: str, timeout: float = 10.0) -> Optional[Image.Image]:
    """
    Download and decode ``url``.

    Returns:
        The decoded RGBA image, or None if the download or the decode fails.
        Callers fall back to a flat fill on None.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            resp = await client.get(url)
            resp.raise_for_status()
        image = Image.open(io.BytesIO(resp.content))
        image.load()
        return image.convert("RGBA")
    except (
        httpx.HTTPError,
        httpx.InvalidURL,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as e:
        logger.warning("Background image %s unavailable, using flat fill: %s", url, e)
        return None
