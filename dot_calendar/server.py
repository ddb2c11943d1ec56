"""
HTTP boundary: two PNG endpoints plus health and index routes.

Both image endpoints always render something. Malformed numbers and colors
fall back to defaults and a failed background download falls back to a
flat fill. The one hard failure is a missing or wrong ``key`` on /days.
"""

from __future__ import annotations

import logging
import re
import secrets
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import FastAPI, Query
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles

from dot_calendar import __version__
from dot_calendar.background import fetch_background
from dot_calendar.config import Settings
from dot_calendar.fonts import FontRegistry
from dot_calendar.layout import GridSpec
from dot_calendar.palette import days_palette, wallpaper_palette
from dot_calendar.renderer import GridRenderer, MosaicRenderer, encode_png

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1170
DEFAULT_HEIGHT = 2532

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Optional[str], default: int, positive: bool = False) -> int:
    """
    Parse the leading integer of ``value`` ("12px" -> 12).

    Anything without a leading integer gives ``default``; so does a value
    below 1 when ``positive`` is set (canvas sizes).
    """
    match = _LEADING_INT.match(value or "")
    if match is None:
        return default
    parsed = int(match.group(1))
    if positive and parsed <= 0:
        return default
    return parsed


def _key_matches(key: Optional[str], secret: Optional[str]) -> bool:
    if not secret or key is None:
        return False
    return secrets.compare_digest(key.encode(), secret.encode())


def _png(image_bytes: bytes) -> Response:
    return Response(content=image_bytes, media_type="image/png")


class _HealthFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return "/health" not in record.getMessage()


def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """
    Build the application.

    Fonts are registered here, so a broken font directory stops the process
    before it serves a single request.

    Args:
        settings: Process configuration; read from the environment if omitted.
        clock:    Source of "now"; defaults to ``settings.now``.
    """
    settings = settings or Settings.from_env()
    fonts = FontRegistry.load(settings.font_dir)
    clock = clock or settings.now

    app = FastAPI(
        title="Dot Calendar",
        description="Renders year-progress dot calendar wallpapers",
        version=__version__,
    )

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    @app.get("/wallpaper", response_class=Response,
             responses={200: {"content": {"image/png": {}}}},
             summary="Twelve-month mosaic wallpaper")
    async def wallpaper(
        width: Optional[str] = None,
        height: Optional[str] = None,
        bg: Optional[str] = None,
        dot: Optional[str] = None,
        today: Optional[str] = None,
        text: Optional[str] = None,
        bg_image: Optional[str] = Query(None, alias="bgImage"),
    ):
        w = parse_int(width, DEFAULT_WIDTH, positive=True)
        h = parse_int(height, DEFAULT_HEIGHT, positive=True)
        palette = wallpaper_palette({"bg": bg, "dot": dot, "today": today, "text": text})

        background = None
        if bg_image:
            background = await fetch_background(bg_image, settings.fetch_timeout)

        now = clock()
        renderer = MosaicRenderer(w, h, palette, fonts)
        logger.info("Rendering wallpaper %dx%d for %s", w, h, now.date())
        return _png(encode_png(renderer.render(now, background)))

    @app.get("/days", response_class=Response,
             responses={200: {"content": {"image/png": {}}}, 401: {"description": "Bad key"}},
             summary="Year grid with verse")
    def days(
        key: Optional[str] = None,
        width: Optional[str] = None,
        height: Optional[str] = None,
        bg: Optional[str] = None,
        dot: Optional[str] = None,
        passed: Optional[str] = None,
        today: Optional[str] = None,
        text: Optional[str] = None,
        side: Optional[str] = None,
        top: Optional[str] = None,
        bottom: Optional[str] = None,
        gap: Optional[str] = None,
    ):
        if not _key_matches(key, settings.days_secret):
            return Response(status_code=401)

        spec = GridSpec(
            canvas_width=parse_int(width, DEFAULT_WIDTH, positive=True),
            canvas_height=parse_int(height, DEFAULT_HEIGHT, positive=True),
            side_padding=parse_int(side, GridSpec.side_padding),
            top_padding=parse_int(top, GridSpec.top_padding),
            bottom_padding=parse_int(bottom, GridSpec.bottom_padding),
            gap=parse_int(gap, GridSpec.gap),
        )
        palette = days_palette(
            {"bg": bg, "dot": dot, "passed": passed, "today": today, "text": text}
        )

        now = clock()
        renderer = GridRenderer(spec, palette, fonts)
        logger.info("Rendering days grid %dx%d for %s", spec.canvas_width,
                    spec.canvas_height, now.date())
        return _png(encode_png(renderer.render(now)))

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": "dot-calendar",
            "version": __version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "today": clock().date().isoformat(),
        }

    @app.get("/")
    async def root():
        return {
            "service": "Dot Calendar",
            "version": __version__,
            "endpoints": {
                "GET /wallpaper": "twelve-month mosaic PNG",
                "GET /days":      "year grid PNG (requires key)",
                "GET /health":    "health check",
                "GET /docs":      "Swagger UI",
            },
        }

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("uvicorn.access").addFilter(_HealthFilter())

    app = create_app(settings)
    logger.info("Serving on http://%s:%d (try /wallpaper)", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
