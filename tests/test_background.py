"""Tests for the remote background fetch."""

import asyncio
import io
import struct
import zlib
from unittest.mock import patch

import httpx
from PIL import Image

from dot_calendar.background import fetch_background

_RealAsyncClient = httpx.AsyncClient


def _png_bytes(color=(10, 20, 30)):
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buf, format="PNG")
    return buf.getvalue()


def oversized_png(width=20000, height=20000):
    """PNG signature and header only, claiming a huge canvas."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    chunk = b"IHDR" + ihdr
    return (
        b"\x89PNG\r\n\x1a\n"
        + struct.pack(">I", len(ihdr))
        + chunk
        + struct.pack(">I", zlib.crc32(chunk) & 0xFFFFFFFF)
    )


def _fetch_with(handler, url="http://images.test/bg.png"):
    """Run fetch_background against an in-process transport."""
    def client_factory(**kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(handler), **kwargs)

    with patch("dot_calendar.background.httpx.AsyncClient", side_effect=client_factory):
        return asyncio.run(fetch_background(url, timeout=1))


class TestFetchBackground:
    def test_decodes_image(self):
        image = _fetch_with(lambda request: httpx.Response(200, content=_png_bytes()))

        assert image is not None
        assert image.mode == "RGBA"
        assert image.getpixel((0, 0)) == (10, 20, 30, 255)

    def test_http_error_returns_none(self):
        assert _fetch_with(lambda request: httpx.Response(404)) is None

    def test_undecodable_body_returns_none(self):
        assert _fetch_with(lambda request: httpx.Response(200, content=b"<html>")) is None

    def test_transport_error_returns_none(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        assert _fetch_with(handler) is None

    def test_unsupported_scheme_returns_none(self):
        assert asyncio.run(fetch_background("ftp://images.test/bg.png")) is None

    def test_failure_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="dot_calendar.background"):
            _fetch_with(lambda request: httpx.Response(500))
        assert "using flat fill" in caplog.text

    def test_oversized_image_returns_none(self):
        """Pillow refuses images over twice its pixel limit; that is a fallback too."""
        image = _fetch_with(lambda request: httpx.Response(200, content=oversized_png()))
        assert image is None
