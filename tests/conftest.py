from datetime import datetime
from pathlib import Path

import pytest

from dot_calendar.config import Settings
from dot_calendar.fonts import FontRegistry

# Thursday of a leap year: day 75 of 366
RENDER_TIME = datetime(2024, 3, 15, 9, 30)


@pytest.fixture
def render_time():
    return RENDER_TIME


@pytest.fixture(scope="session")
def fonts():
    """Pillow's bundled font; no SF Pro files needed in tests."""
    return FontRegistry.load(None)


@pytest.fixture
def settings(tmp_path):
    return Settings(days_secret="s3cret", static_dir=tmp_path / "no-static")
