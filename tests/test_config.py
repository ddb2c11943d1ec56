"""Tests for environment-driven settings."""

from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from dot_calendar.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.days_secret is None
        assert settings.font_dir is None
        assert settings.timezone is None
        assert settings.static_dir == Path("public")
        assert settings.port == 3000
        assert settings.log_level == "INFO"

    def test_from_env(self):
        settings = Settings.from_env({
            "DAYS_SECRET": "s3cret",
            "DOT_CALENDAR_FONT_DIR": "/srv/fonts",
            "DOT_CALENDAR_TIMEZONE": "Europe/Kyiv",
            "DOT_CALENDAR_FETCH_TIMEOUT": "2.5",
            "OUTPUT_DIR": "out",
            "LOG_LEVEL": "debug",
            "PORT": "8080",
        })

        assert settings.days_secret == "s3cret"
        assert settings.font_dir == Path("/srv/fonts")
        assert settings.timezone == ZoneInfo("Europe/Kyiv")
        assert settings.fetch_timeout == 2.5
        assert settings.output_dir == Path("out")
        assert settings.log_level == "DEBUG"
        assert settings.port == 8080

    def test_empty_secret_counts_as_unset(self):
        assert Settings.from_env({"DAYS_SECRET": ""}).days_secret is None

    def test_now_uses_configured_zone(self):
        now = Settings(timezone=ZoneInfo("Pacific/Kiritimati")).now()
        assert now.tzinfo is not None
        assert now.utcoffset().total_seconds() == 14 * 3600

    def test_now_is_naive_local_without_zone(self):
        assert Settings().now().tzinfo is None
        assert isinstance(Settings().now(), datetime)
