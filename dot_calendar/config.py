"""Immutable process configuration, read from the environment once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class Settings:
    days_secret: Optional[str] = None
    font_dir: Optional[Path] = None
    timezone: Optional[tzinfo] = None    # None = server local time
    static_dir: Path = Path("public")
    fetch_timeout: float = 10.0
    output_dir: Path = Path("public")
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        font_dir = env.get("DOT_CALENDAR_FONT_DIR")
        tz_name = env.get("DOT_CALENDAR_TIMEZONE")
        return cls(
            days_secret=env.get("DAYS_SECRET") or None,
            font_dir=Path(font_dir) if font_dir else None,
            timezone=ZoneInfo(tz_name) if tz_name else None,
            static_dir=Path(env.get("DOT_CALENDAR_STATIC_DIR", "public")),
            fetch_timeout=float(env.get("DOT_CALENDAR_FETCH_TIMEOUT", "10")),
            output_dir=Path(env.get("OUTPUT_DIR", "public")),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", "3000")),
        )

    def now(self) -> datetime:
        """Current time in the configured zone (naive local time if none)."""
        if self.timezone is None:
            return datetime.now()
        return datetime.now(self.timezone)
