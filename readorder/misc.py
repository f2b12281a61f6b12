"""Time helpers shared by the CLI and the pipeline."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

_STATE: dict[str, tzinfo] = {"tz": UTC}


def set_default_timezone(tz: str | tzinfo) -> None:
    """Set the timezone used by tz_now (IANA name or tzinfo)."""
    _STATE["tz"] = ZoneInfo(tz) if isinstance(tz, str) else tz


def tz_now() -> datetime:
    """Return the current time in the default timezone."""
    return datetime.now(_STATE["tz"])


def timestamp_slug() -> str:
    """Filesystem-safe timestamp, e.g. for log file names."""
    return tz_now().strftime("%Y-%m-%d_%H-%M-%S")
