from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class ClockTime:
    hour: int
    minute: int

    def hhmm(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def parse_hhmm(value: str) -> ClockTime:
    """
    Parse "HH:MM" (or "H:MM") to ClockTime.
    """
    if value is None:
        raise ValueError("time is required")

    text = value.strip()
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError("time must be in HH:MM format")

    try:
        hour = int(parts[0])
        minute = int(parts[1])
    except ValueError as exc:
        raise ValueError("time must be numeric HH:MM") from exc

    if not (0 <= hour <= 23):
        raise ValueError("hour must be 0..23")
    if not (0 <= minute <= 59):
        raise ValueError("minute must be 0..59")

    return ClockTime(hour=hour, minute=minute)


def resolve_zone(name: Optional[str]) -> Optional[ZoneInfo]:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown time zone: {name}") from exc


def now(tz: Optional[str] = None) -> ClockTime:
    """
    Read the wall clock, in local time or in the named IANA zone.

    The zone is looked up on every call, so a changed system zone is picked
    up at the next reading.
    """
    current = datetime.now(resolve_zone(tz)) if tz else datetime.now()
    return ClockTime(hour=current.hour, minute=current.minute)


def seconds_until_next_minute(timestamp: float) -> float:
    """
    Delay from a POSIX timestamp to the next whole minute, in (0, 60].
    """
    return 60.0 - (timestamp % 60.0)
