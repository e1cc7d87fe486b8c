from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def parse_timestamp(value) -> datetime:
    """Accept a datetime or an ISO-8601 string (a trailing ``Z`` means UTC).

    The wall clock of the value is kept as-is, no timezone conversion.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"unsupported timestamp type: {type(value).__name__}")
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    return datetime.fromisoformat(v)


def format_hhmm(value: time | None, empty: str = "-") -> str:
    return value.strftime("%H:%M") if value is not None else empty


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
