"""Timestamp helpers for character metadata."""

from __future__ import annotations

from datetime import datetime


def parse_iso_timestamp(value: str) -> datetime:
    """Parse the directory's ISO-8601 timestamps, including a trailing ``Z``."""

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    return datetime.fromisoformat(text)


def format_created_date(value: str) -> str:
    """Render e.g. ``November 4, 2017 at 6:48 PM``; unparseable input is returned as-is."""

    try:
        parsed = parse_iso_timestamp(value)
    except (AttributeError, TypeError, ValueError):
        return value
    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return f"{parsed:%B} {parsed.day}, {parsed.year} at {hour}:{parsed:%M} {meridiem}"


__all__ = ["format_created_date", "parse_iso_timestamp"]
