"""Datetime helpers shared by the event model, adapters and CLI."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def to_utc(value: datetime) -> datetime:
    """Convert a datetime to UTC. Naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_utc(value: datetime) -> str:
    """Format a datetime as a second-precision UTC instant.

    Example:
        >>> format_utc(datetime(2025, 1, 25, 18, 0, tzinfo=timezone.utc))
        '2025-01-25T18:00:00Z'
    """
    return to_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_datetime(value: str | datetime | None, tz_name: str | None = None) -> datetime | None:
    """Parse an ISO-8601 string into a timezone-aware datetime.

    Args:
        value: ISO-8601 string (a trailing ``Z`` is accepted) or datetime
        tz_name: IANA zone applied to naive values. UTC when omitted.

    Returns:
        Aware datetime, or None for empty input

    Raises:
        ValueError: If the string is not ISO-8601 or the zone is unknown
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        if tz_name:
            try:
                zone = ZoneInfo(tz_name)
            except ZoneInfoNotFoundError as e:
                raise ValueError(f"Unknown timezone: {tz_name}") from e
            return parsed.replace(tzinfo=zone)
        return parsed.replace(tzinfo=timezone.utc)
    return parsed
