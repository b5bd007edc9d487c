"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, date, datetime, time, timedelta


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


def trailing_days(end: date, days: int) -> list[date]:
    """Calendar days ending at ``end`` (inclusive), oldest first."""
    return [end - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
