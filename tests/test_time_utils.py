from datetime import UTC, date, datetime, timedelta, timezone

from backend.app.core.time import as_utc, start_of_day, trailing_days, utc_now


def test_utc_now_is_timezone_aware_utc():
    value = utc_now()
    assert value.tzinfo is UTC


def test_as_utc_treats_naive_values_as_utc():
    naive = datetime(2024, 5, 1, 12, 0)
    assert as_utc(naive) == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def test_as_utc_converts_other_offsets():
    ist = timezone(timedelta(hours=5, minutes=30))
    value = datetime(2024, 5, 1, 5, 30, tzinfo=ist)
    assert as_utc(value) == datetime(2024, 5, 1, 0, 0, tzinfo=UTC)


def test_start_of_day():
    assert start_of_day(date(2024, 5, 1)) == datetime(2024, 5, 1, tzinfo=UTC)


def test_trailing_days_is_oldest_first_and_inclusive():
    days = trailing_days(date(2024, 3, 2), 30)
    assert len(days) == 30
    assert days[0] == date(2024, 2, 2)
    assert days[-1] == date(2024, 3, 2)
    assert days == sorted(days)
