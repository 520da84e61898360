"""Tests for date normalization and the date context."""

from datetime import date, datetime, timedelta, timezone

import pytest

from gtd.core.dates import (
    DateContext,
    compare_dates,
    create_date_context,
    days_between,
    is_date_urgent,
    normalize_date,
    to_instant,
)

EST = timezone(timedelta(hours=-5))


@pytest.fixture
def midnight(today):
    return datetime(2025, 1, 15, tzinfo=timezone.utc)


class TestDateContext:
    def test_for_day(self, context, midnight):
        assert context.today == midnight
        assert context.tomorrow == midnight + timedelta(days=1)
        assert context.day_after_tomorrow == midnight + timedelta(days=2)

    def test_is_immutable(self, context):
        with pytest.raises(AttributeError):
            context.today = context.tomorrow

    def test_create_from_injected_now(self, midnight):
        ctx = create_date_context(datetime(2025, 1, 15, 23, 30, tzinfo=timezone.utc))
        assert ctx.today == midnight

    def test_create_converts_offset_to_utc(self):
        # 22:00 in UTC-5 is already the 16th in UTC
        ctx = create_date_context(datetime(2025, 1, 15, 22, 0, tzinfo=EST))
        assert ctx.today.date() == date(2025, 1, 16)

    def test_create_naive_now(self):
        ctx = create_date_context(datetime(2025, 1, 15, 8, 0))
        assert ctx.today.date() == date(2025, 1, 15)
        assert ctx.today.tzinfo == timezone.utc

    def test_create_uses_clock(self):
        ctx = create_date_context()
        assert ctx.today.date() == datetime.now(timezone.utc).date()


class TestToInstant:
    def test_naive_datetime_read_as_utc(self):
        assert to_instant(datetime(2025, 1, 15, 10, 0)) == datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)

    def test_iso_string_with_z(self):
        assert to_instant("2025-01-15T10:00:00.000Z") == datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)

    def test_date_becomes_midnight(self):
        assert to_instant(date(2025, 1, 15)) == datetime(2025, 1, 15, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "   ",
            "not a date",
            "2025-13-45",
            12345,
            object(),
            "0001-01-01T00:00:00+05:00",
            "9999-12-31T23:00:00-05:00",
            datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=5))),
        ],
    )
    def test_unusable_input_is_none(self, value):
        assert to_instant(value) is None


class TestNormalizeDate:
    def test_time_of_day_discarded(self, midnight):
        assert normalize_date("2025-01-15T23:59:59Z") == midnight
        assert normalize_date("2025-01-15T00:00:00Z") == midnight

    def test_out_of_range_utc_conversion_is_none(self):
        assert normalize_date("9999-12-31T23:00:00-05:00") is None

    def test_string_and_datetime_agree(self):
        as_text = "2025-01-15T18:45:00.000Z"
        as_datetime = datetime(2025, 1, 15, 18, 45, tzinfo=timezone.utc)
        assert normalize_date(as_text) == normalize_date(as_datetime)

    def test_equivalent_instants_in_other_offsets_agree(self):
        as_text = "2025-01-15T22:00:00-05:00"
        as_datetime = datetime(2025, 1, 15, 22, 0, tzinfo=EST)
        as_utc = "2025-01-16T03:00:00Z"
        assert normalize_date(as_text) == normalize_date(as_datetime) == normalize_date(as_utc)
        assert normalize_date(as_text).date() == date(2025, 1, 16)

    def test_date_only_string(self, midnight):
        assert normalize_date("2025-01-15") == midnight

    def test_result_is_aware_midnight(self):
        result = normalize_date(datetime(2025, 1, 15, 13, 14, 15, 16))
        assert result.tzinfo == timezone.utc
        assert (result.hour, result.minute, result.second, result.microsecond) == (0, 0, 0, 0)

    def test_unparseable_is_none(self):
        assert normalize_date("garbage") is None


class TestIsDateUrgent:
    @pytest.mark.parametrize("offset", [-400, -1, 0, 1])
    def test_up_to_tomorrow_is_urgent(self, context, today, offset):
        assert is_date_urgent(today + timedelta(days=offset), context) is True

    @pytest.mark.parametrize("offset", [2, 3, 30])
    def test_day_after_tomorrow_onwards_is_not(self, context, today, offset):
        assert is_date_urgent(today + timedelta(days=offset), context) is False

    def test_late_evening_tomorrow_is_urgent(self, context):
        assert is_date_urgent("2025-01-16T23:59:59Z", context) is True

    def test_unparseable_is_not_urgent(self, context):
        assert is_date_urgent("soon", context) is False
        assert is_date_urgent(None, context) is False


class TestCompareDates:
    def test_ordering(self):
        assert compare_dates("2025-01-14", "2025-01-15") == -1
        assert compare_dates("2025-01-16", "2025-01-15") == 1

    def test_same_day_different_times_equal(self):
        assert compare_dates("2025-01-15T01:00:00Z", datetime(2025, 1, 15, 22, tzinfo=timezone.utc)) == 0

    def test_unparseable_sorts_last(self):
        assert compare_dates("bad", "2025-01-15") == 1
        assert compare_dates("2025-01-15", None) == -1
        assert compare_dates(None, "bad") == 0


class TestDaysBetween:
    def test_past_and_future(self, context, today):
        assert days_between(today - timedelta(days=3), context) == -3
        assert days_between(today, context) == 0
        assert days_between("2025-01-20T08:00:00Z", context) == 5

    def test_no_date(self, context):
        assert days_between(None, context) is None
