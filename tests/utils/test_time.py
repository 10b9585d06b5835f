"""
Tests for calendar arithmetic on millisecond instants.

Verifies conversions, wall-clock vs absolute stepping, month-end clamping
and timezone resolution.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from zoneinfo import ZoneInfo

from chrono_axis.errors import UnknownTimezoneError
from chrono_axis.utils.time import (
    MILLIS_PER_DAY, MILLIS_PER_HOUR, TimeUnit, add_months, advance,
    format_instant, from_instant, now_instant, resolve_timezone, to_instant
)


class TestConversions:
    """Test instant/datetime conversions."""

    def test_epoch_is_zero(self):
        """Epoch converts to instant 0."""
        assert to_instant(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_known_instant(self):
        """2020-01-01 UTC has a well-known epoch value."""
        assert to_instant(datetime(2020, 1, 1, tzinfo=timezone.utc)) == 1_577_836_800_000

    def test_naive_datetime_is_utc(self):
        """Naive datetimes are read as UTC."""
        assert to_instant(datetime(2020, 1, 1)) == 1_577_836_800_000

    def test_drops_sub_millisecond_digits(self):
        """Microseconds below a millisecond are dropped."""
        value = datetime(1970, 1, 1, 0, 0, 0, 1999, tzinfo=timezone.utc)
        assert to_instant(value) == 1

    def test_from_instant_in_timezone(self):
        """Calendar fields are expressed in the requested timezone."""
        value = from_instant(1_577_836_800_000, ZoneInfo("Europe/Berlin"))
        assert (value.year, value.month, value.day, value.hour) == (2020, 1, 1, 1)

    def test_round_trip(self):
        """from_instant and to_instant are inverse."""
        instant = 1_234_567_890_123
        assert to_instant(from_instant(instant, ZoneInfo("America/New_York"))) == instant

    def test_negative_instants(self):
        """Instants before the epoch convert correctly."""
        value = from_instant(-1)
        assert value == datetime(1969, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)
        assert to_instant(value) == -1

    def test_now_instant_uses_wall_clock(self):
        """now_instant reads the wall clock in UTC."""
        with patch('chrono_axis.utils.time.datetime') as mock_datetime:
            mock_datetime.now.return_value = datetime(2020, 1, 1, tzinfo=timezone.utc)

            assert now_instant() == 1_577_836_800_000
            mock_datetime.now.assert_called_once_with(timezone.utc)

    def test_format_instant(self):
        """Instants format as ISO8601 with milliseconds."""
        assert format_instant(0) == "1970-01-01T00:00:00.000+00:00"


class TestAddMonths:
    """Test wall-clock month arithmetic."""

    def test_simple_step(self):
        """Adding months keeps the day and time."""
        value = datetime(2020, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert add_months(value, 3) == datetime(2020, 4, 15, 10, 30, tzinfo=timezone.utc)

    def test_year_wrap(self):
        """Months wrap into the next year."""
        value = datetime(2020, 11, 5, tzinfo=timezone.utc)
        assert add_months(value, 3) == datetime(2021, 2, 5, tzinfo=timezone.utc)

    def test_clamps_to_month_end(self):
        """Jan 31 + 1 month clamps to the end of February."""
        value = datetime(2020, 1, 31, tzinfo=timezone.utc)
        assert add_months(value, 1) == datetime(2020, 2, 29, tzinfo=timezone.utc)

    def test_negative_months(self):
        """Negative steps move backwards."""
        value = datetime(2020, 3, 31, tzinfo=timezone.utc)
        assert add_months(value, -1) == datetime(2020, 2, 29, tzinfo=timezone.utc)


class TestAdvance:
    """Test the calendar step function."""

    def test_decade(self, ms):
        """Ten years keep the calendar day."""
        assert advance(ms(2013, 12, 25), TimeUnit.YEAR, 10) == ms(2023, 12, 25)

    def test_leap_day_plus_year(self, ms):
        """Feb 29 + 1 year clamps to Feb 28."""
        assert advance(ms(2020, 2, 29, 8), TimeUnit.YEAR, 1) == ms(2021, 2, 28, 8)

    def test_month(self, ms):
        """One month from Jan 31 lands on the last day of February."""
        assert advance(ms(2021, 1, 31), TimeUnit.MONTH, 1) == ms(2021, 2, 28)

    def test_week(self, ms):
        """A week is seven calendar days."""
        assert advance(ms(2020, 1, 1, 12), TimeUnit.WEEK, 1) == ms(2020, 1, 8, 12)

    def test_day(self, ms):
        """A day step in UTC is 24 hours."""
        assert advance(ms(2020, 1, 1), TimeUnit.DAY, 1) - ms(2020, 1, 1) == MILLIS_PER_DAY

    def test_day_across_dst_keeps_wall_clock(self):
        """Day steps keep the local time of day across a DST change."""
        berlin = ZoneInfo("Europe/Berlin")
        start = to_instant(datetime(2021, 3, 27, 12, tzinfo=berlin))

        result = advance(start, TimeUnit.DAY, 1, berlin)

        assert from_instant(result, berlin).hour == 12
        assert result - start == 23 * MILLIS_PER_HOUR

    def test_hour_is_absolute(self):
        """Hour steps add fixed milliseconds even across DST."""
        berlin = ZoneInfo("Europe/Berlin")
        start = to_instant(datetime(2021, 3, 28, 0, tzinfo=berlin))

        result = advance(start, TimeUnit.HOUR, 12, berlin)

        assert result - start == 12 * MILLIS_PER_HOUR
        assert from_instant(result, berlin).hour == 13

    @pytest.mark.parametrize("unit,amount,expected", [
        (TimeUnit.MINUTE, 15, 15 * 60_000),
        (TimeUnit.SECOND, 5, 5_000),
        (TimeUnit.MILLISECOND, 1, 1),
    ])
    def test_fixed_units(self, unit, amount, expected):
        """Fine units step by a fixed number of milliseconds."""
        assert advance(1_000, unit, amount) == 1_000 + expected

    def test_advance_is_pure(self, ms):
        """Repeated calls with the same input give the same result."""
        start = ms(2020, 5, 31)
        assert advance(start, TimeUnit.MONTH, 1) == advance(start, TimeUnit.MONTH, 1)


class TestTimeUnit:
    """Test TimeUnit metadata."""

    def test_markers_are_distinct(self):
        """Every unit has its own marker."""
        markers = [unit.marker for unit in TimeUnit]
        assert len(set(markers)) == len(markers)

    def test_calendar_based_units(self):
        """Only year to day follow the wall clock."""
        calendar_units = {unit for unit in TimeUnit if unit.is_calendar_based}
        assert calendar_units == {TimeUnit.YEAR, TimeUnit.MONTH, TimeUnit.WEEK, TimeUnit.DAY}


class TestResolveTimezone:
    """Test timezone resolution."""

    def test_utc(self):
        """UTC and None resolve to the UTC singleton."""
        assert resolve_timezone("UTC") is timezone.utc
        assert resolve_timezone(None) is timezone.utc

    def test_iana_name(self):
        """IANA names resolve through zoneinfo."""
        assert resolve_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")

    def test_unknown_name(self):
        """Unknown names raise a configuration error."""
        with pytest.raises(UnknownTimezoneError) as exc_info:
            resolve_timezone("Mars/Olympus_Mons")

        assert exc_info.value.timezone_name == "Mars/Olympus_Mons"
        assert exc_info.value.recoverable is False
