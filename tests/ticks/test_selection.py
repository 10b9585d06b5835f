"""Tests for interval selection"""

from chrono_axis.ticks.intervals import (
    DAY, DECADE, HOUR_1, MILLISECOND, MONTH_3, MONTH_6, WEEK, YEAR
)
from chrono_axis.ticks.selection import collect_candidates, prefer_previous, select_interval
from chrono_axis.utils.time import MILLIS_PER_DAY


class TestCollectCandidates:
    """Test candidate generation"""

    def test_includes_lower_and_stops_after_upper(self, ms):
        """Candidates start at lower and never pass upper"""
        candidates = collect_candidates(ms(2020, 1, 1), ms(2020, 1, 3, 12), DAY)
        assert candidates == [ms(2020, 1, 1), ms(2020, 1, 2), ms(2020, 1, 3)]

    def test_upper_is_inclusive(self, ms):
        """A candidate landing on upper is kept"""
        candidates = collect_candidates(ms(2020, 1, 1), ms(2020, 1, 15), WEEK)
        assert candidates == [ms(2020, 1, 1), ms(2020, 1, 8), ms(2020, 1, 15)]

    def test_single_point_range(self, ms):
        """A zero-width range yields only lower"""
        point = ms(2020, 6, 1, 12)
        assert collect_candidates(point, point, MILLISECOND) == [point]

    def test_limit(self, ms):
        """Generation stops at the limit"""
        candidates = collect_candidates(ms(2020, 1, 1), ms(2020, 12, 31), DAY, limit=4)
        assert len(candidates) == 4


class TestPreferPrevious:
    """Test the tie-break between neighboring intervals"""

    def test_coarser_wins_when_closer(self):
        """A small deficit beats a large excess"""
        assert prefer_previous(3, 5, 3.5) is True

    def test_finer_wins_when_closer(self):
        """A small excess beats a large deficit"""
        assert prefer_previous(1, 3, 2.5) is False

    def test_exact_tie_keeps_finer(self):
        """Equal distance keeps the finer interval"""
        assert prefer_previous(3, 5, 4) is False


class TestSelectInterval:
    """Test walking the catalog"""

    def test_year_ticks_for_two_years(self, christmas_range):
        """Three yearly candidates fit a target of three ticks"""
        lower, upper = christmas_range

        selection = select_interval(lower, upper, 3.0)

        assert selection.interval is YEAR
        assert len(selection.candidates) == 3
        assert selection.candidates[0] == lower
        assert selection.fallback is False

    def test_coarser_interval_preferred_when_closer(self, christmas_range):
        """Year (3) beats half-year (5) for a target of 3.5"""
        lower, upper = christmas_range
        assert select_interval(lower, upper, 3.5).interval is YEAR

    def test_finer_interval_chosen_on_tie(self, christmas_range):
        """Half-year (5) beats year (3) for a target of exactly 4"""
        lower, upper = christmas_range

        selection = select_interval(lower, upper, 4.0)

        assert selection.interval is MONTH_6
        assert len(selection.candidates) == 5

    def test_quarterly_ticks(self, ms):
        """A year-long range with six target ticks gets quarters"""
        selection = select_interval(ms(2020, 1, 15), ms(2020, 12, 20), 6.0)

        assert selection.interval is MONTH_3
        assert selection.candidates == (
            ms(2020, 1, 15), ms(2020, 4, 15), ms(2020, 7, 15), ms(2020, 10, 15)
        )

    def test_daily_ticks(self, ms):
        """A week with seven target ticks gets days"""
        selection = select_interval(ms(2020, 1, 1), ms(2020, 1, 8), 7.0)

        assert selection.interval is DAY
        assert len(selection.candidates) == 8

    def test_hourly_ticks(self, ms):
        """Five and a half hours with six target ticks gets hours"""
        selection = select_interval(ms(2020, 1, 1, 10, 30), ms(2020, 1, 1, 16), 6.0)

        assert selection.interval is HOUR_1
        assert len(selection.candidates) == 6

    def test_first_interval_exceeding_immediately(self, ms):
        """With no room for ticks the coarsest interval is used"""
        selection = select_interval(ms(2000, 1, 1), ms(2020, 1, 1), 0.0)

        assert selection.interval is DECADE
        assert selection.candidates == (ms(2000, 1, 1), ms(2010, 1, 1), ms(2020, 1, 1))

    def test_fallback_to_finest_interval(self, ms):
        """A range too small for the target falls back to milliseconds"""
        lower = ms(2020, 1, 1)

        selection = select_interval(lower, lower + 3, 10.0)

        assert selection.interval is MILLISECOND
        assert selection.candidates == (lower, lower + 1, lower + 2, lower + 3)
        assert selection.fallback is True

    def test_single_point_falls_back(self, ms):
        """A single-point range is a valid fallback case"""
        point = ms(2020, 6, 1, 12)

        selection = select_interval(point, point, 5.0)

        assert selection.interval is MILLISECOND
        assert selection.candidates == (point,)

    def test_truncated_candidates_never_returned(self, ms):
        """A finer interval cut short by the limit loses to the coarser one"""
        lower = ms(2020, 1, 1)
        upper = lower + 21 * MILLIS_PER_DAY

        selection = select_interval(lower, upper, 4.5)

        # Week gives 4 candidates, day would give 22
        assert selection.interval is WEEK
        assert selection.candidates == (
            ms(2020, 1, 1), ms(2020, 1, 8), ms(2020, 1, 15), ms(2020, 1, 22)
        )
