"""
tests/vacancy/test_periods.py

2026 weekday reference:
  01-01 Thu, 01-03 Sat, 01-04 Sun, 01-10 Sat, 01-11 Sun, 01-12 Mon,
  01-31 Sat, 02-01 Sun, 02-07 Sat, 02-11 Wed, 05-02 Sat, 05-03 Sun.

Covers:
  - End-to-end scans (days-off-only default and plain gap mode)
  - Month-boundary and maximum-length splitting
  - min_days and weekend/holiday filtering
  - Long-weekend classification
  - Multi-year invariants (30-day cap, one month per period, inside window)
  - Policy validation, input shapes and rejection of inverted windows
"""

import pytest

from sukima.calendar import CalendarDate, DateRange, InvalidRangeError
from sukima.holidays import holiday_dates, holidays_in_range
from sukima.vacancy import (
    MAX_VACANT_DAYS,
    DayOffIndex,
    VacancyPolicy,
    VacantPeriod,
    calculate_vacant_periods,
    is_long_weekend,
    is_valid_vacant_period,
    make_vacant_period,
    split_by_max_days,
    split_by_month,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def plain_gaps():
    """Every unoccupied date counts, weekdays included."""
    return VacancyPolicy(days_off_only=False)


@pytest.fixture
def golden_week():
    return {"2026-05-03", "2026-05-04", "2026-05-05", "2026-05-06"}


# ── Helpers ───────────────────────────────────────────────────────────────────

def spans(periods):
    return [(str(p.start_date), str(p.end_date), p.days) for p in periods]


def assert_invariants(periods, start, end):
    window = DateRange(start, end)
    for p in periods:
        assert 1 <= p.days <= MAX_VACANT_DAYS
        assert p.days == DateRange(p.start_date, p.end_date).days
        assert (p.start_date.year, p.start_date.month) == (p.end_date.year, p.end_date.month)
        assert window.start_date <= p.start_date <= p.end_date <= window.end_date
    starts = [p.start_date for p in periods]
    assert starts == sorted(starts)


# ── End-to-end ────────────────────────────────────────────────────────────────

class TestEndToEnd:

    def test_weekends_only_without_holidays(self):
        result = calculate_vacant_periods([], set(), "2026-01-01", "2026-01-12", 2)
        assert result == [
            VacantPeriod(CalendarDate(2026, 1, 3), CalendarDate(2026, 1, 4), 2, False),
            VacantPeriod(CalendarDate(2026, 1, 10), CalendarDate(2026, 1, 11), 2, False),
        ]

    def test_weekdays_only_window_is_empty(self):
        assert calculate_vacant_periods([], set(), "2026-01-05", "2026-01-09", 1) == []

    def test_fully_occupied_is_empty(self):
        result = calculate_vacant_periods(
            [{"startDate": "2026-01-01", "endDate": "2026-01-10"}],
            set(), "2026-01-01", "2026-01-10", 1,
        )
        assert result == []

    def test_three_day_weekend_with_monday_holiday(self):
        result = calculate_vacant_periods([], {"2026-01-12"}, "2026-01-05", "2026-01-16", 3)
        assert spans(result) == [("2026-01-10", "2026-01-12", 3)]
        assert result[0].is_long_weekend

    def test_friday_holiday_joins_weekend(self):
        result = calculate_vacant_periods([], {"2026-01-09"}, "2026-01-05", "2026-01-14", 3)
        assert spans(result) == [("2026-01-09", "2026-01-11", 3)]

    def test_isolated_weekday_holiday_is_its_own_period(self):
        result = calculate_vacant_periods([], {"2026-02-11"}, "2026-02-02", "2026-02-20", 1)
        assert spans(result) == [
            ("2026-02-07", "2026-02-08", 2),
            ("2026-02-11", "2026-02-11", 1),
            ("2026-02-14", "2026-02-15", 2),
        ]

    def test_golden_week(self, golden_week):
        result = calculate_vacant_periods([], golden_week, "2026-04-27", "2026-05-10", 3)
        assert spans(result) == [("2026-05-02", "2026-05-06", 5)]
        assert result[0].is_long_weekend

    def test_event_takes_part_of_weekend(self):
        result = calculate_vacant_periods(
            [{"startDate": "2026-01-10", "endDate": "2026-01-10"}],
            {"2026-01-12"}, "2026-01-05", "2026-01-16", 2,
        )
        assert spans(result) == [("2026-01-11", "2026-01-12", 2)]
        assert not result[0].is_long_weekend

    def test_weekday_event_leaves_weekends_alone(self):
        result = calculate_vacant_periods(
            [{"startDate": "2026-01-05", "endDate": "2026-01-09"}],
            set(), "2026-01-01", "2026-01-14", 2,
        )
        assert spans(result) == [("2026-01-03", "2026-01-04", 2), ("2026-01-10", "2026-01-11", 2)]

    def test_overlapping_events_cover_weekend(self):
        result = calculate_vacant_periods(
            [
                {"startDate": "2026-01-02", "endDate": "2026-01-04"},
                {"startDate": "2026-01-03", "endDate": "2026-01-05"},
            ],
            set(), "2026-01-01", "2026-01-07", 1,
        )
        assert result == []

    def test_computed_holidays_accepted(self):
        hols = holidays_in_range("2026-09-14", "2026-09-27")
        result = calculate_vacant_periods([], hols, "2026-09-14", "2026-09-27", 3)
        # 09-19 Sat .. 09-23 Wed: weekend + 敬老の日 + 国民の休日 + 秋分の日
        assert spans(result) == [("2026-09-19", "2026-09-23", 5)]
        assert result[0].is_long_weekend


# ── Window boundaries ─────────────────────────────────────────────────────────

class TestWindowBoundaries:

    def test_window_starting_on_weekend(self):
        result = calculate_vacant_periods([], set(), "2026-01-03", "2026-01-04", 2)
        assert spans(result) == [("2026-01-03", "2026-01-04", 2)]

    def test_window_starting_on_weekday(self):
        result = calculate_vacant_periods([], set(), "2026-01-05", "2026-01-14", 2)
        assert spans(result) == [("2026-01-10", "2026-01-11", 2)]

    def test_single_day_window_on_weekend(self):
        result = calculate_vacant_periods([], set(), "2026-01-03", "2026-01-03", 1)
        assert spans(result) == [("2026-01-03", "2026-01-03", 1)]

    def test_single_day_window_on_weekday(self):
        assert calculate_vacant_periods([], set(), "2026-01-05", "2026-01-05", 1) == []

    def test_run_is_clipped_to_window(self, plain_gaps):
        result = calculate_vacant_periods(
            [], set(), "2026-01-09", "2026-01-10", 1, policy=plain_gaps
        )
        assert spans(result) == [("2026-01-09", "2026-01-10", 2)]

    def test_inverted_window_rejected(self):
        with pytest.raises(InvalidRangeError):
            calculate_vacant_periods([], set(), "2026-01-12", "2026-01-01")

    def test_inverted_occupied_range_rejected(self):
        with pytest.raises(InvalidRangeError):
            calculate_vacant_periods(
                [{"startDate": "2026-01-05", "endDate": "2026-01-03"}],
                set(), "2026-01-01", "2026-01-12",
            )


# ── Month boundaries ──────────────────────────────────────────────────────────

class TestMonthBoundaries:

    def test_weekend_across_month_is_split(self):
        # 01-31 Sat | 02-01 Sun
        result = calculate_vacant_periods([], set(), "2026-01-26", "2026-02-06", 1)
        assert spans(result) == [("2026-01-31", "2026-01-31", 1), ("2026-02-01", "2026-02-01", 1)]

    def test_split_halves_can_fall_below_min_days(self):
        assert calculate_vacant_periods([], set(), "2026-01-26", "2026-02-06", 2) == []

    def test_split_by_month(self):
        chunks = split_by_month("2026-01-15", "2026-03-10")
        assert [(str(c.start_date), str(c.end_date)) for c in chunks] == [
            ("2026-01-15", "2026-01-31"),
            ("2026-02-01", "2026-02-28"),
            ("2026-03-01", "2026-03-10"),
        ]

    def test_split_by_month_within_one_month(self):
        assert split_by_month("2026-01-05", "2026-01-20") == [DateRange("2026-01-05", "2026-01-20")]

    def test_split_by_month_across_year(self):
        chunks = split_by_month("2025-12-30", "2026-01-02")
        assert chunks == [DateRange("2025-12-30", "2025-12-31"), DateRange("2026-01-01", "2026-01-02")]


# ── Maximum length ────────────────────────────────────────────────────────────

class TestMaximumLength:

    def test_split_by_max_days_remainder(self):
        chunks = split_by_max_days("2026-01-01", "2026-01-31")
        assert chunks == [DateRange("2026-01-01", "2026-01-30"), DateRange("2026-01-31", "2026-01-31")]

    def test_split_by_max_days_exact_fit(self):
        assert split_by_max_days("2026-04-01", "2026-04-30") == [DateRange("2026-04-01", "2026-04-30")]

    def test_split_by_max_days_custom(self):
        chunks = split_by_max_days("2026-01-01", "2026-01-31", 10)
        assert [c.days for c in chunks] == [10, 10, 10, 1]

    def test_split_by_max_days_rejects_zero(self):
        with pytest.raises(ValueError):
            split_by_max_days("2026-01-01", "2026-01-31", 0)

    def test_month_split_precedes_cap(self, plain_gaps):
        result = calculate_vacant_periods([], set(), "2026-01-01", "2026-03-31", 3, policy=plain_gaps)
        assert spans(result) == [
            ("2026-01-01", "2026-01-30", 30),
            ("2026-02-01", "2026-02-28", 28),
            ("2026-03-01", "2026-03-30", 30),
        ]
        assert not any(p.is_long_weekend for p in result)

    def test_one_day_remainder_kept_when_weekend(self, plain_gaps):
        # 01-31 is a Saturday, 03-31 a Tuesday
        result = calculate_vacant_periods([], set(), "2026-01-01", "2026-03-31", 1, policy=plain_gaps)
        assert ("2026-01-31", "2026-01-31", 1) in spans(result)
        assert ("2026-03-31", "2026-03-31", 1) not in spans(result)


# ── Filtering ─────────────────────────────────────────────────────────────────

class TestFiltering:

    @pytest.fixture
    def fri_to_sun(self):
        """Only 01-09 (Fri) .. 01-11 (Sun) left free in January."""
        return [("2026-01-01", "2026-01-08"), ("2026-01-12", "2026-01-31")]

    def test_run_of_exactly_min_days_kept(self, fri_to_sun, plain_gaps):
        result = calculate_vacant_periods(fri_to_sun, set(), "2026-01-01", "2026-01-31", 3, policy=plain_gaps)
        assert spans(result) == [("2026-01-09", "2026-01-11", 3)]

    def test_run_one_day_short_dropped(self, fri_to_sun, plain_gaps):
        assert calculate_vacant_periods(fri_to_sun, set(), "2026-01-01", "2026-01-31", 4, policy=plain_gaps) == []

    def test_days_off_run_of_min_days(self):
        assert len(calculate_vacant_periods([], set(), "2026-01-05", "2026-01-16", 2)) == 1
        assert calculate_vacant_periods([], set(), "2026-01-05", "2026-01-16", 3) == []

    def test_weekday_only_run_dropped(self, plain_gaps):
        assert calculate_vacant_periods([], set(), "2026-01-05", "2026-01-09", 1, policy=plain_gaps) == []

    def test_weekday_holiday_satisfies_filter(self, plain_gaps):
        result = calculate_vacant_periods([], {"2026-01-07"}, "2026-01-05", "2026-01-09", 1, policy=plain_gaps)
        assert spans(result) == [("2026-01-05", "2026-01-09", 5)]

    def test_default_min_days_is_three(self):
        assert calculate_vacant_periods([], set(), "2026-01-01", "2026-01-12") == []

    def test_is_valid_vacant_period(self):
        assert is_valid_vacant_period("2026-01-09", "2026-01-11", set(), 3)
        assert not is_valid_vacant_period("2026-01-09", "2026-01-11", set(), 4)
        assert not is_valid_vacant_period("2026-01-05", "2026-01-09", set(), 1)


# ── Long weekends ─────────────────────────────────────────────────────────────

class TestLongWeekend:

    def test_saturday_sunday_monday_holiday(self):
        assert is_long_weekend("2026-01-10", "2026-01-12", {"2026-01-12"})

    def test_two_day_weekend(self):
        assert not is_long_weekend("2026-01-10", "2026-01-11", set())

    def test_two_day_weekend_with_holiday_too_short(self):
        assert not is_long_weekend("2026-01-11", "2026-01-12", {"2026-01-12"})

    def test_weekend_without_holiday(self):
        assert not is_long_weekend("2026-01-09", "2026-01-11", set())

    def test_holiday_without_weekend(self):
        assert not is_long_weekend("2026-01-06", "2026-01-08", {"2026-01-07"})

    def test_five_days(self, golden_week):
        assert is_long_weekend("2026-05-02", "2026-05-06", golden_week)

    def test_six_days_is_a_large_block(self, golden_week):
        assert not is_long_weekend("2026-05-02", "2026-05-07", golden_week | {"2026-05-07"})

    def test_six_day_run_from_scan(self, golden_week):
        hols = golden_week | {"2026-05-07"}
        result = calculate_vacant_periods([], hols, "2026-04-27", "2026-05-10", 3)
        assert spans(result) == [("2026-05-02", "2026-05-07", 6)]
        assert not result[0].is_long_weekend

    def test_custom_bounds(self):
        policy = VacancyPolicy(long_weekend_max_days=6)
        hols = {"2026-05-03", "2026-05-04", "2026-05-05", "2026-05-06", "2026-05-07"}
        assert is_long_weekend("2026-05-02", "2026-05-07", hols, policy=policy)


# ── Multi-year invariants ─────────────────────────────────────────────────────

class TestInvariants:

    def test_two_year_window_without_occupancy(self, plain_gaps):
        result = calculate_vacant_periods([], set(), "2026-02-08", "2028-02-08", 1, policy=plain_gaps)
        assert_invariants(result, "2026-02-08", "2028-02-08")
        assert len(result) > 24

    def test_two_year_window_days_off_only(self):
        hols = holidays_in_range("2026-02-08", "2028-02-08")
        result = calculate_vacant_periods([], hols, "2026-02-08", "2028-02-08", 2)
        assert_invariants(result, "2026-02-08", "2028-02-08")
        assert len(result) > 1
        dates = holiday_dates(hols)
        for p in result:
            for d in DateRange(p.start_date, p.end_date).dates():
                assert d.weekday in (0, 6) or d in dates

    def test_two_year_window_with_events(self):
        occupied = [("2026-04-01", "2026-04-05"), ("2026-08-10", "2026-08-15")]
        result = calculate_vacant_periods(occupied, set(), "2026-02-08", "2028-02-08", 2)
        assert_invariants(result, "2026-02-08", "2028-02-08")
        for p in result:
            assert not (p.start_date <= CalendarDate(2026, 4, 4) <= p.end_date)

    def test_deterministic(self):
        args = ([("2026-03-01", "2026-03-03")], {"2026-03-20"}, "2026-01-01", "2026-12-31", 2)
        assert calculate_vacant_periods(*args) == calculate_vacant_periods(*args)


# ── Policy and values ─────────────────────────────────────────────────────────

class TestPolicyAndValues:

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_days": 0},
            {"max_days": 0},
            {"long_weekend_min_days": 0},
            {"long_weekend_min_days": 4, "long_weekend_max_days": 3},
        ],
    )
    def test_invalid_policy(self, kwargs):
        with pytest.raises(ValueError):
            VacancyPolicy(**kwargs)

    def test_min_days_argument_overrides_policy(self):
        policy = VacancyPolicy(min_days=5)
        result = calculate_vacant_periods([], set(), "2026-01-01", "2026-01-12", 2, policy=policy)
        assert len(result) == 2

    def test_zero_min_days_argument_rejected(self):
        with pytest.raises(ValueError):
            calculate_vacant_periods([], set(), "2026-01-01", "2026-01-12", 0)

    def test_custom_max_days(self):
        policy = VacancyPolicy(max_days=7, days_off_only=False)
        result = calculate_vacant_periods([], set(), "2026-01-01", "2026-01-31", 1, policy=policy)
        assert all(p.days <= 7 for p in result)

    def test_as_dict(self):
        period = make_vacant_period("2026-01-10", "2026-01-12", {"2026-01-12"})
        assert period.as_dict() == {
            "startDate": "2026-01-10",
            "endDate": "2026-01-12",
            "days": 3,
            "isLongWeekend": True,
        }

    def test_vacant_period_is_frozen(self):
        period = make_vacant_period("2026-01-10", "2026-01-11", set())
        with pytest.raises(AttributeError):
            period.days = 5

    def test_day_off_index_counts(self):
        index = DayOffIndex("2026-01-01", "2026-01-31", {"2026-01-01", "2026-01-12"})
        assert index.weekend_days("2026-01-01", "2026-01-31") == 9
        assert index.holiday_days("2026-01-01", "2026-01-31") == 2
        assert not index.contains_day_off("2026-01-13", "2026-01-16")

    def test_day_off_index_rejects_outside_window(self):
        index = DayOffIndex("2026-01-01", "2026-01-31", set())
        with pytest.raises(ValueError):
            index.weekend_days("2025-12-31", "2026-01-02")
