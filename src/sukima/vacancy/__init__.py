# src/sukima/vacancy/__init__.py
"""
sukima.vacancy
~~~~~~~~~~~~~~

Vacant-period detection: given the date ranges already taken by events or
blocked periods, and the holiday set of the scan window, find the free runs
worth planning a trip into.

Pipeline, per scan window:

1. union the occupied ranges into a set of dates (plus ordinary working days
   unless ``VacancyPolicy(days_off_only=False)``);
2. detect the maximal free runs of the window;
3. cut every run at month boundaries, then into pieces of at most 30 days;
4. keep pieces of at least ``min_days`` containing a weekend day or holiday;
5. flag 3–5 day pieces holding both a weekend day and a holiday as long
   weekends.

Basic usage::

    from sukima.vacancy import calculate_vacant_periods

    periods = calculate_vacant_periods(
        [{"startDate": "2026-01-10", "endDate": "2026-01-10"}],
        {"2026-01-12"},
        "2026-01-05", "2026-01-16",
        min_days=2,
    )
    # → [VacantPeriod(2026-01-11, 2026-01-12, days=2, is_long_weekend=False)]

Public API
----------
calculate_vacant_periods  The full pipeline.
VacantPeriod              Result value type.
VacancyPolicy             Tunables (min/max days, long-weekend bounds, mode).
occupied_dates            Union of occupied ranges as a date set.
detect_gaps               Maximal free runs of a window.
split_by_month            Cut a run at month boundaries.
split_by_max_days         Cut a run into bounded windows.
is_long_weekend           Long-weekend classification of a single run.
"""

from __future__ import annotations

from sukima.vacancy.gaps import (
    detect_gaps,
    occupied_dates,
    occupied_ordinals,
    true_runs,
    workday_dates,
)
from sukima.vacancy.periods import (
    DayOffIndex,
    VacantPeriod,
    calculate_vacant_periods,
    is_long_weekend,
    is_valid_vacant_period,
    make_vacant_period,
    split_by_max_days,
    split_by_month,
)
from sukima.vacancy.policy import (
    DEFAULT_MIN_DAYS,
    LONG_WEEKEND_MAX_DAYS,
    LONG_WEEKEND_MIN_DAYS,
    MAX_VACANT_DAYS,
    VacancyPolicy,
)

__all__ = [
    "DEFAULT_MIN_DAYS",
    "LONG_WEEKEND_MAX_DAYS",
    "LONG_WEEKEND_MIN_DAYS",
    "MAX_VACANT_DAYS",
    "DayOffIndex",
    "VacancyPolicy",
    "VacantPeriod",
    "calculate_vacant_periods",
    "detect_gaps",
    "is_long_weekend",
    "is_valid_vacant_period",
    "make_vacant_period",
    "occupied_dates",
    "occupied_ordinals",
    "split_by_max_days",
    "split_by_month",
    "true_runs",
    "workday_dates",
]
