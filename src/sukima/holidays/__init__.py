# src/sukima/holidays/__init__.py
"""
sukima.holidays
~~~~~~~~~~~~~~~

Japanese national holidays for any span of years between 1980 and 2099.

Each year contributes its fixed-date holidays, the "happy Monday" holidays
pinned to the n-th Monday of a month, and the two equinox days.  Two derived
kinds are then folded in across the whole span: a 振替休日 after every
holiday falling on a Sunday, and a 国民の休日 on any non-Sunday squeezed
between two holidays.

Basic usage::

    from sukima.holidays import holidays_in_range, holiday_dates

    hols = holidays_in_range("2026-05-01", "2026-05-10")
    [str(h.date) for h in hols]
    # → ['2026-05-03', '2026-05-04', '2026-05-05', '2026-05-06']
    dates = holiday_dates(hols)         # frozenset of CalendarDate

Public API
----------
Holiday               ``(date, title)`` named tuple.
holidays_in_range     Sorted holidays within an inclusive date range.
holidays_for_year     Every holiday of a single year.
holiday_dates         Holiday (or date-like) iterable → set of dates.
is_holiday            Membership test against a holiday date set.
is_day_off            Weekend or holiday.
"""

from __future__ import annotations

from sukima.holidays.calculator import (
    CITIZENS_HOLIDAY,
    SUBSTITUTE_HOLIDAY,
    SUPPORTED_YEARS,
    Holiday,
    HolidayLike,
    add_citizens_holidays,
    add_substitute_holidays,
    autumn_equinox_day,
    base_holidays,
    holiday_dates,
    holidays_for_year,
    holidays_in_range,
    is_day_off,
    is_holiday,
    nth_monday,
    spring_equinox_day,
)

__all__ = [
    "CITIZENS_HOLIDAY",
    "SUBSTITUTE_HOLIDAY",
    "SUPPORTED_YEARS",
    "Holiday",
    "HolidayLike",
    "add_citizens_holidays",
    "add_substitute_holidays",
    "autumn_equinox_day",
    "base_holidays",
    "holiday_dates",
    "holidays_for_year",
    "holidays_in_range",
    "is_day_off",
    "is_holiday",
    "nth_monday",
    "spring_equinox_day",
]
