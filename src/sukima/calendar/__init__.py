# src/sukima/calendar/__init__.py
"""
sukima.calendar
~~~~~~~~~~~~~~~

Naive calendar dates and the primitive arithmetic the rest of the engine is
built on.  Dates have no time of day and no timezone; every value is
immutable and serialises as ``YYYY-MM-DD``.

Basic usage::

    from sukima.calendar import CalendarDate, days_between, is_weekend

    d = CalendarDate.parse("2026-01-10")
    days_between(d, d.add_days(2))      # → 3 (inclusive)
    is_weekend(d)                       # → True (Saturday)

Spans are restartable and can be handed to NumPy as ordinal arrays::

    span = enumerate_dates("2026-01-01", "2026-01-31")
    len(span)                           # → 31
    span.ordinals()                     # → int64 array of day ordinals

Public API
----------
CalendarDate          Immutable date value type.
DateRange             Inclusive, never-inverted ``[start_date, end_date]``.
DateSpan              Restartable sequence of every date in a span.
CalendarError         Base exception for all engine errors.
ParseError            Malformed ``YYYY-MM-DD`` input.
InvalidRangeError     A range or window whose end precedes its start.
UnsupportedYearError  Holiday rules requested outside 1980–2099.
"""

from __future__ import annotations

from sukima.calendar._exceptions import (
    CalendarError,
    InvalidRangeError,
    ParseError,
    UnsupportedYearError,
)
from sukima.calendar.dates import (
    CalendarDate,
    DateLike,
    DateRange,
    DateSpan,
    add_days,
    add_years,
    day_ordinals,
    days_between,
    enumerate_dates,
    first_day_of_month,
    format_date,
    is_weekend,
    last_day_of_month,
    ordinal_array,
    parse_date,
    weekday,
    weekend_mask,
)

__all__ = [
    "CalendarDate",
    "CalendarError",
    "DateLike",
    "DateRange",
    "DateSpan",
    "InvalidRangeError",
    "ParseError",
    "UnsupportedYearError",
    "add_days",
    "add_years",
    "day_ordinals",
    "days_between",
    "enumerate_dates",
    "first_day_of_month",
    "format_date",
    "is_weekend",
    "last_day_of_month",
    "ordinal_array",
    "parse_date",
    "weekday",
    "weekend_mask",
]
