from __future__ import annotations

import logging
import math
from functools import reduce
from typing import AbstractSet, Iterable, NamedTuple, Union

from sukima.calendar import (
    CalendarDate,
    DateLike,
    InvalidRangeError,
    UnsupportedYearError,
    is_weekend,
)

logger = logging.getLogger(__name__)

# The equinox approximation below only holds for these years.
SUPPORTED_YEARS = range(1980, 2100)

SUBSTITUTE_HOLIDAY = "振替休日"
CITIZENS_HOLIDAY = "国民の休日"

# (title, month, day)
FIXED_HOLIDAYS: tuple[tuple[str, int, int], ...] = (
    ("元日", 1, 1),
    ("建国記念の日", 2, 11),
    ("天皇誕生日", 2, 23),
    ("昭和の日", 4, 29),
    ("憲法記念日", 5, 3),
    ("みどりの日", 5, 4),
    ("こどもの日", 5, 5),
    ("山の日", 8, 11),
    ("文化の日", 11, 3),
    ("勤労感謝の日", 11, 23),
)

# (title, month, n) for the n-th Monday of the month
HAPPY_MONDAY_HOLIDAYS: tuple[tuple[str, int, int], ...] = (
    ("成人の日", 1, 2),
    ("海の日", 7, 3),
    ("敬老の日", 9, 3),
    ("スポーツの日", 10, 2),
)

SPRING_EQUINOX_HOLIDAY = "春分の日"
AUTUMN_EQUINOX_HOLIDAY = "秋分の日"


class Holiday(NamedTuple):
    date: CalendarDate
    title: str


HolidayLike = Union[Holiday, DateLike]

# Accumulator threaded through the derivation folds: the holidays so far and
# the set of dates they occupy.
_Fold = tuple[tuple[Holiday, ...], frozenset[CalendarDate]]


# ── rule helpers ──────────────────────────────────────────────────────────

def check_year(year: int) -> None:
    if year not in SUPPORTED_YEARS:
        raise UnsupportedYearError(
            f"Holiday rules are only defined for {SUPPORTED_YEARS.start}–"
            f"{SUPPORTED_YEARS.stop - 1}; got {year}."
        )


def nth_monday(year: int, month: int, n: int) -> CalendarDate:
    w = CalendarDate(year, month, 1).weekday
    return CalendarDate(year, month, 1 + (8 - w) % 7 + (n - 1) * 7)


def spring_equinox_day(year: int) -> int:
    """Day of March on which 春分の日 falls."""
    check_year(year)
    return math.floor(20.8431 + 0.242194 * (year - 1980) - math.floor((year - 1980) / 4))


def autumn_equinox_day(year: int) -> int:
    """Day of September on which 秋分の日 falls."""
    check_year(year)
    return math.floor(23.2488 + 0.242194 * (year - 1980) - math.floor((year - 1980) / 4))


def base_holidays(year: int) -> tuple[Holiday, ...]:
    """Fixed-date, happy-Monday and equinox holidays of ``year``, unsorted."""
    check_year(year)
    fixed = tuple(Holiday(CalendarDate(year, m, d), title) for title, m, d in FIXED_HOLIDAYS)
    floating = tuple(
        Holiday(nth_monday(year, m, n), title) for title, m, n in HAPPY_MONDAY_HOLIDAYS
    )
    equinox = (
        Holiday(CalendarDate(year, 3, spring_equinox_day(year)), SPRING_EQUINOX_HOLIDAY),
        Holiday(CalendarDate(year, 9, autumn_equinox_day(year)), AUTUMN_EQUINOX_HOLIDAY),
    )
    return fixed + floating + equinox


# ── derivation passes ─────────────────────────────────────────────────────

def _sorted(holidays: Iterable[Holiday]) -> tuple[Holiday, ...]:
    return tuple(sorted(holidays, key=lambda h: h.date))


def _start(holidays: tuple[Holiday, ...]) -> _Fold:
    return holidays, frozenset(h.date for h in holidays)


def _insert_substitute(acc: _Fold, holiday: Holiday) -> _Fold:
    result, taken = acc
    if holiday.date.weekday != 0:
        return acc
    sub = holiday.date.add_days(1)
    while sub in taken:
        sub = sub.add_days(1)
    return result + (Holiday(sub, SUBSTITUTE_HOLIDAY),), taken | {sub}


def _insert_citizens(acc: _Fold, holiday: Holiday) -> _Fold:
    result, taken = acc
    between = holiday.date.add_days(1)
    # Saturdays are deliberately not excluded here, only Sundays.
    if (
        holiday.date.add_days(2) in taken
        and between not in taken
        and between.weekday != 0
    ):
        return result + (Holiday(between, CITIZENS_HOLIDAY),), taken | {between}
    return acc


def add_substitute_holidays(holidays: Iterable[Holiday]) -> tuple[Holiday, ...]:
    """
    Add a 振替休日 after every holiday falling on a Sunday.

    The substitute lands on the first following date not already a holiday,
    including substitutes inserted earlier in the same pass.
    """
    holidays = _sorted(holidays)
    result, _ = reduce(_insert_substitute, holidays, _start(holidays))
    return _sorted(result)


def add_citizens_holidays(holidays: Iterable[Holiday]) -> tuple[Holiday, ...]:
    """Promote a non-Sunday date sandwiched between two holidays to 国民の休日."""
    holidays = _sorted(holidays)
    result, _ = reduce(_insert_citizens, holidays, _start(holidays))
    return _sorted(result)


def derive_holidays(years: Iterable[int]) -> tuple[Holiday, ...]:
    base = _sorted(h for year in years for h in base_holidays(year))
    return add_citizens_holidays(add_substitute_holidays(base))


# ── public API ────────────────────────────────────────────────────────────

def holidays_for_year(year: int) -> tuple[Holiday, ...]:
    return derive_holidays([year])


def holidays_in_range(range_start: DateLike, range_end: DateLike) -> tuple[Holiday, ...]:
    """
    Japanese public holidays with ``range_start <= date <= range_end``,
    ascending by date.  The range may span several years.
    """
    start = CalendarDate.coerce(range_start)
    end = CalendarDate.coerce(range_end)
    if end < start:
        raise InvalidRangeError(f"Holiday range ends ({end}) before it starts ({start}).")

    years = range(start.year, end.year + 1)
    for year in years:
        check_year(year)

    derived = derive_holidays(years)
    result = tuple(h for h in derived if start <= h.date <= end)
    logger.debug(
        "Derived %d holidays for %d year(s); %d within %s..%s",
        len(derived), len(years), len(result), start, end,
    )
    return result


def holiday_dates(holidays: Iterable[HolidayLike]) -> frozenset[CalendarDate]:
    """The set of dates covered by ``holidays`` (Holiday objects or date-likes)."""
    return frozenset(
        h.date if isinstance(h, Holiday) else CalendarDate.coerce(h) for h in holidays
    )


def is_holiday(d: DateLike, dates: AbstractSet[CalendarDate]) -> bool:
    return CalendarDate.coerce(d) in dates


def is_day_off(d: DateLike, dates: AbstractSet[CalendarDate]) -> bool:
    return is_weekend(d) or is_holiday(d, dates)
