from __future__ import annotations

import calendar as _stdlib_calendar
import datetime as _dt
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Iterator, Mapping, Union

import numpy as np

from ._exceptions import InvalidRangeError, ParseError

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

DateLike = Union["CalendarDate", _dt.date, str]


@total_ordering
class CalendarDate:
    """
    Naive calendar date (no time of day, no timezone).

    Stored as a proleptic Gregorian ordinal so that all arithmetic is plain
    integer arithmetic.  Instances are immutable and hashable; ``str(d)``
    is the canonical ``YYYY-MM-DD`` form.
    """

    __slots__ = ("_ordinal",)

    def __init__(self, year: int, month: int, day: int) -> None:
        try:
            ordinal = _dt.date(year, month, day).toordinal()
        except (TypeError, ValueError) as exc:
            raise ParseError(
                f"Not a calendar date: year={year!r}, month={month!r}, day={day!r} ({exc})."
            ) from exc
        object.__setattr__(self, "_ordinal", ordinal)

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        if not _dt.date.min.toordinal() <= ordinal <= _dt.date.max.toordinal():
            raise ParseError(f"Ordinal {ordinal} is outside the representable calendar.")
        obj = object.__new__(cls)
        object.__setattr__(obj, "_ordinal", int(ordinal))
        return obj

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        if not isinstance(text, str):
            raise ParseError(f"Expected a YYYY-MM-DD string; got {type(text).__name__}.")
        m = _ISO_DATE.fullmatch(text)
        if m is None:
            raise ParseError(f"Expected a YYYY-MM-DD string; got {text!r}.")
        year, month, day = (int(g) for g in m.groups())
        return cls(year, month, day)

    @classmethod
    def coerce(cls, value: DateLike) -> CalendarDate:
        if isinstance(value, CalendarDate):
            return value
        if isinstance(value, _dt.datetime):
            raise ParseError("datetime values carry a time of day; pass a date instead.")
        if isinstance(value, _dt.date):
            return cls.from_ordinal(value.toordinal())
        return cls.parse(value)

    # ── components ───────────────────────────────────────────────────────

    @property
    def ordinal(self) -> int:
        return self._ordinal

    @property
    def year(self) -> int:
        return self.to_date().year

    @property
    def month(self) -> int:
        return self.to_date().month

    @property
    def day(self) -> int:
        return self.to_date().day

    @property
    def weekday(self) -> int:
        # Ordinal 1 (0001-01-01) is a Monday, so ordinal % 7 is 0 on Sundays.
        return self._ordinal % 7

    def to_date(self) -> _dt.date:
        return _dt.date.fromordinal(self._ordinal)

    # ── arithmetic ───────────────────────────────────────────────────────

    def add_days(self, n: int) -> CalendarDate:
        return CalendarDate.from_ordinal(self._ordinal + int(n))

    # ── value semantics ──────────────────────────────────────────────────

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CalendarDate is immutable.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __lt__(self, other: CalendarDate) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __str__(self) -> str:
        return self.to_date().isoformat()

    def __repr__(self) -> str:
        return f"CalendarDate({str(self)!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (CalendarDate.from_ordinal, (self._ordinal,))


class DateSpan:
    """
    Every date from ``start`` to ``end`` inclusive.

    Iterating twice yields the same dates; a span whose start lies after its
    end is empty.
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: DateLike, end: DateLike) -> None:
        self._start = CalendarDate.coerce(start)
        self._end = CalendarDate.coerce(end)

    def __iter__(self) -> Iterator[CalendarDate]:
        for ordinal in range(self._start.ordinal, self._end.ordinal + 1):
            yield CalendarDate.from_ordinal(ordinal)

    def __len__(self) -> int:
        return max(self._end.ordinal - self._start.ordinal + 1, 0)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, CalendarDate):
            return False
        return self._start <= value <= self._end

    def ordinals(self) -> np.ndarray:
        return np.arange(self._start.ordinal, self._end.ordinal + 1, dtype=np.int64)

    def __repr__(self) -> str:
        return f"DateSpan({str(self._start)!r}, {str(self._end)!r}, days={len(self)})"


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive ``[start_date, end_date]`` interval; never inverted."""

    start_date: CalendarDate
    end_date: CalendarDate

    def __post_init__(self) -> None:
        start = CalendarDate.coerce(self.start_date)
        end = CalendarDate.coerce(self.end_date)
        if end < start:
            raise InvalidRangeError(f"Range ends ({end}) before it starts ({start}).")
        object.__setattr__(self, "start_date", start)
        object.__setattr__(self, "end_date", end)

    @classmethod
    def coerce(cls, value: DateRange | Mapping[str, DateLike] | tuple[DateLike, DateLike]) -> DateRange:
        if isinstance(value, DateRange):
            return value
        if isinstance(value, Mapping):
            try:
                start = value["startDate"] if "startDate" in value else value["start_date"]
                end = value["endDate"] if "endDate" in value else value["end_date"]
            except KeyError as exc:
                raise ParseError(f"Range mapping is missing {exc.args[0]!r}.") from exc
            return cls(start, end)
        start, end = value
        return cls(start, end)

    @property
    def days(self) -> int:
        return days_between(self.start_date, self.end_date)

    def dates(self) -> DateSpan:
        return DateSpan(self.start_date, self.end_date)

    def __contains__(self, value: object) -> bool:
        return value in self.dates()


# ── functional API ────────────────────────────────────────────────────────

def parse_date(text: str) -> CalendarDate:
    return CalendarDate.parse(text)


def format_date(d: DateLike) -> str:
    return str(CalendarDate.coerce(d))


def days_between(start: DateLike, end: DateLike) -> int:
    """Inclusive day count: ``days_between(d, d) == 1``."""
    return CalendarDate.coerce(end).ordinal - CalendarDate.coerce(start).ordinal + 1


def add_days(d: DateLike, n: int) -> CalendarDate:
    return CalendarDate.coerce(d).add_days(n)


def weekday(d: DateLike) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return CalendarDate.coerce(d).weekday


def is_weekend(d: DateLike) -> bool:
    return weekday(d) in (0, 6)


def first_day_of_month(year: int, month: int) -> CalendarDate:
    return CalendarDate(year, month, 1)


def last_day_of_month(year: int, month: int) -> CalendarDate:
    if not 1 <= month <= 12:
        raise ParseError(f"Month must be within 1..12; got {month}.")
    return CalendarDate(year, month, _stdlib_calendar.monthrange(year, month)[1])


def add_years(d: DateLike, n: int) -> CalendarDate:
    d = CalendarDate.coerce(d)
    year = d.year + n
    day = d.day
    if d.month == 2 and day == 29 and not _stdlib_calendar.isleap(year):
        day = 28
    return CalendarDate(year, d.month, day)


def enumerate_dates(start: DateLike, end: DateLike) -> DateSpan:
    return DateSpan(start, end)


def day_ordinals(start: DateLike, end: DateLike) -> np.ndarray:
    return DateSpan(start, end).ordinals()


def weekend_mask(ordinals: np.ndarray) -> np.ndarray:
    dow = np.asarray(ordinals, dtype=np.int64) % 7
    return (dow == 0) | (dow == 6)


def ordinal_array(dates: Any) -> np.ndarray:
    """Sorted unique ordinals of an iterable of date-likes."""
    return np.unique(
        np.fromiter((CalendarDate.coerce(d).ordinal for d in dates), dtype=np.int64)
    )
