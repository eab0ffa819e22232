from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional

import numpy as np

from sukima.calendar import (
    CalendarDate,
    DateLike,
    DateRange,
    last_day_of_month,
    ordinal_array,
    weekend_mask,
)
from sukima.holidays import HolidayLike, holiday_dates
from sukima.vacancy.gaps import detect_gaps, occupied_dates, workday_dates
from sukima.vacancy.policy import DEFAULT_MIN_DAYS, MAX_VACANT_DAYS, VacancyPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VacantPeriod:
    start_date: CalendarDate
    end_date: CalendarDate
    days: int
    is_long_weekend: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "startDate": str(self.start_date),
            "endDate": str(self.end_date),
            "days": self.days,
            "isLongWeekend": self.is_long_weekend,
        }


class DayOffIndex:
    """
    Prefix counts of weekend days and holidays over a fixed window, so that
    "does this chunk contain a weekend/holiday" is answered in O(1).
    """

    def __init__(
        self,
        range_start: DateLike,
        range_end: DateLike,
        holidays: Iterable[HolidayLike],
    ) -> None:
        window = DateRange(range_start, range_end)
        ords = window.dates().ordinals()
        hols = ordinal_array(holiday_dates(holidays))

        self._window = window
        self._origin: int = window.start_date.ordinal
        self._weekend_prefix = self._prefix(weekend_mask(ords))
        self._holiday_prefix = self._prefix(np.isin(ords, hols))

    @staticmethod
    def _prefix(mask: np.ndarray) -> np.ndarray:
        prefix = np.zeros(mask.size + 1, dtype=np.int64)
        np.cumsum(mask, out=prefix[1:])
        return prefix

    def _bounds(self, start: DateLike, end: DateLike) -> tuple[int, int]:
        chunk = DateRange(start, end)
        if chunk.start_date < self._window.start_date or chunk.end_date > self._window.end_date:
            raise ValueError(
                f"{chunk.start_date}..{chunk.end_date} lies outside the indexed window "
                f"{self._window.start_date}..{self._window.end_date}."
            )
        lo = chunk.start_date.ordinal - self._origin
        hi = chunk.end_date.ordinal - self._origin + 1
        return lo, hi

    def weekend_days(self, start: DateLike, end: DateLike) -> int:
        lo, hi = self._bounds(start, end)
        return int(self._weekend_prefix[hi] - self._weekend_prefix[lo])

    def holiday_days(self, start: DateLike, end: DateLike) -> int:
        lo, hi = self._bounds(start, end)
        return int(self._holiday_prefix[hi] - self._holiday_prefix[lo])

    def contains_weekend(self, start: DateLike, end: DateLike) -> bool:
        return self.weekend_days(start, end) > 0

    def contains_holiday(self, start: DateLike, end: DateLike) -> bool:
        return self.holiday_days(start, end) > 0

    def contains_day_off(self, start: DateLike, end: DateLike) -> bool:
        return self.contains_weekend(start, end) or self.contains_holiday(start, end)


# ── splitting ─────────────────────────────────────────────────────────────

def split_by_month(start: DateLike, end: DateLike) -> list[DateRange]:
    """Cut ``[start, end]`` so that no piece straddles two calendar months."""
    gap = DateRange(start, end)
    chunks: list[DateRange] = []
    cursor = gap.start_date
    while cursor <= gap.end_date:
        month_end = min(last_day_of_month(cursor.year, cursor.month), gap.end_date)
        chunks.append(DateRange(cursor, month_end))
        cursor = month_end.add_days(1)
    return chunks


def split_by_max_days(
    start: DateLike, end: DateLike, max_days: int = MAX_VACANT_DAYS
) -> list[DateRange]:
    """Consecutive windows of ``max_days``; the last one takes the remainder."""
    if max_days < 1:
        raise ValueError(f"max_days must be at least 1; got {max_days}.")
    chunk = DateRange(start, end)
    last = chunk.end_date.ordinal
    return [
        DateRange(
            CalendarDate.from_ordinal(first),
            CalendarDate.from_ordinal(min(first + max_days - 1, last)),
        )
        for first in range(chunk.start_date.ordinal, last + 1, max_days)
    ]


# ── classification ────────────────────────────────────────────────────────

def _is_valid(index: DayOffIndex, chunk: DateRange, min_days: int) -> bool:
    return chunk.days >= min_days and index.contains_day_off(chunk.start_date, chunk.end_date)


def _is_long_weekend(index: DayOffIndex, chunk: DateRange, policy: VacancyPolicy) -> bool:
    if not policy.long_weekend_min_days <= chunk.days <= policy.long_weekend_max_days:
        return False
    return index.contains_weekend(chunk.start_date, chunk.end_date) and index.contains_holiday(
        chunk.start_date, chunk.end_date
    )


def _make(index: DayOffIndex, chunk: DateRange, policy: VacancyPolicy) -> VacantPeriod:
    return VacantPeriod(
        start_date=chunk.start_date,
        end_date=chunk.end_date,
        days=chunk.days,
        is_long_weekend=_is_long_weekend(index, chunk, policy),
    )


def is_valid_vacant_period(
    start: DateLike,
    end: DateLike,
    holidays: Iterable[HolidayLike],
    min_days: int = DEFAULT_MIN_DAYS,
) -> bool:
    """At least ``min_days`` long and containing a weekend day or a holiday."""
    return _is_valid(DayOffIndex(start, end, holidays), DateRange(start, end), min_days)


def is_long_weekend(
    start: DateLike,
    end: DateLike,
    holidays: Iterable[HolidayLike],
    *,
    policy: Optional[VacancyPolicy] = None,
) -> bool:
    """
    True for a 3–5 day run holding both a weekend day and a holiday.  Runs of
    six days or more are large blocks (e.g. Golden Week), never long weekends.
    """
    policy = policy or VacancyPolicy()
    return _is_long_weekend(DayOffIndex(start, end, holidays), DateRange(start, end), policy)


def make_vacant_period(
    start: DateLike,
    end: DateLike,
    holidays: Iterable[HolidayLike],
    *,
    policy: Optional[VacancyPolicy] = None,
) -> VacantPeriod:
    policy = policy or VacancyPolicy()
    return _make(DayOffIndex(start, end, holidays), DateRange(start, end), policy)


# ── pipeline ──────────────────────────────────────────────────────────────

def calculate_vacant_periods(
    occupied_ranges: Iterable[object],
    holidays: Iterable[HolidayLike],
    range_start: DateLike,
    range_end: DateLike,
    min_days: Optional[int] = None,
    *,
    policy: Optional[VacancyPolicy] = None,
) -> list[VacantPeriod]:
    """
    Free date runs of ``[range_start, range_end]`` usable for trip planning.

    Gaps between the occupied ranges are cut at month boundaries, then into
    pieces of at most ``policy.max_days``; only pieces of at least
    ``min_days`` that contain a weekend day or holiday survive.  ``min_days``
    overrides ``policy.min_days`` when given.
    """
    policy = policy or VacancyPolicy()
    if min_days is not None and min_days != policy.min_days:
        policy = replace(policy, min_days=min_days)

    window = DateRange(range_start, range_end)
    hols = holiday_dates(holidays)

    occupied = occupied_dates(occupied_ranges)
    if policy.days_off_only:
        occupied = occupied | workday_dates(window.start_date, window.end_date, hols)

    raw_gaps = detect_gaps(occupied, window.start_date, window.end_date)
    chunks = [
        piece
        for gap in raw_gaps
        for month in split_by_month(gap.start_date, gap.end_date)
        for piece in split_by_max_days(month.start_date, month.end_date, policy.max_days)
    ]

    index = DayOffIndex(window.start_date, window.end_date, hols)
    periods = [_make(index, c, policy) for c in chunks if _is_valid(index, c, policy.min_days)]
    logger.debug(
        "%s..%s: %d gap(s) -> %d chunk(s) -> %d vacant period(s)",
        window.start_date, window.end_date, len(raw_gaps), len(chunks), len(periods),
    )
    return periods
