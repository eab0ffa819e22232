from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sukima.anniversary import AnniversaryEntry, ExpandedAnniversary, expand_anniversaries
from sukima.calendar import CalendarDate, DateLike, DateRange, add_years
from sukima.holidays import Holiday, holidays_in_range
from sukima.vacancy import VacancyPolicy, VacantPeriod, calculate_vacant_periods

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_YEARS = 2


@dataclass(frozen=True, slots=True)
class WindowPlan:
    range_start: CalendarDate
    range_end: CalendarDate
    holidays: tuple[Holiday, ...]
    vacant_periods: tuple[VacantPeriod, ...]
    anniversaries: tuple[ExpandedAnniversary, ...] = ()

    @property
    def long_weekends(self) -> tuple[VacantPeriod, ...]:
        return tuple(p for p in self.vacant_periods if p.is_long_weekend)


def window_end(range_start: DateLike, years: int = DEFAULT_WINDOW_YEARS) -> CalendarDate:
    """Default end of a scan window starting at ``range_start``."""
    return add_years(range_start, years)


def plan_window(
    range_start: DateLike,
    occupied_ranges: Iterable[object] = (),
    range_end: Optional[DateLike] = None,
    *,
    anniversaries: Iterable[AnniversaryEntry] = (),
    policy: Optional[VacancyPolicy] = None,
) -> WindowPlan:
    """
    Holidays, vacant periods and anniversaries of one scan window.

    ``occupied_ranges`` are the already-resolved event and blocked-period
    ranges; ``range_end`` defaults to two years after ``range_start``.
    """
    start = CalendarDate.coerce(range_start)
    end = window_end(start) if range_end is None else CalendarDate.coerce(range_end)
    window = DateRange(start, end)

    holidays = holidays_in_range(window.start_date, window.end_date)
    vacant = calculate_vacant_periods(
        occupied_ranges, holidays, window.start_date, window.end_date, policy=policy
    )
    expanded = expand_anniversaries(anniversaries, window.start_date, window.end_date)

    logger.info(
        "Planned %s..%s: %d holiday(s), %d vacant period(s), %d anniversary(ies)",
        window.start_date, window.end_date, len(holidays), len(vacant), len(expanded),
    )
    return WindowPlan(
        range_start=window.start_date,
        range_end=window.end_date,
        holidays=holidays,
        vacant_periods=tuple(vacant),
        anniversaries=tuple(expanded),
    )
