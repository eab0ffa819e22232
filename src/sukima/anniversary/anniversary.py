from __future__ import annotations

import calendar as _stdlib_calendar
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sukima.calendar import CalendarDate, DateLike, DateRange, ParseError

logger = logging.getLogger(__name__)

# Any leap year; used only to validate a month/day pair.
_LEAP_YEAR = 2000


@dataclass(frozen=True, slots=True)
class AnniversaryEntry:
    """A yearly date stored as month/day only."""

    id: int
    title: str
    month: int
    day: int
    memo: str = ""

    def __post_init__(self) -> None:
        try:
            CalendarDate(_LEAP_YEAR, self.month, self.day)
        except ParseError as exc:
            raise ParseError(
                f"Anniversary {self.title!r} has no valid month/day ({self.month}/{self.day})."
            ) from exc

    def occurrence(self, year: int) -> Optional[CalendarDate]:
        # 29 Feb only recurs in leap years.
        if self.month == 2 and self.day == 29 and not _stdlib_calendar.isleap(year):
            return None
        return CalendarDate(year, self.month, self.day)


@dataclass(frozen=True, slots=True)
class ExpandedAnniversary:
    entry: AnniversaryEntry
    date: CalendarDate

    @property
    def title(self) -> str:
        return self.entry.title


def expand_anniversaries(
    entries: Iterable[AnniversaryEntry],
    range_start: DateLike,
    range_end: DateLike,
) -> list[ExpandedAnniversary]:
    """
    One occurrence per entry and year of the window, restricted to
    ``[range_start, range_end]``.  Ordered by entry, then year.
    """
    window = DateRange(range_start, range_end)
    years = range(window.start_date.year, window.end_date.year + 1)

    expanded: list[ExpandedAnniversary] = []
    for entry in entries:
        for year in years:
            d = entry.occurrence(year)
            if d is not None and d in window:
                expanded.append(ExpandedAnniversary(entry, d))

    logger.debug("Expanded anniversaries over %d year(s) -> %d occurrence(s)", len(years), len(expanded))
    return expanded
