from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from sukima.calendar import (
    CalendarDate,
    DateLike,
    DateRange,
    ordinal_array,
    weekend_mask,
)

logger = logging.getLogger(__name__)


def _to_dates(ordinals: np.ndarray) -> frozenset[CalendarDate]:
    return frozenset(CalendarDate.from_ordinal(int(o)) for o in ordinals)


def occupied_ordinals(ranges: Iterable[object]) -> np.ndarray:
    spans = [DateRange.coerce(r).dates().ordinals() for r in ranges]
    if not spans:
        return np.empty(0, dtype=np.int64)
    return np.unique(np.concatenate(spans))


def occupied_dates(ranges: Iterable[object]) -> frozenset[CalendarDate]:
    """Union of every date covered by ``ranges`` (inclusive at both ends)."""
    return _to_dates(occupied_ordinals(ranges))


def workday_dates(
    range_start: DateLike,
    range_end: DateLike,
    holidays: Iterable[DateLike],
) -> frozenset[CalendarDate]:
    """Dates of the window that are neither a weekend day nor a holiday."""
    ords = DateRange(range_start, range_end).dates().ordinals()
    off = weekend_mask(ords) | np.isin(ords, ordinal_array(holidays))
    return _to_dates(ords[~off])


def true_runs(mask: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Inclusive first/last indices of each maximal run of True in ``mask``."""
    padded = np.concatenate(([False], np.asarray(mask, dtype=bool), [False]))
    edges = np.diff(padded.astype(np.int8))
    return np.flatnonzero(edges == 1), np.flatnonzero(edges == -1) - 1


def detect_gaps(
    occupied: Iterable[DateLike],
    range_start: DateLike,
    range_end: DateLike,
) -> list[DateRange]:
    """
    Maximal runs of consecutive dates within ``[range_start, range_end]``
    that are absent from ``occupied``, in date order.
    """
    ords = DateRange(range_start, range_end).dates().ordinals()
    free = ~np.isin(ords, ordinal_array(occupied))
    firsts, lasts = true_runs(free)
    gaps = [
        DateRange(
            CalendarDate.from_ordinal(int(ords[i])),
            CalendarDate.from_ordinal(int(ords[j])),
        )
        for i, j in zip(firsts, lasts)
    ]
    logger.debug(
        "Scanned %d day(s): %d free, %d gap(s)", ords.size, int(free.sum()), len(gaps)
    )
    return gaps
