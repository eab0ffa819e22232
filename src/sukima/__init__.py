"""
sukima
~~~~~~

Calendar date engine for family trip planning: Japanese national holidays
and the vacant periods left between already-scheduled events.

Subpackages
-----------
sukima.calendar     Naive dates, ranges and their arithmetic.
sukima.holidays     Japanese national holidays, 1980–2099.
sukima.vacancy      Free-run detection, splitting and long-weekend labels.
sukima.anniversary  Month/day anniversaries expanded into a window.
sukima.planner      Everything above for one scan window.
"""

from sukima.calendar import CalendarDate, CalendarError, DateRange, ParseError
from sukima.holidays import Holiday, holidays_in_range
from sukima.vacancy import VacancyPolicy, VacantPeriod, calculate_vacant_periods

__version__ = "0.1.0"

__all__ = [
    "CalendarDate",
    "CalendarError",
    "DateRange",
    "Holiday",
    "ParseError",
    "VacancyPolicy",
    "VacantPeriod",
    "calculate_vacant_periods",
    "holidays_in_range",
]
