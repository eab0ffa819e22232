from __future__ import annotations


class CalendarError(Exception):
    """Base class for every error raised by the date engine."""


class ParseError(CalendarError, ValueError):
    """A date string is not well-formed ``YYYY-MM-DD`` or names no real day."""


class InvalidRangeError(CalendarError, ValueError):
    """A date range or scan window ends before it starts."""


class UnsupportedYearError(CalendarError, ValueError):
    """Holiday rules were requested for a year outside the supported span."""
