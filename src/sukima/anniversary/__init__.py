"""
sukima.anniversary
~~~~~~~~~~~~~~~~~~

Yearly anniversaries (birthdays, wedding days, ...) are stored as month/day
only and expanded into concrete dates for a display window::

    from sukima.anniversary import AnniversaryEntry, expand_anniversaries

    wedding = AnniversaryEntry(id=1, title="Wedding", month=6, day=12)
    expand_anniversaries([wedding], "2026-01-01", "2027-12-31")
    # → occurrences on 2026-06-12 and 2027-06-12
"""

from sukima.anniversary.anniversary import (
    AnniversaryEntry,
    ExpandedAnniversary,
    expand_anniversaries,
)

__all__ = ["AnniversaryEntry", "ExpandedAnniversary", "expand_anniversaries"]
