from __future__ import annotations

from dataclasses import dataclass

MAX_VACANT_DAYS = 30
DEFAULT_MIN_DAYS = 3
LONG_WEEKEND_MIN_DAYS = 3
LONG_WEEKEND_MAX_DAYS = 5


@dataclass(frozen=True, slots=True)
class VacancyPolicy:
    """
    Tunables of the vacant-period scan.

    min_days               shortest run kept after splitting.
    max_days               longest run emitted; longer month chunks are cut.
    long_weekend_min_days  inclusive lower bound for a long weekend.
    long_weekend_max_days  inclusive upper bound; longer runs are "large blocks".
    days_off_only          treat ordinary working days (neither weekend nor
                           holiday) as occupied, so that only consecutive
                           days off form vacant periods.
    """

    min_days: int = DEFAULT_MIN_DAYS
    max_days: int = MAX_VACANT_DAYS
    long_weekend_min_days: int = LONG_WEEKEND_MIN_DAYS
    long_weekend_max_days: int = LONG_WEEKEND_MAX_DAYS
    days_off_only: bool = True

    def __post_init__(self) -> None:
        if self.min_days < 1:
            raise ValueError(f"min_days must be at least 1; got {self.min_days}.")
        if self.max_days < 1:
            raise ValueError(f"max_days must be at least 1; got {self.max_days}.")
        if not 1 <= self.long_weekend_min_days <= self.long_weekend_max_days:
            raise ValueError(
                "Long-weekend bounds must satisfy 1 <= min <= max; got "
                f"{self.long_weekend_min_days}..{self.long_weekend_max_days}."
            )
