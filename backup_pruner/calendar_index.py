"""Year -> month -> day index over a list of backups."""

import logging
from collections.abc import Iterator, Sequence

from .models import BackupRecord

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
DAYS_PER_MONTH = 31

# One slot per day of month, holding the index of the backup in the source list
MonthBucket = list[int | None]


def _empty_year() -> list[MonthBucket]:
    return [[None] * DAYS_PER_MONTH for _ in range(MONTHS_PER_YEAR)]


class CalendarIndex:
    """Buckets backups by year, month and day.

    Day slots store positions into the backup list the index was built
    from, so callers look names up in that list. Only one backup is kept
    per date: a later backup with the same date replaces the earlier one.
    """

    def __init__(self) -> None:
        self.years: dict[int, list[MonthBucket]] = {}

    @classmethod
    def build(cls, backups: Sequence[BackupRecord]) -> 'CalendarIndex':
        index = cls()
        for i, backup in enumerate(backups):
            index.add(i, backup)
        return index

    def add(self, position: int, backup: BackupRecord) -> None:
        date = backup.date
        if not 1 <= date.month <= MONTHS_PER_YEAR or not 1 <= date.day <= DAYS_PER_MONTH:
            raise ValueError(f"Date out of range for {backup.name}: {date}")

        months = self.years.setdefault(date.year, _empty_year())
        slot = months[date.month - 1]
        previous = slot[date.day - 1]
        if previous is not None:
            logger.debug(f"Backup #{position} replaces #{previous} on {date}")
        slot[date.day - 1] = position

    def buckets(self) -> Iterator[tuple[int, int, MonthBucket]]:
        """Yields (year, month, bucket) in first-seen year order, months ascending."""
        for year, months in self.years.items():
            for month_idx, bucket in enumerate(months):
                yield year, month_idx + 1, bucket
