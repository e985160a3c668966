"""Age-based retention policies and the day selection they imply."""

import enum
import logging
from collections.abc import Sequence

from .calendar_index import MonthBucket
from .models import Date

logger = logging.getLogger(__name__)

# Age thresholds in months
WEEKLY_AFTER = 2
BIMONTHLY_AFTER = 4
MONTHLY_AFTER = 9


class RetentionPolicy(enum.Enum):
    DAILY = 'daily'
    WEEKLY = 'weekly'
    BIMONTHLY = 'bimonthly'
    MONTHLY_FIRST = 'monthly-first'


# Anchor days of month each thinning policy keeps, ascending
KEEP_DAYS: dict[RetentionPolicy, tuple[int, ...]] = {
    RetentionPolicy.WEEKLY: (1, 8, 15, 22, 29),
    RetentionPolicy.BIMONTHLY: (1, 15),
    RetentionPolicy.MONTHLY_FIRST: (1,),
}


def policy_for(today: Date, year: int, month: int) -> RetentionPolicy:
    """Pick the retention policy for the (year, month) bucket as seen from today."""
    if year > today.year:
        return RetentionPolicy.DAILY

    # Shift today's month into the bucket's year so only a month delta remains
    today_month = today.month + 12 * (today.year - year)
    if today_month <= month:
        return RetentionPolicy.DAILY

    age = today_month - month
    if age < WEEKLY_AFTER:
        return RetentionPolicy.DAILY
    if age < BIMONTHLY_AFTER:
        return RetentionPolicy.WEEKLY
    if age < MONTHLY_AFTER:
        return RetentionPolicy.BIMONTHLY
    return RetentionPolicy.MONTHLY_FIRST


def keep_days(bucket: MonthBucket, days_to_keep: Sequence[int]) -> list[int]:
    """Return the populated slots of bucket that fall before the last anchor day.

    Anchor days are kept. The walk stops as soon as the last anchor has
    been passed, so days after it are never proposed for removal.
    """
    result = []
    anchors = iter(days_to_keep)
    next_keep = next(anchors, None)
    for i, position in enumerate(bucket):
        if next_keep is None:
            break
        if i + 1 == next_keep:
            next_keep = next(anchors, None)
            continue
        if position is not None:
            result.append(position)
    return result


def apply_policy(policy: RetentionPolicy, bucket: MonthBucket) -> list[int]:
    """Positions of the backups in bucket that policy marks for removal."""
    if policy is RetentionPolicy.DAILY:
        return []
    return keep_days(bucket, KEEP_DAYS[policy])
