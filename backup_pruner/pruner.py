"""Compute and carry out backup removals for an age-based retention schedule."""

import logging
from collections.abc import Sequence

from .calendar_index import CalendarIndex
from .deleters import BackupDeleter
from .models import BackupRecord, Date, Removal, today_utc
from .policy import RetentionPolicy, apply_policy, policy_for
from .readers import BackupReader

logger = logging.getLogger(__name__)


def plan_removals(backups: Sequence[BackupRecord], today: Date) -> list[Removal]:
    """Work out which backups the retention schedule drops.

    Removals come out bucket by bucket (years in listing order, months
    ascending), days ascending within a bucket. The order is not sorted
    globally.
    """
    index = CalendarIndex.build(backups)
    positions: list[int] = []
    for year, month, bucket in index.buckets():
        if not any(slot is not None for slot in bucket):
            continue
        policy = policy_for(today, year, month)
        to_remove = apply_policy(policy, bucket)
        if policy is not RetentionPolicy.DAILY:
            logger.debug(f"{year}/{month:02d}: {policy.value}, {len(to_remove)} to remove")
        positions.extend(to_remove)

    return [Removal(backups[i].name) for i in positions]


def prune(
    reader: BackupReader,
    deleter: BackupDeleter,
    today: Date | None = None,
    dry_run: bool = False,
) -> list[Removal]:
    """Read backups, plan removals and delete them one by one.

    In dry run the removals are only reported and the deleter is never
    called. A DeleteError stops the run at the failing backup; backups
    deleted before it stay deleted.

    Returns:
        The removals that were reported (dry run) or deleted
    """
    if today is None:
        today = today_utc()
    logger.info(f"today's date: {today}")

    backups = reader.read()
    logger.info(f"Found {len(backups)} backup(s)")

    removals = plan_removals(backups, today)
    if not removals:
        logger.info("Nothing to remove")
        return []

    if dry_run:
        for removal in removals:
            logger.info(f"Dry run removing: {removal.name}")
        return removals

    for removal in removals:
        deleter.delete(removal)

    logger.info(f"Cleanup complete: {len(removals)} old backup(s) removed")
    return removals
