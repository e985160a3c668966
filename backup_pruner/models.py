"""Backup records and date parsing from YYYYMMDD-prefixed names."""

import re
from datetime import datetime, timezone
from typing import NamedTuple

# Shortest name we accept, e.g. "20230101.gz"
MIN_NAME_LENGTH = 11

_DATE_PREFIX = re.compile(r'(\d{4})(\d{2})(\d{2})', re.ASCII)


class Date(NamedTuple):
    """Calendar date as a plain (year, month, day) triple, ordered field by field."""
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}/{self.month}/{self.day}"


class BackupRecord(NamedTuple):
    name: str
    date: Date


def parse_date(name: str) -> Date | None:
    """Parse the leading YYYYMMDD of a backup name.

    Returns None when the name is not a backup: too short, non-digit
    characters in the date prefix, or a month/day outside 1-12 / 1-31.
    Impossible dates such as Feb 31 are still accepted.
    """
    if len(name) < MIN_NAME_LENGTH:
        return None
    match = _DATE_PREFIX.match(name)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    return Date(year, month, day)


def parse_backup(name: str) -> BackupRecord | None:
    date = parse_date(name)
    if date is None:
        return None
    return BackupRecord(name, date)


def today_utc() -> Date:
    """Today's calendar date in UTC."""
    now = datetime.now(timezone.utc)
    return Date(now.year, now.month, now.day)


class Removal(NamedTuple):
    """A backup name staged for deletion."""
    name: str
