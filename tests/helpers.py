"""Shared builders and fakes for the prune tests."""

import calendar

from backup_pruner.errors import DeleteError
from backup_pruner.models import BackupRecord, parse_backup


def month_of_backups(year: int, month: int, suffix: str = '.tar.gz') -> list[str]:
    days = calendar.monthrange(year, month)[1]
    return [f"{year}{month:02d}{day:02d}{suffix}" for day in range(1, days + 1)]


def records(names) -> list[BackupRecord]:
    return [parse_backup(name) for name in names]


class RecordingDeleter:
    def __init__(self, fail_on: str | None = None):
        self.deleted = []
        self.fail_on = fail_on

    def delete(self, removal) -> None:
        if removal.name == self.fail_on:
            raise DeleteError(f"boom: {removal.name}")
        self.deleted.append(removal.name)


class StaticReader:
    def __init__(self, names):
        self.names = list(names)

    def read(self) -> list[BackupRecord]:
        return [b for b in records(self.names) if b is not None]
