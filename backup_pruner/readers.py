"""Backup listing backends."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from .dropbox import DropboxClient
from .errors import ReadError
from .models import BackupRecord, parse_backup

logger = logging.getLogger(__name__)


class BackupReader(Protocol):
    def read(self) -> list[BackupRecord]:
        """Return every backup in the listing, skipping names that are not backups."""
        ...


def _collect(names: Iterable[str]) -> list[BackupRecord]:
    backups = []
    for name in names:
        backup = parse_backup(name)
        if backup is None:
            logger.debug(f"Skipping non-backup entry: {name}")
            continue
        backups.append(backup)
    return backups


class DropboxBackupReader:
    def __init__(self, client: DropboxClient, folder: str):
        self.client = client
        self.folder = folder

    def read(self) -> list[BackupRecord]:
        logger.info(f"Querying {self.folder} ...")
        result = self.client.list_folder(self.folder)
        logger.info(f"Querying {self.folder} ... done")

        if result.get("has_more"):
            raise ReadError(f"Listing of {self.folder} is truncated (has_more); cursor paging is not supported")

        names = [
            entry["name"]
            for entry in result.get("entries", [])
            if entry.get(".tag") == "file"
        ]
        return _collect(names)


class ListingFileReader:
    """Reads backup names from a text file, one per line."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> list[BackupRecord]:
        try:
            with open(self.path, encoding='utf-8') as f:
                lines = [line.strip() for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Cannot read listing {self.path}: {e}") from e

        return _collect(line for line in lines if line)


class DirectoryReader:
    """Lists regular files directly inside a directory."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> list[BackupRecord]:
        if not self.path.is_dir():
            raise ReadError(f"Backup directory not found: {self.path}")
        try:
            names = sorted(p.name for p in self.path.iterdir() if p.is_file())
        except OSError as e:
            raise ReadError(f"Cannot list {self.path}: {e}") from e

        return _collect(names)
