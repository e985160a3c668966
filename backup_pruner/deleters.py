"""Backup deletion backends."""

import logging
from pathlib import Path
from typing import Protocol

from .dropbox import DropboxClient
from .errors import DeleteError
from .models import Removal

logger = logging.getLogger(__name__)


class BackupDeleter(Protocol):
    def delete(self, removal: Removal) -> None:
        """Delete one backup or raise DeleteError."""
        ...


class DropboxDeleter:
    def __init__(self, client: DropboxClient, folder: str):
        self.client = client
        self.folder = folder.rstrip('/')

    def delete(self, removal: Removal) -> None:
        path = f"{self.folder}/{removal.name}"
        logger.info(f"dbx delete: {path} ...")
        self.client.delete(path)
        logger.info("dbx delete: done")


class LocalDeleter:
    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def delete(self, removal: Removal) -> None:
        path = self.directory / removal.name
        try:
            path.unlink()
        except OSError as e:
            raise DeleteError(f"Cannot delete {path}: {e}") from e
        logger.info(f"Deleted old backup: {removal.name}")


class NoopDeleter:
    """Stands in for deletion when the listing has no backing storage."""

    def delete(self, removal: Removal) -> None:
        logger.info(f"Noop remove: {removal.name}")
