"""Exceptions raised while pruning backups."""


class PruneError(Exception):
    """Base class for errors that abort a prune run."""


class ConfigError(PruneError):
    """Missing or invalid configuration."""


class ReadError(PruneError):
    """Listing the backups failed or returned an incomplete result."""


class DeleteError(PruneError):
    """Deleting a single backup failed."""
