"""CLI entry point for pruning dated backups."""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .deleters import BackupDeleter, DropboxDeleter, LocalDeleter, NoopDeleter
from .dropbox import DEFAULT_TIMEOUT, DropboxClient
from .errors import ConfigError, PruneError
from .pruner import prune
from .readers import BackupReader, DirectoryReader, DropboxBackupReader, ListingFileReader

logger = logging.getLogger(__name__)

READ_FROM = {
    'dropbox': 'dropbox',
    'dbx': 'dropbox',
    'filesystem': 'filesystem',
    'fs': 'filesystem',
    'directory': 'directory',
    'dir': 'directory',
}

TRUTHY = {'1', 'true', 'yes', 'on'}


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Prune dated backups by age-based retention')
    parser.add_argument(
        '--read-from',
        required=True,
        choices=sorted(READ_FROM),
        help='Where to list backups from',
    )
    parser.add_argument('--dbx-path', default=os.environ.get('DBX_PATH', ''), help='Dropbox folder to prune')
    parser.add_argument('--fs-path', default=os.environ.get('FS_PATH', ''), help='Listing file or backup directory')
    parser.add_argument('--dry-run', action='store_true', help='Only report what would be removed')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    return parser


def build_backends(args: argparse.Namespace) -> tuple[BackupReader, BackupDeleter, DropboxClient | None]:
    """Creates the reader/deleter pair for --read-from.

    Returns:
        (reader, deleter, client) where client is the shared Dropbox
        client to close after the run, or None
    """
    source = READ_FROM[args.read_from]

    if source == 'dropbox':
        if not args.dbx_path:
            raise ConfigError("missing --dbx-path")
        token = os.environ.get('DBX_TOKEN')
        if not token:
            raise ConfigError("Missing required env var: DBX_TOKEN")
        try:
            timeout = float(os.environ.get('DBX_TIMEOUT', DEFAULT_TIMEOUT))
        except ValueError as e:
            raise ConfigError(f"Invalid DBX_TIMEOUT: {e}") from e
        client = DropboxClient(token, timeout=timeout)
        return DropboxBackupReader(client, args.dbx_path), DropboxDeleter(client, args.dbx_path), client

    if not args.fs_path:
        raise ConfigError("missing --fs-path")
    path = Path(args.fs_path)
    if source == 'filesystem':
        return ListingFileReader(path), NoopDeleter(), None
    return DirectoryReader(path), LocalDeleter(path), None


def run(args: argparse.Namespace) -> bool:
    """Runs one prune pass. Returns False if it was aborted."""
    dry_run = args.dry_run or os.environ.get('BACKUP_PRUNE_DRY_RUN', '').lower() in TRUTHY
    client = None
    try:
        reader, deleter, client = build_backends(args)
        prune(reader, deleter, dry_run=dry_run)
        return True
    except PruneError as e:
        logger.error(f"Prune failed: {e}")
        return False
    finally:
        if client is not None:
            client.close()


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    if args.verbose:
        logger.debug("Verbose logging enabled.")

    if not run(args):
        sys.exit(1)


if __name__ == "__main__":
    main()
