import pytest

from backup_pruner.models import Date

from helpers import month_of_backups


@pytest.fixture
def today() -> Date:
    return Date(2023, 9, 15)


@pytest.fixture
def january_2023() -> list[str]:
    return month_of_backups(2023, 1)


@pytest.fixture
def two_years() -> list[str]:
    """Daily backups from 2022-01-01 through 2023-09-30."""
    names = []
    for year, month in [(2022, m) for m in range(1, 13)] + [(2023, m) for m in range(1, 10)]:
        names.extend(month_of_backups(year, month))
    return names
