import pytest

from backup_pruner.calendar_index import CalendarIndex
from backup_pruner.models import BackupRecord, Date

from helpers import records


def test_build_stores_positions_by_date():
    backups = records(["20230105.tar.gz", "20221231.tar.gz", "20230210.tar.gz"])
    index = CalendarIndex.build(backups)

    assert index.years[2023][0][4] == 0
    assert index.years[2022][11][30] == 1
    assert index.years[2023][1][9] == 2
    assert index.years[2023][2] == [None] * 31
    assert 2021 not in index.years


def test_years_iterate_in_first_seen_order():
    backups = records(["20230105.tar.gz", "20221231.tar.gz", "20230210.tar.gz"])
    index = CalendarIndex.build(backups)

    assert list(index.years) == [2023, 2022]
    buckets = list(index.buckets())
    assert len(buckets) == 24
    assert [(y, m) for y, m, _ in buckets[:2]] == [(2023, 1), (2023, 2)]
    assert [(y, m) for y, m, _ in buckets[12:14]] == [(2022, 1), (2022, 2)]


def test_duplicate_date_keeps_last_backup():
    backups = records(["20230105.tar.gz", "20230105-full.tar.gz"])
    index = CalendarIndex.build(backups)

    assert index.years[2023][0][4] == 1


@pytest.mark.parametrize("date", [Date(2023, 0, 1), Date(2023, 13, 1), Date(2023, 1, 0), Date(2023, 1, 32)])
def test_out_of_range_record_is_rejected(date):
    with pytest.raises(ValueError):
        CalendarIndex.build([BackupRecord("bad.tar.gz", date)])
