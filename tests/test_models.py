import pytest

from backup_pruner.models import BackupRecord, Date, parse_backup, parse_date, today_utc


def test_parse_date_from_archive_name():
    assert parse_date("20230115.tar.gz") == Date(2023, 1, 15)


def test_parse_date_only_needs_eleven_chars():
    assert parse_date("20230115.gz") == Date(2023, 1, 15)
    assert parse_date("20230115.z") is None


@pytest.mark.parametrize("name", [
    "",
    "README.md",
    "2023011",
    "20230115",
    "notes-2023.txt",
    "2023-01-15.tar.gz",
    "2023O115.tar.gz",
    "+0230115.tar.gz",
    "２０２３0115.tar.gz",
])
def test_not_a_backup(name):
    assert parse_date(name) is None
    assert parse_backup(name) is None


@pytest.mark.parametrize("name", ["20231399.tar.gz", "20230001.tar.gz", "20230100.tar.gz", "20230132.tar.gz"])
def test_out_of_range_month_or_day_is_not_a_backup(name):
    assert parse_date(name) is None


def test_impossible_calendar_dates_are_accepted():
    assert parse_date("20230231.tar.gz") == Date(2023, 2, 31)


def test_dates_order_by_year_month_day():
    assert Date(2022, 12, 31) < Date(2023, 1, 1) < Date(2023, 1, 2) < Date(2023, 2, 1)
    assert str(Date(2023, 9, 15)) == "2023/9/15"


def test_parse_backup_keeps_name():
    assert parse_backup("20230115.tar.gz") == BackupRecord("20230115.tar.gz", Date(2023, 1, 15))


def test_today_utc_is_a_date():
    today = today_utc()
    assert 1 <= today.month <= 12
    assert 1 <= today.day <= 31
