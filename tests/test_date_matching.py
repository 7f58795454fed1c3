from datetime import date

import pytest

from mdfiles.date_matching import matches, modification_date, parse_date, today
from mdfiles.models import CandidateEntry, ConfigError, SearchConfig

TARGET = date(2025, 1, 1)


@pytest.mark.parametrize(
    "value, expected",
    [("2025-12-25", date(2025, 12, 25)), ("2024-01-01", date(2024, 1, 1))],
)
def test_parse_date_valid(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", ["25-12-2025", "2025-13-45", "not-a-date", ""])
def test_parse_date_invalid(value):
    with pytest.raises(ConfigError, match="Invalid date format"):
        parse_date(value)


def test_today_is_local_date():
    assert today() == date.today()


def test_modification_date_local_calendar_day(noon):
    assert modification_date(noon(TARGET)) == TARGET


def test_modification_date_unavailable():
    assert modification_date(None) is None
    assert modification_date(1e20) is None


def _config(suffix=".go"):
    return SearchConfig(target_date=TARGET, suffix=suffix)


def test_matches_requires_file_suffix_and_date(noon):
    ts = noon(TARGET)
    assert matches(CandidateEntry("./a/foo.go", True, ts), _config())
    assert not matches(CandidateEntry("./a/foo.go", False, ts), _config())
    assert not matches(CandidateEntry("./a/foo.py", True, ts), _config())
    assert not matches(CandidateEntry("./a/foo.go", True, noon(date(2025, 1, 2))), _config())
    assert not matches(CandidateEntry("./a/foo.go", True, None), _config())


def test_suffix_is_case_sensitive_tail_of_name(noon):
    ts = noon(TARGET)
    assert not matches(CandidateEntry("foo.Go", True, ts), _config())
    assert not matches(CandidateEntry("x.md.bak", True, ts), _config(".md"))
    assert matches(CandidateEntry("notes_backup", True, ts), _config("backup"))


def test_suffix_checks_file_name_not_directory(noon):
    ts = noon(TARGET)
    assert not matches(CandidateEntry("./dir.go/readme", True, ts), _config())


def test_empty_suffix_matches_every_file(noon):
    assert matches(CandidateEntry("./Makefile", True, noon(TARGET)), _config(""))
