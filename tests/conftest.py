import os
from datetime import date, datetime, timedelta

import pytest


def noon_timestamp(day: date) -> float:
    """Local noon of day, far from any midnight boundary."""
    return datetime(day.year, day.month, day.day, 12, 0).timestamp()


@pytest.fixture
def make_file():
    def _make(path, day: date, content: str = "x"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        ts = noon_timestamp(day)
        os.utime(path, (ts, ts))
        return path

    return _make


@pytest.fixture
def noon():
    return noon_timestamp


@pytest.fixture
def yesterday():
    return date.today() - timedelta(days=1)
