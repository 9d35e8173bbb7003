from __future__ import annotations

from datetime import date

from app.models.usage import Reading, Resolution
from app.services.window import WindowedReader
from tests.fakes import FakeUsageRepository, load_readings


def _reader_with(rows: list[tuple[int, int, int, str]]) -> WindowedReader:
    repo = FakeUsageRepository()
    load_readings(repo, user_id=1, resolution=Resolution.DAILY, rows=rows)
    return WindowedReader(repo)


def test_window_starts_inclusively_on_start_date() -> None:
    reader = _reader_with(
        [
            (1, -1, 10, "2014-02-01 23:59:59"),
            (2, -10, 100, "2014-02-02 00:00:00"),
            (3, 20, 89, "2014-02-02 18:30:00"),
        ]
    )

    rows = reader.query(1, Resolution.DAILY, date(2014, 2, 2), 10)

    assert rows == [Reading("2014-02-02", -10, 100), Reading("2014-02-02", 20, 89)]


def test_window_is_ordered_and_capped() -> None:
    reader = _reader_with(
        [
            (1, 4, 40, "2014-03-04 08:00:00"),
            (2, 1, 10, "2014-03-01 08:00:00"),
            (3, 3, 30, "2014-03-03 08:00:00"),
            (4, 2, 20, "2014-03-02 08:00:00"),
        ]
    )

    rows = reader.query(1, Resolution.DAILY, date(2014, 3, 1), 3)

    assert [r.date for r in rows] == ["2014-03-01", "2014-03-02", "2014-03-03"]
    assert all(r.date >= "2014-03-01" for r in rows)


def test_window_rows_are_date_temperature_consumption() -> None:
    reader = _reader_with([(1, -7, 123, "2014-02-06 12:02:13")])

    (row,) = reader.query(1, Resolution.DAILY, date(2014, 1, 1), 1)

    assert tuple(row) == ("2014-02-06", -7, 123)


def test_window_after_last_reading_is_empty() -> None:
    reader = _reader_with([(1, -1, 10, "2014-02-01 12:02:13")])

    assert reader.query(1, Resolution.DAILY, date(2014, 2, 2), 5) == []
