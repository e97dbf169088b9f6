"""Tests for the CSV/Excel efficiency repository."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from cosy_efficiency.domain.entities.daily_record import DailyRecord
from cosy_efficiency.infrastructure.repositories.file_efficiency_repository import (
    FileEfficiencyRepository,
)


def make_raw(day: int, kwh: str = "10.0", outdoor: str = "5.0", **kwargs) -> DailyRecord:
    return DailyRecord(
        date=date(2025, 1, day),
        electricity_kwh=Decimal(kwh),
        outdoor_avg_c=Decimal(outdoor),
        **kwargs,
    )


def test_missing_file_is_empty(repository, data_file):
    """A fresh store starts empty and does not create the file until saved."""
    assert repository.get_records() == []
    assert not data_file.exists()


def test_add_assigns_incrementing_ids(repository):
    first = make_raw(1)
    second = make_raw(2)
    repository.add(first)
    repository.add(second)
    assert (first.id, second.id) == (1, 2)


def test_save_and_reload_roundtrip(repository, data_file):
    created = datetime(2025, 1, 2, 7, 30, tzinfo=timezone.utc)
    repository.add(
        make_raw(
            1,
            kwh="12.3456",
            outdoor="-2.75",
            outdoor_high_c=Decimal("1.5"),
            indoor_avg_c=Decimal("20.25"),
            comfort_score=4,
            change_active=True,
            change_description="Flow temp 40C",
            notes="frosty, clear",
            created_at=created,
            updated_at=created,
        )
    )
    repository.add(make_raw(2))
    repository.save()

    assert data_file.exists()
    reloaded = FileEfficiencyRepository(str(data_file))
    first, second = reloaded.get_records()

    assert first.id == 1
    assert first.electricity_kwh == Decimal("12.3456")
    assert str(first.electricity_kwh) == "12.3456"
    assert first.outdoor_avg_c == Decimal("-2.75")
    assert first.outdoor_high_c == Decimal("1.5")
    assert first.outdoor_low_c is None
    assert first.indoor_avg_c == Decimal("20.25")
    assert first.comfort_score == 4
    assert first.change_active is True
    assert first.change_description == "Flow temp 40C"
    assert first.notes == "frosty, clear"
    assert first.created_at == created

    assert second.change_active is False
    assert second.change_description is None
    assert second.comfort_score is None
    assert second.created_at is None


def test_xlsx_roundtrip(tmp_path):
    path = tmp_path / "records.xlsx"
    repo = FileEfficiencyRepository(str(path))
    repo.add(make_raw(3, kwh="9.5", outdoor="1.25", change_description="Weather comp"))
    repo.save()

    (record,) = FileEfficiencyRepository(str(path)).get_records()
    assert record.electricity_kwh == Decimal("9.5")
    assert record.outdoor_avg_c == Decimal("1.25")
    assert record.change_description == "Weather comp"


def test_get_records_ordered_and_filtered(repository):
    for day in (5, 1, 3, 2, 4):
        repository.add(make_raw(day))

    assert [r.date.day for r in repository.get_records()] == [1, 2, 3, 4, 5]
    assert [r.date.day for r in repository.get_records(date(2025, 1, 2), date(2025, 1, 4))] == [
        2,
        3,
        4,
    ]
    assert [r.date.day for r in repository.get_records(from_date=date(2025, 1, 4))] == [4, 5]
    assert [r.date.day for r in repository.get_records(to_date=date(2025, 1, 1))] == [1]


def test_get_by_id(repository):
    record = make_raw(1)
    repository.add(record)
    assert repository.get_by_id(record.id) is record
    assert repository.get_by_id(999) is None


def test_exists_for_date(repository):
    record = make_raw(1)
    repository.add(record)

    assert repository.exists_for_date(date(2025, 1, 1))
    assert not repository.exists_for_date(date(2025, 1, 2))
    assert not repository.exists_for_date(date(2025, 1, 1), exclude_id=record.id)


def test_delete(repository, data_file):
    keep, drop = make_raw(1), make_raw(2)
    repository.add(keep)
    repository.add(drop)
    repository.delete(drop)
    repository.save()

    reloaded = FileEfficiencyRepository(str(data_file))
    assert [r.id for r in reloaded.get_records()] == [keep.id]


def test_ids_continue_after_reload(repository, data_file):
    repository.add(make_raw(1))
    repository.add(make_raw(2))
    repository.save()

    reloaded = FileEfficiencyRepository(str(data_file))
    record = make_raw(3)
    reloaded.add(record)
    assert record.id == 3


def test_missing_required_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("date,electricity_kwh\n2025-01-01,10\n", encoding="utf-8")

    with pytest.raises(ValueError, match="missing columns"):
        FileEfficiencyRepository(str(path))


def test_invalid_row(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text(
        "id,date,electricity_kwh,outdoor_avg_c\n1,2025-01-01,lots,5\n", encoding="utf-8"
    )

    with pytest.raises(ValueError, match="Invalid row"):
        FileEfficiencyRepository(str(path))


def test_minimal_hand_written_file(tmp_path):
    """Optional columns may be left out entirely."""
    path = tmp_path / "minimal.csv"
    path.write_text(
        "id,date,electricity_kwh,outdoor_avg_c,change_active\n"
        "1,2025-01-01,10.5,4.5,false\n"
        "2,2025-01-02,9.0,4.0,TRUE\n",
        encoding="utf-8",
    )

    first, second = FileEfficiencyRepository(str(path)).get_records()
    assert first.change_active is False
    assert second.change_active is True
    assert second.notes is None
