"""Shared fixtures for efficiency tests."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from cosy_efficiency.application.services.efficiency_analyzer_service import (
    EfficiencyAnalyzerService,
)
from cosy_efficiency.domain.entities.daily_record import DailyRecord, RecordInput
from cosy_efficiency.domain.use_cases.hdd_calculator import to_enriched
from cosy_efficiency.infrastructure.repositories.file_efficiency_repository import (
    FileEfficiencyRepository,
)


@pytest.fixture
def base_day() -> date:
    """Return the first day used for generated records."""
    return date(2025, 1, 1)


@pytest.fixture
def make_record(base_day):
    """Factory for enriched records; ``offset`` picks the day after base_day."""

    def _make(kwh, outdoor, offset=0, change_active=False, description=None, **kwargs):
        raw = DailyRecord(
            id=offset + 1,
            date=base_day + timedelta(days=offset),
            electricity_kwh=Decimal(str(kwh)),
            outdoor_avg_c=Decimal(str(outdoor)),
            change_active=change_active,
            change_description=description,
            **kwargs,
        )
        return to_enriched(raw)

    return _make


@pytest.fixture
def make_input(base_day):
    """Factory for record inputs as the service receives them."""

    def _make(kwh, outdoor, offset=0, **kwargs):
        return RecordInput(
            date=base_day + timedelta(days=offset),
            electricity_kwh=Decimal(str(kwh)),
            outdoor_avg_c=Decimal(str(outdoor)),
            **kwargs,
        )

    return _make


@pytest.fixture
def data_file(tmp_path):
    """Path to a not-yet-existing CSV data file."""
    return tmp_path / "data" / "efficiency_records.csv"


@pytest.fixture
def repository(data_file) -> FileEfficiencyRepository:
    return FileEfficiencyRepository(str(data_file))


@pytest.fixture
def service(repository) -> EfficiencyAnalyzerService:
    return EfficiencyAnalyzerService(repository=repository)
