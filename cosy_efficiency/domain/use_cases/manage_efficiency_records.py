"""Use case for creating, updating and deleting daily records."""

import logging
from datetime import datetime, timezone
from typing import Callable
from ..entities.daily_record import DailyRecord, RecordInput
from ..exceptions import DuplicateRecordDateError, RecordNotFoundError
from ..repositories.efficiency_repository import EfficiencyRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ManageEfficiencyRecordsUseCase:
    """Write paths for daily records, enforcing one record per date."""

    def __init__(
        self,
        repository: EfficiencyRepository,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize use case.

        Args:
            repository: Repository for efficiency record access
            clock: Source of the current time for audit timestamps
        """
        self.repository = repository
        self.clock = clock

    def get(self, record_id: int) -> DailyRecord:
        record = self.repository.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def create(self, data: RecordInput) -> DailyRecord:
        """
        Store a new record.

        Raises:
            DuplicateRecordDateError: If a record already exists for the date
        """
        if self.repository.exists_for_date(data.date):
            raise DuplicateRecordDateError(data.date)

        now = self.clock()
        record = DailyRecord(
            date=data.date,
            electricity_kwh=data.electricity_kwh,
            outdoor_avg_c=data.outdoor_avg_c,
            outdoor_high_c=data.outdoor_high_c,
            outdoor_low_c=data.outdoor_low_c,
            indoor_avg_c=data.indoor_avg_c,
            comfort_score=data.comfort_score,
            change_active=data.change_active,
            change_description=data.change_description,
            notes=data.notes,
            created_at=now,
            updated_at=now,
        )
        self.repository.add(record)
        self.repository.save()
        logger.info(f"Created efficiency record {record.id} for {record.date}")
        return record

    def update(self, record_id: int, data: RecordInput) -> DailyRecord:
        """
        Overwrite an existing record's measurements.

        Raises:
            RecordNotFoundError: If the record does not exist
            DuplicateRecordDateError: If the date moves onto another record's date
        """
        record = self.get(record_id)
        if record.date != data.date and self.repository.exists_for_date(
            data.date, exclude_id=record_id
        ):
            raise DuplicateRecordDateError(data.date)

        record.date = data.date
        record.electricity_kwh = data.electricity_kwh
        record.outdoor_avg_c = data.outdoor_avg_c
        record.outdoor_high_c = data.outdoor_high_c
        record.outdoor_low_c = data.outdoor_low_c
        record.indoor_avg_c = data.indoor_avg_c
        record.comfort_score = data.comfort_score
        record.change_active = data.change_active
        record.change_description = data.change_description
        record.notes = data.notes
        record.updated_at = self.clock()
        self.repository.save()
        logger.info(f"Updated efficiency record {record_id}")
        return record

    def delete(self, record_id: int) -> None:
        """
        Remove a record.

        Raises:
            RecordNotFoundError: If the record does not exist
        """
        record = self.get(record_id)
        self.repository.delete(record)
        self.repository.save()
        logger.info(f"Deleted efficiency record {record_id}")
