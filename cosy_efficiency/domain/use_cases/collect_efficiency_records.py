"""Use case for collecting enriched efficiency records."""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from ..entities.daily_record import EnrichedRecord
from ..repositories.efficiency_repository import EfficiencyRepository
from .hdd_calculator import BASE_TEMPERATURE_C, to_enriched

logger = logging.getLogger(__name__)


class CollectEfficiencyRecordsUseCase:
    """Use case to load daily records and attach their HDD metrics."""

    def __init__(
        self,
        repository: EfficiencyRepository,
        base_temp_c: Decimal = BASE_TEMPERATURE_C,
    ):
        """
        Initialize use case.

        Args:
            repository: Repository for efficiency record access
            base_temp_c: Base temperature for heating degree days
        """
        self.repository = repository
        self.base_temp_c = base_temp_c

    def execute(
        self,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[EnrichedRecord]:
        """
        Execute the use case.

        Args:
            from_date: Start date (inclusive, optional)
            to_date: End date (inclusive, optional)

        Returns:
            List of EnrichedRecord entities ordered by date
        """
        logger.info(f"Collecting efficiency records: from={from_date}, to={to_date}")
        records = self.repository.get_records(from_date, to_date)
        enriched = [to_enriched(r, self.base_temp_c) for r in records]
        analysable = sum(1 for r in enriched if r.is_analysable)
        logger.info(f"Collected {len(enriched)} records ({analysable} with HDD > 0)")
        return enriched
