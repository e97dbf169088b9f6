"""Main service orchestrating efficiency record management and analysis."""

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...domain.entities.analysis_results import ChangeGroup, ComparisonResult
from ...domain.entities.daily_record import EnrichedRecord, RecordInput
from ...domain.repositories.efficiency_repository import EfficiencyRepository

# Use cases
from ...domain.use_cases import period_analyzer
from ...domain.use_cases.hdd_calculator import BASE_TEMPERATURE_C, to_enriched
from ...domain.use_cases.collect_efficiency_records import CollectEfficiencyRecordsUseCase
from ...domain.use_cases.manage_efficiency_records import ManageEfficiencyRecordsUseCase
from ...domain.use_cases.export_efficiency_report import ExportEfficiencyReportUseCase
from ...domain.use_cases.plot_efficiency_trend import PlotEfficiencyTrendUseCase

logger = logging.getLogger(__name__)


class EfficiencyAnalyzerService:
    """Orchestrates record storage, HDD enrichment and period analysis."""

    def __init__(
        self,
        repository: EfficiencyRepository,
        analysis_settings: Optional[Dict[str, Any]] = None,
    ):
        settings = analysis_settings or {}
        self.repository = repository
        self.base_temp_c = Decimal(str(settings.get("hdd_base_temp_c", BASE_TEMPERATURE_C)))
        self.min_analysable_days = int(
            settings.get("min_analysable_days", period_analyzer.MIN_ANALYSABLE_DAYS)
        )
        self.max_outdoor_divergence_c = Decimal(
            str(
                settings.get(
                    "max_outdoor_divergence_c", period_analyzer.MAX_OUTDOOR_DIVERGENCE_C
                )
            )
        )

        self.collect_uc = CollectEfficiencyRecordsUseCase(repository, self.base_temp_c)
        self.manage_uc = ManageEfficiencyRecordsUseCase(repository)
        self.export_uc = ExportEfficiencyReportUseCase()
        self.plot_uc = PlotEfficiencyTrendUseCase()

    # --- records ---

    def list_records(
        self, from_date: Optional[date] = None, to_date: Optional[date] = None
    ) -> List[EnrichedRecord]:
        return self.collect_uc.execute(from_date, to_date)

    def get_record(self, record_id: int) -> EnrichedRecord:
        return to_enriched(self.manage_uc.get(record_id), self.base_temp_c)

    def create_record(self, data: RecordInput) -> EnrichedRecord:
        return to_enriched(self.manage_uc.create(data), self.base_temp_c)

    def update_record(self, record_id: int, data: RecordInput) -> EnrichedRecord:
        return to_enriched(self.manage_uc.update(record_id, data), self.base_temp_c)

    def delete_record(self, record_id: int) -> None:
        self.manage_uc.delete(record_id)

    # --- analysis ---

    def compare_periods(
        self, from_date: Optional[date] = None, to_date: Optional[date] = None
    ) -> ComparisonResult:
        """Compare days without the change active (baseline) against days with it."""
        records = self.list_records(from_date, to_date)
        baseline = [r for r in records if not r.change_active]
        change = [r for r in records if r.change_active]

        result = period_analyzer.compare(
            baseline,
            change,
            min_analysable_days=self.min_analysable_days,
            max_outdoor_divergence_c=self.max_outdoor_divergence_c,
        )
        for warning in result.warnings:
            logger.warning(f"Comparison: {warning}")
        logger.info(
            f"Comparison: baseline={len(baseline)} change={len(change)} "
            f"improved={result.improved} change_pct={result.change_pct}"
        )
        return result

    def group_by_change(
        self, from_date: Optional[date] = None, to_date: Optional[date] = None
    ) -> List[ChangeGroup]:
        groups = period_analyzer.group_by_change(self.list_records(from_date, to_date))
        logger.info(f"Grouped records into {len(groups)} change groups")
        return groups

    def filter_by_temperature(
        self,
        min_outdoor_c: Decimal,
        max_outdoor_c: Decimal,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[EnrichedRecord]:
        if min_outdoor_c > max_outdoor_c:
            logger.warning(
                f"Temperature range is inverted ({min_outdoor_c} > {max_outdoor_c}), "
                "no records will match"
            )
        return period_analyzer.filter_by_temperature_range(
            self.list_records(from_date, to_date), min_outdoor_c, max_outdoor_c
        )

    # --- exports ---

    def export_report(
        self,
        output_dir: str,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> Dict[str, Path]:
        """Write enriched records and the comparison/group report."""
        records = self.list_records(from_date, to_date)
        paths = self.export_uc.execute(
            records=records,
            comparison=self.compare_periods(from_date, to_date),
            groups=period_analyzer.group_by_change(records),
            output_dir=output_dir,
        )
        return {name: Path(p) for name, p in paths.items()}

    def export_trend_chart(
        self,
        output_file: str,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> Path:
        """Write a PNG chart of daily normalised efficiency."""
        return Path(self.plot_uc.execute(self.list_records(from_date, to_date), output_file))
