"""Example usage of the heat pump efficiency tracker."""

import logging
from datetime import date, timedelta
from decimal import Decimal

from cosy_efficiency.application.services.efficiency_analyzer_service import (
    EfficiencyAnalyzerService,
)
from cosy_efficiency.domain.entities.daily_record import RecordInput
from cosy_efficiency.domain.exceptions import DuplicateRecordDateError
from cosy_efficiency.infrastructure.repositories.file_efficiency_repository import (
    FileEfficiencyRepository,
)
from config.settings import ANALYSIS_SETTINGS, DATA_DIR, EXPORT_DIR

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# (kWh, outdoor average °C) for a week before and a week after lowering the flow temperature
BASELINE_DAYS = [(14.2, 3.1), (16.8, 1.4), (12.9, 4.6), (18.3, -0.2), (15.1, 2.8), (11.4, 6.0), (13.7, 4.1)]
CHANGE_DAYS = [(12.1, 2.5), (13.9, 1.0), (10.2, 5.2), (15.6, -0.8), (12.4, 3.3), (9.8, 6.4), (11.0, 4.4)]


def main():
    """Example usage."""
    repository = FileEfficiencyRepository(str(DATA_DIR / "example_records.csv"))
    service = EfficiencyAnalyzerService(repository=repository, analysis_settings=ANALYSIS_SETTINGS)

    # Example 1: Record daily readings
    print("=" * 60)
    print("Example 1: Recording daily readings")
    print("=" * 60)
    start = date(2025, 1, 6)
    days = [(False, kwh, out) for kwh, out in BASELINE_DAYS] + [
        (True, kwh, out) for kwh, out in CHANGE_DAYS
    ]
    for offset, (active, kwh, outdoor) in enumerate(days):
        try:
            record = service.create_record(
                RecordInput(
                    date=start + timedelta(days=offset),
                    electricity_kwh=Decimal(str(kwh)),
                    outdoor_avg_c=Decimal(str(outdoor)),
                    change_active=active,
                    change_description="Flow temperature 45C -> 40C" if active else None,
                )
            )
            print(f"  {record}  HDD={record.heating_degree_days}")
        except DuplicateRecordDateError as e:
            logger.info(f"Skipping: {e}")

    # Example 2: Compare baseline and change period
    print("\n" + "=" * 60)
    print("Example 2: Baseline vs change period")
    print("=" * 60)
    result = service.compare_periods()
    for summary in (result.baseline, result.change):
        print(
            f"  {summary.label}: {summary.record_count} days, "
            f"kWh/HDD={summary.avg_normalised_efficiency:.3f}"
        )
    print(f"  Improved: {result.improved} ({result.change_pct:+}%)")
    for warning in result.warnings:
        print(f"  ! {warning}")

    # Example 3: Exports
    print("\n" + "=" * 60)
    print("Example 3: Writing report and chart")
    print("=" * 60)
    for name, path in service.export_report(str(EXPORT_DIR)).items():
        print(f"  {name}: {path}")
    print(f"  chart: {service.export_trend_chart(str(EXPORT_DIR / 'efficiency_trend.png'))}")


if __name__ == "__main__":
    main()
