"""Use case for exporting enriched records and a plain-text analysis report."""

import logging
import os
from dataclasses import asdict
from typing import Dict, List, Optional

import pandas as pd

from ..entities.analysis_results import ChangeGroup, ComparisonResult, PeriodSummary
from ..entities.daily_record import EnrichedRecord

logger = logging.getLogger(__name__)

RECORDS_FILE = "enriched_records.csv"
REPORT_FILE = "efficiency_report.txt"


def _fmt(value, places: int = 2, unit: str = "") -> str:
    if value is None:
        return "n/a"
    return f"{value:.{places}f}{unit}"


class ExportEfficiencyReportUseCase:
    """Write enriched records to CSV and a comparison/group summary to text."""

    def execute(
        self,
        records: List[EnrichedRecord],
        comparison: ComparisonResult,
        groups: List[ChangeGroup],
        output_dir: str,
    ) -> Dict[str, str]:
        """
        Export the analysis.

        Args:
            records: Enriched records in the analysed range
            comparison: Baseline vs change comparison for those records
            groups: Records grouped by change description
            output_dir: Directory to write into (created if missing)

        Returns:
            Mapping of artefact name to written path
        """
        os.makedirs(output_dir, exist_ok=True)
        logger.info(f"Exporting efficiency report for {len(records)} records to {output_dir}")

        records_path = os.path.join(output_dir, RECORDS_FILE)
        self._save_records(records, records_path)

        report_path = os.path.join(output_dir, REPORT_FILE)
        self._save_report(comparison, groups, report_path)

        return {"records": records_path, "report": report_path}

    def _save_records(self, records: List[EnrichedRecord], path: str) -> None:
        df = pd.DataFrame([asdict(r) for r in records])
        df.to_csv(path, index=False)
        logger.info(f"Enriched records saved → {path}")

    def _write_summary(self, f, summary: PeriodSummary) -> None:
        f.write(f"{summary.label}\n")
        f.write("-" * 60 + "\n")
        f.write(f"   Days:                   {summary.record_count}")
        f.write(f" ({summary.analysable_records} with HDD > 0)\n")
        f.write(f"   Avg electricity:        {_fmt(summary.avg_electricity_kwh, unit=' kWh')}\n")
        f.write(f"   Avg outdoor temp:       {_fmt(summary.avg_outdoor_avg_c, 1, '°C')}\n")
        f.write(f"   Avg HDD:                {_fmt(summary.avg_hdd)}\n")
        f.write(
            f"   Avg kWh per HDD:        {_fmt(summary.avg_normalised_efficiency, 3)}\n\n"
        )

    def _save_report(
        self, comparison: ComparisonResult, groups: List[ChangeGroup], path: str
    ) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write("HEAT PUMP EFFICIENCY REPORT (HDD-normalised)\n")
            f.write("Lower kWh per heating degree day = more efficient\n")
            f.write("=" * 70 + "\n\n")

            self._write_summary(f, comparison.baseline)
            self._write_summary(f, comparison.change)

            f.write("VERDICT\n")
            f.write("-" * 60 + "\n")
            if comparison.improved is None:
                f.write("   Not enough data to compare periods.\n")
            else:
                verdict = "IMPROVED" if comparison.improved else "NOT IMPROVED"
                f.write(f"   {verdict}")
                if comparison.change_pct is not None:
                    f.write(f" ({comparison.change_pct:+}% kWh per HDD)")
                f.write("\n")
            for warning in comparison.warnings:
                f.write(f"   ! {warning}\n")
            f.write("\n")

            if groups:
                f.write("BY CHANGE\n")
                f.write("=" * 70 + "\n\n")
                for group in groups:
                    self._write_summary(f, group.summary)
        logger.info(f"Efficiency report saved → {path}")
