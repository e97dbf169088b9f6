"""CLI interface for heat pump efficiency tracking."""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ...application.services.efficiency_analyzer_service import EfficiencyAnalyzerService
from ...domain.entities.analysis_results import PeriodSummary
from ...domain.entities.daily_record import EnrichedRecord
from ...domain.exceptions import EfficiencyError
from ...infrastructure.repositories.file_efficiency_repository import FileEfficiencyRepository
from ..api.schemas import EfficiencyRecordRequest

from config.settings import (
    ANALYSIS_SETTINGS,
    EFFICIENCY_DATA_FILE,
    EXPORT_DIR,
    LOG_FORMAT,
    LOG_LEVEL,
)

logger = logging.getLogger(__name__)


def _decimal_arg(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def _date_arg(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}")


def _fmt(value, places: int = 2) -> str:
    return "n/a" if value is None else f"{value:.{places}f}"


def print_records(records: List[EnrichedRecord]) -> None:
    print(f"{'id':>4}  {'date':<10}  {'kWh':>8}  {'out °C':>7}  {'HDD':>6}  {'kWh/HDD':>8}  change")
    print("-" * 70)
    for r in records:
        print(
            f"{r.id:>4}  {r.date.isoformat():<10}  {_fmt(r.electricity_kwh):>8}  "
            f"{_fmt(r.outdoor_avg_c, 1):>7}  {_fmt(r.heating_degree_days):>6}  "
            f"{_fmt(r.normalised_efficiency, 3):>8}  "
            f"{'*' if r.change_active else ' '} {r.change_description or ''}"
        )
    print(f"\n{len(records)} record(s)")


def print_summary(summary: PeriodSummary) -> None:
    print(f" {summary.label}")
    print(f"   Days:        {summary.record_count} ({summary.analysable_records} with HDD > 0)")
    print(f"   Avg kWh:     {_fmt(summary.avg_electricity_kwh)}")
    print(f"   Avg outdoor: {_fmt(summary.avg_outdoor_avg_c, 1)}°C")
    print(f"   Avg HDD:     {_fmt(summary.avg_hdd)}")
    print(f"   kWh per HDD: {_fmt(summary.avg_normalised_efficiency, 3)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Heat pump efficiency tracker (HDD-normalised)")
    parser.add_argument(
        "--data-file",
        type=str,
        default=str(EFFICIENCY_DATA_FILE),
        help="CSV/XLSX file holding daily records",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    range_parser = argparse.ArgumentParser(add_help=False)
    range_parser.add_argument("--from", dest="from_date", type=_date_arg, default=None)
    range_parser.add_argument("--to", dest="to_date", type=_date_arg, default=None)

    # === list ===
    subparsers.add_parser("list", parents=[range_parser], help="List records with HDD metrics")

    # === add ===
    add_parser = subparsers.add_parser("add", help="Add a daily record")
    add_parser.add_argument("--date", type=_date_arg, required=True)
    add_parser.add_argument("--kwh", type=_decimal_arg, required=True, help="Electricity used")
    add_parser.add_argument("--outdoor-avg", type=_decimal_arg, required=True, help="°C")
    add_parser.add_argument("--outdoor-high", type=_decimal_arg, default=None)
    add_parser.add_argument("--outdoor-low", type=_decimal_arg, default=None)
    add_parser.add_argument("--indoor-avg", type=_decimal_arg, default=None)
    add_parser.add_argument("--comfort", type=int, default=None, help="Comfort score 1-5")
    add_parser.add_argument("--change", type=str, default=None, help="Change description")
    add_parser.add_argument(
        "--change-active", action="store_true", help="Record belongs to the change period"
    )
    add_parser.add_argument("--notes", type=str, default=None)

    # === delete ===
    delete_parser = subparsers.add_parser("delete", help="Delete a record by id")
    delete_parser.add_argument("id", type=int)

    # === analysis ===
    subparsers.add_parser(
        "compare", parents=[range_parser], help="Compare baseline vs change period"
    )
    subparsers.add_parser("groups", parents=[range_parser], help="Summaries per change")
    filter_parser = subparsers.add_parser(
        "filter", parents=[range_parser], help="Records within an outdoor temperature range"
    )
    filter_parser.add_argument("--min", dest="min_c", type=_decimal_arg, required=True)
    filter_parser.add_argument("--max", dest="max_c", type=_decimal_arg, required=True)

    # === exports ===
    export_parser = subparsers.add_parser(
        "export", parents=[range_parser], help="Write records CSV and text report"
    )
    export_parser.add_argument("--output-dir", type=str, default=str(EXPORT_DIR))
    plot_parser = subparsers.add_parser(
        "plot", parents=[range_parser], help="Chart daily kWh per HDD"
    )
    plot_parser.add_argument(
        "--output", type=str, default=str(EXPORT_DIR / "efficiency_trend.png")
    )

    return parser


def run(args: argparse.Namespace, service: EfficiencyAnalyzerService) -> int:
    """Execute a parsed command. Returns the process exit code."""
    if args.command == "list":
        print_records(service.list_records(args.from_date, args.to_date))

    elif args.command == "add":
        try:
            request = EfficiencyRecordRequest(
                date=args.date,
                electricity_kwh=args.kwh,
                outdoor_avg_c=args.outdoor_avg,
                outdoor_high_c=args.outdoor_high,
                outdoor_low_c=args.outdoor_low,
                indoor_avg_c=args.indoor_avg,
                comfort_score=args.comfort,
                change_active=args.change_active,
                change_description=args.change,
                notes=args.notes,
            )
        except ValidationError as e:
            logger.error(f"Invalid record: {e}")
            return 1
        record = service.create_record(request.to_input())
        print(f"Added record {record.id} for {record.date} (HDD {_fmt(record.heating_degree_days)})")

    elif args.command == "delete":
        service.delete_record(args.id)
        print(f"Deleted record {args.id}")

    elif args.command == "compare":
        result = service.compare_periods(args.from_date, args.to_date)
        print("\n" + "=" * 50)
        print(" EFFICIENCY COMPARISON (kWh per HDD, lower is better)")
        print("=" * 50)
        print_summary(result.baseline)
        print("-" * 50)
        print_summary(result.change)
        print("-" * 50)
        if result.improved is None:
            print(" Verdict: insufficient data")
        else:
            print(f" Verdict: {'IMPROVED' if result.improved else 'NOT IMPROVED'}")
            if result.change_pct is not None:
                print(f" Change:  {result.change_pct:+}%")
        for warning in result.warnings:
            print(f" ! {warning}")
        print("=" * 50)

    elif args.command == "groups":
        for group in service.group_by_change(args.from_date, args.to_date):
            print_summary(group.summary)
            print()

    elif args.command == "filter":
        print_records(
            service.filter_by_temperature(args.min_c, args.max_c, args.from_date, args.to_date)
        )

    elif args.command == "export":
        paths = service.export_report(args.output_dir, args.from_date, args.to_date)
        for name, path in paths.items():
            print(f" {name}: {path.resolve()}")

    elif args.command == "plot":
        path = service.export_trend_chart(args.output, args.from_date, args.to_date)
        print(f" Chart saved to: {Path(path).resolve()}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # === Initialize repository and service ===
    try:
        repository = FileEfficiencyRepository(args.data_file)
        service = EfficiencyAnalyzerService(
            repository=repository, analysis_settings=ANALYSIS_SETTINGS
        )
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        return 1

    try:
        return run(args, service)
    except EfficiencyError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Command '{args.command}' failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
