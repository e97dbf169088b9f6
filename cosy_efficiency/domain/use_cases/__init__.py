"""Use cases - core business operations."""

from .hdd_calculator import (
    BASE_TEMPERATURE_C,
    compute_hdd,
    compute_normalised_efficiency,
    to_enriched,
)
from .period_analyzer import (
    compare,
    filter_by_temperature_range,
    group_by_change,
    summarise,
)
from .collect_efficiency_records import CollectEfficiencyRecordsUseCase
from .manage_efficiency_records import ManageEfficiencyRecordsUseCase
from .export_efficiency_report import ExportEfficiencyReportUseCase
from .plot_efficiency_trend import PlotEfficiencyTrendUseCase

__all__ = [
    "BASE_TEMPERATURE_C",
    "compute_hdd",
    "compute_normalised_efficiency",
    "to_enriched",
    "summarise",
    "compare",
    "group_by_change",
    "filter_by_temperature_range",
    "CollectEfficiencyRecordsUseCase",
    "ManageEfficiencyRecordsUseCase",
    "ExportEfficiencyReportUseCase",
    "PlotEfficiencyTrendUseCase",
]
