"""Domain entities."""

from .daily_record import DailyRecord, EnrichedRecord, RecordInput
from .analysis_results import (
    NO_CHANGE_LABEL,
    ChangeGroup,
    ComparisonResult,
    PeriodSummary,
)

__all__ = [
    "DailyRecord",
    "EnrichedRecord",
    "RecordInput",
    "PeriodSummary",
    "ComparisonResult",
    "ChangeGroup",
    "NO_CHANGE_LABEL",
]
