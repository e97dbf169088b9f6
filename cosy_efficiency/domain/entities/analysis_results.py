"""Value objects produced by period analysis."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .daily_record import EnrichedRecord

NO_CHANGE_LABEL = "(no change)"


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregate statistics for a set of enriched records.

    For an empty period only ``label`` and ``record_count`` (0) are set.
    """

    label: str
    record_count: int = 0
    avg_electricity_kwh: Optional[Decimal] = None
    avg_outdoor_avg_c: Optional[Decimal] = None
    avg_hdd: Optional[Decimal] = None
    avg_normalised_efficiency: Optional[Decimal] = None  # over HDD > 0 days only
    analysable_records: int = 0


@dataclass(frozen=True)
class ComparisonResult:
    """Baseline versus change-period comparison."""

    baseline: PeriodSummary
    change: PeriodSummary
    improved: Optional[bool] = None
    change_pct: Optional[Decimal] = None
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChangeGroup:
    """Records sharing one change description.

    ``change_description`` is None for records without a description;
    they are displayed under NO_CHANGE_LABEL.
    """

    change_description: Optional[str]
    summary: PeriodSummary
    records: List[EnrichedRecord] = field(default_factory=list)

    @property
    def label(self) -> str:
        if self.change_description is None:
            return NO_CHANGE_LABEL
        return self.change_description
