"""Period analysis over enriched daily records.

Summaries, baseline-vs-change comparison, grouping by change description
and outdoor temperature filtering. Every function is pure and total:
empty inputs, zero-HDD days and a zero baseline efficiency all produce a
defined result, with advisory warnings instead of exceptions.
"""

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from ..entities.analysis_results import (
    NO_CHANGE_LABEL,
    ChangeGroup,
    ComparisonResult,
    PeriodSummary,
)
from ..entities.daily_record import EnrichedRecord

BASELINE_LABEL = "Baseline"
CHANGE_LABEL = "Change Period"

# Fewer analysable days than this makes a period statistically unreliable
MIN_ANALYSABLE_DAYS = 3
# Outdoor average divergence (°C) beyond which HDD normalisation is suspect
MAX_OUTDOOR_DIVERGENCE_C = Decimal("3.0")

_PCT_PLACES = Decimal("0.01")


def _mean(values: Iterable[Decimal]) -> Decimal:
    values = list(values)
    return sum(values, Decimal("0")) / Decimal(len(values))


def summarise(label: str, records: Sequence[EnrichedRecord]) -> PeriodSummary:
    """
    Summarise a period.

    Electricity, outdoor temperature and HDD are averaged over all records,
    mild (HDD = 0) days included. Normalised efficiency is averaged over the
    analysable subset (HDD > 0) only.

    Args:
        label: Display label for the period
        records: Enriched records in the period (may be empty)

    Returns:
        PeriodSummary; all averages are None for an empty period
    """
    if not records:
        return PeriodSummary(label=label)

    analysable = [r for r in records if r.heating_degree_days > 0]

    return PeriodSummary(
        label=label,
        record_count=len(records),
        avg_electricity_kwh=_mean(r.electricity_kwh for r in records),
        avg_outdoor_avg_c=_mean(r.outdoor_avg_c for r in records),
        avg_hdd=_mean(r.heating_degree_days for r in records),
        avg_normalised_efficiency=(
            _mean(r.normalised_efficiency for r in analysable) if analysable else None
        ),
        analysable_records=len(analysable),
    )


def compare(
    baseline: Sequence[EnrichedRecord],
    change: Sequence[EnrichedRecord],
    min_analysable_days: int = MIN_ANALYSABLE_DAYS,
    max_outdoor_divergence_c: Decimal = MAX_OUTDOOR_DIVERGENCE_C,
) -> ComparisonResult:
    """
    Compare baseline records against change-period records.

    Lower kWh per degree-day is better, so the change improved efficiency
    when its average normalised efficiency is below the baseline's.
    ``change_pct`` is rounded to 2 places with banker's rounding.

    Args:
        baseline: Records before the change
        change: Records with the change active
        min_analysable_days: Sample size below which a warning is added
        max_outdoor_divergence_c: Outdoor temperature gap that triggers a warning

    Returns:
        ComparisonResult with summaries, verdict and advisory warnings
    """
    baseline_summary = summarise(BASELINE_LABEL, baseline)
    change_summary = summarise(CHANGE_LABEL, change)
    warnings: List[str] = []
    improved: Optional[bool] = None
    change_pct: Optional[Decimal] = None

    if baseline_summary.analysable_records < min_analysable_days:
        warnings.append(
            f"Baseline has fewer than {min_analysable_days} analysable days (HDD > 0). "
            "Results may be unreliable."
        )
    if change_summary.analysable_records < min_analysable_days:
        warnings.append(
            f"Change period has fewer than {min_analysable_days} analysable days (HDD > 0). "
            "Results may be unreliable."
        )

    base_eff = baseline_summary.avg_normalised_efficiency
    change_eff = change_summary.avg_normalised_efficiency

    if base_eff is not None and change_eff is not None:
        improved = change_eff < base_eff
        if base_eff != 0:
            change_pct = ((change_eff - base_eff) / base_eff * 100).quantize(
                _PCT_PLACES, rounding=ROUND_HALF_EVEN
            )

        outdoor_diff = abs(baseline_summary.avg_outdoor_avg_c - change_summary.avg_outdoor_avg_c)
        if outdoor_diff > max_outdoor_divergence_c:
            warnings.append(
                f"Average outdoor temperature differs by {outdoor_diff:.1f}°C between periods. "
                "HDD normalisation may not fully compensate."
            )
    else:
        warnings.append("Insufficient data to compare efficiency between periods.")

    return ComparisonResult(
        baseline=baseline_summary,
        change=change_summary,
        improved=improved,
        change_pct=change_pct,
        warnings=warnings,
    )


def _description_key(record: EnrichedRecord) -> Optional[str]:
    # Blank descriptions count as "no change"
    return record.change_description or None


def group_by_change(records: Sequence[EnrichedRecord]) -> List[ChangeGroup]:
    """
    Partition records by change description, in first-seen order.

    Records without a description share one group whose label is
    NO_CHANGE_LABEL; each group carries its own summary.
    """
    buckets: Dict[Optional[str], List[EnrichedRecord]] = {}
    for record in records:
        buckets.setdefault(_description_key(record), []).append(record)

    return [
        ChangeGroup(
            change_description=description,
            summary=summarise(
                NO_CHANGE_LABEL if description is None else description, members
            ),
            records=members,
        )
        for description, members in buckets.items()
    ]


def filter_by_temperature_range(
    records: Sequence[EnrichedRecord],
    min_outdoor_c: Decimal,
    max_outdoor_c: Decimal,
) -> List[EnrichedRecord]:
    """Records whose outdoor average lies in [min_outdoor_c, max_outdoor_c].

    An inverted range (min > max) simply matches nothing.
    """
    return [r for r in records if min_outdoor_c <= r.outdoor_avg_c <= max_outdoor_c]
