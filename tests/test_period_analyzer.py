"""Tests for period summaries, comparison, grouping and filtering."""

from decimal import Decimal

import pytest

from cosy_efficiency.domain.entities.analysis_results import NO_CHANGE_LABEL
from cosy_efficiency.domain.use_cases.period_analyzer import (
    BASELINE_LABEL,
    CHANGE_LABEL,
    compare,
    filter_by_temperature_range,
    group_by_change,
    summarise,
)


def make_period(make_record, kwh, outdoor, days=3, start=0, change_active=False):
    """Generate ``days`` identical consecutive records."""
    return [
        make_record(kwh, outdoor, offset=start + i, change_active=change_active)
        for i in range(days)
    ]


# =============================================================================
# summarise
# =============================================================================


class TestSummarise:
    def test_empty(self):
        summary = summarise("Empty", [])
        assert summary.label == "Empty"
        assert summary.record_count == 0
        assert summary.analysable_records == 0
        assert summary.avg_electricity_kwh is None
        assert summary.avg_outdoor_avg_c is None
        assert summary.avg_hdd is None
        assert summary.avg_normalised_efficiency is None

    def test_means_over_all_records(self, make_record):
        """Mild days count towards electricity, temperature and HDD means."""
        records = [
            make_record(4, 20, offset=0),  # HDD 0
            make_record(11, 10, offset=1),  # HDD 5.5 -> 2
            make_record(21, 5, offset=2),  # HDD 10.5 -> 2
        ]
        summary = summarise("Mixed", records)

        assert summary.record_count == 3
        assert summary.avg_electricity_kwh == Decimal("12")
        assert summary.avg_outdoor_avg_c == pytest.approx(Decimal("35") / 3)
        assert summary.avg_hdd == Decimal("16") / Decimal("3")

    def test_efficiency_over_analysable_only(self, make_record):
        records = [
            make_record(4, 20, offset=0),
            make_record(11, 10, offset=1),
            make_record(21, 5, offset=2),
        ]
        summary = summarise("Mixed", records)

        assert summary.analysable_records == 2
        assert summary.avg_normalised_efficiency == Decimal("2")

    def test_no_analysable_days(self, make_record):
        records = [make_record(3, 16, offset=0), make_record(2, 19, offset=1)]
        summary = summarise("Mild", records)

        assert summary.record_count == 2
        assert summary.analysable_records == 0
        assert summary.avg_hdd == 0
        assert summary.avg_normalised_efficiency is None

    def test_analysable_never_exceeds_count(self, make_record):
        all_cold = [make_record(10, t, offset=i) for i, t in enumerate([0, 5, 10])]
        some_mild = [make_record(10, t, offset=i) for i, t in enumerate([0, 15.5, 10])]

        cold = summarise("cold", all_cold)
        mixed = summarise("mixed", some_mild)
        assert cold.analysable_records == cold.record_count
        assert mixed.analysable_records < mixed.record_count

    def test_does_not_mutate_input(self, make_record):
        records = [make_record(10, 5, offset=0), make_record(8, 7, offset=1)]
        snapshot = list(records)
        summarise("x", records)
        assert records == snapshot


# =============================================================================
# compare
# =============================================================================


class TestCompare:
    def test_improvement(self, make_record):
        baseline = make_period(make_record, 10, 5)
        change = make_period(make_record, 7, 5, start=3, change_active=True)

        result = compare(baseline, change)

        assert result.baseline.label == BASELINE_LABEL
        assert result.change.label == CHANGE_LABEL
        assert result.improved is True
        assert result.change_pct < 0
        assert result.change_pct == Decimal("-30")
        assert result.warnings == []

    def test_regression(self, make_record):
        baseline = make_period(make_record, 10, 5)
        change = make_period(make_record, 12, 5, start=3, change_active=True)

        result = compare(baseline, change)

        assert result.improved is False
        assert result.change_pct > 0
        assert result.change_pct == Decimal("20")

    def test_equal_efficiency_is_not_improved(self, make_record):
        result = compare(make_period(make_record, 10, 5), make_period(make_record, 10, 5, start=3))
        assert result.improved is False
        assert result.change_pct == 0

    def test_change_pct_rounds_half_even(self, make_record):
        """0.125% rounds to 0.12 (banker's rounding)."""
        baseline = make_period(make_record, "10.5", 5)  # 1 kWh/HDD
        change = make_period(make_record, "10.513125", 5, start=3)  # 1.00125 kWh/HDD

        result = compare(baseline, change)

        assert result.change_pct == Decimal("0.12")
        assert str(result.change_pct) == "0.12"

    def test_both_empty(self):
        result = compare([], [])

        assert result.improved is None
        assert result.change_pct is None
        assert result.baseline.record_count == 0
        assert result.change.record_count == 0
        assert len(result.warnings) == 3
        assert result.warnings[-1] == "Insufficient data to compare efficiency between periods."

    def test_one_side_without_analysable_days(self, make_record):
        baseline = make_period(make_record, 3, 18)  # all mild
        change = make_period(make_record, 7, 5, start=3)

        result = compare(baseline, change)

        assert result.improved is None
        assert result.change_pct is None
        assert result.warnings == [
            "Baseline has fewer than 3 analysable days (HDD > 0). Results may be unreliable.",
            "Insufficient data to compare efficiency between periods.",
        ]

    def test_small_sample_warnings_alongside_verdict(self, make_record):
        baseline = make_period(make_record, 10, 5, days=2)
        change = make_period(make_record, 7, 5, days=1, start=3)

        result = compare(baseline, change)

        assert result.improved is True
        assert len(result.warnings) == 2
        assert result.warnings[0].startswith("Baseline has fewer than 3")
        assert result.warnings[1].startswith("Change period has fewer than 3")

    def test_outdoor_divergence_warning(self, make_record):
        baseline = make_period(make_record, 10, 5)
        change = make_period(make_record, 12, 0, start=3)

        result = compare(baseline, change)

        assert result.improved is not None
        assert result.warnings == [
            "Average outdoor temperature differs by 5.0°C between periods. "
            "HDD normalisation may not fully compensate."
        ]

    def test_outdoor_divergence_threshold_is_exclusive(self, make_record):
        baseline = make_period(make_record, 10, 5)
        change = make_period(make_record, 10, 2, start=3)  # exactly 3.0°C apart

        result = compare(baseline, change)

        assert result.warnings == []

    def test_zero_baseline_efficiency(self, make_record):
        """A zero baseline still yields a verdict but no percentage."""
        baseline = make_period(make_record, 0, 5)
        change = make_period(make_record, 5, 5, start=3)

        result = compare(baseline, change)

        assert result.improved is False
        assert result.change_pct is None

    def test_custom_thresholds(self, make_record):
        baseline = make_period(make_record, 10, 5, days=5)
        change = make_period(make_record, 9, 3, days=5, start=5)

        strict = compare(
            baseline, change, min_analysable_days=7, max_outdoor_divergence_c=Decimal("1")
        )

        assert len(strict.warnings) == 3
        assert "fewer than 7 analysable days" in strict.warnings[0]
        assert "differs by 2.0°C" in strict.warnings[2]


# =============================================================================
# group_by_change
# =============================================================================


class TestGroupByChange:
    def test_partitions_by_description(self, make_record):
        records = [
            make_record(10, 5, offset=0, description="A"),
            make_record(9, 5, offset=1, description="A"),
            make_record(8, 5, offset=2, description="B"),
            make_record(12, 5, offset=3),
        ]

        groups = group_by_change(records)

        by_label = {g.label: g for g in groups}
        assert set(by_label) == {"A", "B", NO_CHANGE_LABEL}
        assert len(by_label["A"].records) == 2
        assert len(by_label["B"].records) == 1
        assert len(by_label[NO_CHANGE_LABEL].records) == 1

    def test_group_summaries(self, make_record):
        records = [
            make_record(10, 5, offset=0, description="A"),
            make_record(9, 5, offset=1, description="A"),
            make_record(8, 20, offset=2, description="B"),
        ]

        groups = group_by_change(records)

        a, b = groups
        assert a.summary.label == "A"
        assert a.summary.record_count == 2
        assert a.summary.avg_electricity_kwh == Decimal("9.5")
        assert b.summary.analysable_records == 0
        assert b.summary.avg_normalised_efficiency is None

    def test_first_seen_order(self, make_record):
        records = [
            make_record(10, 5, offset=0, description="B"),
            make_record(10, 5, offset=1),
            make_record(10, 5, offset=2, description="A"),
            make_record(10, 5, offset=3, description="B"),
        ]

        assert [g.label for g in group_by_change(records)] == ["B", NO_CHANGE_LABEL, "A"]

    def test_blank_description_is_no_change(self, make_record):
        records = [make_record(10, 5, offset=0, description=""), make_record(10, 5, offset=1)]

        groups = group_by_change(records)

        assert len(groups) == 1
        assert groups[0].change_description is None
        assert groups[0].summary.label == NO_CHANGE_LABEL

    def test_literal_sentinel_does_not_merge(self, make_record):
        """A real description equal to the sentinel text stays a separate group."""
        records = [
            make_record(10, 5, offset=0, description=NO_CHANGE_LABEL),
            make_record(10, 5, offset=1),
        ]

        groups = group_by_change(records)

        assert len(groups) == 2
        assert [g.change_description for g in groups] == [NO_CHANGE_LABEL, None]

    def test_empty(self):
        assert group_by_change([]) == []


# =============================================================================
# filter_by_temperature_range
# =============================================================================


class TestFilterByTemperatureRange:
    @pytest.fixture
    def records(self, make_record):
        return [make_record(10, t, offset=i) for i, t in enumerate([-5, 0, 5, 10])]

    def test_inside_range(self, records):
        result = filter_by_temperature_range(records, Decimal("-1"), Decimal("6"))
        assert [r.outdoor_avg_c for r in result] == [Decimal("0"), Decimal("5")]

    def test_bounds_inclusive(self, records):
        result = filter_by_temperature_range(records, Decimal("0"), Decimal("5"))
        assert [r.outdoor_avg_c for r in result] == [Decimal("0"), Decimal("5")]

    def test_inverted_range_is_empty(self, records):
        assert filter_by_temperature_range(records, Decimal("6"), Decimal("-1")) == []

    def test_keeps_order(self, records):
        result = filter_by_temperature_range(records, Decimal("-10"), Decimal("10"))
        assert result == records
