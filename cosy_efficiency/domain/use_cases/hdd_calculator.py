"""Heating degree days and HDD-normalised efficiency.

Pure functions with no I/O and no failure modes. All arithmetic is done
on ``Decimal`` so stored precision survives unchanged.

HDD = max(0, base - outdoor average). Days at or above the base
temperature have no heating demand, so their normalised efficiency
(kWh / HDD) is undefined and reported as None rather than 0 or infinity.
"""

from dataclasses import fields
from decimal import Decimal
from typing import Optional

from ..entities.daily_record import DailyRecord, EnrichedRecord

# Base temperature for heating degree days (°C)
BASE_TEMPERATURE_C = Decimal("15.5")

_ZERO = Decimal("0")


def compute_hdd(outdoor_avg_c: Decimal, base_temp_c: Decimal = BASE_TEMPERATURE_C) -> Decimal:
    """Calculate heating degree days for one day.

    Args:
        outdoor_avg_c: Average outdoor temperature for the day (°C).
        base_temp_c: Base/comfort temperature (°C).

    Returns:
        Heating degree days, never negative.

    Example:
        >>> compute_hdd(Decimal("10.0"))
        Decimal('5.5')
        >>> compute_hdd(Decimal("20.0"))
        Decimal('0')

    """
    return max(_ZERO, base_temp_c - outdoor_avg_c)


def compute_normalised_efficiency(electricity_kwh: Decimal, hdd: Decimal) -> Optional[Decimal]:
    """Electricity used per heating degree day, or None when HDD is zero.

    Lower values mean a more efficient system.
    """
    if hdd > 0:
        return electricity_kwh / hdd
    return None


def to_enriched(record: DailyRecord, base_temp_c: Decimal = BASE_TEMPERATURE_C) -> EnrichedRecord:
    """Copy a raw record and attach its derived HDD metrics.

    The input record is not modified.
    """
    hdd = compute_hdd(record.outdoor_avg_c, base_temp_c)
    raw = {f.name: getattr(record, f.name) for f in fields(DailyRecord)}
    return EnrichedRecord(
        **raw,
        heating_degree_days=hdd,
        normalised_efficiency=compute_normalised_efficiency(record.electricity_kwh, hdd),
    )
