"""Daily efficiency record entities."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class DailyRecord:
    """A single day's heat pump measurements, as stored.

    At most one record exists per calendar date; uniqueness is enforced by
    the repository and the service, never by the analysis functions.
    """

    date: date
    electricity_kwh: Decimal
    outdoor_avg_c: Decimal
    id: Optional[int] = None
    outdoor_high_c: Optional[Decimal] = None
    outdoor_low_c: Optional[Decimal] = None
    indoor_avg_c: Optional[Decimal] = None
    comfort_score: Optional[int] = None  # 1-5
    change_active: bool = False
    change_description: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"{self.date.isoformat()} ({self.electricity_kwh} kWh @ {self.outdoor_avg_c}°C)"


@dataclass
class EnrichedRecord(DailyRecord):
    """A DailyRecord with its derived HDD metrics attached.

    Derived fields are computed on every read and never persisted.
    """

    heating_degree_days: Decimal = Decimal("0")
    normalised_efficiency: Optional[Decimal] = None  # kWh per HDD, lower is better

    @property
    def is_analysable(self) -> bool:
        """Whether this day had any heating demand."""
        return self.heating_degree_days > 0


@dataclass
class RecordInput:
    """User-supplied fields for creating or updating a daily record."""

    date: date
    electricity_kwh: Decimal
    outdoor_avg_c: Decimal
    outdoor_high_c: Optional[Decimal] = None
    outdoor_low_c: Optional[Decimal] = None
    indoor_avg_c: Optional[Decimal] = None
    comfort_score: Optional[int] = None
    change_active: bool = False
    change_description: Optional[str] = None
    notes: Optional[str] = None
