"""Request/response models for the efficiency API."""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from ...domain.entities.analysis_results import ChangeGroup
from ...domain.entities.daily_record import RecordInput

# Decimals stay exact internally and go out as JSON numbers
JsonDecimal = Annotated[
    Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")
]


class ApiModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EfficiencyRecordRequest(ApiModel):
    """Request model for creating or updating a daily record."""

    date: date
    electricity_kwh: Decimal = Field(..., ge=0, alias="electricityKWh", description="kWh used")
    outdoor_avg_c: Decimal = Field(..., description="Average outdoor temperature (°C)")
    outdoor_high_c: Optional[Decimal] = None
    outdoor_low_c: Optional[Decimal] = None
    indoor_avg_c: Optional[Decimal] = None
    comfort_score: Optional[int] = Field(None, ge=1, le=5, description="Subjective comfort 1-5")
    change_active: bool = False
    change_description: Optional[str] = None
    notes: Optional[str] = None

    def to_input(self) -> RecordInput:
        return RecordInput(**self.model_dump(by_alias=False))


class EfficiencyRecordResponse(ApiModel):
    """Response model for a daily record with derived HDD metrics."""

    id: int
    date: date
    electricity_kwh: JsonDecimal = Field(..., alias="electricityKWh")
    outdoor_avg_c: JsonDecimal
    outdoor_high_c: Optional[JsonDecimal] = None
    outdoor_low_c: Optional[JsonDecimal] = None
    indoor_avg_c: Optional[JsonDecimal] = None
    comfort_score: Optional[int] = None
    change_active: bool
    change_description: Optional[str] = None
    notes: Optional[str] = None
    heating_degree_days: JsonDecimal
    normalised_efficiency: Optional[JsonDecimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PeriodSummaryResponse(ApiModel):
    """Response model for a period summary."""

    label: str
    record_count: int
    avg_electricity_kwh: Optional[JsonDecimal] = Field(None, alias="avgElectricityKWh")
    avg_outdoor_avg_c: Optional[JsonDecimal] = None
    avg_hdd: Optional[JsonDecimal] = Field(None, alias="avgHDD")
    avg_normalised_efficiency: Optional[JsonDecimal] = None
    analysable_records: int


class ComparisonResponse(ApiModel):
    """Response model for a baseline vs change comparison."""

    baseline: PeriodSummaryResponse
    change: PeriodSummaryResponse
    improved: Optional[bool] = None
    change_pct: Optional[JsonDecimal] = None
    warnings: List[str] = []


class ChangeGroupResponse(ApiModel):
    """Response model for records grouped by change description."""

    change_description: str
    summary: PeriodSummaryResponse
    records: List[EfficiencyRecordResponse]

    @classmethod
    def from_group(cls, group: ChangeGroup) -> "ChangeGroupResponse":
        return cls(
            change_description=group.label,
            summary=PeriodSummaryResponse.model_validate(group.summary),
            records=[EfficiencyRecordResponse.model_validate(r) for r in group.records],
        )
