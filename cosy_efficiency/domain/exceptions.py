"""Domain exceptions."""

from datetime import date


class EfficiencyError(Exception):
    """Base class for record management errors."""


class RecordNotFoundError(EfficiencyError, LookupError):
    """Raised when no record exists for the requested id."""

    def __init__(self, record_id: int):
        super().__init__(f"Efficiency record not found: {record_id}")
        self.record_id = record_id


class DuplicateRecordDateError(EfficiencyError, ValueError):
    """Raised when a second record would be stored for the same date."""

    def __init__(self, day: date):
        super().__init__(f"A record already exists for {day.isoformat()}.")
        self.date = day
