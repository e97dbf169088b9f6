"""Efficiency record repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from ..entities.daily_record import DailyRecord


class EfficiencyRepository(ABC):
    """Abstract repository for daily efficiency records."""

    @abstractmethod
    def get_records(
        self,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[DailyRecord]:
        """
        Retrieve records within an optional date range.

        Args:
            from_date: Start date (inclusive, optional)
            to_date: End date (inclusive, optional)

        Returns:
            List of DailyRecord entities ordered by date ascending
        """
        pass

    @abstractmethod
    def get_by_id(self, record_id: int) -> Optional[DailyRecord]:
        """
        Retrieve a single record.

        Args:
            record_id: Record identifier

        Returns:
            The record, or None if it does not exist
        """
        pass

    @abstractmethod
    def exists_for_date(self, day: date, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether a record already holds the given date.

        Args:
            day: Calendar date to check
            exclude_id: Record id to ignore (the record being updated)

        Returns:
            True if another record exists for that date
        """
        pass

    @abstractmethod
    def add(self, record: DailyRecord) -> None:
        """
        Stage a new record and assign its id.

        Args:
            record: Record to add
        """
        pass

    @abstractmethod
    def delete(self, record: DailyRecord) -> None:
        """
        Stage removal of a record.

        Args:
            record: Record to remove
        """
        pass

    @abstractmethod
    def save(self) -> None:
        """Persist all staged changes."""
        pass
