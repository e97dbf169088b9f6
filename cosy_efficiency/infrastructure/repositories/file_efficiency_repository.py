"""CSV/Excel file-backed efficiency record repository implementation."""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional
import pandas as pd
from ...domain.entities.daily_record import DailyRecord
from ...domain.repositories.efficiency_repository import EfficiencyRepository

logger = logging.getLogger(__name__)

COLUMNS = [
    "id",
    "date",
    "electricity_kwh",
    "outdoor_avg_c",
    "outdoor_high_c",
    "outdoor_low_c",
    "indoor_avg_c",
    "comfort_score",
    "change_active",
    "change_description",
    "notes",
    "created_at",
    "updated_at",
]


def _decimal(value: str) -> Optional[Decimal]:
    return Decimal(value) if value else None


def _to_cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


class FileEfficiencyRepository(EfficiencyRepository):
    """Repository for daily efficiency records stored in a CSV or Excel file.

    Records are held in memory; ``add``/``delete`` and in-place edits are
    written back on ``save``. A missing file is treated as an empty store.
    """

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV (or .xlsx) file with daily records
        """
        self.data_file = Path(data_file)
        self._records: List[DailyRecord] = self._load()

    def _read_frame(self) -> pd.DataFrame:
        # Read everything as text so numeric precision is preserved exactly
        if self.data_file.suffix == ".xlsx":
            df = pd.read_excel(self.data_file, dtype=str, engine="openpyxl")
        else:
            df = pd.read_csv(self.data_file, dtype=str, keep_default_na=False)
        return df.fillna("")

    def _load(self) -> List[DailyRecord]:
        if not self.data_file.exists():
            logger.info(f"No efficiency data file at {self.data_file}, starting empty")
            return []

        logger.info(f"Loading efficiency records from {self.data_file}")
        try:
            df = self._read_frame()
        except Exception as e:
            logger.error(f"Error reading efficiency data file: {e}")
            raise

        missing = [c for c in ("id", "date", "electricity_kwh", "outdoor_avg_c") if c not in df]
        if missing:
            raise ValueError(f"Efficiency data file {self.data_file} is missing columns: {missing}")

        # Optional columns may be absent in hand-edited files
        for col in COLUMNS:
            if col not in df.columns:
                df[col] = ""

        result = []
        for _, row in df.iterrows():
            try:
                record = DailyRecord(
                    id=int(row["id"]),
                    date=date.fromisoformat(row["date"]),
                    electricity_kwh=Decimal(row["electricity_kwh"]),
                    outdoor_avg_c=Decimal(row["outdoor_avg_c"]),
                    outdoor_high_c=_decimal(row["outdoor_high_c"]),
                    outdoor_low_c=_decimal(row["outdoor_low_c"]),
                    indoor_avg_c=_decimal(row["indoor_avg_c"]),
                    comfort_score=int(row["comfort_score"]) if row["comfort_score"] else None,
                    change_active=row["change_active"].strip().lower() in ("true", "1", "yes"),
                    change_description=row["change_description"] or None,
                    notes=row["notes"] or None,
                    created_at=(
                        datetime.fromisoformat(row["created_at"]) if row["created_at"] else None
                    ),
                    updated_at=(
                        datetime.fromisoformat(row["updated_at"]) if row["updated_at"] else None
                    ),
                )
            except (ValueError, InvalidOperation) as e:
                logger.error(f"Invalid efficiency record row {row.to_dict()}: {e}")
                raise ValueError(f"Invalid row in {self.data_file}: {e}") from e
            result.append(record)

        logger.info(f"Loaded {len(result)} efficiency records")
        return result

    def get_records(
        self,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[DailyRecord]:
        """Retrieve records in the date range, ordered by date."""
        records = [
            r
            for r in self._records
            if (from_date is None or r.date >= from_date)
            and (to_date is None or r.date <= to_date)
        ]
        return sorted(records, key=lambda r: r.date)

    def get_by_id(self, record_id: int) -> Optional[DailyRecord]:
        """Retrieve a record by id."""
        return next((r for r in self._records if r.id == record_id), None)

    def exists_for_date(self, day: date, exclude_id: Optional[int] = None) -> bool:
        """Check whether another record already holds the date."""
        return any(
            r.date == day and (exclude_id is None or r.id != exclude_id) for r in self._records
        )

    def add(self, record: DailyRecord) -> None:
        """Assign the next id and stage the record."""
        record.id = max((r.id for r in self._records), default=0) + 1
        self._records.append(record)

    def delete(self, record: DailyRecord) -> None:
        """Stage removal of the record."""
        self._records = [r for r in self._records if r.id != record.id]

    def save(self) -> None:
        """Write all records to the data file."""
        logger.info(f"Saving {len(self._records)} efficiency records to {self.data_file}")

        rows = [
            {col: _to_cell(getattr(r, col)) for col in COLUMNS}
            for r in sorted(self._records, key=lambda r: r.date)
        ]
        df = pd.DataFrame(rows, columns=COLUMNS)

        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        if self.data_file.suffix == ".xlsx":
            df.to_excel(self.data_file, index=False, engine="openpyxl")
        else:
            df.to_csv(self.data_file, index=False)

        logger.info("Efficiency records saved successfully")
