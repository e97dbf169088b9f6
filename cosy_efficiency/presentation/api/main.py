"""FastAPI main application."""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from fastapi import Depends, FastAPI, HTTPException, Query, Response, status
from ...application.services.efficiency_analyzer_service import EfficiencyAnalyzerService
from ...domain.exceptions import DuplicateRecordDateError, RecordNotFoundError
from ...infrastructure.repositories.file_efficiency_repository import FileEfficiencyRepository
from .schemas import (
    ChangeGroupResponse,
    ComparisonResponse,
    EfficiencyRecordRequest,
    EfficiencyRecordResponse,
)
from config.settings import (
    ANALYSIS_SETTINGS,
    API_SETTINGS,
    EFFICIENCY_DATA_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize repository and service
efficiency_repo = FileEfficiencyRepository(str(EFFICIENCY_DATA_FILE))

service = EfficiencyAnalyzerService(
    repository=efficiency_repo,
    analysis_settings=ANALYSIS_SETTINGS,
)


def get_service() -> EfficiencyAnalyzerService:
    """Service dependency (overridable in tests)."""
    return service


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": API_SETTINGS["title"],
        "version": API_SETTINGS["version"],
        "endpoints": {
            "records": "/api/efficiency/records",
            "comparison": "/api/efficiency/comparison",
            "groups": "/api/efficiency/groups",
            "filter": "/api/efficiency/filter",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/api/efficiency/records", response_model=List[EfficiencyRecordResponse])
def list_records(
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> List[EfficiencyRecordResponse]:
    """List daily records with derived HDD metrics, ordered by date."""
    return [
        EfficiencyRecordResponse.model_validate(r) for r in svc.list_records(from_date, to_date)
    ]


@app.get("/api/efficiency/records/{record_id}", response_model=EfficiencyRecordResponse)
def get_record(
    record_id: int,
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> EfficiencyRecordResponse:
    """Get a single daily record."""
    try:
        return EfficiencyRecordResponse.model_validate(svc.get_record(record_id))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post(
    "/api/efficiency/records",
    response_model=EfficiencyRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_record(
    request: EfficiencyRecordRequest,
    response: Response,
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> EfficiencyRecordResponse:
    """
    Create a daily record.

    Args:
        request: Daily measurements; only one record per date is allowed

    Returns:
        The stored record with derived metrics
    """
    try:
        record = svc.create_record(request.to_input())
    except DuplicateRecordDateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Create record error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    response.headers["Location"] = f"/api/efficiency/records/{record.id}"
    return EfficiencyRecordResponse.model_validate(record)


@app.put("/api/efficiency/records/{record_id}", response_model=EfficiencyRecordResponse)
def update_record(
    record_id: int,
    request: EfficiencyRecordRequest,
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> EfficiencyRecordResponse:
    """Update an existing daily record."""
    try:
        record = svc.update_record(record_id, request.to_input())
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DuplicateRecordDateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Update record error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return EfficiencyRecordResponse.model_validate(record)


@app.delete("/api/efficiency/records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_record(
    record_id: int,
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> Response:
    """Delete a daily record."""
    try:
        svc.delete_record(record_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Delete record error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/api/efficiency/comparison", response_model=ComparisonResponse)
def get_comparison(
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> ComparisonResponse:
    """
    Compare baseline days (change inactive) against change-period days.

    Returns:
        Period summaries, whether kWh per HDD improved, the percentage
        change and any advisory warnings
    """
    try:
        return ComparisonResponse.model_validate(svc.compare_periods(from_date, to_date))
    except Exception as e:
        logger.error(f"Comparison error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/efficiency/groups", response_model=List[ChangeGroupResponse])
def get_groups(
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> List[ChangeGroupResponse]:
    """Records grouped by change description with per-group summaries."""
    try:
        return [ChangeGroupResponse.from_group(g) for g in svc.group_by_change(from_date, to_date)]
    except Exception as e:
        logger.error(f"Grouping error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/efficiency/filter", response_model=List[EfficiencyRecordResponse])
def filter_records(
    min_outdoor_c: Decimal = Query(..., alias="minOutdoorC"),
    max_outdoor_c: Decimal = Query(..., alias="maxOutdoorC"),
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    svc: EfficiencyAnalyzerService = Depends(get_service),
) -> List[EfficiencyRecordResponse]:
    """Records whose average outdoor temperature lies within [min, max]."""
    records = svc.filter_by_temperature(min_outdoor_c, max_outdoor_c, from_date, to_date)
    return [EfficiencyRecordResponse.model_validate(r) for r in records]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
