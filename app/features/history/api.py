"""Session history and daily report endpoints"""

import logging
from datetime import date as date_type

from fastapi import APIRouter, Depends, HTTPException

from app.infra.local_storage import get_local_storage
from app.features.history.repository import SessionRecordRepository
from app.features.history.recorder import SessionRecorder
from app.features.history.reports import build_daily_reports, sessions_for_date
from app.features.history.domain import SessionRecord
from app.features.history.schemas import (
    ClearHistoryResponse,
    DailyReportListResponse,
    DaySessionsResponse,
    RecordSessionRequest,
)

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/reports", tags=["reports"])


def get_session_repository() -> SessionRecordRepository:
    return SessionRecordRepository(get_local_storage())


@router.get("", response_model=DailyReportListResponse)
async def list_daily_reports(
    repository: SessionRecordRepository = Depends(get_session_repository)
):
    """Per-day study/break totals, newest day first"""
    return {"reports": build_daily_reports(repository.find_all())}


@router.get("/{day}", response_model=DaySessionsResponse)
async def get_day_sessions(
    day: str,
    repository: SessionRecordRepository = Depends(get_session_repository)
):
    """All session records of one local date (YYYY-MM-DD), most recent first"""
    try:
        target = date_type.fromisoformat(day)
    except ValueError:
        raise HTTPException(status_code=400, detail="date must be in YYYY-MM-DD format")

    return {
        "date": target.isoformat(),
        "sessions": sessions_for_date(repository.find_all(), target),
    }


@router.post("/sessions", response_model=SessionRecord)
async def record_session(
    request: RecordSessionRequest,
    repository: SessionRecordRepository = Depends(get_session_repository)
):
    """Append a phase start, or the completion of an earlier start, to the log"""
    recorder = SessionRecorder(repository)

    if request.started_id is None:
        return recorder.record_start(request.type, request.duration)

    records = repository.find_all()
    start_record = next(
        (r for r in records if r.id == request.started_id and not r.completed),
        None,
    )
    if start_record is None:
        raise HTTPException(status_code=404, detail=f"Session {request.started_id} not found")
    if start_record.type is not request.type:
        raise HTTPException(status_code=400, detail="Session type does not match the started session")
    if any(r.completed and r.started_id == start_record.id for r in records):
        raise HTTPException(status_code=409, detail=f"Session {start_record.id} is already completed")

    return recorder.record_completion(start_record)


@router.delete("", response_model=ClearHistoryResponse)
async def clear_history(
    repository: SessionRecordRepository = Depends(get_session_repository)
):
    """Irreversibly delete the whole session history"""
    repository.clear()
    return {"success": True, "message": "Session history cleared"}
