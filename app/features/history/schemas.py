"""Request and response schemas for the session history API"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.features.timer.domain import Phase
from app.features.history.domain import DailyReport, SessionRecord


class DailyReportListResponse(BaseModel):
    """Response model for the report overview"""
    reports: List[DailyReport]


class DaySessionsResponse(BaseModel):
    """Response model for one day's sessions, most recent first"""
    date: str
    sessions: List[SessionRecord]


class RecordSessionRequest(BaseModel):
    """
    Request model for logging a phase from the client.

    Without startedId this records a phase start. With startedId it records
    the natural completion of that earlier start.
    """
    model_config = ConfigDict(populate_by_name=True)

    type: Phase
    duration: int = Field(gt=0)
    started_id: Optional[int] = Field(default=None, alias="startedId")


class ClearHistoryResponse(BaseModel):
    """Response model for wiping the session log"""
    success: bool
    message: str
