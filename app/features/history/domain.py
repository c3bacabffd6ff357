"""Domain models for study session history"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.features.timer.domain import Phase


class SessionRecord(BaseModel):
    """
    One fact in the append-only session log.

    A phase start is written with completed=False. When the phase runs out
    naturally a second record with completed=True is appended whose
    started_id points back at the start record. Records are never edited.
    Field aliases match the stored JSON layout.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    type: Phase
    started_at: datetime = Field(alias="date")
    duration_seconds: int = Field(alias="duration", ge=0)
    completed: bool = False
    started_id: Optional[int] = Field(default=None, alias="startedId")


class DailyReport(BaseModel):
    """Aggregate of all sessions for one local calendar date (derived, never stored)"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    date: str  # YYYY-MM-DD
    formatted_date: str
    total_study_time: int
    total_break_time: int
    completed_count: int
    incomplete_count: int
