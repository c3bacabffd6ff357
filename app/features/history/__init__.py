"""Session history feature module"""

from app.features.history.api import router
from app.features.history.repository import SessionRecordRepository, SESSIONS_STORAGE_KEY
from app.features.history.recorder import SessionRecorder
from app.features.history.reports import build_daily_reports, sessions_for_date, group_by_date
from app.features.history.domain import SessionRecord, DailyReport

__all__ = [
    "router",
    "SessionRecordRepository",
    "SESSIONS_STORAGE_KEY",
    "SessionRecorder",
    "build_daily_reports",
    "sessions_for_date",
    "group_by_date",
    "SessionRecord",
    "DailyReport",
]
