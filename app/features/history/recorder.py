"""Session Recorder - appends phase start/completion facts to the session log"""

import logging
from datetime import datetime
from typing import Callable, Optional

from app.features.timer.domain import Phase
from app.features.history.domain import SessionRecord
from app.features.history.repository import SessionRecordRepository
from app.utils.datetime_helper import now_local

logger = logging.getLogger(__name__)


class SessionRecorder:
    """Writes SessionRecords with time-derived, strictly increasing ids"""

    def __init__(
        self,
        repository: SessionRecordRepository,
        clock: Callable[[], datetime] = now_local,
    ):
        self._repository = repository
        self._clock = clock
        self._last_id: Optional[int] = None

    def _next_id(self, at: datetime) -> int:
        if self._last_id is None:
            self._last_id = self._repository.last_id()
        candidate = int(at.timestamp() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def record_start(self, phase: Phase, duration_seconds: int) -> SessionRecord:
        """Append an incomplete record for a phase that just started"""
        started_at = self._clock()
        record = SessionRecord(
            id=self._next_id(started_at),
            type=phase,
            started_at=started_at,
            duration_seconds=duration_seconds,
            completed=False,
        )
        logger.info(f"Recording {phase.value} session start ({duration_seconds}s)")
        return self._repository.append(record)

    def record_completion(self, start_record: SessionRecord) -> SessionRecord:
        """Append the completion fact for a phase that ran out naturally"""
        record = SessionRecord(
            id=self._next_id(self._clock()),
            type=start_record.type,
            started_at=start_record.started_at,
            duration_seconds=start_record.duration_seconds,
            completed=True,
            started_id=start_record.id,
        )
        logger.info(f"Recording {record.type.value} session completion for {start_record.id}")
        return self._repository.append(record)
