"""Session log persistence on top of client-local storage"""

import json
import logging
from typing import List

from pydantic import ValidationError

from app.infra.local_storage import LocalStorage
from app.features.history.domain import SessionRecord

logger = logging.getLogger(__name__)

SESSIONS_STORAGE_KEY = "studySessionsData"


class SessionRecordRepository:
    """
    Append-only log of SessionRecords stored under a single well-known key.

    The log is a flat JSON array. Anything unreadable degrades to an empty
    history instead of raising.
    """

    def __init__(self, storage: LocalStorage, key: str = SESSIONS_STORAGE_KEY):
        self._storage = storage
        self._key = key

    def _load_raw(self) -> list:
        raw = self._storage.get_item(self._key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Failed to parse session history, treating it as empty: {e}")
            return []
        if not isinstance(data, list):
            logger.warning("Session history is not a list, treating it as empty")
            return []
        return data

    def find_all(self) -> List[SessionRecord]:
        """All records in insertion order"""
        try:
            return [SessionRecord.model_validate(item) for item in self._load_raw()]
        except ValidationError as e:
            logger.warning(f"Session history contains invalid records, treating it as empty: {e}")
            return []

    def last_id(self) -> int:
        records = self.find_all()
        return records[-1].id if records else 0

    def append(self, record: SessionRecord) -> SessionRecord:
        data = self._load_raw()
        data.append(record.model_dump(mode="json", by_alias=True, exclude_none=True))
        self._storage.set_item(self._key, json.dumps(data))
        logger.debug(f"Appended {record.type.value} session record {record.id}")
        return record

    def clear(self) -> None:
        """Irreversibly wipe the whole log"""
        self._storage.remove_item(self._key)
        logger.info("Session history cleared")
