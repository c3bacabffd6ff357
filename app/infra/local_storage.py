"""Client-local key-value storage backed by a JSON file"""
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from app.config import LOCAL_STORAGE_PATH

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    String key/value store persisted as one JSON object on disk.

    Mirrors the browser localStorage contract: values are strings, missing
    keys read as None. A file that cannot be parsed reads as empty.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read local storage at {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Local storage at {self._path} is not an object, ignoring it")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp_path, self._path)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


_local_storage: Optional[LocalStorage] = None


def get_local_storage() -> LocalStorage:
    """Get or create the LocalStorage singleton"""
    global _local_storage

    if _local_storage is None:
        _local_storage = LocalStorage(LOCAL_STORAGE_PATH)

    return _local_storage


def reset_local_storage():
    """Reset the LocalStorage singleton (useful for testing)"""
    global _local_storage
    _local_storage = None
