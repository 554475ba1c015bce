"""File-backed key/value storage for client state"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    String key/value storage persisted as a single JSON object.

    Every write re-reads the file, replaces one key and rewrites the whole
    file. Concurrent writers are not coordinated: the last write wins.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as e:
            logger.error(f"Local storage file {self.path} is corrupt, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Local storage file {self.path} does not hold an object, starting empty")
            return {}
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        """Get the stored string for key, or None"""
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store a string under key"""
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        """Remove key if present"""
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        """Remove every key"""
        self._write({})
