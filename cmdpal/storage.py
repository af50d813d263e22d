"""
Key-value persistence backends for the recency store.

Both backends satisfy the small ``KeyValueStorage`` protocol: string keys,
string values, ``get`` returning None for an absent key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from .exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Storage capability injected into the recency store."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage, used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """
    Storage backed by a single JSON object file.

    Every value is kept as a string under its key. A missing, unreadable or
    corrupt file reads as empty; the next successful write replaces it.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring state file %s: top level is not an object", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n")
        except OSError as e:
            raise StorageError("Failed to write state file", path=str(self.path)) from e
