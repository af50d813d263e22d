"""
Recently-used command ids.

A capped, duplicate-free, most-recent-first list of command ids persisted as
a JSON array under one key of an injected key-value storage. Reading never
fails: anything that is not a JSON array of strings reads as an empty list.
"""

from __future__ import annotations

import json
import logging

from .config.constants import MAX_RECENT, RECENT_KEY
from .exceptions import StorageError
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


def _dedupe(ids: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for command_id in ids:
        if command_id not in seen:
            seen.add(command_id)
            result.append(command_id)
    return result


class RecencyStore:
    """Most-recently-used list of command ids."""

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = RECENT_KEY,
        max_items: int = MAX_RECENT,
    ):
        self.storage = storage
        self.key = key
        self.max_items = max_items

    def load(self) -> list[str]:
        """Return the stored ids, most recent first. Never raises."""
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            logger.debug("Discarding malformed recency data under %s", self.key)
            return []
        if not isinstance(value, list) or not all(isinstance(i, str) for i in value):
            logger.debug("Discarding recency data under %s: not a list of strings", self.key)
            return []
        return _dedupe(value)[: self.max_items]

    def record(self, command_id: str) -> list[str]:
        """Move ``command_id`` to the front and persist. Returns the new list."""
        updated = [command_id] + [i for i in self.load() if i != command_id]
        updated = updated[: self.max_items]
        try:
            self.storage.set(self.key, json.dumps(updated))
        except StorageError as e:
            # A failed write never blocks dispatch
            logger.warning("Could not persist recent commands: %s", e)
        return updated
