# src/lexilens/core/history.py
"""
Recent lookups, most recent first.

At most MAX_HISTORY entries, no duplicates. Written through on every change.
"""

from loguru import logger

from lexilens.core.storage import ClientStorage
from lexilens.core.validate import validate


MAX_HISTORY = 5
HISTORY_RECORD = "history"


class HistoryStore:
    def __init__(self, storage: ClientStorage, limit: int = MAX_HISTORY):
        self.storage = storage
        self.limit = limit
        self._entries = self._load()

    def _load(self) -> list[str]:
        data = self.storage.get_json(HISTORY_RECORD)
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(e, str) for e in data):
            logger.warning("Ignoring malformed history record")
            return []
        entries = []
        for entry in data:
            if validate(entry) == entry and entry not in entries:
                entries.append(entry)
        if len(entries) != len(data):
            logger.warning("Dropped {} invalid or repeated history entries", len(data) - len(entries))
        return entries[: self.limit]

    def reload(self) -> None:
        self._entries = self._load()

    def add(self, query: str, pipe=None) -> list[str]:
        """Put `query` in front, dropping any earlier copy of it."""
        entries = [query] + [e for e in self._entries if e != query]
        entries = entries[: self.limit]

        self.storage.set_json(HISTORY_RECORD, entries, pipe=pipe)
        self._entries = entries
        return list(entries)

    def all(self) -> list[str]:
        return list(self._entries)

    def get(self, index: int) -> str | None:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self.storage.delete(HISTORY_RECORD)
        self._entries = []
