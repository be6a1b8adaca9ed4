# src/lexilens/core/storage.py
"""
Client-held storage for history and quota records.

Each client owns a keyspace "lexilens:<client_id>" in its own Redis.
Records are JSON values under "<prefix>:<name>".
"""

import json
from typing import Any

import redis
from loguru import logger

from lexilens.config import CLIENT_ID, REDIS_URL


KEY_ROOT = "lexilens"


def connect(url: str = REDIS_URL) -> redis.Redis:
    return redis.Redis.from_url(url)


class ClientStorage:
    def __init__(self, client: redis.Redis, client_id: str = CLIENT_ID):
        self.client = client
        self.client_id = client_id
        self.prefix = f"{KEY_ROOT}:{client_id}"

    def key(self, name: str) -> str:
        return f"{self.prefix}:{name}"

    def get_json(self, name: str) -> Any | None:
        """Read a record. Missing or unreadable records come back as None."""
        raw = self.client.get(self.key(name))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Ignoring unreadable record {}", self.key(name))
            return None

    def set_json(self, name: str, value: Any, pipe=None) -> None:
        """Write a record, or queue the write on `pipe`."""
        (pipe if pipe is not None else self.client).set(self.key(name), json.dumps(value))

    def delete(self, name: str) -> None:
        self.client.delete(self.key(name))

    def pipeline(self):
        """A MULTI/EXEC pipeline: queued writes commit together."""
        return self.client.pipeline(transaction=True)
