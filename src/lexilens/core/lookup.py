# src/lexilens/core/lookup.py
"""
Lookup orchestration.

    validate -> quota check -> backend (one call) -> commit quota + history

Nothing is written unless the whole round trip succeeds, and the quota and
history writes land in a single MULTI/EXEC transaction. Callers must not run
two lookups for the same client at once.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

import redis
from loguru import logger

from lexilens.core.define import DefinitionBackend
from lexilens.core.history import HistoryStore
from lexilens.core.quota import MAX_QUERIES_PER_DAY, QuotaTracker, as_utc
from lexilens.core.result import LookupResult
from lexilens.core.storage import ClientStorage
from lexilens.core.validate import ValidationError, validate


QUOTA_MESSAGE = f"You've used all {MAX_QUERIES_PER_DAY} lookups for today. Try again tomorrow."
BACKEND_MESSAGE = "Failed to fetch definition"


class FailureKind(Enum):
    INVALID = "invalid"
    QUOTA_EXCEEDED = "quota_exceeded"
    BACKEND_FAILURE = "backend_failure"


@dataclass(frozen=True)
class LookupFailure:
    kind: FailureKind
    reason: ValidationError | None = None

    @property
    def message(self) -> str:
        if self.kind is FailureKind.INVALID:
            return self.reason.value
        if self.kind is FailureKind.QUOTA_EXCEEDED:
            return QUOTA_MESSAGE
        return BACKEND_MESSAGE


class LookupClient:
    def __init__(self, backend: DefinitionBackend, storage: ClientStorage):
        self.backend = backend
        self.storage = storage
        self.quota = QuotaTracker(storage)
        self.history = HistoryStore(storage)

    def lookup(self, raw: str, now: datetime | None = None) -> LookupResult | LookupFailure:
        now = as_utc(now) if now else datetime.now(timezone.utc)

        query = validate(raw)
        if isinstance(query, ValidationError):
            return LookupFailure(FailureKind.INVALID, query)

        if self.quota.remaining(now) == 0:
            logger.info("Daily quota used up for client {}", self.storage.client_id)
            return LookupFailure(FailureKind.QUOTA_EXCEEDED)

        outcome = self.backend.define(query)
        if not outcome.success:
            logger.warning("Lookup of {!r} failed: {}", query, outcome.message)
            return LookupFailure(FailureKind.BACKEND_FAILURE)

        if not self._commit(query, now):
            return LookupFailure(FailureKind.QUOTA_EXCEEDED)

        usage = outcome.data.usage
        logger.info(
            "Looked up {!r}: {} prompt + {} completion tokens",
            query, usage.prompt_tokens, usage.completion_tokens,
        )
        return outcome.data

    def relookup(self, index: int, now: datetime | None = None) -> LookupResult | LookupFailure:
        """Look up a history entry again (0 = most recent)."""
        query = self.history.get(index)
        if query is None:
            raise IndexError(f"No history entry at {index}")
        return self.lookup(query, now)

    def _commit(self, query: str, now: datetime) -> bool:
        with self.storage.pipeline() as pipe:
            decision = self.quota.check_and_consume(now, pipe=pipe)
            if not decision.allowed:
                return False
            self.history.add(query, pipe=pipe)
            try:
                pipe.execute()
            except redis.RedisError:
                # Drop the in-memory view of writes that never landed
                self.quota.reload()
                self.history.reload()
                raise
        return True
