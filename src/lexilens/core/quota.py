# src/lexilens/core/quota.py
"""
Daily lookup quota, held by the client.

The counter lives in a rolling 24h window that starts when the counter is
(re)initialized. Only successful lookups are counted.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from loguru import logger

from lexilens.core.storage import ClientStorage


MAX_QUERIES_PER_DAY = 25
QUOTA_WINDOW = timedelta(hours=24)
QUOTA_RECORD = "quota"


def as_utc(moment: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class DenialReason(Enum):
    DAILY_LIMIT_REACHED = "daily_limit_reached"


@dataclass(frozen=True)
class QuotaState:
    count: int
    window_expiry: datetime

    @classmethod
    def fresh(cls, now: datetime) -> "QuotaState":
        return cls(count=0, window_expiry=as_utc(now) + QUOTA_WINDOW)

    def expired(self, now: datetime) -> bool:
        return as_utc(now) > self.window_expiry

    def to_dict(self) -> dict:
        return {"count": self.count, "window_expiry": self.window_expiry.isoformat()}

    @classmethod
    def from_dict(cls, data: dict) -> "QuotaState":
        count = int(data["count"])
        if count < 0:
            raise ValueError(f"negative quota count: {count}")
        expiry = as_utc(datetime.fromisoformat(data["window_expiry"]))
        return cls(count=count, window_expiry=expiry)


@dataclass(frozen=True)
class QuotaDecision:
    allowed: bool
    remaining: int
    reason: DenialReason | None = None


class QuotaTracker:
    def __init__(self, storage: ClientStorage, limit: int = MAX_QUERIES_PER_DAY):
        self.storage = storage
        self.limit = limit
        self._stored = self._load()

    def _load(self) -> QuotaState | None:
        data = self.storage.get_json(QUOTA_RECORD)
        if data is None:
            return None
        try:
            return QuotaState.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Resetting malformed quota record: {}", e)
            return None

    def reload(self) -> None:
        self._stored = self._load()

    def state(self, now: datetime) -> QuotaState:
        """The effective state at `now`; an expired window reads as a fresh one."""
        now = as_utc(now)
        if self._stored is None or self._stored.expired(now):
            return QuotaState.fresh(now)
        return self._stored

    def remaining(self, now: datetime) -> int:
        return max(0, self.limit - self.state(now).count)

    def check_and_consume(self, now: datetime, pipe=None) -> QuotaDecision:
        """
        Count one lookup against the quota.

        With `pipe`, the write is queued and only lands when the caller
        executes the pipeline.
        """
        current = self.state(now)
        if current.count >= self.limit:
            return QuotaDecision(False, 0, DenialReason.DAILY_LIMIT_REACHED)

        updated = QuotaState(count=current.count + 1, window_expiry=current.window_expiry)
        self.storage.set_json(QUOTA_RECORD, updated.to_dict(), pipe=pipe)
        self._stored = updated
        return QuotaDecision(True, self.limit - updated.count)

    def reset(self) -> None:
        self.storage.delete(QUOTA_RECORD)
        self._stored = None
