from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict


class CacheEntry(BaseModel):
    """A cached response payload for one request URL."""

    model_config = ConfigDict(frozen=True)

    data: Any  # Shape depends on the endpoint
    fetched_at: datetime

    def age(self, now: datetime | None = None) -> timedelta:
        return (now or datetime.now(UTC)) - self.fetched_at

    def is_fresh(self, ttl: timedelta, now: datetime | None = None) -> bool:
        return self.age(now) < ttl
