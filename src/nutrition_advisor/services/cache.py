"""Cache for AI nutrition estimates."""

from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from nutrition_advisor.domain.nutrition import NutritionRecord


class EstimateCache(Protocol):
    """Stores nutrition estimates keyed by normalized food name."""

    def get(self, name: str) -> NutritionRecord | None:
        """Return a cached estimate if present and not expired."""

    def put(self, name: str, record: NutritionRecord) -> None:
        """Store an estimate."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _Entry:
    record: NutritionRecord
    expires_at: datetime


@dataclass
class InMemoryEstimateCache(EstimateCache):
    """Bounded per-process cache; oldest entries are evicted first."""

    ttl_seconds: int = 3600
    max_entries: int = 512
    clock: Callable[[], datetime] = _utcnow
    _entries: OrderedDict[str, _Entry] = field(default_factory=OrderedDict)

    def get(self, name: str) -> NutritionRecord | None:
        """Return the estimate for ``name`` unless it has expired."""
        entry = self._entries.get(name)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            del self._entries[name]
            return None
        return entry.record

    def put(self, name: str, record: NutritionRecord) -> None:
        """Store an estimate with the configured TTL."""
        expires_at = self.clock() + timedelta(seconds=self.ttl_seconds)
        self._entries[name] = _Entry(record=record, expires_at=expires_at)
        self._entries.move_to_end(name)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
