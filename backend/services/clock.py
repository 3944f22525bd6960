"""Time and randomness seams so sessions can be driven deterministically in tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
