from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import StrEnum

MAX_ATTEMPTS = 3
TARGET_RANGE = (1, 10)
SESSION_TTL = timedelta(minutes=10)
SWEEP_INTERVAL = timedelta(minutes=5)


class Hint(StrEnum):
    HIGHER = "higher"
    LOWER = "lower"


@dataclass
class GuessSession:
    user_id: str
    target: int                            # drawn from TARGET_RANGE
    attempts: int = 0
    max_attempts: int = MAX_ATTEMPTS
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class Win:
    attempts: int
    number: int


@dataclass(frozen=True)
class Lose:
    attempts: int
    number: int


@dataclass(frozen=True)
class Continue:
    hint: Hint
    attempts: int
    max_attempts: int


GuessOutcome = Win | Lose | Continue
