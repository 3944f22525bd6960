"""In-memory guessing-game sessions, one per user."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta

from models.session import (
    MAX_ATTEMPTS,
    SESSION_TTL,
    TARGET_RANGE,
    Continue,
    GuessOutcome,
    GuessSession,
    Hint,
    Lose,
    Win,
)
from services.clock import Clock, RandomSource, SystemClock

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Owns the user -> GuessSession mapping.

    None of the methods await, so on a single event loop every read or mutation
    of the mapping completes before the sweeper or another handler can run.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        ttl: timedelta = SESSION_TTL,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self._clock = clock or SystemClock()
        self._rng = rng or random.Random()
        self._ttl = ttl
        self._max_attempts = max_attempts
        self._sessions: dict[str, GuessSession] = {}

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def start(self, user_id: str) -> GuessSession:
        """Create a fresh session for user_id, replacing any existing one."""
        low, high = TARGET_RANGE
        session = GuessSession(
            user_id=user_id,
            target=self._rng.randint(low, high),
            max_attempts=self._max_attempts,
            created_at=self._clock.now(),
        )
        if user_id in self._sessions:
            logger.info("[sessions] Restarting game for user=%s", user_id)
        self._sessions[user_id] = session
        logger.info("[sessions] Session started: user=%s active=%d", user_id, len(self._sessions))
        return session

    def submit_guess(self, user_id: str, guess: int) -> GuessOutcome | None:
        """
        Apply one guess. Returns None when the user has no active game.

        Win is checked before exhaustion, so a correct final guess still wins.
        """
        session = self._sessions.get(user_id)
        if session is None:
            return None

        session.attempts += 1
        if guess == session.target:
            del self._sessions[user_id]
            logger.info("[sessions] user=%s won in %d attempts", user_id, session.attempts)
            return Win(attempts=session.attempts, number=session.target)
        if session.attempts >= session.max_attempts:
            del self._sessions[user_id]
            logger.info("[sessions] user=%s lost after %d attempts", user_id, session.attempts)
            return Lose(attempts=session.attempts, number=session.target)

        hint = Hint.LOWER if guess > session.target else Hint.HIGHER
        return Continue(hint=hint, attempts=session.attempts, max_attempts=session.max_attempts)

    def sweep_expired(self, now: datetime | None = None) -> int:
        """Drop every session older than the TTL. Returns how many were removed."""
        now_dt = now or self._clock.now()
        expired = [
            user_id
            for user_id, session in self._sessions.items()
            if now_dt - session.created_at > self._ttl
        ]
        for user_id in expired:
            del self._sessions[user_id]
        if expired:
            logger.info(
                "[sessions] Swept %d expired session(s); %d still active",
                len(expired),
                len(self._sessions),
            )
        return len(expired)

    def get(self, user_id: str) -> GuessSession | None:
        return self._sessions.get(user_id)

    def has_session(self, user_id: str) -> bool:
        return user_id in self._sessions

    def count(self) -> int:
        return len(self._sessions)
