"""Environment-driven settings for the bot process."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class BotSettings:
    discord_token: str
    health_host: str = "0.0.0.0"
    health_port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return (
            f"BotSettings(health_host={self.health_host!r}, health_port={self.health_port}, "
            f"log_level={self.log_level!r})"
        )


def load_settings() -> BotSettings:
    token = os.environ.get("DISCORD_TOKEN", "").strip()
    if not token:
        raise RuntimeError("DISCORD_TOKEN is not set. Set it in backend/.env or the environment.")

    raw_port = os.environ.get("PORT", "").strip() or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {raw_port!r}") from None

    return BotSettings(
        discord_token=token,
        health_host=os.environ.get("HEALTH_HOST", "").strip() or "0.0.0.0",
        health_port=port,
        log_level=(os.environ.get("LOG_LEVEL", "").strip() or "INFO").upper(),
    )
