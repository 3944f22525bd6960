from __future__ import annotations

from typing import Any

import pytest

import bot
from services.config import BotSettings


class _FakeServer:
    def __init__(self, config: Any) -> None:
        self.config = config
        self.served = False

    async def serve(self) -> None:
        self.served = True


class _FakeBot:
    def __init__(self) -> None:
        self.token: str | None = None

    async def __aenter__(self) -> _FakeBot:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False

    async def start(self, token: str) -> None:
        self.token = token


@pytest.mark.anyio
async def test_run_passes_log_level_to_health_server(monkeypatch: pytest.MonkeyPatch) -> None:
    configs: list[dict[str, Any]] = []
    servers: list[_FakeServer] = []
    fake_bot = _FakeBot()

    def _config(app: Any, **kwargs: Any) -> dict[str, Any]:
        configs.append(kwargs)
        return kwargs

    def _server(config: Any) -> _FakeServer:
        server = _FakeServer(config)
        servers.append(server)
        return server

    monkeypatch.setattr(bot.uvicorn, "Config", _config)
    monkeypatch.setattr(bot.uvicorn, "Server", _server)
    monkeypatch.setattr(bot, "build_bot", lambda: fake_bot)

    settings = BotSettings(discord_token="t", health_host="127.0.0.1", health_port=8081, log_level="DEBUG")
    await bot.run(settings)

    assert configs == [{"host": "127.0.0.1", "port": 8081, "log_level": "debug"}]
    assert servers[0].served
    assert fake_bot.token == "t"
