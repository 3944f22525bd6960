from __future__ import annotations

import asyncio
import logging
import os

import uvicorn
from dotenv import load_dotenv

from app.main import app as api_app
from services.config import BotSettings, load_settings
from services.discord_gateway import GameBot
from services.dialogue_engine import DialogueEngine
from services.dispatcher import Dispatcher
from services.session_manager import SessionManager
from services.sweeper import SessionSweeper

# Load .env from backend dir (where bot.py runs)
load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

logger = logging.getLogger(__name__)


def build_bot() -> GameBot:
    """Wire the single SessionManager and DialogueEngine into the Discord client."""
    sessions = SessionManager()
    dialogue = DialogueEngine()
    for scene_key, next_key in dialogue.dangling_edges():
        logger.warning("[startup] Scene %r links to missing scene %r; it will show the fallback.", scene_key, next_key)
    sweeper = SessionSweeper(sessions)
    return GameBot(Dispatcher(sessions, dialogue), sweeper)


async def run(settings: BotSettings) -> None:
    bot = build_bot()
    server = uvicorn.Server(
        uvicorn.Config(api_app, host=settings.health_host, port=settings.health_port, log_level=settings.log_level.lower())
    )
    logger.info("[startup] Health server on %s:%d", settings.health_host, settings.health_port)
    async with bot:
        await asyncio.gather(server.serve(), bot.start(settings.discord_token))


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run(settings))


if __name__ == "__main__":
    main()
