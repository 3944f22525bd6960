"""Liveness endpoints. They report process status only and never touch game state."""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.models import HealthResponse

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Bot is running!"


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    uptime = time.monotonic() - _STARTED_AT
    logger.debug("[health] GET /health uptime=%.1fs", uptime)
    return HealthResponse(status="ok", uptime_seconds=round(uptime, 3), healthy=True)
