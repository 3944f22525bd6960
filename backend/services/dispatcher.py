"""Route classified chat events into the games and deliver the replies."""

from __future__ import annotations

import logging
from typing import Protocol, assert_never

from models.actions import (
    Action,
    AdventureStep,
    Ignore,
    InvalidGuess,
    SayHello,
    ShowHelp,
    ShowMenu,
    ShowStats,
    StartAdventure,
    StartGuess,
    SubmitGuess,
)
from models.events import ControlActivation, InboundEvent, TextMessage
from models.render import RenderRequest
from services import rendering
from services.commands import parse_control, parse_text
from services.dialogue_engine import DialogueEngine
from services.session_manager import SessionManager

logger = logging.getLogger(__name__)


class MessageSink(Protocol):
    async def send(self, request: RenderRequest) -> None: ...


class Dispatcher:
    def __init__(self, sessions: SessionManager, dialogue: DialogueEngine) -> None:
        self._sessions = sessions
        self._dialogue = dialogue

    def classify(self, event: InboundEvent) -> Action:
        match event:
            case TextMessage(user_id=user_id, text=text):
                return parse_text(text, awaiting_guess=self._sessions.has_session(user_id))
            case ControlActivation(custom_id=custom_id):
                return parse_control(custom_id)
            case _:
                assert_never(event)

    def respond(self, user_id: str, action: Action) -> list[RenderRequest]:
        """
        Apply the action and build the replies.

        All state changes happen here, before anything is sent, so a reply that
        suspends on network I/O never leaves a session half-updated.
        """
        match action:
            case ShowHelp():
                return [rendering.render_help()]
            case ShowMenu():
                return [rendering.render_menu()]
            case SayHello():
                return [rendering.render_hello()]
            case ShowStats():
                return [rendering.render_stats(self._sessions.count(), self._dialogue.scene_count())]
            case StartGuess():
                return [rendering.render_guess_started(self._sessions.start(user_id))]
            case SubmitGuess(value=value):
                outcome = self._sessions.submit_guess(user_id, value)
                if outcome is None:
                    return [rendering.render_no_game()]
                return [rendering.render_outcome(outcome)]
            case InvalidGuess():
                return [rendering.render_invalid_guess()]
            case StartAdventure():
                return [rendering.render_scene(self._dialogue.start())]
            case AdventureStep(scene_key=scene_key):
                return [rendering.render_scene(self._dialogue.resolve(scene_key))]
            case Ignore(reason=reason):
                logger.debug("[dispatcher] Ignoring event from user=%s: %s", user_id, reason)
                return []
            case _:
                assert_never(action)

    async def handle(self, event: InboundEvent, sink: MessageSink) -> None:
        action: Action | None = None
        try:
            action = self.classify(event)
            logger.debug("[dispatcher] user=%s action=%s", event.user_id, type(action).__name__)
            for request in self.respond(event.user_id, action):
                await sink.send(request)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "[dispatcher] Failed handling %s for user=%s: %s",
                type(action).__name__ if action is not None else type(event).__name__,
                event.user_id,
                exc,
                exc_info=True,
            )
            await self._notify_failure(sink)

    async def _notify_failure(self, sink: MessageSink) -> None:
        try:
            await sink.send(rendering.render_failure())
        except Exception as exc:  # noqa: BLE001
            logger.warning("[dispatcher] Could not deliver failure notice: %s", exc)
