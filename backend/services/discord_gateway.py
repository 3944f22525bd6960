"""discord.py adapter: chat messages and button clicks in, embeds and buttons out."""

from __future__ import annotations

import logging
from typing import Any

import discord

from models.events import ControlActivation, TextMessage
from models.render import ControlStyle, RenderRequest, Tone
from services.dispatcher import Dispatcher
from services.sweeper import SessionSweeper

logger = logging.getLogger(__name__)

VIEW_TIMEOUT_SECONDS = 600

_COLOURS = {
    Tone.INFO: discord.Colour.blurple(),
    Tone.SUCCESS: discord.Colour.green(),
    Tone.FAILURE: discord.Colour.red(),
    Tone.ADVENTURE: discord.Colour.dark_gold(),
}

_BUTTON_STYLES = {
    ControlStyle.PRIMARY: discord.ButtonStyle.primary,
    ControlStyle.SECONDARY: discord.ButtonStyle.secondary,
    ControlStyle.SUCCESS: discord.ButtonStyle.success,
    ControlStyle.DANGER: discord.ButtonStyle.danger,
}


def to_embed(request: RenderRequest) -> discord.Embed:
    return discord.Embed(title=request.title, description=request.body, colour=_COLOURS[request.tone])


def to_view(request: RenderRequest) -> discord.ui.View | None:
    """Buttons carry only a custom_id; clicks come back through on_interaction."""
    if not request.controls:
        return None
    view = discord.ui.View(timeout=VIEW_TIMEOUT_SECONDS)
    for control in request.controls:
        view.add_item(
            discord.ui.Button(
                label=control.label,
                custom_id=control.custom_id,
                style=_BUTTON_STYLES[control.style],
            )
        )
    return view


def _message_kwargs(request: RenderRequest) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"embed": to_embed(request)}
    view = to_view(request)
    if view is not None:
        kwargs["view"] = view
    return kwargs


class ChannelSink:
    def __init__(self, channel: discord.abc.Messageable) -> None:
        self._channel = channel

    async def send(self, request: RenderRequest) -> None:
        await self._channel.send(**_message_kwargs(request))


class InteractionSink:
    """First reply answers the interaction; later replies go out as followups."""

    def __init__(self, interaction: discord.Interaction) -> None:
        self._interaction = interaction

    async def send(self, request: RenderRequest) -> None:
        kwargs = _message_kwargs(request)
        if self._interaction.response.is_done():
            await self._interaction.followup.send(**kwargs)
        else:
            await self._interaction.response.send_message(**kwargs)


def default_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class GameBot(discord.Client):
    def __init__(
        self,
        dispatcher: Dispatcher,
        sweeper: SessionSweeper,
        *,
        intents: discord.Intents | None = None,
    ) -> None:
        super().__init__(intents=intents or default_intents())
        self._dispatcher = dispatcher
        self._sweeper = sweeper

    async def setup_hook(self) -> None:
        self._sweeper.start()

    async def on_ready(self) -> None:
        logger.info("[gateway] Bot is online as %s", self.user)

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return
        event = TextMessage(user_id=str(message.author.id), text=message.content)
        await self._dispatcher.handle(event, ChannelSink(message.channel))

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        if interaction.type is not discord.InteractionType.component:
            return
        custom_id = (interaction.data or {}).get("custom_id")
        if not custom_id:
            return
        event = ControlActivation(user_id=str(interaction.user.id), custom_id=str(custom_id))
        await self._dispatcher.handle(event, InteractionSink(interaction))

    async def close(self) -> None:
        await self._sweeper.stop()
        await super().close()
