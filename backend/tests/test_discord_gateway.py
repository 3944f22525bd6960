from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from models import Control, ControlStyle, RenderRequest, Tone
from services.dialogue_engine import DialogueEngine
from services.discord_gateway import ChannelSink, GameBot, InteractionSink, to_embed, to_view
from services.dispatcher import Dispatcher
from services.session_manager import SessionManager
from services.sweeper import SessionSweeper


def _request(*controls: Control) -> RenderRequest:
    return RenderRequest(title="Title", body="Body", controls=controls, tone=Tone.SUCCESS)


def _bot() -> tuple[GameBot, SessionSweeper]:
    sessions = SessionManager()
    sweeper = SessionSweeper(sessions)
    return GameBot(Dispatcher(sessions, DialogueEngine()), sweeper), sweeper


def test_to_embed_maps_text_and_colour() -> None:
    embed = to_embed(_request())
    assert embed.title == "Title"
    assert embed.description == "Body"
    assert embed.colour == discord.Colour.green()


@pytest.mark.anyio
async def test_to_view_builds_one_button_per_control() -> None:
    view = to_view(
        _request(
            Control("Go", "adv_forest"),
            Control("Help", "show_help", ControlStyle.SECONDARY),
        )
    )
    assert view is not None
    buttons = [item for item in view.children if isinstance(item, discord.ui.Button)]
    assert [b.custom_id for b in buttons] == ["adv_forest", "show_help"]
    assert buttons[1].style is discord.ButtonStyle.secondary


def test_to_view_without_controls_is_none() -> None:
    assert to_view(_request()) is None


@pytest.mark.anyio
async def test_channel_sink_omits_view_when_no_controls() -> None:
    channel = MagicMock()
    channel.send = AsyncMock()
    await ChannelSink(channel).send(_request())
    kwargs = channel.send.await_args.kwargs
    assert "view" not in kwargs
    assert kwargs["embed"].title == "Title"


@pytest.mark.anyio
async def test_interaction_sink_responds_then_follows_up() -> None:
    interaction = MagicMock()
    interaction.response.is_done = MagicMock(side_effect=[False, True])
    interaction.response.send_message = AsyncMock()
    interaction.followup.send = AsyncMock()

    sink = InteractionSink(interaction)
    await sink.send(_request())
    await sink.send(_request(Control("Again", "play_guessing")))

    interaction.response.send_message.assert_awaited_once()
    follow_kwargs = interaction.followup.send.await_args.kwargs
    assert isinstance(follow_kwargs["view"], discord.ui.View)


@pytest.mark.anyio
async def test_on_message_ignores_bots_and_dispatches_users() -> None:
    bot, _ = _bot()

    from_bot = MagicMock()
    from_bot.author.bot = True
    from_bot.channel.send = AsyncMock()
    await bot.on_message(from_bot)
    from_bot.channel.send.assert_not_awaited()

    from_user = MagicMock()
    from_user.author.bot = False
    from_user.author.id = 42
    from_user.content = "!hello"
    from_user.channel.send = AsyncMock()
    await bot.on_message(from_user)
    embed = from_user.channel.send.await_args.kwargs["embed"]
    assert embed.description == "Hey there!"


@pytest.mark.anyio
async def test_on_interaction_routes_button_clicks() -> None:
    bot, _ = _bot()
    interaction = MagicMock()
    interaction.type = discord.InteractionType.component
    interaction.data = {"custom_id": "adv_start"}
    interaction.user.id = 7
    interaction.response.is_done = MagicMock(return_value=False)
    interaction.response.send_message = AsyncMock()

    await bot.on_interaction(interaction)

    view = interaction.response.send_message.await_args.kwargs["view"]
    assert len(view.children) == 3


@pytest.mark.anyio
async def test_on_interaction_skips_non_component_interactions() -> None:
    bot, _ = _bot()
    interaction = MagicMock()
    interaction.type = discord.InteractionType.application_command
    interaction.response.send_message = AsyncMock()

    await bot.on_interaction(interaction)
    interaction.response.send_message.assert_not_awaited()


@pytest.mark.anyio
async def test_setup_hook_starts_sweeper_and_close_stops_it(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(discord.Client, "close", AsyncMock())
    bot, sweeper = _bot()

    await bot.setup_hook()
    assert sweeper.running

    await bot.close()
    assert not sweeper.running
