"""Turn game results into platform-neutral render requests."""

from __future__ import annotations

from typing import assert_never

from models.render import Control, ControlStyle, RenderRequest, Tone
from models.scene import Scene
from models.session import TARGET_RANGE, Continue, GuessOutcome, GuessSession, Hint, Lose, Win
from services.commands import adventure_control_id
from services.scenes import START_SCENE_KEY

ADVENTURE_TITLE = "🗺️ The Stolen Bell"

PLAY_GUESSING = Control("🎯 Guess the Number", "play_guessing")
PLAY_ADVENTURE = Control("🗺️ Adventure", "play_adventure", ControlStyle.SUCCESS)
SHOW_HELP = Control("❓ Help", "show_help", ControlStyle.SECONDARY)
PLAY_AGAIN_ADVENTURE = Control("🔄 Play Again", adventure_control_id(START_SCENE_KEY), ControlStyle.SUCCESS)

HELP_TEXT = "\n".join(
    [
        "`!start` - show the game menu",
        "`!guess` - start a number guessing game",
        "`!adventure` - begin the adventure",
        "`!stats` - show bot stats",
        "`!hello` - say hi",
        "`!help` - show this message",
    ]
)


def render_help() -> RenderRequest:
    return RenderRequest(title="❓ Commands", body=HELP_TEXT, controls=(PLAY_GUESSING, PLAY_ADVENTURE))


def render_menu() -> RenderRequest:
    return RenderRequest(
        title="🎮 Game Menu",
        body="Pick a game to play!",
        controls=(PLAY_GUESSING, PLAY_ADVENTURE, SHOW_HELP),
    )


def render_hello() -> RenderRequest:
    return RenderRequest(title="👋 Hello", body="Hey there!")


def render_stats(active_games: int, scene_count: int) -> RenderRequest:
    return RenderRequest(
        title="📊 Bot Stats",
        body=f"Active guessing games: **{active_games}**\nAdventure scenes: **{scene_count}**",
    )


def render_guess_started(session: GuessSession) -> RenderRequest:
    low, high = TARGET_RANGE
    return RenderRequest(
        title="🎯 Guess the Number",
        body=(
            f"I'm thinking of a number between {low} and {high}. "
            f"You have {session.max_attempts} attempts. Type your guess!"
        ),
    )


def render_outcome(outcome: GuessOutcome) -> RenderRequest:
    match outcome:
        case Win(attempts=attempts, number=number):
            return RenderRequest(
                title="🎉 Correct!",
                body=f"The number was **{number}**. You got it in {attempts} attempt{'s' if attempts != 1 else ''}!",
                controls=(Control("🔄 Play Again", "play_guessing", ControlStyle.SUCCESS),),
                tone=Tone.SUCCESS,
            )
        case Lose(number=number):
            return RenderRequest(
                title="💀 Out of attempts",
                body=f"The number was **{number}**. Better luck next time!",
                controls=(Control("🔄 Try Again", "play_guessing"),),
                tone=Tone.FAILURE,
            )
        case Continue(hint=hint, attempts=attempts, max_attempts=max_attempts):
            arrow = "📈 Higher!" if hint is Hint.HIGHER else "📉 Lower!"
            return RenderRequest(
                title=arrow,
                body=f"Try a {hint} number. Attempts: {attempts}/{max_attempts}",
            )
        case _:
            assert_never(outcome)


def render_invalid_guess() -> RenderRequest:
    low, high = TARGET_RANGE
    return RenderRequest(
        title="⚠️ Invalid guess",
        body=f"Please enter a whole number between {low} and {high}.",
        tone=Tone.FAILURE,
    )


def render_no_game() -> RenderRequest:
    return RenderRequest(
        title="🎯 No active game",
        body="You don't have a game running. Type `!guess` to start one.",
        controls=(PLAY_GUESSING,),
    )


def render_scene(scene: Scene) -> RenderRequest:
    """One button per choice; an ending gets a single restart button."""
    if scene.is_terminal:
        controls: tuple[Control, ...] = (PLAY_AGAIN_ADVENTURE,)
    else:
        controls = tuple(
            Control(choice.label, adventure_control_id(choice.next_key)) for choice in scene.choices
        )
    return RenderRequest(title=ADVENTURE_TITLE, body=scene.text, controls=controls, tone=Tone.ADVENTURE)


def render_failure() -> RenderRequest:
    return RenderRequest(
        title="⚠️ Something went wrong",
        body="Sorry, I couldn't finish that. Please try again.",
        tone=Tone.FAILURE,
    )
