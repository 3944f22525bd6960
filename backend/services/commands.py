"""Classify raw chat text and button ids into actions."""

from __future__ import annotations

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
from models.session import TARGET_RANGE

COMMAND_PREFIX = "!"
ADVENTURE_PREFIX = "adv_"

COMMANDS: dict[str, Action] = {
    "help": ShowHelp(),
    "start": ShowMenu(),
    "guess": StartGuess(),
    "adventure": StartAdventure(),
    "stats": ShowStats(),
    "hello": SayHello(),
}

CONTROLS: dict[str, Action] = {
    "play_guessing": StartGuess(),
    "play_adventure": StartAdventure(),
    "show_help": ShowHelp(),
}


def parse_guess(text: str) -> int | None:
    """Whole number inside TARGET_RANGE, else None."""
    stripped = text.strip()
    low, high = TARGET_RANGE
    if not stripped.isdecimal() or len(stripped) > len(str(high)):
        return None
    value = int(stripped)
    if not low <= value <= high:
        return None
    return value


def parse_text(text: str, *, awaiting_guess: bool) -> Action:
    stripped = text.strip()
    if stripped.startswith(COMMAND_PREFIX):
        name = stripped[len(COMMAND_PREFIX):].split(maxsplit=1)
        if not name:
            return Ignore("empty command")
        return COMMANDS.get(name[0].lower(), Ignore(f"unknown command {name[0]!r}"))

    if not awaiting_guess:
        return Ignore("chatter")
    value = parse_guess(stripped)
    if value is None:
        return InvalidGuess(raw=text)
    return SubmitGuess(value=value)


def parse_control(custom_id: str) -> Action:
    if custom_id.startswith(ADVENTURE_PREFIX):
        return AdventureStep(scene_key=custom_id[len(ADVENTURE_PREFIX):])
    return CONTROLS.get(custom_id, Ignore(f"unknown control {custom_id!r}"))


def adventure_control_id(scene_key: str) -> str:
    return f"{ADVENTURE_PREFIX}{scene_key}"
