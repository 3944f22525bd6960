"""Closed set of actions an inbound event can be classified into."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class ShowMenu:
    pass


@dataclass(frozen=True)
class StartGuess:
    pass


@dataclass(frozen=True)
class StartAdventure:
    pass


@dataclass(frozen=True)
class ShowStats:
    pass


@dataclass(frozen=True)
class SayHello:
    pass


@dataclass(frozen=True)
class SubmitGuess:
    value: int


@dataclass(frozen=True)
class InvalidGuess:
    raw: str


@dataclass(frozen=True)
class AdventureStep:
    scene_key: str


@dataclass(frozen=True)
class Ignore:
    reason: str = ""


Action = (
    ShowHelp
    | ShowMenu
    | StartGuess
    | StartAdventure
    | ShowStats
    | SayHello
    | SubmitGuess
    | InvalidGuess
    | AdventureStep
    | Ignore
)
