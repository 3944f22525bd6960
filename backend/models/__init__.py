from .actions import (
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
from .events import ControlActivation, InboundEvent, TextMessage
from .render import Control, ControlStyle, RenderRequest, Tone
from .scene import Choice, Scene
from .session import (
    MAX_ATTEMPTS,
    SESSION_TTL,
    SWEEP_INTERVAL,
    TARGET_RANGE,
    Continue,
    GuessOutcome,
    GuessSession,
    Hint,
    Lose,
    Win,
)

__all__ = [
    "Action",
    "AdventureStep",
    "Choice",
    "Continue",
    "Control",
    "ControlActivation",
    "ControlStyle",
    "GuessOutcome",
    "GuessSession",
    "Hint",
    "Ignore",
    "InboundEvent",
    "InvalidGuess",
    "Lose",
    "MAX_ATTEMPTS",
    "RenderRequest",
    "SESSION_TTL",
    "SWEEP_INTERVAL",
    "SayHello",
    "Scene",
    "ShowHelp",
    "ShowMenu",
    "ShowStats",
    "StartAdventure",
    "StartGuess",
    "SubmitGuess",
    "TARGET_RANGE",
    "TextMessage",
    "Tone",
    "Win",
]
