from dataclasses import dataclass


@dataclass(frozen=True)
class TextMessage:
    user_id: str
    text: str


@dataclass(frozen=True)
class ControlActivation:
    user_id: str
    custom_id: str             # e.g. "adv_forest", "play_guessing"


InboundEvent = TextMessage | ControlActivation
