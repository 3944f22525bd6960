from dataclasses import dataclass
from enum import StrEnum


class Tone(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    FAILURE = "failure"
    ADVENTURE = "adventure"


class ControlStyle(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class Control:
    label: str
    custom_id: str
    style: ControlStyle = ControlStyle.PRIMARY


@dataclass(frozen=True)
class RenderRequest:
    title: str
    body: str
    controls: tuple[Control, ...] = ()
    tone: Tone = Tone.INFO
