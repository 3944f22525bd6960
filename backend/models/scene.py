from dataclasses import dataclass


@dataclass(frozen=True)
class Choice:
    label: str                 # button text
    next_key: str              # may point at a scene that does not exist


@dataclass(frozen=True)
class Scene:
    key: str
    text: str
    choices: tuple[Choice, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return not self.choices
