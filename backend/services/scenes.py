"""Static scene graph for the adventure game. Built once at import, never mutated."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from models.scene import Choice, Scene

START_SCENE_KEY = "start"

FALLBACK_SCENE = Scene(
    key="coming_soon",
    text="🚧 This part of the adventure is still being written. More content coming soon!",
    choices=(Choice("🏠 Return to the crossroads", START_SCENE_KEY),),
)


def _scene(key: str, text: str, *choices: tuple[str, str]) -> Scene:
    return Scene(key=key, text=text, choices=tuple(Choice(label, nxt) for label, nxt in choices))


_SCENE_LIST = [
    _scene(
        "start",
        "You stand at a crossroads at the edge of the Whispering Woods. "
        "The village bell was stolen last night, and the path splits three ways.",
        ("🌲 Enter the forest", "forest"),
        ("🏘️ Visit the village", "village"),
        ("⛰️ Climb the mountain", "mountain"),
    ),
    _scene(
        "forest",
        "Tall pines swallow the daylight. A low growl rolls out of the undergrowth.",
        ("⚔️ Stand and fight", "wolf_fight"),
        ("🤫 Sneak past", "hidden_grove"),
    ),
    _scene(
        "wolf_fight",
        "A grey wolf lunges from the ferns, teeth bared!",
        ("🗡️ Strike at its flank", "wolf_victory"),
        ("🏃 Flee back to the crossroads", "start"),
    ),
    _scene(
        "wolf_victory",
        "The wolf yelps and bolts. Where it stood lies a silver key on a frayed cord.",
        ("🔑 Bring the key to the village", "village"),
        ("🔁 Start over", "start"),
    ),
    _scene(
        "hidden_grove",
        "You slip into a grove lit by glowing mushrooms. An old hermit stirs a pot over a fire.",
        ("💬 Talk to the hermit", "hermit"),
        ("🍄 Eat a glowing mushroom", "mushroom_dream"),
    ),
    _scene(
        "hermit",
        "\"The bell?\" the hermit chuckles. \"A dragon on the mountain took it. "
        "Shiny things are its weakness.\"",
        ("⛰️ Head for the mountain", "mountain"),
        ("🏘️ Warn the village", "village"),
    ),
    _scene(
        "mushroom_dream",
        "Colours spin, the trees sing, and you wake at the crossroads with no memory of the day.",
        ("🌀 Shake it off", "start"),
    ),
    _scene(
        "village",
        "Villagers whisper about a shadow over the mountain. The square is quiet without its bell.",
        ("🍺 Visit the tavern", "tavern"),
        ("🛒 Browse the market", "market"),
        ("🗣️ Speak with the elder", "elder"),
    ),
    _scene(
        "tavern",
        "The tavern smells of smoke and cider. A one-eyed sailor waves you over.",
        ("🎲 Play dice with the sailor", "dice_game"),
        ("🗺️ Buy his map of the mountain", "mountain"),
    ),
    _scene(
        "elder",
        "The elder grips your hands. \"Bring back our bell and the village is in your debt.\"",
        ("✅ Accept the quest", "mountain"),
        ("❌ Politely decline", "village_ending"),
    ),
    _scene(
        "village_ending",
        "You settle into quiet village life. The bell is never found, but the cider is good. The End?",
        ("🔁 Play again", "start"),
    ),
    _scene(
        "mountain",
        "Wind howls across the ridge. Ahead, a cave mouth glows with a faint golden light.",
        ("🐉 Enter the cave", "dragon_lair"),
        ("🏕️ Make camp for the night", "mountain_camp"),
    ),
    _scene(
        "mountain_camp",
        "The night is bitter and your fire will not catch. You stumble back down at dawn, defeated.",
        ("🔁 Try again", "start"),
    ),
    _scene(
        "dragon_lair",
        "A red dragon lies coiled around a bronze bell, one eye slowly opening.",
        ("⚔️ Fight the dragon", "dragon_defeat"),
        ("🗣️ Reason with the dragon", "dragon_bargain"),
        ("🔔 Ring the bell", "quest_complete"),
    ),
    _scene(
        "dragon_defeat",
        "Fire fills the cave. You wake in the village infirmary, singed but alive.",
        ("🔁 Try again", "start"),
    ),
    _scene(
        "dragon_bargain",
        "\"Answer my riddle and the bell is yours,\" rumbles the dragon. "
        "\"What has a tongue but cannot speak?\"",
        ("🧠 \"A bell.\"", "quest_complete"),
        ("🏃 Run for it", "start"),
    ),
    _scene(
        "quest_complete",
        "🏆 The bell rings out across the valley and the villagers cheer your name. Quest complete!",
    ),
]

SCENES: Mapping[str, Scene] = MappingProxyType({scene.key: scene for scene in _SCENE_LIST})
