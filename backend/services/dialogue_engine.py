"""Scene lookup and traversal over the static adventure graph."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from models.scene import Scene
from services.scenes import FALLBACK_SCENE, SCENES, START_SCENE_KEY

logger = logging.getLogger(__name__)


class DialogueEngine:
    """
    Resolve scene keys against an immutable scene graph.

    The graph may be cyclic and may contain edges to keys that do not exist;
    resolve() answers those with the fallback scene instead of raising.
    """

    def __init__(
        self,
        scenes: Mapping[str, Scene] = SCENES,
        *,
        start_key: str = START_SCENE_KEY,
        fallback: Scene = FALLBACK_SCENE,
    ) -> None:
        self._scenes = scenes
        self._start_key = start_key
        self._fallback = fallback

    @property
    def start_key(self) -> str:
        return self._start_key

    @property
    def fallback(self) -> Scene:
        return self._fallback

    def resolve(self, scene_key: str) -> Scene:
        scene = self._scenes.get(scene_key)
        if scene is None:
            logger.info("[dialogue] Unknown scene %r; using fallback", scene_key)
            return self._fallback
        return scene

    def start(self) -> Scene:
        return self.resolve(self._start_key)

    @staticmethod
    def is_terminal(scene: Scene) -> bool:
        return scene.is_terminal

    def scene_count(self) -> int:
        return len(self._scenes)

    def dangling_edges(self) -> list[tuple[str, str]]:
        """(scene_key, next_key) pairs whose target is not in the graph."""
        return [
            (scene.key, choice.next_key)
            for scene in self._scenes.values()
            for choice in scene.choices
            if choice.next_key not in self._scenes
        ]
