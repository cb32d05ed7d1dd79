"""Registry of scenes with one active scene."""

from __future__ import annotations

import logging
import weakref
from typing import Any, Optional, Union

from .scene import Scene

log = logging.getLogger(__name__)


class SceneManager:
    """Holds scenes by name and forwards updates to the active one."""

    def __init__(self, engine: Any = None) -> None:
        self._engine = engine
        self._scenes: dict[str, Scene] = {}
        self._active: Optional[weakref.ReferenceType[Scene]] = None

    @property
    def active_scene(self) -> Optional[Scene]:
        return self._active() if self._active is not None else None

    def __len__(self) -> int:
        return len(self._scenes)

    def add_scene(self, scene: Optional[Scene]) -> None:
        if scene is None:
            raise ValueError("attempt to add null scene")
        if scene.name in self._scenes:
            raise ValueError(f"scene with name '{scene.name}' already exists")
        scene.set_engine(self._engine)
        self._scenes[scene.name] = scene

    def remove_scene(self, scene: Union[str, Scene, None]) -> None:
        """Remove a scene by name or object; removing the active one clears it."""
        if scene is None:
            raise ValueError("attempt to remove null scene")
        name = scene if isinstance(scene, str) else scene.name
        found = self._scenes.get(name)
        if found is None:
            raise KeyError(f"scene '{name}' not found")
        if self.active_scene is found:
            log.debug("Removing active scene '%s', resetting active scene", name)
            self._active = None
        del self._scenes[name]

    def get_scene(self, name: str) -> Scene:
        try:
            return self._scenes[name]
        except KeyError:
            raise KeyError(f"scene '{name}' not found") from None

    def set_active_scene(self, name: str) -> None:
        """Make a scene active, initializing it first if needed."""
        log.info("Setting active scene to '%s'", name)
        scene = self.get_scene(name)
        if not scene.initialized:
            scene.initialize()
        current = self.active_scene
        if current is not None:
            log.debug("Deactivating current active scene '%s'", current.name)
            current.active = False
        self._active = weakref.ref(scene)
        scene.active = True
        log.info("Scene '%s' is now active", name)

    def has_scene(self, scene: Union[str, Scene, None]) -> bool:
        if scene is None:
            return False
        name = scene if isinstance(scene, str) else scene.name
        return name in self._scenes

    def update(self) -> None:
        scene = self.active_scene
        if scene is not None:
            scene.update()

    def render(self) -> None:
        scene = self.active_scene
        if scene is not None:
            scene.render()