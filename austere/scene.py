"""A named scene owning a tree of scene nodes."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .node import SceneNode

log = logging.getLogger(__name__)


class Scene:
    """A named scene with a root node; a default root named "Root" is made if none is given."""

    def __init__(self, name: str, root: Optional[SceneNode] = None) -> None:
        self._name = name
        self._root: Optional[SceneNode] = root if root is not None else SceneNode("Root")
        self._initialized = False
        self.active = False
        self.engine: Any = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def root(self) -> Optional[SceneNode]:
        return self._root

    @property
    def initialized(self) -> bool:
        return self._initialized

    def set_root(self, node: Optional[SceneNode]) -> None:
        """Replace the root; it is initialized at once if the scene already is."""
        if node is not None:
            node.set_engine(self.engine)
            if self._initialized and not node.initialized:
                node.initialize()
        self._root = node

    def initialize(self) -> None:
        log.info("Initializing scene '%s'", self._name)
        if self._initialized:
            raise RuntimeError(f"scene '{self._name}' is already initialized")
        if self._root is None:
            raise RuntimeError(f"scene '{self._name}' has no root node")
        self._root.initialize()
        self._initialized = True
        log.info("Scene '%s' initialized", self._name)

    def destroy(self) -> None:
        """Destroy the node tree and drop the root."""
        log.info("Destroying scene '%s'", self._name)
        if not self._initialized:
            raise RuntimeError(f"scene '{self._name}' is not initialized")
        if self._root is not None:
            if self._root.initialized:
                self._root.destroy()
            self._root = None
        self._initialized = False
        log.info("Scene '%s' destroyed", self._name)

    def update(self) -> None:
        if self._root is not None:
            self._root.update()

    def render(self) -> None:
        if self._root is not None:
            self._root.render()

    def set_engine(self, engine: Any) -> None:
        self.engine = engine
        if self._root is not None:
            self._root.set_engine(engine)