"""Scene graph nodes with a lifecycle and named children."""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Optional, Union

from .transform import Transform

log = logging.getLogger(__name__)

NodeHook = Callable[["SceneNode"], None]


class SceneNode:
    """A named node holding a transform and uniquely named children.

    Behaviour is supplied either by overriding the ``on_*`` hooks in a
    subclass or by passing callables for them to the constructor; each
    callable receives the node. Children are visited in ascending order
    of their names. The parent is held weakly.
    """

    def __init__(
        self,
        name: str = "Node",
        *,
        on_initialize: Optional[NodeHook] = None,
        on_destroy: Optional[NodeHook] = None,
        on_update: Optional[NodeHook] = None,
        on_render: Optional[NodeHook] = None,
    ) -> None:
        self._name = name
        self.transform = Transform()
        self._parent: Optional[weakref.ReferenceType[SceneNode]] = None
        self._children: dict[str, SceneNode] = {}
        self._initialized = False
        self.enabled = True
        self.engine: Any = None
        self._hooks: dict[str, Optional[NodeHook]] = {
            "initialize": on_initialize,
            "destroy": on_destroy,
            "update": on_update,
            "render": on_render,
        }

    @property
    def name(self) -> str:
        return self._name

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def parent(self) -> Optional[SceneNode]:
        return self._parent() if self._parent is not None else None

    @property
    def has_parent(self) -> bool:
        return self.parent is not None

    @property
    def children(self) -> tuple[SceneNode, ...]:
        """The children, ordered by name."""
        return tuple(self._children[key] for key in sorted(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def add_child(self, node: Optional[SceneNode]) -> None:
        """Attach a child; it is initialized at once if this node already is."""
        if node is None:
            raise ValueError(f"cannot add null child to node '{self._name}'")
        if node is self:
            raise ValueError(f"cannot add node '{self._name}' as a child of itself")
        if node.name in self._children:
            raise ValueError(f"node '{self._name}' already has child '{node.name}'")
        node.set_parent(self)
        node.set_engine(self.engine)
        self._children[node.name] = node
        if self._initialized and not node.initialized:
            node.initialize()

    def remove_child(self, node: Union[str, SceneNode, None]) -> None:
        """Detach a child given by name or by the node itself."""
        if isinstance(node, str):
            child = self._children.get(node)
            if child is None:
                raise KeyError(f"node '{self._name}' has no child named '{node}'")
        else:
            if node is None:
                raise ValueError(f"cannot remove null child from node '{self._name}'")
            child = self._children.get(node.name)
            if child is not node:
                raise KeyError(f"node '{self._name}' doesn't have the specified child")
        child.set_parent(None)
        del self._children[child.name]

    def child(self, name: str) -> Optional[SceneNode]:
        return self._children.get(name)

    def set_parent(self, node: Optional[SceneNode]) -> None:
        self._parent = weakref.ref(node) if node is not None else None
        self.transform.set_parent(node.transform if node is not None else None)

    def has_child(self, node: Union[str, SceneNode, None]) -> bool:
        if node is None:
            return False
        if isinstance(node, str):
            return node in self._children
        return self._children.get(node.name) is node

    def initialize(self) -> None:
        """Initialize this node, then its children.

        If a child fails, the children already initialized are destroyed,
        ``on_destroy`` runs and the error propagates.
        """
        if self._initialized:
            raise RuntimeError(f"node '{self._name}' is already initialized")
        self.on_initialize()
        try:
            for child in self.children:
                child.engine = self.engine
                child.initialize()
        except Exception:
            log.error("Initialization of node '%s' failed", self._name)
            for child in self.children:
                if child.initialized:
                    child.destroy()
            self.on_destroy()
            raise
        self._initialized = True

    def destroy(self) -> None:
        """Destroy the children, then this node."""
        if not self._initialized:
            raise RuntimeError(f"node '{self._name}' is not initialized")
        for child in self.children:
            if child.initialized:
                child.destroy()
        self.on_destroy()
        self._initialized = False

    def update(self) -> None:
        if not self.enabled or not self._initialized:
            return
        self.on_update()
        for child in self.children:
            child.update()

    def render(self) -> None:
        if not self.enabled or not self._initialized:
            return
        self.on_render()
        for child in self.children:
            child.render()

    def set_engine(self, engine: Any) -> None:
        """Set the engine on this node and every descendant."""
        self.engine = engine
        for child in self._children.values():
            child.set_engine(engine)

    def _run_hook(self, stage: str) -> None:
        hook = self._hooks.get(stage)
        if hook is not None:
            hook(self)

    def on_initialize(self) -> None:
        """Run on initialization; raise to signal failure."""
        self._run_hook("initialize")

    def on_destroy(self) -> None:
        """Run on destruction."""
        self._run_hook("destroy")

    def on_update(self) -> None:
        """Run once per frame while enabled and initialized."""
        self._run_hook("update")

    def on_render(self) -> None:
        """Run once per frame while enabled and initialized."""
        self._run_hook("render")