"""Hierarchies of meshes and materials loaded from model files."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
from numpy.typing import ArrayLike


class ModelNode:
    """A node of a model: a local transform, meshes with materials, and children.

    The parent is held weakly so that a tree is owned from its root down.
    """

    def __init__(self, name: str = "", transform: Optional[ArrayLike] = None) -> None:
        self.name = name
        self.transform = np.eye(4) if transform is None else np.array(transform, dtype=float).reshape(4, 4)
        self._parent: Optional[weakref.ReferenceType[ModelNode]] = None
        self._meshes: list[Any] = []
        self._materials: list[Any] = []
        self._children: list[ModelNode] = []

    @property
    def parent(self) -> Optional[ModelNode]:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Optional[ModelNode]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def meshes(self) -> tuple[Any, ...]:
        return tuple(self._meshes)

    @property
    def materials(self) -> tuple[Any, ...]:
        return tuple(self._materials)

    @property
    def children(self) -> tuple[ModelNode, ...]:
        return tuple(self._children)

    def add_mesh(self, mesh: Any) -> None:
        self._meshes.append(mesh)

    def add_material(self, material: Any) -> None:
        self._materials.append(material)

    def add_child(self, child: Optional[ModelNode]) -> None:
        if child is None:
            return
        child.parent = self
        self._children.append(child)

    def remove_child(self, child: ModelNode) -> None:
        self._children = [c for c in self._children if c is not child]


@dataclass(eq=False)
class Model:
    """A loaded model, reachable through its root node."""

    root: Optional[ModelNode] = None