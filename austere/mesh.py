"""Indexed triangle meshes with optional per-vertex attributes."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .aabb import AABB

log = logging.getLogger(__name__)


def _rows(value: Optional[ArrayLike], width: int) -> np.ndarray:
    if value is None:
        return np.zeros((0, width))
    return np.array(value, dtype=float).reshape(-1, width)


def _indices(value: Optional[ArrayLike]) -> np.ndarray:
    if value is None:
        return np.zeros(0, dtype=np.uint32)
    return np.array(value, dtype=np.uint32).reshape(-1)


class Mesh:
    """Vertex positions plus optional indices, normals, UVs, tangents and bitangents."""

    def __init__(
        self,
        vertices: Optional[ArrayLike] = None,
        indices: Optional[ArrayLike] = None,
        normals: Optional[ArrayLike] = None,
        tex_coords: Optional[ArrayLike] = None,
        tangents: Optional[ArrayLike] = None,
        bitangents: Optional[ArrayLike] = None,
    ) -> None:
        self.vertices = vertices
        self.indices = indices
        self.normals = normals
        self.tex_coords = tex_coords
        self.tangents = tangents
        self.bitangents = bitangents
        self.aabb = AABB()
        if not self.has_vertices():
            log.error("Mesh has no vertices")

    @property
    def vertices(self) -> np.ndarray:
        return self._vertices

    @vertices.setter
    def vertices(self, value: Optional[ArrayLike]) -> None:
        self._vertices = _rows(value, 3)

    @property
    def indices(self) -> np.ndarray:
        return self._indices

    @indices.setter
    def indices(self, value: Optional[ArrayLike]) -> None:
        self._indices = _indices(value)

    @property
    def normals(self) -> np.ndarray:
        return self._normals

    @normals.setter
    def normals(self, value: Optional[ArrayLike]) -> None:
        self._normals = _rows(value, 3)

    @property
    def tex_coords(self) -> np.ndarray:
        return self._tex_coords

    @tex_coords.setter
    def tex_coords(self, value: Optional[ArrayLike]) -> None:
        self._tex_coords = _rows(value, 2)

    @property
    def tangents(self) -> np.ndarray:
        return self._tangents

    @tangents.setter
    def tangents(self, value: Optional[ArrayLike]) -> None:
        self._tangents = _rows(value, 3)

    @property
    def bitangents(self) -> np.ndarray:
        return self._bitangents

    @bitangents.setter
    def bitangents(self, value: Optional[ArrayLike]) -> None:
        self._bitangents = _rows(value, 3)

    def has_vertices(self) -> bool:
        return len(self._vertices) > 0

    def has_normals(self) -> bool:
        return len(self._normals) > 0

    def has_tex_coords(self) -> bool:
        return len(self._tex_coords) > 0

    def has_tangents(self) -> bool:
        return len(self._tangents) > 0

    def has_bitangents(self) -> bool:
        return len(self._bitangents) > 0

    def has_indices(self) -> bool:
        return len(self._indices) > 0

    def draw_count(self) -> int:
        """Number of elements a draw call submits: indices if any, else vertices."""
        if not self.has_vertices():
            return 0
        return len(self._indices) if self.has_indices() else len(self._vertices)