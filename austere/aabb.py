"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np
from numpy.typing import ArrayLike


def _vec3(value: ArrayLike) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3)


@dataclass(eq=False)
class AABB:
    """A box given by its minimum and maximum corners."""

    min: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.min = _vec3(self.min)
        self.max = _vec3(self.max)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return bool(np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max))

    def expand(self, other: Union[AABB, ArrayLike]) -> None:
        """Grow the box so that it encloses a point or another box."""
        if isinstance(other, AABB):
            self.min = np.minimum(self.min, other.min)
            self.max = np.maximum(self.max, other.max)
        else:
            point = _vec3(other)
            self.min = np.minimum(self.min, point)
            self.max = np.maximum(self.max, point)

    def center(self) -> np.ndarray:
        return (self.min + self.max) * 0.5

    def extents(self) -> np.ndarray:
        """Half the size of the box along each axis."""
        return (self.max - self.min) * 0.5

    def vertices(self) -> list[np.ndarray]:
        """The eight corners, with z varying fastest and x slowest."""
        lo, hi = self.min, self.max
        return [
            np.array([x, y, z])
            for x in (lo[0], hi[0])
            for y in (lo[1], hi[1])
            for z in (lo[2], hi[2])
        ]

    def contains(self, point: ArrayLike) -> bool:
        p = _vec3(point)
        return bool(np.all(p >= self.min) and np.all(p <= self.max))

    def intersects(self, other: AABB) -> bool:
        return bool(np.all(self.min <= other.max) and np.all(self.max >= other.min))

    def transform(self, matrix: ArrayLike) -> AABB:
        """Return the box enclosing the transformed corners.

        The result starts as the zero box, so it always encloses the origin.
        """
        m = np.asarray(matrix, dtype=float).reshape(4, 4)
        result = AABB()
        for vertex in self.vertices():
            transformed = m @ np.append(vertex, 1.0)
            result.expand(transformed[:3] / transformed[3])
        return result