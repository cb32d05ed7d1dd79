"""View frustum made of six planes extracted from a view-projection matrix."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike

from .aabb import AABB


@dataclass
class Plane:
    """A plane with dot(normal, p) + distance == 0."""

    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    distance: float = 0.0

    def signed_distance(self, point: ArrayLike) -> float:
        return float(np.dot(self.normal, np.asarray(point, dtype=float)) + self.distance)


class Frustum:
    """Six inward-facing planes: left, right, bottom, top, near, far."""

    LEFT, RIGHT, BOTTOM, TOP, NEAR, FAR = range(6)

    def __init__(self) -> None:
        self.planes: list[Plane] = [Plane() for _ in range(6)]

    def update(self, view_projection: ArrayLike) -> None:
        """Extract and normalise the planes from a row-major 4x4 matrix."""
        m = np.asarray(view_projection, dtype=float).reshape(4, 4)
        planes = []
        for axis in range(3):
            for sign in (1.0, -1.0):
                row = m[3] + sign * m[axis]
                length = float(np.linalg.norm(row[:3]))
                planes.append(Plane(row[:3] / length, float(row[3] / length)))
        self.planes = planes

    def contains(self, point: ArrayLike) -> bool:
        return all(plane.signed_distance(point) >= 0.0 for plane in self.planes)

    def intersects_sphere(self, center: ArrayLike, radius: float) -> bool:
        return all(plane.signed_distance(center) >= -radius for plane in self.planes)

    def intersects_aabb(self, aabb: AABB) -> bool:
        for plane in self.planes:
            positive = np.where(plane.normal >= 0, aabb.max, aabb.min)
            if plane.signed_distance(positive) < 0.0:
                return False
        return True