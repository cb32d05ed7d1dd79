"""Perspective camera driven by a transform."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .frustum import Frustum
from .transform import Transform


def look_at(eye: ArrayLike, center: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = np.asarray(center, dtype=float) - eye
    f = f / np.linalg.norm(f)
    s = np.cross(f, np.asarray(up, dtype=float))
    s = s / np.linalg.norm(s)
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip depth [-1, 1]; fovy in radians."""
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


class Camera:
    """A perspective camera whose matrices are rebuilt lazily."""

    def __init__(
        self,
        transform: Optional[Transform] = None,
        aspect_ratio: float = 16.0 / 9.0,
        field_of_view: float = 45.0,
        near_plane: float = 0.1,
        far_plane: float = 1000.0,
    ) -> None:
        self.transform = transform if transform is not None else Transform()
        self._field_of_view = field_of_view
        self._near_plane = near_plane
        self._far_plane = far_plane
        self._aspect_ratio = aspect_ratio
        self._dirty = True
        self._view = np.eye(4)
        self._projection = np.eye(4)
        self._frustum = Frustum()
        self.transform.set_dirty_callback(self.mark_dirty)

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def field_of_view(self) -> float:
        """Vertical field of view in degrees."""
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, value: float) -> None:
        if value != self._field_of_view:
            self._field_of_view = value
            self.mark_dirty()

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @near_plane.setter
    def near_plane(self, value: float) -> None:
        if value != self._near_plane:
            self._near_plane = value
            self.mark_dirty()

    @property
    def far_plane(self) -> float:
        return self._far_plane

    @far_plane.setter
    def far_plane(self, value: float) -> None:
        if value != self._far_plane:
            self._far_plane = value
            self.mark_dirty()

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: float) -> None:
        if value != self._aspect_ratio:
            self._aspect_ratio = value
            self.mark_dirty()

    def view_matrix(self) -> np.ndarray:
        self._refresh()
        return self._view.copy()

    def projection_matrix(self) -> np.ndarray:
        self._refresh()
        return self._projection.copy()

    def frustum(self) -> Frustum:
        self._refresh()
        return self._frustum

    def mark_dirty(self, dirty: bool = True) -> None:
        self._dirty = dirty

    def _refresh(self) -> None:
        if not self._dirty:
            return
        position = self.transform.world_position()
        self._view = look_at(position, position + self.transform.forward(), self.transform.up())
        self._projection = perspective(
            math.radians(self._field_of_view), self._aspect_ratio, self._near_plane, self._far_plane
        )
        self._frustum.update(self._projection @ self._view)
        self._dirty = False