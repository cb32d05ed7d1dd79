"""Hierarchical position/rotation/scale transforms and quaternion helpers.

Quaternions are arrays ordered (w, x, y, z). Matrices are row-major 4x4 arrays
acting on column vectors.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np
from numpy.typing import ArrayLike


def _vec3(value: ArrayLike) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3)


def _quat(value: ArrayLike) -> np.ndarray:
    return np.array(value, dtype=float).reshape(4)


def quat_multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Hamilton product a * b."""
    aw, ax, ay, az = _quat(a)
    bw, bx, by, bz = _quat(b)
    return np.array([
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    ])


def quat_rotate(q: ArrayLike, v: ArrayLike) -> np.ndarray:
    """Rotate a 3-vector by a quaternion."""
    q = _quat(q)
    v = _vec3(v)
    u = q[1:]
    uv = np.cross(u, v)
    uuv = np.cross(u, uv)
    return v + 2.0 * (q[0] * uv + uuv)


def quat_from_axis_angle(axis: ArrayLike, angle: float) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians about ``axis``."""
    axis = _vec3(axis)
    length = float(np.linalg.norm(axis))
    if length == 0.0:
        raise ValueError("rotation axis must be non-zero")
    axis = axis / length
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], axis * math.sin(half)))


def quat_to_matrix(q: ArrayLike) -> np.ndarray:
    """4x4 rotation matrix of a quaternion."""
    w, x, y, z = _quat(q)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


class Transform:
    """Position, rotation and scale with an optional parent.

    Derived matrices and direction vectors are cached and rebuilt lazily when
    the transform, or one of its ancestors, is marked dirty.
    """

    def __init__(
        self,
        position: ArrayLike = (0.0, 0.0, 0.0),
        rotation: ArrayLike = (1.0, 0.0, 0.0, 0.0),
        scale: ArrayLike = (1.0, 1.0, 1.0),
        parent: Optional[Transform] = None,
    ) -> None:
        self._position = _vec3(position)
        self._rotation = _quat(rotation)
        self._scale = _vec3(scale)
        self._parent: Optional[Transform] = None
        self._children: list[Transform] = []
        self._callback: Optional[Callable[[], None]] = None
        self._dirty = True
        self._local_matrix = np.eye(4)
        self._forward = np.array([0.0, 0.0, -1.0])
        self._right = np.array([1.0, 0.0, 0.0])
        self._up = np.array([0.0, 1.0, 0.0])
        if parent is not None:
            self.set_parent(parent)

    @property
    def parent(self) -> Optional[Transform]:
        return self._parent

    @property
    def children(self) -> tuple[Transform, ...]:
        return tuple(self._children)

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: ArrayLike) -> None:
        self._position = _vec3(value)
        self.mark_dirty()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: ArrayLike) -> None:
        self._rotation = _quat(value)
        self.mark_dirty()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: ArrayLike) -> None:
        self._scale = _vec3(value)
        self.mark_dirty()

    def translate(self, translation: ArrayLike) -> None:
        self._position = self._position + _vec3(translation)
        self.mark_dirty()

    def rotate(self, rotation: ArrayLike) -> None:
        """Post-multiply the rotation by a quaternion."""
        self._rotation = quat_multiply(self._rotation, rotation)
        self.mark_dirty()

    def rotate_axis(self, axis: ArrayLike, angle: float) -> None:
        """Rotate by ``angle`` radians about a local axis."""
        self.rotate(quat_from_axis_angle(axis, angle))

    def scale_by(self, scaling: ArrayLike) -> None:
        self._scale = self._scale * _vec3(scaling)
        self.mark_dirty()

    def world_position(self) -> np.ndarray:
        return self.world_matrix()[:3, 3].copy()

    def world_rotation(self) -> np.ndarray:
        if self._parent is not None:
            return quat_multiply(self._parent.world_rotation(), self._rotation)
        return self._rotation.copy()

    def world_scale(self) -> np.ndarray:
        return np.linalg.norm(self.world_matrix()[:3, :3], axis=0)

    def forward(self) -> np.ndarray:
        self._refresh()
        return self._forward.copy()

    def right(self) -> np.ndarray:
        self._refresh()
        return self._right.copy()

    def up(self) -> np.ndarray:
        self._refresh()
        return self._up.copy()

    def local_matrix(self) -> np.ndarray:
        self._refresh()
        return self._local_matrix.copy()

    def world_matrix(self) -> np.ndarray:
        if self._parent is not None:
            return self._parent.world_matrix() @ self.local_matrix()
        return self.local_matrix()

    def set_parent(self, parent: Optional[Transform]) -> None:
        if self._parent is not None:
            self._parent._children = [c for c in self._parent._children if c is not self]
        self._parent = parent
        if parent is not None:
            parent._children.append(self)
        self.mark_dirty()

    def set_dirty_callback(self, callback: Optional[Callable[[], None]]) -> None:
        """Register a function called whenever this transform becomes dirty."""
        self._callback = callback

    def mark_dirty(self, dirty: bool = True) -> None:
        self._dirty = dirty
        if dirty:
            for child in self._children:
                child.mark_dirty()
            if self._callback is not None:
                self._callback()

    def _refresh(self) -> None:
        if not self._dirty:
            return
        translation = np.eye(4)
        translation[:3, 3] = self._position
        self._local_matrix = translation @ quat_to_matrix(self._rotation) @ np.diag(np.append(self._scale, 1.0))
        world_rot = self.world_rotation()
        self._forward = _normalize(quat_rotate(world_rot, (0.0, 0.0, -1.0)))
        self._right = _normalize(quat_rotate(world_rot, (1.0, 0.0, 0.0)))
        self._up = _normalize(quat_rotate(world_rot, (0.0, 1.0, 0.0)))
        self._dirty = False


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)