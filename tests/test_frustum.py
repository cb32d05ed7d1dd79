import numpy as np
import pytest

from austere.aabb import AABB
from austere.frustum import Frustum


@pytest.fixture
def cube():
    frustum = Frustum()
    frustum.update(np.eye(4))
    return frustum


def test_unset_frustum_contains_everything():
    frustum = Frustum()
    assert frustum.contains([1000, -1000, 5])


def test_planes_are_normalised(cube):
    assert len(cube.planes) == 6
    for plane in cube.planes:
        assert np.isclose(np.linalg.norm(plane.normal), 1.0)


def test_identity_is_clip_cube(cube):
    assert cube.contains([0, 0, 0])
    assert cube.contains([1, -1, 1])
    assert not cube.contains([1.5, 0, 0])
    assert not cube.contains([0, 0, -2])


def test_left_plane_faces_inward(cube):
    left = cube.planes[Frustum.LEFT]
    assert left.normal[0] > 0
    right = cube.planes[Frustum.RIGHT]
    assert right.normal[0] < 0


def test_sphere(cube):
    assert cube.intersects_sphere([1.5, 0, 0], 1.0)
    assert not cube.intersects_sphere([1.5, 0, 0], 0.1)


def test_aabb(cube):
    assert cube.intersects_aabb(AABB([0.5, 0.5, 0.5], [3, 3, 3]))
    assert not cube.intersects_aabb(AABB([2, 2, 2], [3, 3, 3]))
    assert cube.intersects_aabb(AABB([-5, -5, -5], [5, 5, 5]))


def test_scaling_matrix_does_not_change_planes(cube):
    scaled = Frustum()
    scaled.update(np.eye(4) * 3.0)
    for a, b in zip(cube.planes, scaled.planes):
        assert np.allclose(a.normal, b.normal)
        assert np.isclose(a.distance, b.distance)