import math

import numpy as np

from austere.aabb import AABB
from austere.camera import Camera, look_at, perspective
from austere.transform import Transform


def _project(m, point):
    clip = m @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_look_at_default_orientation_is_identity():
    assert np.allclose(look_at([0, 0, 0], [0, 0, -1], [0, 1, 0]), np.eye(4))


def test_look_at_maps_eye_to_origin():
    eye = [3.0, -2.0, 5.0]
    view = look_at(eye, [0, 0, 0], [0, 1, 0])
    assert np.allclose(view @ np.append(eye, 1.0), [0, 0, 0, 1])
    assert np.allclose(view[:3, :3] @ view[:3, :3].T, np.eye(3))


def test_perspective_near_and_far_map_to_clip_bounds():
    proj = perspective(math.radians(60), 1.5, 0.5, 50.0)
    assert np.isclose(_project(proj, [0, 0, -0.5])[2], -1.0)
    assert np.isclose(_project(proj, [0, 0, -50.0])[2], 1.0)


def test_default_camera_view_is_identity():
    cam = Camera()
    assert np.allclose(cam.view_matrix(), np.eye(4))
    assert not cam.dirty


def test_projection_uses_settings():
    cam = Camera(aspect_ratio=2.0, field_of_view=90.0, near_plane=1.0, far_plane=10.0)
    assert np.allclose(cam.projection_matrix(), perspective(math.radians(90.0), 2.0, 1.0, 10.0))


def test_setting_same_value_keeps_clean():
    cam = Camera(field_of_view=45.0)
    cam.view_matrix()
    cam.field_of_view = 45.0
    assert not cam.dirty
    cam.field_of_view = 60.0
    assert cam.dirty
    assert cam.field_of_view == 60.0


def test_transform_change_dirties_camera():
    transform = Transform()
    cam = Camera(transform)
    cam.view_matrix()
    transform.translate([0, 0, 5])
    assert cam.dirty
    view = cam.view_matrix()
    assert np.allclose(view @ np.append(transform.world_position(), 1.0), [0, 0, 0, 1])


def test_frustum_culls_behind_camera():
    cam = Camera(near_plane=0.1, far_plane=100.0)
    frustum = cam.frustum()
    assert frustum.contains([0, 0, -10])
    assert not frustum.contains([0, 0, 10])
    assert frustum.intersects_aabb(AABB([-1, -1, -6], [1, 1, -4]))
    assert not frustum.intersects_aabb(AABB([-1, -1, 4], [1, 1, 6]))


def test_near_far_setters():
    cam = Camera()
    cam.view_matrix()
    cam.near_plane = 2.0
    cam.far_plane = 20.0
    cam.aspect_ratio = 1.0
    assert cam.dirty
    assert not cam.frustum().contains([0, 0, -1])
    assert cam.frustum().contains([0, 0, -10])