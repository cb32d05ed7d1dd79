# austere

The engine-side core of a small 3D renderer, in plain Python with numpy. It
holds the parts of a rendering engine that need no GPU: math, camera, culling,
lights, materials, meshes, a scene graph, input state and render batching.

Matrices are row-major 4x4 numpy arrays acting on column vectors; quaternions
are arrays ordered `(w, x, y, z)`.

## Modules

- `austere.color`: `Color`, a frozen RGBA dataclass with `to_vec3()` and
  `to_vec4()` and constants such as `Color.WHITE`, `Color.RED` and
  `Color.TRANSPARENT`.
- `austere.aabb`: `AABB` with `expand` (by a point or a box), `center`,
  `extents`, `vertices`, `contains`, `intersects` and `transform`. The box
  returned by `transform` starts as the zero box, so it always encloses the
  origin.
- `austere.frustum`: `Plane` and `Frustum`. `Frustum.update` extracts six
  normalised planes from a view-projection matrix; `contains`,
  `intersects_sphere` and `intersects_aabb` test against them.
- `austere.transform`: `Transform` (position, rotation, scale, optional parent,
  lazily cached matrices and `forward` / `right` / `up` vectors, a dirty
  callback) and the helpers `quat_multiply`, `quat_rotate`,
  `quat_from_axis_angle` and `quat_to_matrix`.
- `austere.camera`: `Camera` with cached `view_matrix()`, `projection_matrix()`
  and `frustum()`, rebuilt when its transform or its field of view (degrees),
  near plane, far plane or aspect ratio change; plus `look_at` and
  `perspective`.
- `austere.lights`: `LightType`, `LightSource`, `DirectionalLight`,
  `PointLight` and `SpotLight`. Each light's `apply(shader, uniform_name,
  index)` writes fields such as `u_PointLights[0].color`.
- `austere.lighting`: `LightManager`, a mapping of names to lights.
  `add_light` raises `ValueError` for a name already taken and `remove_light`
  raises `KeyError` for an unknown one. `apply(shader)` sets
  `u_DirLightCount`, `u_PointLightCount` and `u_SpotLightCount` and uploads
  the enabled lights of each type.
- `austere.material`: `Material` with ambient, diffuse and specular colours,
  shininess and up to five textures (diffuse, specular, emissive, normal,
  opacity); `apply(shader, uniform_name="u_Material")`, `is_transparent()` and
  the shared `Material.default()`.
- `austere.mesh`: `Mesh` with vertices, indices, normals, texture coordinates,
  tangents and bitangents as numpy arrays, an `aabb`, `has_*` checks and
  `draw_count()`.
- `austere.model`: `ModelNode` (a transform, meshes, materials and children,
  with a weakly held parent) and `Model`, which holds a root node.
- `austere.node`: `SceneNode`, with uniquely named children visited in name
  order and an `initialize` / `update` / `render` / `destroy` life cycle.
- `austere.scene`: `Scene`, a named scene with a root node (a node named
  `"Root"` is made if none is given).
- `austere.scene_manager`: `SceneManager`, a registry of scenes with one
  active scene.
- `austere.application`: `ApplicationInfo` and `Application`, which can also
  be used as a context manager (entering initializes, leaving shuts down).
- `austere.input`: `Keyboard`, `Mouse` and `InputManager`, fed with
  `KeyEvent`, `MouseButtonEvent`, `MouseMotionEvent` and `MouseWheelEvent`
  and tracking pressed, released, down and up state per frame; `MouseButton`
  names the buttons.
- `austere.renderer`: `Renderer`, `RenderBatch`, `InstanceData` and
  `RenderMode`. Submitted meshes are culled against the camera frustum and
  grouped into opaque or transparent batches by shader and material;
  `sorted_transparent_batches()` orders transparent batches back to front, and
  `render_frame(draw)` uploads uniforms per batch and calls `draw(mesh)` for
  every instance.

## Installation

```
pip install austere
```

To run the tests as well:

```
pip install "austere[test]"
pytest
```

## A short example

```python
import numpy as np

from austere.aabb import AABB
from austere.camera import Camera
from austere.transform import Transform

camera = Camera(Transform(position=(0.0, 0.0, 5.0)), aspect_ratio=16 / 9)

box = AABB(np.array([-1.0, -1.0, -1.0]), np.array([1.0, 1.0, 1.0]))
print(camera.frustum().intersects_aabb(box))   # True: the box is in view
```

## Shaders and textures

A shader is any object with `set_int`, `set_float`, `set_bool`, `set_vec3`
and `set_mat4` methods, plus `bind` and `unbind` where materials and the
renderer need them. A texture given to a material needs a `valid` and a
`has_transparency` attribute and a `bind(slot)` method. Lighting, materials
and the renderer can therefore run against a real graphics backend or a
recording stand-in.

## Scenes

Subclass `SceneNode` and override `on_initialize`, `on_update`, `on_render`
and `on_destroy`, or pass callables for them to the constructor (each
receives the node). Add nodes under a scene's root with `add_child`, register
the scene with `SceneManager.add_scene`, then call `set_active_scene(name)`,
which initializes the scene if needed. After that, `update()` and `render()`
on the manager reach every enabled, initialized node of the active scene.

Failures are raised: adding a duplicate child or scene raises `ValueError`,
looking up a missing one raises `KeyError`, and initializing twice or
destroying something not initialized raises `RuntimeError`. If a child fails
to initialize, the children already initialized are destroyed, the node's
`on_destroy` runs and the error propagates.

## What this package does not do

It opens no window, creates no graphics context and issues no draw calls of
its own; drawing happens only through the `draw` callable passed to
`Renderer.render_frame`. It does not load images, model files or shader
sources, compile shaders, or read events from an operating system; input
arrives only as the event objects in `austere.input`. There is no engine main
loop and no command to run.