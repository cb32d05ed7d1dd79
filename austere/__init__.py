"""Math, camera, lighting, materials, meshes, scene graph, input and render batching for a small 3D engine."""

__version__ = "0.0.1"