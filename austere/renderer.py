"""Batching of meshes by shader and material, with frustum culling."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import numpy as np
from numpy.typing import ArrayLike

from .camera import Camera
from .lighting import LightManager
from .material import Material
from .model import Model, ModelNode

log = logging.getLogger(__name__)


class RenderMode(enum.IntEnum):
    DEFAULT = 0
    WIREFRAME = 1


@dataclass(eq=False)
class InstanceData:
    mesh: Any
    transform: np.ndarray


@dataclass(eq=False)
class RenderBatch:
    """Mesh instances sharing one shader and one material."""

    shader: Any
    material: Material
    instances: list[InstanceData] = field(default_factory=list)

    def max_distance_squared(self, point: np.ndarray) -> float:
        """Largest squared distance from ``point`` to an instance's origin."""
        return max(
            (float(np.sum((inst.transform[:3, 3] - point) ** 2)) for inst in self.instances),
            default=0.0,
        )


class Renderer:
    """Collects submitted meshes into opaque and transparent batches each frame."""

    def __init__(self, light_manager: LightManager) -> None:
        if light_manager is None:
            raise ValueError("renderer needs a light manager")
        self.light_manager = light_manager
        self.render_mode = RenderMode.DEFAULT
        self.camera: Optional[Camera] = None
        self._opaque: list[RenderBatch] = []
        self._transparent: list[RenderBatch] = []
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def opaque_batches(self) -> tuple[RenderBatch, ...]:
        return tuple(self._opaque)

    @property
    def transparent_batches(self) -> tuple[RenderBatch, ...]:
        return tuple(self._transparent)

    def initialize(self) -> None:
        log.info("Initializing renderer...")
        if self._initialized:
            raise RuntimeError("renderer is already initialized")
        self._initialized = True
        log.info("Renderer initialized")

    def shutdown(self) -> None:
        log.info("Shutting down renderer...")
        if not self._initialized:
            raise RuntimeError("renderer is not initialized")
        self.camera = None
        self._opaque.clear()
        self._transparent.clear()
        self._initialized = False
        log.info("Renderer shut down")

    def submit_mesh(
        self,
        mesh: Any,
        shader: Any,
        material: Optional[Material] = None,
        transform: Optional[ArrayLike] = None,
    ) -> None:
        """Queue a mesh instance unless it lies outside the camera's frustum."""
        if mesh is None or shader is None:
            return
        matrix = np.eye(4) if transform is None else np.array(transform, dtype=float).reshape(4, 4)
        if self.camera is not None:
            if not self.camera.frustum().intersects_aabb(mesh.aabb.transform(matrix)):
                return
        mat = material if material is not None else Material.default()
        batches = self._transparent if mat.is_transparent() else self._opaque
        instance = InstanceData(mesh, matrix)
        for batch in batches:
            if batch.shader is shader and batch.material is mat:
                batch.instances.append(instance)
                return
        batches.append(RenderBatch(shader, mat, [instance]))

    def submit_model(self, model: Optional[Model], shader: Any, transform: Optional[ArrayLike] = None) -> None:
        if model is None or shader is None:
            return
        self.submit_model_node(model.root, shader, transform)

    def submit_model_node(
        self, node: Optional[ModelNode], shader: Any, parent_transform: Optional[ArrayLike] = None
    ) -> None:
        """Submit a node's meshes and, recursively, its children's."""
        if node is None or shader is None:
            return
        parent = np.eye(4) if parent_transform is None else np.asarray(parent_transform, dtype=float).reshape(4, 4)
        world = parent @ node.transform
        materials = node.materials
        for index, mesh in enumerate(node.meshes):
            material = materials[index] if index < len(materials) else None
            self.submit_mesh(mesh, shader, material, world)
        for child in node.children:
            self.submit_model_node(child, shader, world)

    def prepare_frame(self) -> None:
        """Drop the batches of the previous frame."""
        self._opaque.clear()
        self._transparent.clear()

    def _camera_position(self) -> np.ndarray:
        if self.camera is None:
            return np.zeros(3)
        return self.camera.transform.world_position()

    def sorted_transparent_batches(self) -> list[RenderBatch]:
        """Transparent batches ordered back to front from the camera."""
        position = self._camera_position()
        self._transparent.sort(key=lambda batch: batch.max_distance_squared(position), reverse=True)
        return list(self._transparent)

    def render_frame(self, draw: Callable[[Any], None]) -> None:
        """Upload uniforms for every batch, opaque first, and call ``draw`` per instance."""
        for batch in self._opaque:
            self._render_batch(batch, draw)
        for batch in self.sorted_transparent_batches():
            self._render_batch(batch, draw)

    def _render_batch(self, batch: RenderBatch, draw: Callable[[Any], None]) -> None:
        shader = batch.shader
        shader.bind()
        if self.camera is not None:
            shader.set_mat4("u_ProjectionMatrix", self.camera.projection_matrix())
            shader.set_mat4("u_ViewMatrix", self.camera.view_matrix())
            shader.set_vec3("u_CameraPos", self.camera.transform.world_position())
        else:
            shader.set_mat4("u_ProjectionMatrix", np.eye(4))
            shader.set_mat4("u_ViewMatrix", np.eye(4))
            shader.set_vec3("u_CameraPos", np.zeros(3))
        shader.set_int("u_RenderMode", int(self.render_mode))
        batch.material.apply(shader)
        self.light_manager.apply(shader)
        for instance in batch.instances:
            shader.set_mat4("u_ModelMatrix", instance.transform)
            draw(instance.mesh)
        shader.unbind()