"""Light sources that write their parameters into shader uniforms."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

import numpy as np

from .color import Color


class LightType(enum.Enum):
    DIRECTIONAL = enum.auto()
    POINT = enum.auto()
    SPOT = enum.auto()


def _vec3(value: Any) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3)


@dataclass(eq=False)
class LightSource(ABC):
    """Common colour, intensity and on/off state of every light."""

    color: Color = Color.WHITE
    intensity: float = 1.0
    enabled: bool = field(default=True, kw_only=True)

    light_type: ClassVar[LightType]

    @abstractmethod
    def apply(self, shader: Any, uniform_name: str, index: int) -> None:
        """Write this light into element ``index`` of the uniform array ``uniform_name``."""

    def _apply_common(self, shader: Any, uniform_name: str, index: int) -> Optional[str]:
        if shader is None or not uniform_name:
            return None
        prefix = f"{uniform_name}[{index}]"
        shader.set_vec3(f"{prefix}.color", self.color.to_vec3())
        shader.set_float(f"{prefix}.intensity", self.intensity)
        return prefix


@dataclass(eq=False)
class DirectionalLight(LightSource):
    """A light infinitely far away, shining along one direction."""

    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, -1.0, 0.0]))

    light_type: ClassVar[LightType] = LightType.DIRECTIONAL

    def __post_init__(self) -> None:
        self.direction = _vec3(self.direction)

    def apply(self, shader: Any, uniform_name: str, index: int) -> None:
        prefix = self._apply_common(shader, uniform_name, index)
        if prefix is None:
            return
        shader.set_vec3(f"{prefix}.direction", self.direction)


@dataclass(eq=False)
class PointLight(LightSource):
    """A light radiating from a point, attenuated with distance."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032

    light_type: ClassVar[LightType] = LightType.POINT

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)

    def apply(self, shader: Any, uniform_name: str, index: int) -> None:
        prefix = self._apply_common(shader, uniform_name, index)
        if prefix is None:
            return
        shader.set_vec3(f"{prefix}.position", self.position)
        shader.set_float(f"{prefix}.constant", self.constant)
        shader.set_float(f"{prefix}.linear", self.linear)
        shader.set_float(f"{prefix}.quadratic", self.quadratic)


@dataclass(eq=False)
class SpotLight(LightSource):
    """A cone of light from a point towards a direction."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    inner_cutoff: float = 12.5
    outer_cutoff: float = 17.5
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032

    light_type: ClassVar[LightType] = LightType.SPOT

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.direction = _vec3(self.direction)

    def apply(self, shader: Any, uniform_name: str, index: int) -> None:
        prefix = self._apply_common(shader, uniform_name, index)
        if prefix is None:
            return
        shader.set_vec3(f"{prefix}.position", self.position)
        shader.set_vec3(f"{prefix}.direction", self.direction)
        shader.set_float(f"{prefix}.innerCutoff", self.inner_cutoff)
        shader.set_float(f"{prefix}.outerCutoff", self.outer_cutoff)
        shader.set_float(f"{prefix}.constant", self.constant)
        shader.set_float(f"{prefix}.linear", self.linear)
        shader.set_float(f"{prefix}.quadratic", self.quadratic)