"""A named collection of light sources."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .lights import LightSource, LightType

log = logging.getLogger(__name__)

_UNIFORMS = {
    LightType.DIRECTIONAL: ("u_DirLightCount", "u_DirLights"),
    LightType.POINT: ("u_PointLightCount", "u_PointLights"),
    LightType.SPOT: ("u_SpotLightCount", "u_SpotLights"),
}


class LightManager:
    """Holds lights by name and uploads the enabled ones to a shader."""

    def __init__(self) -> None:
        self._lights: dict[str, LightSource] = {}

    def add_light(self, name: str, light: LightSource) -> None:
        if name in self._lights:
            raise ValueError(f"light source with name '{name}' already exists")
        self._lights[name] = light
        log.debug("Added light source named '%s'", name)

    def remove_light(self, name: str) -> None:
        try:
            del self._lights[name]
        except KeyError:
            raise KeyError(f"light source with name '{name}' not found") from None
        log.debug("Removed light source named '%s'", name)

    def apply(self, shader: Any) -> None:
        """Write light counts and per-type light arrays into the shader."""
        if shader is None:
            return
        groups: dict[LightType, list[LightSource]] = {t: [] for t in LightType}
        for light in self._lights.values():
            if light.enabled:
                groups[light.light_type].append(light)
        for light_type, (count_name, _) in _UNIFORMS.items():
            shader.set_int(count_name, len(groups[light_type]))
        for light_type, (_, array_name) in _UNIFORMS.items():
            for index, light in enumerate(groups[light_type]):
                light.apply(shader, array_name, index)

    def __getitem__(self, name: str) -> LightSource:
        return self._lights[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lights)

    def __len__(self) -> int:
        return len(self._lights)

    def __contains__(self, name: object) -> bool:
        return name in self._lights