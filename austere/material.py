"""Surface materials: Phong colours plus optional texture maps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Protocol

from .color import Color


class TextureLike(Protocol):
    """What a material needs from a texture."""

    @property
    def valid(self) -> bool: ...

    @property
    def has_transparency(self) -> bool: ...

    def bind(self, slot: int) -> None: ...


_TEXTURE_SLOTS = (
    ("diffuse", 0),
    ("specular", 1),
    ("emissive", 2),
    ("normal", 3),
    ("opacity", 4),
)


@dataclass(eq=False)
class Material:
    """Colours, shininess and up to five texture maps."""

    ambient_color: Color = Color(0.2, 0.2, 0.2, 1.0)
    diffuse_color: Color = Color(0.8, 0.8, 0.8, 1.0)
    specular_color: Color = Color.WHITE
    shininess: float = 32.0
    diffuse_texture: Optional[TextureLike] = None
    specular_texture: Optional[TextureLike] = None
    emissive_texture: Optional[TextureLike] = None
    normal_texture: Optional[TextureLike] = None
    opacity_texture: Optional[TextureLike] = None

    _default: ClassVar[Optional[Material]] = None

    @classmethod
    def default(cls) -> Material:
        """The shared material used when none is given."""
        if Material._default is None:
            Material._default = Material()
        return Material._default

    def _textures(self) -> tuple[tuple[str, int, Optional[TextureLike]], ...]:
        return (
            ("diffuse", 0, self.diffuse_texture),
            ("specular", 1, self.specular_texture),
            ("emissive", 2, self.emissive_texture),
            ("normal", 3, self.normal_texture),
            ("opacity", 4, self.opacity_texture),
        )

    def apply(self, shader: Any, uniform_name: str = "u_Material") -> None:
        """Bind the shader, upload colours and bind valid textures to their slots."""
        if shader is None:
            return
        shader.bind()
        shader.set_vec3(f"{uniform_name}.ambientColor", self.ambient_color.to_vec3())
        shader.set_vec3(f"{uniform_name}.diffuseColor", self.diffuse_color.to_vec3())
        shader.set_vec3(f"{uniform_name}.specularColor", self.specular_color.to_vec3())
        shader.set_float(f"{uniform_name}.shininess", self.shininess)
        for kind, slot, texture in self._textures():
            flag = f"{uniform_name}.has{kind.capitalize()}Texture"
            if texture is not None and texture.valid:
                texture.bind(slot)
                shader.set_int(f"{uniform_name}.{kind}Texture", slot)
                shader.set_bool(flag, True)
            else:
                shader.set_bool(flag, False)

    def is_transparent(self) -> bool:
        if self.opacity_texture is not None and self.opacity_texture.valid:
            return True
        return self.diffuse_texture is not None and bool(self.diffuse_texture.has_transparency)