"""RGBA colours with float components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np


@dataclass(frozen=True)
class Color:
    """An RGBA colour whose components usually lie in [0, 1]."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]

    def to_vec3(self) -> np.ndarray:
        """Return the RGB components as a 3-vector."""
        return np.array([self.r, self.g, self.b], dtype=float)

    def to_vec4(self) -> np.ndarray:
        """Return the RGBA components as a 4-vector."""
        return np.array([self.r, self.g, self.b, self.a], dtype=float)


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
Color.YELLOW = Color(1.0, 1.0, 0.0, 1.0)
Color.CYAN = Color(0.0, 1.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0, 1.0)