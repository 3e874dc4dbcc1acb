# scenery/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Vec2 = Tuple[float, float]  # u, v
Vec3 = Tuple[float, float, float]  # x, y, z
Color = Tuple[float, float, float]  # r, g, b


@dataclass(frozen=True, slots=True)
class Vertex:
    """A single vertex as read through the Mesh contract."""

    position: Vec3
    normal: Optional[Vec3] = None
    uv: Optional[Vec2] = None
