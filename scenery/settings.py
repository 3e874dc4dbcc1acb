# scenery/settings.py
from __future__ import annotations

from dataclasses import dataclass

from scenery.types import Color

BLACK: Color = (0.0, 0.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class MaterialDefaults:
    """
    Values a MaterialBuilder falls back to for fields that were never set.

    Unset diffuse resolves to white (full albedo), which is what most MTL
    readers assume when `Kd` is missing. Ambient and specular resolve to
    black, i.e. no contribution.
    """

    ambient_color: Color = BLACK
    diffuse_color: Color = WHITE
    specular_color: Color = BLACK
    specular_exponent: float = 0.0
    opacity: float = 1.0


DEFAULT_MATERIAL_SETTINGS = MaterialDefaults()
