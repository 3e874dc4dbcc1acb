# scenery/materials/material.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

from scenery.errors import MissingRequiredField
from scenery.settings import DEFAULT_MATERIAL_SETTINGS
from scenery.types import Color

# Texture map slots and their MTL directive names. The first five follow the
# MTL format, the rest are the common PBR extensions (norm, map_Pr, ...),
# only understood by some target applications.
AMBIENT_MAP_KEY = "map_Ka"
DIFFUSE_MAP_KEY = "map_Kd"
SPECULAR_MAP_KEY = "map_Ks"
BUMP_MAP_KEY = "bump"
DISPLACEMENT_MAP_KEY = "disp"
NORMAL_MAP_KEY = "norm"
ROUGHNESS_MAP_KEY = "map_Pr"
METALLIC_MAP_KEY = "map_Pm"
SHEEN_MAP_KEY = "map_Ps"
EMISSIVE_MAP_KEY = "map_Ke"

MAP_FIELDS: Dict[str, str] = {
    AMBIENT_MAP_KEY: "ambient_map",
    DIFFUSE_MAP_KEY: "diffuse_map",
    SPECULAR_MAP_KEY: "specular_map",
    BUMP_MAP_KEY: "bump_map",
    DISPLACEMENT_MAP_KEY: "displacement_map",
    NORMAL_MAP_KEY: "normal_map",
    ROUGHNESS_MAP_KEY: "roughness_map",
    METALLIC_MAP_KEY: "metallic_map",
    SHEEN_MAP_KEY: "sheen_map",
    EMISSIVE_MAP_KEY: "emissive_map",
}


def _color_tuple(attr: str, value: object) -> Color:
    try:
        components = tuple(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"{attr} must be a sequence of 3 numbers") from None
    if len(components) != 3:
        raise ValueError(f"{attr} must have 3 components, got {len(components)}")

    r, g, b = components
    return float(r), float(g), float(b)


@dataclass(frozen=True, slots=True)
class Material:
    """
    Appearance of an entity, following OBJ/MTL material semantics.

    | Field               | MTL directive | Notes                      |
    | ------------------- | ------------- | -------------------------- |
    | `ambient_color`     | `Ka`          |                            |
    | `diffuse_color`     | `Kd`          | albedo / base color        |
    | `specular_color`    | `Ks`          |                            |
    | `specular_exponent` | `Ns`          | shininess                  |
    | `opacity`           | `d`           | `Tr` is `1 - d`            |
    | `*_map`             | see MAP_FIELDS| texture path, None if unset|

    Colors are copied into float tuples but never clamped. An empty name
    raises MissingRequiredField. Instances are immutable; derive new ones
    with `MaterialBuilder.from_material`.
    """

    name: str
    ambient_color: Color = DEFAULT_MATERIAL_SETTINGS.ambient_color
    diffuse_color: Color = DEFAULT_MATERIAL_SETTINGS.diffuse_color
    specular_color: Color = DEFAULT_MATERIAL_SETTINGS.specular_color
    specular_exponent: float = DEFAULT_MATERIAL_SETTINGS.specular_exponent
    opacity: float = DEFAULT_MATERIAL_SETTINGS.opacity

    ambient_map: Optional[str] = None
    diffuse_map: Optional[str] = None
    specular_map: Optional[str] = None
    bump_map: Optional[str] = None
    displacement_map: Optional[str] = None
    normal_map: Optional[str] = None
    roughness_map: Optional[str] = None
    metallic_map: Optional[str] = None
    sheen_map: Optional[str] = None
    emissive_map: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, not {type(self.name).__name__}")
        if not self.name:
            raise MissingRequiredField("name")

        # Copy sequences into float tuples so callers cannot mutate them later
        for attr in ("ambient_color", "diffuse_color", "specular_color"):
            object.__setattr__(self, attr, _color_tuple(attr, getattr(self, attr)))
        for attr in ("specular_exponent", "opacity"):
            object.__setattr__(self, attr, float(getattr(self, attr)))
        for attr in MAP_FIELDS.values():
            path = getattr(self, attr)
            if path is not None:
                object.__setattr__(self, attr, os.fspath(path) or None)

    def map(self, key: str) -> Optional[str]:
        """Look up a texture path by MTL directive name, e.g. `map_Kd`."""
        try:
            return getattr(self, MAP_FIELDS[key])
        except KeyError:
            raise KeyError(f"Unknown texture map key '{key}'") from None

    def maps(self) -> Dict[str, str]:
        """All texture paths that are set, keyed by MTL directive name."""
        return {
            key: getattr(self, attr)
            for key, attr in MAP_FIELDS.items()
            if getattr(self, attr) is not None
        }

    @property
    def transparency(self) -> float:
        """Inverse of opacity, as written by the MTL `Tr` directive."""
        return 1.0 - self.opacity
