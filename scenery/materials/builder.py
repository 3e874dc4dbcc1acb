# scenery/materials/builder.py
from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Union

from scenery.errors import MissingRequiredField
from scenery.materials.material import (
    AMBIENT_MAP_KEY,
    BUMP_MAP_KEY,
    DIFFUSE_MAP_KEY,
    DISPLACEMENT_MAP_KEY,
    EMISSIVE_MAP_KEY,
    MAP_FIELDS,
    METALLIC_MAP_KEY,
    NORMAL_MAP_KEY,
    ROUGHNESS_MAP_KEY,
    SHEEN_MAP_KEY,
    SPECULAR_MAP_KEY,
    Material,
)
from scenery.settings import DEFAULT_MATERIAL_SETTINGS, MaterialDefaults
from scenery.types import Color

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]", None]


def _color(r: float, g: float, b: float) -> Color:
    return float(r), float(g), float(b)


class MaterialBuilder:
    """
    Stages material fields and produces immutable `Material` values.

    All setters overwrite any previous value and return the builder, so
    calls can be chained:

        gold = (
            MaterialBuilder()
            .set_name("Gold")
            .set_diffuse_color(0.9, 0.7, 0.1)
            .set_specular_exponent(32.0)
            .set_diffuse_map("gold_diffuse.png")
            .build()
        )

    Fields that are never set fall back to `defaults`. The builder may be
    reused after `build()`; materials already built are not affected.
    """

    def __init__(self, defaults: MaterialDefaults = DEFAULT_MATERIAL_SETTINGS) -> None:
        self._defaults = defaults
        self._name: Optional[str] = None
        self._colors: Dict[str, Color] = {}
        self._scalars: Dict[str, float] = {}
        self._maps: Dict[str, str] = {}  # MTL key -> path

    @classmethod
    def from_material(
        cls,
        material: Material,
        defaults: MaterialDefaults = DEFAULT_MATERIAL_SETTINGS,
    ) -> MaterialBuilder:
        """Start a builder holding every field of an existing material."""
        builder = cls(defaults)
        builder._name = material.name
        builder._colors = {
            "ambient_color": material.ambient_color,
            "diffuse_color": material.diffuse_color,
            "specular_color": material.specular_color,
        }
        builder._scalars = {
            "specular_exponent": material.specular_exponent,
            "opacity": material.opacity,
        }
        builder._maps = material.maps()
        return builder

    @property
    def defaults(self) -> MaterialDefaults:
        return self._defaults

    def set_name(self, name: str) -> MaterialBuilder:
        if not isinstance(name, str):
            raise TypeError(f"name must be str, not {type(name).__name__}")
        self._name = name
        return self

    # Colors
    def set_ambient_color(self, r: float, g: float, b: float) -> MaterialBuilder:
        self._colors["ambient_color"] = _color(r, g, b)
        return self

    def set_diffuse_color(self, r: float, g: float, b: float) -> MaterialBuilder:
        self._colors["diffuse_color"] = _color(r, g, b)
        return self

    def set_specular_color(self, r: float, g: float, b: float) -> MaterialBuilder:
        self._colors["specular_color"] = _color(r, g, b)
        return self

    # Scalars
    def set_specular_exponent(self, exponent: float) -> MaterialBuilder:
        self._scalars["specular_exponent"] = float(exponent)
        return self

    def set_opacity(self, opacity: float) -> MaterialBuilder:
        self._scalars["opacity"] = float(opacity)
        return self

    # Texture maps
    def set_map(self, key: str, path: PathArg) -> MaterialBuilder:
        """
        Set the texture map for an MTL key such as `map_Kd`.

        `None` or an empty path clears the slot.
        """
        if key not in MAP_FIELDS:
            raise KeyError(f"Unknown texture map key '{key}'")

        value = os.fspath(path) if path is not None else ""
        if value:
            self._maps[key] = value
        else:
            self._maps.pop(key, None)
        return self

    def clear_map(self, key: str) -> MaterialBuilder:
        return self.set_map(key, None)

    def set_ambient_map(self, path: PathArg) -> MaterialBuilder:
        return self.set_map(AMBIENT_MAP_KEY, path)

    def set_diffuse_map(self, path: PathArg) -> MaterialBuilder:
        """Diffuse color map, also known as albedo or basecolor."""
        return self.set_map(DIFFUSE_MAP_KEY, path)

    def set_specular_map(self, path: PathArg) -> MaterialBuilder:
        return self.set_map(SPECULAR_MAP_KEY, path)

    def set_bump_map(self, path: PathArg) -> MaterialBuilder:
        """Scalar bump map."""
        return self.set_map(BUMP_MAP_KEY, path)

    def set_displacement_map(self, path: PathArg) -> MaterialBuilder:
        """Scalar displacement map with midpoint at 0.5."""
        return self.set_map(DISPLACEMENT_MAP_KEY, path)

    def set_normal_map(self, path: PathArg) -> MaterialBuilder:
        """Tangent-space normal map. Not part of the official MTL format."""
        return self.set_map(NORMAL_MAP_KEY, path)

    def set_roughness_map(self, path: PathArg) -> MaterialBuilder:
        return self.set_map(ROUGHNESS_MAP_KEY, path)

    def set_metallic_map(self, path: PathArg) -> MaterialBuilder:
        return self.set_map(METALLIC_MAP_KEY, path)

    def set_sheen_map(self, path: PathArg) -> MaterialBuilder:
        return self.set_map(SHEEN_MAP_KEY, path)

    def set_emissive_map(self, path: PathArg) -> MaterialBuilder:
        return self.set_map(EMISSIVE_MAP_KEY, path)

    def build(self) -> Material:
        """
        Produce a Material from the staged fields.

        Raises:
            MissingRequiredField: if no (non-empty) name was set.
        """
        if not self._name:
            raise MissingRequiredField("name")

        defaults = self._defaults
        material = Material(
            name=self._name,
            ambient_color=self._colors.get("ambient_color", defaults.ambient_color),
            diffuse_color=self._colors.get("diffuse_color", defaults.diffuse_color),
            specular_color=self._colors.get(
                "specular_color", defaults.specular_color
            ),
            specular_exponent=self._scalars.get(
                "specular_exponent", defaults.specular_exponent
            ),
            opacity=self._scalars.get("opacity", defaults.opacity),
            **{MAP_FIELDS[key]: path for key, path in self._maps.items()},
        )

        logger.debug(
            "Built material '%s' with %d texture map(s)",
            material.name,
            len(self._maps),
        )
        return material
