# scenery/materials/__init__.py
from scenery.materials.builder import MaterialBuilder
from scenery.materials.library import MaterialLibrary
from scenery.materials.material import MAP_FIELDS, Material
from scenery.materials.mtl import (
    apply_directive,
    library_from_directives,
    library_from_lines,
    material_from_directives,
    to_directives,
)

__all__ = [
    "Material",
    "MaterialBuilder",
    "MaterialLibrary",
    "MAP_FIELDS",
    "apply_directive",
    "library_from_directives",
    "library_from_lines",
    "material_from_directives",
    "to_directives",
]
