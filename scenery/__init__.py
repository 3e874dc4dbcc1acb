# scenery/__init__.py
"""
Types for representing scenes:

* `Mesh`, the contract for types that represent triangle meshes,
  with `IndexedMesh` as a ready-made implementation,
* `Material` and `MaterialBuilder` for OBJ/MTL-compatible materials,
* `Entity`, a named mesh with a referenced material.
"""
from scenery.entity import Entity
from scenery.errors import (
    DuplicateMaterial,
    IndexOutOfRange,
    InvalidName,
    MissingRequiredField,
    SceneError,
)
from scenery.materials import Material, MaterialBuilder, MaterialLibrary
from scenery.mesh import IndexedMesh, Mesh
from scenery.settings import DEFAULT_MATERIAL_SETTINGS, MaterialDefaults
from scenery.types import Vertex

__all__ = [
    "Entity",
    "Mesh",
    "IndexedMesh",
    "Vertex",
    "Material",
    "MaterialBuilder",
    "MaterialLibrary",
    "MaterialDefaults",
    "DEFAULT_MATERIAL_SETTINGS",
    "SceneError",
    "MissingRequiredField",
    "IndexOutOfRange",
    "InvalidName",
    "DuplicateMaterial",
]
