# scenery/entity.py
from __future__ import annotations

from dataclasses import dataclass, replace

from scenery.errors import InvalidName
from scenery.materials.material import Material
from scenery.mesh.base import Mesh


@dataclass(frozen=True, slots=True)
class Entity:
    """
    A named mesh with one material, the unit placed into a scene.

    The mesh is held by reference and may be shared by many entities
    (instancing). The material is immutable and may be shared as well;
    to change either, derive a new entity with `with_mesh`/`with_material`.
    """

    name: str
    mesh: Mesh
    material: Material

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidName(self.name)

    def with_material(self, material: Material) -> Entity:
        return replace(self, material=material)

    def with_mesh(self, mesh: Mesh) -> Entity:
        return replace(self, mesh=mesh)

    def with_name(self, name: str) -> Entity:
        return replace(self, name=name)
