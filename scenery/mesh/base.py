# scenery/mesh/base.py
from __future__ import annotations

from typing import Iterator, Optional, Protocol, Tuple, runtime_checkable

from scenery.types import Vec2, Vec3, Vertex


@runtime_checkable
class Mesh(Protocol):
    """
    Read-only access to a triangle mesh, independent of its storage layout.

    Any type exposing these methods is a Mesh; no base class is required.
    Queries must be side-effect free and return the same value for the same
    index for as long as the mesh object lives. Out-of-range indices raise
    `IndexOutOfRange`.
    """

    def vertex_count(self) -> int: ...

    def face_count(self) -> int: ...

    def face_vertices(self, face_index: int) -> Tuple[int, int, int]: ...

    def vertex_position(self, vertex_index: int) -> Vec3: ...

    def vertex_normal(self, vertex_index: int) -> Optional[Vec3]: ...

    def vertex_uv(self, vertex_index: int) -> Optional[Vec2]: ...


def vertex(mesh: Mesh, vertex_index: int) -> Vertex:
    """Gather all attributes of one vertex."""
    return Vertex(
        position=mesh.vertex_position(vertex_index),
        normal=mesh.vertex_normal(vertex_index),
        uv=mesh.vertex_uv(vertex_index),
    )


def triangles(mesh: Mesh) -> Iterator[Tuple[Vertex, Vertex, Vertex]]:
    """Yield every face of the mesh as three vertices, in face order."""
    for face_index in range(mesh.face_count()):
        i, j, k = mesh.face_vertices(face_index)
        yield vertex(mesh, i), vertex(mesh, j), vertex(mesh, k)


def bounds(mesh: Mesh) -> Tuple[Vec3, Vec3]:
    """
    Axis-aligned bounds over all vertex positions as (min, max).

    Raises:
        ValueError: if the mesh has no vertices.
    """
    count = mesh.vertex_count()
    if count == 0:
        raise ValueError("Cannot compute bounds of an empty mesh")

    min_x = min_y = min_z = float("inf")
    max_x = max_y = max_z = float("-inf")

    for idx in range(count):
        px, py, pz = mesh.vertex_position(idx)
        min_x = min(min_x, px)
        max_x = max(max_x, px)
        min_y = min(min_y, py)
        max_y = max(max_y, py)
        min_z = min(min_z, pz)
        max_z = max(max_z, pz)

    return (min_x, min_y, min_z), (max_x, max_y, max_z)


def centroid(mesh: Mesh) -> Vec3:
    """
    Mean of all vertex positions.

    Raises:
        ValueError: if the mesh has no vertices.
    """
    count = mesh.vertex_count()
    if count == 0:
        raise ValueError("Cannot compute centroid of an empty mesh")

    sx = sy = sz = 0.0
    for idx in range(count):
        px, py, pz = mesh.vertex_position(idx)
        sx += px
        sy += py
        sz += pz

    return sx / count, sy / count, sz / count
