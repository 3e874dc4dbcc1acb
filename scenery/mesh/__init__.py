# scenery/mesh/__init__.py
from scenery.mesh.base import Mesh, bounds, centroid, triangles, vertex
from scenery.mesh.indexed import IndexedMesh

__all__ = [
    "Mesh",
    "IndexedMesh",
    "vertex",
    "triangles",
    "bounds",
    "centroid",
]
