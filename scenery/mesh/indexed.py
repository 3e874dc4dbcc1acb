# scenery/mesh/indexed.py
from __future__ import annotations

import operator
from typing import Iterable, List, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from scenery.errors import IndexOutOfRange
from scenery.types import Vec2, Vec3, Vertex


def _as_integral(data: ArrayLike, name: str) -> np.ndarray:
    raw = np.asarray(data)
    if raw.dtype.kind in "iu":
        return raw
    if raw.dtype.kind != "f":
        raise ValueError(f"{name} must be integers, got dtype {raw.dtype}")
    if not (np.isfinite(raw).all() and (raw == np.floor(raw)).all()):
        raise ValueError(f"{name} must be whole numbers")
    return raw


def _frozen(data: ArrayLike, dtype: type, columns: int, name: str) -> np.ndarray:
    if np.issubdtype(dtype, np.integer):
        data = _as_integral(data, name)

    arr = np.array(data, dtype=dtype, copy=True)
    if arr.ndim == 1:
        if arr.size % columns != 0:
            raise ValueError(
                f"{name} length {arr.size} is not a multiple of {columns}"
            )
        arr = arr.reshape(-1, columns)

    if arr.ndim != 2 or arr.shape[1] != columns:
        raise ValueError(f"{name} must have shape (n, {columns}), got {arr.shape}")

    arr.setflags(write=False)
    return arr


def _check_index(index: int, limit: int, kind: str) -> int:
    idx = operator.index(index)
    if idx < 0 or idx >= limit:
        raise IndexOutOfRange(kind, idx, limit)
    return idx


class IndexedMesh:
    """
    Indexed triangle mesh with de-interleaved attributes.

    Each attribute lives in its own array:
        positions  (n, 3) float
        normals    (n, 3) float, optional
        texcoords  (n, 2) float, optional
        indices    (f, 3) int, one row per triangle

    Flat sequences are accepted and reshaped. Arrays are copied and marked
    read-only, so the mesh never changes after construction.
    """

    __slots__ = ("_positions", "_normals", "_texcoords", "_indices")

    def __init__(
        self,
        positions: ArrayLike,
        indices: ArrayLike,
        normals: Optional[ArrayLike] = None,
        texcoords: Optional[ArrayLike] = None,
    ) -> None:
        self._positions = _frozen(positions, np.float64, 3, "positions")
        self._indices = _frozen(indices, np.int64, 3, "indices")

        n = len(self._positions)

        self._normals = (
            _frozen(normals, np.float64, 3, "normals") if normals is not None else None
        )
        self._texcoords = (
            _frozen(texcoords, np.float64, 2, "texcoords")
            if texcoords is not None
            else None
        )

        if self._normals is not None and len(self._normals) != n:
            raise ValueError(
                f"Expected {n} normals to match positions, got {len(self._normals)}"
            )
        if self._texcoords is not None and len(self._texcoords) != n:
            raise ValueError(
                f"Expected {n} texcoords to match positions, got {len(self._texcoords)}"
            )

        if self._indices.size:
            bad = (self._indices < 0) | (self._indices >= n)
            if bad.any():
                face, corner = np.argwhere(bad)[0]
                raise IndexOutOfRange("vertex", int(self._indices[face, corner]), n)

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> IndexedMesh:
        """
        Collect an unindexed vertex stream into a mesh.

        Every three consecutive vertices form one triangle. Normals and
        texcoords are kept only if every vertex carries them.

        Raises:
            ValueError: if the vertex count is not a multiple of three.
        """
        positions: List[Vec3] = []
        normals: List[Vec3] = []
        uvs: List[Vec2] = []
        has_normals = True
        has_uvs = True

        for vtx in vertices:
            positions.append(vtx.position)
            if vtx.normal is None:
                has_normals = False
            elif has_normals:
                normals.append(vtx.normal)
            if vtx.uv is None:
                has_uvs = False
            elif has_uvs:
                uvs.append(vtx.uv)

        if len(positions) % 3 != 0:
            raise ValueError(
                f"Vertex stream of length {len(positions)} does not form whole triangles"
            )

        count = len(positions)
        return cls(
            positions=positions,
            indices=np.arange(count).reshape(-1, 3),
            normals=normals if has_normals and count else None,
            texcoords=uvs if has_uvs and count else None,
        )

    # Raw buffers (read-only views)
    @property
    def positions(self) -> np.ndarray:
        return self._positions

    @property
    def normals(self) -> Optional[np.ndarray]:
        return self._normals

    @property
    def texcoords(self) -> Optional[np.ndarray]:
        return self._texcoords

    @property
    def indices(self) -> np.ndarray:
        return self._indices

    # Mesh contract
    def vertex_count(self) -> int:
        return len(self._positions)

    def face_count(self) -> int:
        return len(self._indices)

    def face_vertices(self, face_index: int) -> Tuple[int, int, int]:
        idx = _check_index(face_index, len(self._indices), "face")
        i, j, k = self._indices[idx]
        return int(i), int(j), int(k)

    def vertex_position(self, vertex_index: int) -> Vec3:
        idx = _check_index(vertex_index, len(self._positions), "vertex")
        x, y, z = self._positions[idx]
        return float(x), float(y), float(z)

    def vertex_normal(self, vertex_index: int) -> Optional[Vec3]:
        idx = _check_index(vertex_index, len(self._positions), "vertex")
        if self._normals is None:
            return None
        x, y, z = self._normals[idx]
        return float(x), float(y), float(z)

    def vertex_uv(self, vertex_index: int) -> Optional[Vec2]:
        idx = _check_index(vertex_index, len(self._positions), "vertex")
        if self._texcoords is None:
            return None
        u, v = self._texcoords[idx]
        return float(u), float(v)

    def __repr__(self) -> str:
        return (
            f"IndexedMesh(vertices={self.vertex_count()}, faces={self.face_count()}, "
            f"normals={self._normals is not None}, texcoords={self._texcoords is not None})"
        )
