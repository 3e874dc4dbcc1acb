import pytest

from scenery.materials import MaterialBuilder
from scenery.mesh import IndexedMesh


@pytest.fixture
def two_triangle_mesh():
    """Six vertices, two faces, with normals and texcoords."""
    return IndexedMesh(
        positions=[
            1.0, 1.0, 1.0,
            10.0, 10.0, 10.0,
            100.0, 100.0, 100.0,
            -1.0, -1.0, -1.0,
            -10.0, -10.0, -10.0,
            -100.0, -100.0, -100.0,
        ],
        normals=[
            1.0, 0.0, 0.0,
            1.0, 0.0, 0.0,
            1.0, 0.0, 0.0,
            0.0, 0.0, 1.0,
            0.0, 0.0, 1.0,
            0.0, 0.0, 1.0,
        ],
        texcoords=[0.0, 0.0, 1.0, 1.0, 0.0, 1.0, 0.75, 0.75, 0.75, 0.75, 0.75, 0.75],
        indices=[3, 4, 5, 0, 1, 2],
    )


@pytest.fixture
def positions_only_mesh():
    return IndexedMesh(
        positions=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
        indices=[(0, 1, 2)],
    )


@pytest.fixture
def gold():
    return (
        MaterialBuilder()
        .set_name("Gold")
        .set_diffuse_color(0.9, 0.7, 0.1)
        .set_specular_exponent(32.0)
        .set_diffuse_map("gold_diffuse.png")
        .build()
    )
