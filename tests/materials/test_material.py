from pathlib import Path

import pytest

from scenery.errors import MissingRequiredField
from scenery.materials import MAP_FIELDS, Material


def test_direct_construction_uses_defaults():
    mat = Material(name="plain")

    assert mat.diffuse_color == (1.0, 1.0, 1.0)
    assert mat.ambient_color == (0.0, 0.0, 0.0)
    assert mat.opacity == 1.0


def test_map_lookup_by_key():
    mat = Material(name="m", diffuse_map="d.png", bump_map="b.png")

    assert mat.map("map_Kd") == "d.png"
    assert mat.map("bump") == "b.png"
    assert mat.map("map_Ka") is None


def test_map_lookup_unknown_key():
    with pytest.raises(KeyError, match="Unknown texture map key"):
        Material(name="m").map("map_d")


def test_maps_only_contains_set_paths():
    mat = Material(name="m", specular_map="s.png", emissive_map="e.png")

    assert mat.maps() == {"map_Ks": "s.png", "map_Ke": "e.png"}


def test_every_map_key_names_a_field():
    mat = Material(name="m")
    for attr in MAP_FIELDS.values():
        assert getattr(mat, attr) is None


def test_transparency_is_inverse_opacity():
    assert Material(name="glass", opacity=0.25).transparency == pytest.approx(0.75)


def test_materials_are_hashable():
    a = Material(name="a")
    b = Material(name="a")

    assert len({a, b}) == 1


def test_colors_are_copied_into_tuples():
    color = [1.0, 0.0, 0.0]
    mat = Material(name="red", diffuse_color=color)

    color[0] = 0.0

    assert mat.diffuse_color == (1.0, 0.0, 0.0)
    assert isinstance(mat.diffuse_color, tuple)


def test_scalars_and_colors_are_floats():
    mat = Material(name="ints", ambient_color=(1, 0, 0), specular_exponent=8, opacity=1)

    assert mat.ambient_color == (1.0, 0.0, 0.0)
    assert all(isinstance(c, float) for c in mat.ambient_color)
    assert isinstance(mat.specular_exponent, float)
    assert isinstance(mat.opacity, float)


def test_empty_name_rejected():
    with pytest.raises(MissingRequiredField, match="name"):
        Material(name="")


def test_non_string_name_rejected():
    with pytest.raises(TypeError):
        Material(name=None)


@pytest.mark.parametrize("color,error", [((1.0, 0.0), ValueError), (0.5, TypeError)])
def test_malformed_color_rejected(color, error):
    with pytest.raises(error, match="diffuse_color"):
        Material(name="m", diffuse_color=color)


def test_map_paths_are_normalised():
    mat = Material(name="m", diffuse_map=Path("tex") / "d.png", bump_map="")

    assert mat.diffuse_map == str(Path("tex") / "d.png")
    assert mat.bump_map is None
    assert mat.maps() == {"map_Kd": str(Path("tex") / "d.png")}


def test_unknown_key_error_is_not_chained():
    with pytest.raises(KeyError) as exc:
        Material(name="m").map("map_d")

    assert exc.value.__cause__ is None
    assert exc.value.__suppress_context__
