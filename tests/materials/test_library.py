import pytest

from scenery.errors import DuplicateMaterial
from scenery.materials import Material, MaterialLibrary


def test_register_and_get():
    library = MaterialLibrary("metals")
    mat = Material(name="Iron")

    library.register(mat)

    assert "Iron" in library
    assert library.get("Iron") is mat
    assert len(library) == 1


def test_missing_material():
    library = MaterialLibrary()

    assert "Nope" not in library
    assert library.try_get("Nope") is None
    with pytest.raises(KeyError, match="Material 'Nope' not found"):
        library.get("Nope")


def test_duplicate_name_rejected():
    library = MaterialLibrary()
    library.register(Material(name="Stone"))

    with pytest.raises(DuplicateMaterial, match="Stone"):
        library.register(Material(name="Stone", opacity=0.5))

    assert library.get("Stone").opacity == 1.0


def test_duplicate_name_replaced_on_request():
    library = MaterialLibrary()
    library.register(Material(name="Stone"))

    library.register(Material(name="Stone", opacity=0.5), replace=True)

    assert library.get("Stone").opacity == 0.5
    assert len(library) == 1


def test_iteration_keeps_registration_order():
    library = MaterialLibrary()
    for name in ("c", "a", "b"):
        library.register(Material(name=name))

    assert library.names() == ["c", "a", "b"]
    assert [m.name for m in library] == ["c", "a", "b"]


def test_remove_and_clear():
    library = MaterialLibrary()
    library.register(Material(name="A"))
    library.register(Material(name="B"))

    removed = library.remove("A")

    assert removed.name == "A"
    assert "A" not in library

    library.clear()

    assert len(library) == 0
    with pytest.raises(KeyError):
        library.remove("B")


def test_lookup_errors_are_not_chained():
    library = MaterialLibrary()

    with pytest.raises(KeyError) as exc:
        library.get("Ghost")
    assert exc.value.__suppress_context__

    with pytest.raises(KeyError) as exc:
        library.remove("Ghost")
    assert exc.value.__suppress_context__
