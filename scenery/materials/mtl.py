# scenery/materials/mtl.py
"""
Mapping between MTL directives and the material builder.

Works on already-read text: callers hand in lines or `(keyword, args)`
pairs, nothing here touches the filesystem.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from scenery.materials.builder import MaterialBuilder
from scenery.materials.library import MaterialLibrary
from scenery.materials.material import (
    AMBIENT_MAP_KEY,
    BUMP_MAP_KEY,
    DIFFUSE_MAP_KEY,
    DISPLACEMENT_MAP_KEY,
    EMISSIVE_MAP_KEY,
    METALLIC_MAP_KEY,
    NORMAL_MAP_KEY,
    ROUGHNESS_MAP_KEY,
    SHEEN_MAP_KEY,
    SPECULAR_MAP_KEY,
    Material,
)
from scenery.settings import DEFAULT_MATERIAL_SETTINGS, MaterialDefaults

logger = logging.getLogger(__name__)

Directive = Tuple[str, Sequence[str]]

# Spellings found in the wild for each texture slot
MAP_DIRECTIVES: Dict[str, str] = {
    "map_Ka": AMBIENT_MAP_KEY,
    "map_Kd": DIFFUSE_MAP_KEY,
    "map_Ks": SPECULAR_MAP_KEY,
    "map_Bump": BUMP_MAP_KEY,
    "map_bump": BUMP_MAP_KEY,
    "bump": BUMP_MAP_KEY,
    "disp": DISPLACEMENT_MAP_KEY,
    "norm": NORMAL_MAP_KEY,
    "map_Pr": ROUGHNESS_MAP_KEY,
    "map_Pm": METALLIC_MAP_KEY,
    "map_Ps": SHEEN_MAP_KEY,
    "map_Ke": EMISSIVE_MAP_KEY,
}


def split_directive(line: str) -> Optional[Directive]:
    """Split one MTL line into keyword and arguments. Blank and comment lines give None."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    parts = line.split()
    return parts[0], parts[1:]


def _floats(keyword: str, args: Sequence[str]) -> List[float]:
    try:
        return [float(a) for a in args]
    except ValueError:
        raise ValueError(f"Non-numeric argument in '{keyword} {' '.join(args)}'")


def _scalar(keyword: str, args: Sequence[str]) -> float:
    if len(args) != 1:
        raise ValueError(f"'{keyword}' expects 1 value, got {len(args)}")
    return _floats(keyword, args)[0]


def _rgb(keyword: str, args: Sequence[str]) -> Tuple[float, float, float]:
    values = _floats(keyword, args)
    if len(values) == 1:
        # A single value means r == g == b
        return values[0], values[0], values[0]
    if len(values) == 3:
        return values[0], values[1], values[2]
    raise ValueError(f"'{keyword}' expects 1 or 3 values, got {len(values)}")


# Texture options and how many values each takes, as (min, max)
TEXTURE_OPTIONS: Dict[str, Tuple[int, int]] = {
    "-blendu": (1, 1),
    "-blendv": (1, 1),
    "-bm": (1, 1),
    "-boost": (1, 1),
    "-cc": (1, 1),
    "-clamp": (1, 1),
    "-imfchan": (1, 1),
    "-texres": (1, 1),
    "-type": (1, 1),
    "-mm": (2, 2),
    "-o": (1, 3),
    "-s": (1, 3),
    "-t": (1, 3),
}


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def _texture_path(keyword: str, args: Sequence[str]) -> str:
    """
    Skip leading texture options and return the rest as the path.

    Paths may contain spaces, so the remaining tokens are joined back
    together with single spaces.
    """
    pos = 0
    while pos < len(args) and args[pos] in TEXTURE_OPTIONS:
        option = args[pos]
        min_values, max_values = TEXTURE_OPTIONS[option]
        pos += 1
        taken = 0
        while taken < max_values and pos < len(args) - 1:
            if taken >= min_values and not _is_number(args[pos]):
                break
            pos += 1
            taken += 1
        if taken < min_values:
            raise ValueError(f"'{keyword}' option '{option}' is missing a value")

    if pos >= len(args):
        raise ValueError(f"'{keyword}' is missing a texture path")
    return " ".join(args[pos:])


_COLOR_SETTERS: Dict[str, Callable[[MaterialBuilder, float, float, float], MaterialBuilder]] = {
    "Ka": MaterialBuilder.set_ambient_color,
    "Kd": MaterialBuilder.set_diffuse_color,
    "Ks": MaterialBuilder.set_specular_color,
}


def apply_directive(builder: MaterialBuilder, keyword: str, args: Sequence[str]) -> bool:
    """
    Apply one MTL directive to a builder.

    Returns:
        True if the directive was understood, False if it was ignored.

    Raises:
        ValueError: on malformed arguments.
    """
    if keyword == "newmtl":
        if not args:
            raise ValueError("'newmtl' is missing a material name")
        builder.set_name(" ".join(args))
    elif keyword in _COLOR_SETTERS:
        _COLOR_SETTERS[keyword](builder, *_rgb(keyword, args))
    elif keyword == "Ns":
        builder.set_specular_exponent(_scalar(keyword, args))
    elif keyword == "d":
        builder.set_opacity(_scalar(keyword, args))
    elif keyword == "Tr":
        builder.set_opacity(1.0 - _scalar(keyword, args))
    elif keyword in MAP_DIRECTIVES:
        builder.set_map(MAP_DIRECTIVES[keyword], _texture_path(keyword, args))
    else:
        logger.debug("Ignoring unsupported MTL directive '%s'", keyword)
        return False

    return True


def library_from_directives(
    directives: Iterable[Directive],
    name: str = "",
    defaults: MaterialDefaults = DEFAULT_MATERIAL_SETTINGS,
) -> MaterialLibrary:
    """
    Assemble a material library from a stream of directives.

    Each `newmtl` starts a new material. Directives before the first
    `newmtl` are an error.

    Raises:
        ValueError: on malformed input.
        DuplicateMaterial: if two materials share a name.
    """
    library = MaterialLibrary(name)
    builder: Optional[MaterialBuilder] = None

    for keyword, args in directives:
        if keyword == "newmtl":
            if builder is not None:
                library.register(builder.build())
            builder = MaterialBuilder(defaults)
        elif builder is None:
            raise ValueError(f"'{keyword}' appears before any 'newmtl'")

        apply_directive(builder, keyword, args)

    if builder is not None:
        library.register(builder.build())

    logger.debug("Assembled material library '%s' with %d material(s)", name, len(library))
    return library


def library_from_lines(
    lines: Iterable[str],
    name: str = "",
    defaults: MaterialDefaults = DEFAULT_MATERIAL_SETTINGS,
) -> MaterialLibrary:
    """Like `library_from_directives`, for raw MTL text lines."""
    directives = (d for d in map(split_directive, lines) if d is not None)
    return library_from_directives(directives, name, defaults)


def material_from_directives(
    directives: Iterable[Directive],
    defaults: MaterialDefaults = DEFAULT_MATERIAL_SETTINGS,
) -> Material:
    """
    Build a single material. A `newmtl` directive is optional here but at
    most one may appear.

    Raises:
        MissingRequiredField: if no name was given.
        ValueError: on malformed input or a second `newmtl`.
    """
    builder = MaterialBuilder(defaults)
    seen_name = False

    for keyword, args in directives:
        if keyword == "newmtl":
            if seen_name:
                raise ValueError("Multiple 'newmtl' directives for a single material")
            seen_name = True
        apply_directive(builder, keyword, args)

    return builder.build()


def _fmt(value: float) -> str:
    return repr(float(value))


def to_directives(material: Material) -> List[str]:
    """Render a material as MTL lines, `newmtl` first."""
    lines = [
        f"newmtl {material.name}",
        "Ka " + " ".join(map(_fmt, material.ambient_color)),
        "Kd " + " ".join(map(_fmt, material.diffuse_color)),
        "Ks " + " ".join(map(_fmt, material.specular_color)),
        f"Ns {_fmt(material.specular_exponent)}",
        f"d {_fmt(material.opacity)}",
    ]
    lines.extend(f"{key} {path}" for key, path in material.maps().items())
    return lines
