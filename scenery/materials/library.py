# scenery/materials/library.py
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from scenery.errors import DuplicateMaterial
from scenery.materials.material import Material

logger = logging.getLogger(__name__)


class MaterialLibrary:
    """
    Named collection of materials, typically one per MTL file.

    Material names are unique within a library. Iteration yields materials
    in registration order.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._materials: Dict[str, Material] = {}

    def register(self, material: Material, replace: bool = False) -> None:
        """
        Add a material under its own name.

        Raises:
            DuplicateMaterial: if the name is taken and `replace` is False.
        """
        if material.name in self._materials and not replace:
            raise DuplicateMaterial(material.name)

        self._materials[material.name] = material
        logger.debug("Registered material '%s'", material.name)

    def get(self, name: str) -> Material:
        """Get a material by name."""
        try:
            return self._materials[name]
        except KeyError:
            raise KeyError(f"Material '{name}' not found") from None

    def try_get(self, name: str) -> Optional[Material]:
        return self._materials.get(name)

    def remove(self, name: str) -> Material:
        try:
            return self._materials.pop(name)
        except KeyError:
            raise KeyError(f"Material '{name}' not found") from None

    def names(self) -> List[str]:
        return list(self._materials)

    def clear(self) -> None:
        self._materials.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._materials

    def __len__(self) -> int:
        return len(self._materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(list(self._materials.values()))
