# scenery/errors.py
from __future__ import annotations


class SceneError(Exception):
    """Base class for all scene model errors."""


class MissingRequiredField(SceneError, ValueError):
    def __init__(self, field: str, owner: str = "Material") -> None:
        self.field = field
        self.owner = owner
        super().__init__(f"{owner} is missing required field '{field}'")


class IndexOutOfRange(SceneError, IndexError):
    def __init__(self, kind: str, index: int, limit: int) -> None:
        self.kind = kind
        self.index = index
        self.limit = limit
        valid = f"0..{limit - 1}" if limit > 0 else "none"
        super().__init__(f"{kind} index {index} out of range (valid: {valid})")


class InvalidName(SceneError, ValueError):
    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Invalid entity name: {name!r}")


class DuplicateMaterial(SceneError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Material '{name}' already registered")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])
