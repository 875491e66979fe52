# typesfinder/types.py
"""
Resolved type model for docblock return types.

A resolved type is one of three variants:

    Scalar(kind)        built-in keyword type (``int``, ``string``, ``void`` ...)
    ArrayType()         generic array, element type not tracked
    ObjectType(fqsen)   class-like type, absolute name starting with ``\\``

The variants are frozen dataclasses so equality is structural and the values
can be hashed, compared and shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


ROOT_SEPARATOR = "\\"


class ScalarKind(Enum):
    """Built-in keyword types. The value is the canonical docblock spelling."""
    INTEGER = "int"
    STRING = "string"
    FLOAT = "float"
    BOOLEAN = "bool"
    CALLABLE = "callable"
    MIXED = "mixed"
    VOID = "void"
    OBJECT = "object"
    ITERABLE = "iterable"
    SELF = "self"
    STATIC = "static"
    PARENT = "parent"
    NULL = "null"
    NEVER = "never"
    TRUE = "true"
    FALSE = "false"
    RESOURCE = "resource"
    SCALAR = "scalar"
    THIS = "$this"


# ── Variants ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Scalar:
    kind: ScalarKind

    def __str__(self) -> str:
        return self.kind.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "scalar", "kind": self.kind.name.lower()}


@dataclass(frozen=True)
class ArrayType:
    """Array of unknown element type; nesting depth is not kept."""

    def __str__(self) -> str:
        return "array"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "array"}


@dataclass(frozen=True)
class ObjectType:
    fqsen: str

    def __post_init__(self) -> None:
        if not self.fqsen.startswith(ROOT_SEPARATOR):
            object.__setattr__(self, "fqsen", ROOT_SEPARATOR + self.fqsen)

    @property
    def short_name(self) -> str:
        """Last segment of the fully qualified name."""
        return self.fqsen.rsplit(ROOT_SEPARATOR, 1)[-1]

    def __str__(self) -> str:
        return self.fqsen

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "object", "fqsen": self.fqsen}


ResolvedType = Union[Scalar, ArrayType, ObjectType]
