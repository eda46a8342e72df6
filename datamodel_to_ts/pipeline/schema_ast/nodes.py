"""
Node definitions for the input datamodel.

These nodes mirror the datamodel handed over by the schema library
(enums, models, embedded types and their fields). They are read-only:
nothing downstream mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FieldKind(str, Enum):
    """Kind of a model field."""

    SCALAR = "scalar"
    OBJECT = "object"  # Relation to a model or embedded type
    ENUM = "enum"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldNode:
    """A field of a model or embedded type."""

    name: str = ""

    kind: FieldKind = FieldKind.SCALAR

    # Scalar kind ("String", "Int", ...), enum name, or model/type name
    type_name: str = ""

    is_required: bool = True
    is_list: bool = False
    has_default_value: bool = False

    # Raw documentation; its last line may hold a per-field type override
    documentation: str | None = None


@dataclass(frozen=True)
class EnumNode:
    """An enum and its values, in declaration order."""

    name: str = ""
    values: tuple[str, ...] = ()
    documentation: str | None = None


@dataclass(frozen=True)
class ModelNode:
    """A model or an embedded type. Both are emitted the same way."""

    name: str = ""
    fields: tuple[FieldNode, ...] = ()
    documentation: str | None = None


@dataclass(frozen=True)
class Datamodel:
    """Root of the parsed datamodel."""

    enums: tuple[EnumNode, ...] = field(default_factory=tuple)
    models: tuple[ModelNode, ...] = field(default_factory=tuple)
    types: tuple[ModelNode, ...] = field(default_factory=tuple)

    @property
    def declarations(self) -> tuple[ModelNode, ...]:
        """Models followed by embedded types, in schema order."""
        return self.models + self.types
