"""
Schema document node definitions.

These nodes are the read-only input of the converter: models, their
ordered fields, and embedded types, as produced by the loader.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldKind(str, Enum):
    """Kind of a model field."""

    SCALAR = "scalar"  # String, Int, DateTime, ...
    ENUM = "enum"  # Reference to an enum type
    OBJECT = "object"  # Relation to a model or an embedded type


@dataclass(frozen=True)
class DefaultFunction:
    """A generated default such as ``autoincrement()`` or ``now()``."""

    name: str = ""
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Field:
    """A single field of a model or embedded type."""

    name: str = ""
    type: str = ""  # Scalar name, enum name, or referenced model/type name
    kind: FieldKind = FieldKind.SCALAR
    is_list: bool = False
    is_required: bool = True
    is_id: bool = False
    relation_name: str | None = None  # Set iff the field is a relation

    # None (absent), a scalar literal, a list of literals, or a DefaultFunction
    default: Any = None
    documentation: str | None = None

    @property
    def is_relation(self) -> bool:
        return bool(self.relation_name)


@dataclass(frozen=True)
class Model:
    """A named entity definition with an ordered field list."""

    name: str = ""
    fields: tuple[Field, ...] = ()

    def get_field(self, name: str) -> Field | None:
        """Get field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class SchemaDocument:
    """Root of the input: every model and every embedded type, in declaration order."""

    models: tuple[Model, ...] = ()
    types: tuple[Model, ...] = field(default_factory=tuple)  # Embedded types

    def get_model(self, name: str) -> Model | None:
        for model in self.models:
            if model.name == name:
                return model
        return None
