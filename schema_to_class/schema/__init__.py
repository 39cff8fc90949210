"""
Schema module.

Contains the input node definitions and the document loader.
"""

from __future__ import annotations

from .loader import SchemaLoader, load_schema_document
from .nodes import DefaultFunction, Field, FieldKind, Model, SchemaDocument

__all__ = [
    "SchemaDocument",
    "Model",
    "Field",
    "FieldKind",
    "DefaultFunction",
    "SchemaLoader",
    "load_schema_document",
]
