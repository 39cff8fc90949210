"""
Converter module.

Type mapping, annotation extraction, field conversion and class building.
"""

from __future__ import annotations

from .class_builder import ClassBuilder, build_class
from .field_converter import convert_field, resolve_default, resolve_type
from .graph import extract_graph_annotation
from .model_set import RELATIONS_POSTFIX, convert_models
from .serialization import extract_serialization_annotation
from .type_mapper import UNKNOWN_TYPE, map_scalar_type
from .validation_rules import extract_validation_annotations

__all__ = [
    "ClassBuilder",
    "build_class",
    "convert_field",
    "convert_models",
    "resolve_type",
    "resolve_default",
    "extract_serialization_annotation",
    "extract_validation_annotations",
    "extract_graph_annotation",
    "map_scalar_type",
    "UNKNOWN_TYPE",
    "RELATIONS_POSTFIX",
]
