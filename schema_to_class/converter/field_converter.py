"""
Field conversion.

Resolves the type, nullability and default expression of a field and
collects its annotations. Annotations are always appended in the same
order: serialization, validation, graph.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..config import ConverterConfig
from ..exceptions import SchemaValidationError
from ..ir.nodes import Annotation, FieldDescription
from ..schema.nodes import DefaultFunction, Field, FieldKind
from .graph import extract_graph_annotation
from .serialization import extract_serialization_annotation
from .type_mapper import UNKNOWN_TYPE, map_scalar_type
from .validation_rules import extract_validation_annotations


def arrayify(type_name: str) -> str:
    return f"{type_name}[]"


def _annotation_extractors(config: ConverterConfig) -> list[Callable[[Field], list[Annotation]]]:
    """Enabled extractors, in emission order."""
    extractors = []
    if config.use_serialization_annotations:
        extractors.append(lambda f: [extract_serialization_annotation(f)])
    if config.use_validation_annotations:
        extractors.append(extract_validation_annotations)
    if config.use_graph_annotations:
        extractors.append(lambda f: [extract_graph_annotation(f)])
    return extractors


def resolve_type(field: Field) -> str:
    """
    Resolve the declared type of a field to its target type name.

    Scalars are mapped; enums, relations and embedded types keep their
    declared name. Lists are wrapped afterwards.
    """
    mapped = map_scalar_type(field.type)
    if mapped != UNKNOWN_TYPE:
        type_name = mapped
    elif field.kind == FieldKind.SCALAR:
        raise SchemaValidationError(f"unknown scalar type '{field.type}'", field_name=field.name)
    elif not field.type:
        raise SchemaValidationError(f"{field.kind.value} field without a type name", field_name=field.name)
    else:
        type_name = field.type

    if field.is_list:
        type_name = arrayify(type_name)
    return type_name


def _literal_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_default(field: Field) -> str | None:
    """
    Render the default value of a field as an expression.

    Enum defaults become ``Enum.Value``, big integers ``BigInt(n)`` and
    strings quoted literals. Generated defaults (``now()``, ...) have no
    expression.
    """
    default = field.default
    if default is None or isinstance(default, DefaultFunction):
        return None

    if isinstance(default, (list, tuple)):
        if field.type == "String":
            items = [f"'{item}'" for item in default]
        else:
            items = [_literal_text(item) for item in default]
        return f"[{','.join(items)}]"

    text = _literal_text(default)
    if field.kind == FieldKind.ENUM:
        return f"{field.type}.{text}"
    if field.type == "BigInt":
        return f"BigInt({text})"
    if field.type == "String":
        return f"'{text}'"
    return text


def convert_field(field: Field, config: ConverterConfig) -> FieldDescription:
    """Convert one schema field into a field description."""
    description = FieldDescription(
        name=field.name,
        type=resolve_type(field),
        nullable=not field.is_required,
        default=resolve_default(field),
        use_undefined_default=config.use_undefined_default,
        non_nullable_assertion=config.use_non_nullable_assertions,
        preserve_default_nullable=config.preserve_default_nullable,
    )

    for extract in _annotation_extractors(config):
        description.annotations.extend(extract(field))

    return description
