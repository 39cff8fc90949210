"""Exposure (serialization) annotations for fields."""

from __future__ import annotations

from ..ir.nodes import Annotation, AnnotationParam, DeferredRef, LiteralParam, OptionsParam
from ..schema.nodes import Field, FieldKind
from .type_mapper import JSON_SCALAR, UNKNOWN_TYPE, capitalize_first, map_scalar_type

SERIALIZATION_ORIGIN = "@nestjs/swagger"

REQUIRED_PROPERTY = "ApiProperty"
OPTIONAL_PROPERTY = "ApiPropertyOptional"


def extract_serialization_annotation(field: Field) -> Annotation:
    """
    Build the exposure annotation of a field.

    The options carry ``isArray`` for lists, then the first applicable of:
    the capitalized scalar type, a deferred reference to the related
    model, or the enum and its quoted name. Embedded types get no type.
    """
    name = REQUIRED_PROPERTY if field.is_required else OPTIONAL_PROPERTY
    annotation = Annotation(name=name, origin=SERIALIZATION_ORIGIN)

    options: dict[str, AnnotationParam] = {}
    if field.is_list:
        options["isArray"] = LiteralParam(True)

    mapped = map_scalar_type(field.type)
    if mapped != UNKNOWN_TYPE and field.type != JSON_SCALAR:
        options["type"] = LiteralParam(capitalize_first(mapped))
    elif field.is_relation:
        options["type"] = DeferredRef(field.type)
    elif field.kind == FieldKind.ENUM and mapped == UNKNOWN_TYPE:
        options["enum"] = LiteralParam(field.type)
        options["enumName"] = LiteralParam(f"'{field.type}'")

    annotation.params.append(OptionsParam(options))
    return annotation
