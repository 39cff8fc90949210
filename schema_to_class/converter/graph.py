"""Graph schema (object type field) annotations."""

from __future__ import annotations

from ..ir.nodes import Annotation, DeferredRef, LiteralParam, OptionsParam
from ..schema.nodes import Field, FieldKind
from .type_mapper import JSON_SCALAR, UNKNOWN_TYPE, capitalize_first, map_scalar_type

GRAPH_ORIGIN = "@nestjs/graphql"

FIELD_ANNOTATION = "Field"
OBJECT_TYPE_ANNOTATION = "ObjectType"

ID_TYPE = "ID"
JSON_OBJECT_TYPE = "GraphQLJSONObject"
INT_TYPE = "Int"


def graph_scalar_name(mapped_type: str) -> str:
    """``string`` -> ``String``; numbers are exposed as ``Int``."""
    name = capitalize_first(mapped_type)
    if name == "Number":
        return INT_TYPE
    return name


def extract_graph_annotation(field: Field) -> Annotation:
    """
    Build the graph schema annotation of a field.

    Identifiers resolve to the ID type and nothing else. Otherwise the
    scalar, relation and enum references are appended in that order,
    followed by ``{nullable: true}`` for optional fields.
    """
    annotation = Annotation(name=FIELD_ANNOTATION, origin=GRAPH_ORIGIN)

    if field.is_id:
        annotation.params.append(DeferredRef(ID_TYPE))
        return annotation

    is_json = field.type == JSON_SCALAR
    if is_json:
        annotation.params.append(DeferredRef(JSON_OBJECT_TYPE))

    mapped = map_scalar_type(field.type)
    if mapped != UNKNOWN_TYPE and not is_json:
        annotation.params.append(DeferredRef(graph_scalar_name(mapped), is_list=field.is_list))

    if field.is_relation:
        annotation.params.append(DeferredRef(field.type, is_list=field.is_list))

    if field.kind == FieldKind.ENUM:
        annotation.params.append(DeferredRef(field.type, is_list=field.is_list))

    if not field.is_required:
        annotation.params.append(OptionsParam({"nullable": LiteralParam(True)}))

    return annotation


def object_type_annotation(description: str) -> Annotation:
    """Class level annotation registering the class as a graph object type."""
    return Annotation(
        name=OBJECT_TYPE_ANNOTATION,
        origin=GRAPH_ORIGIN,
        params=[OptionsParam({"description": LiteralParam(f'"{description}"')})],
    )
