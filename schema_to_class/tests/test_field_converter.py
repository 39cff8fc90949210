"""
Tests for field conversion: type resolution, defaults, flags and annotation order.
"""

import pytest

from schema_to_class.config import ConverterConfig
from schema_to_class.converter.field_converter import convert_field, resolve_default, resolve_type
from schema_to_class.exceptions import SchemaValidationError
from schema_to_class.schema.nodes import DefaultFunction, Field, FieldKind

ALL_ANNOTATIONS = ConverterConfig(
    use_serialization_annotations=True,
    use_validation_annotations=True,
    use_graph_annotations=True,
)


@pytest.mark.parametrize(
    "field,expected",
    [
        (Field(name="a", type="Int"), "number"),
        (Field(name="b", type="String", is_list=True), "string[]"),
        (Field(name="c", type="Role", kind=FieldKind.ENUM), "Role"),
        (Field(name="d", type="Post", kind=FieldKind.OBJECT, is_list=True, relation_name="r"), "Post[]"),
        (Field(name="e", type="Address", kind=FieldKind.OBJECT), "Address"),
        (Field(name="f", type="Json"), "object"),
    ],
)
def test_resolve_type(field, expected):
    assert resolve_type(field) == expected


def test_unknown_scalar_is_an_error():
    with pytest.raises(SchemaValidationError) as exc_info:
        resolve_type(Field(name="body", type="Text"))
    assert exc_info.value.field_name == "body"
    assert "Text" in str(exc_info.value)


def test_enum_without_type_is_an_error():
    with pytest.raises(SchemaValidationError):
        resolve_type(Field(name="role", type="", kind=FieldKind.ENUM))


@pytest.mark.parametrize(
    "field,expected",
    [
        (Field(name="a", type="Int", default=5), "5"),
        (Field(name="b", type="Int", default=0), "0"),
        (Field(name="c", type="Boolean", default=False), "false"),
        (Field(name="d", type="Boolean", default=True), "true"),
        (Field(name="e", type="String", default="draft"), "'draft'"),
        (Field(name="f", type="String", default=""), "''"),
        (Field(name="g", type="BigInt", default=10), "BigInt(10)"),
        (Field(name="h", type="Role", kind=FieldKind.ENUM, default="USER"), "Role.USER"),
        (Field(name="i", type="Float", default=1.5), "1.5"),
        (Field(name="j", type="String", is_list=True, default=("a", "b")), "['a','b']"),
        (Field(name="k", type="Int", is_list=True, default=(1, 2, 3)), "[1,2,3]"),
        (Field(name="l", type="Int", is_list=True, default=()), "[]"),
        (Field(name="m", type="Int", default=DefaultFunction("autoincrement")), None),
        (Field(name="n", type="String"), None),
    ],
)
def test_resolve_default(field, expected):
    assert resolve_default(field) == expected


def test_nullable_and_flags():
    config = ConverterConfig(use_undefined_default=True, use_non_nullable_assertions=True, preserve_default_nullable=True)
    description = convert_field(Field(name="nick", type="String", is_required=False), config)
    assert description.nullable is True
    assert description.use_undefined_default is True
    assert description.non_nullable_assertion is True
    assert description.preserve_default_nullable is True
    assert description.annotations == []

    description = convert_field(Field(name="nick", type="String"), ConverterConfig())
    assert description.nullable is False
    assert description.non_nullable_assertion is False


def test_annotation_order():
    field = Field(name="email", type="String", is_required=False, documentation="isEmail")
    description = convert_field(field, ALL_ANNOTATIONS)
    assert [a.name for a in description.annotations] == ["ApiPropertyOptional", "IsOptional", "IsEmail", "Field"]
    assert [a.origin for a in description.annotations] == [
        "@nestjs/swagger",
        "class-validator",
        "class-validator",
        "@nestjs/graphql",
    ]


@pytest.mark.parametrize(
    "option,expected",
    [
        ("use_serialization_annotations", ["ApiProperty"]),
        ("use_validation_annotations", ["IsInt"]),
        ("use_graph_annotations", ["Field"]),
    ],
)
def test_each_extractor_is_optional(option, expected):
    description = convert_field(Field(name="age", type="Int"), ConverterConfig(**{option: True}))
    assert [a.name for a in description.annotations] == expected


def test_list_relation_field():
    field = Field(name="posts", type="Post", kind=FieldKind.OBJECT, is_list=True, relation_name="PostToUser")
    description = convert_field(field, ALL_ANNOTATIONS)
    assert description.type == "Post[]"
    serialization, graph = description.annotations
    assert serialization.to_source() == "ApiProperty({ isArray: true, type: (type) => Post })"
    assert graph.to_source() == "Field((type) => [Post])"
