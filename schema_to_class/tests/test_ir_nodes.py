from schema_to_class.ir.nodes import (
    Annotation,
    ClassDescription,
    DeferredRef,
    FieldDescription,
    LiteralParam,
    OptionsParam,
    ParamKind,
)


def test_param_kinds():
    assert LiteralParam("3").kind is ParamKind.LITERAL
    assert OptionsParam().kind is ParamKind.OPTIONS
    assert DeferredRef("Post").kind is ParamKind.DEFERRED


def test_literal_source():
    assert LiteralParam("3").to_source() == "3"
    assert LiteralParam(True).to_source() == "true"
    assert LiteralParam(False).to_source() == "false"
    assert LiteralParam(None).to_source() == "null"
    assert LiteralParam("'Role'").to_source() == "'Role'"


def test_deferred_source():
    assert DeferredRef("Post").to_source() == "(type) => Post"
    assert DeferredRef("Post", is_list=True).to_source() == "(type) => [Post]"


def test_options_source():
    assert OptionsParam().to_source() == "{}"
    options = OptionsParam({"isArray": LiteralParam(True), "type": DeferredRef("Post")})
    assert options.to_source() == "{ isArray: true, type: (type) => Post }"


def test_to_dict():
    annotation = Annotation(name="Field", origin="@nestjs/graphql", params=[DeferredRef("Post", is_list=True)])
    class_desc = ClassDescription(
        name="User",
        fields=[FieldDescription(name="posts", type="Post[]", annotations=[annotation])],
        relation_types=["Post"],
    )
    data = class_desc.to_dict()
    assert data["name"] == "User"
    assert data["relation_types"] == ["Post"]
    (field,) = data["fields"]
    assert field["annotations"] == [
        {
            "name": "Field",
            "origin": "@nestjs/graphql",
            "params": [{"kind": "deferred", "target": "Post", "is_list": True}],
        }
    ]
