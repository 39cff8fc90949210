import json

import pytest

from schema_to_class.config import ConversionContext, ConverterConfig, load_config
from schema_to_class.exceptions import ConfigError
from schema_to_class.schema.nodes import SchemaDocument


def test_defaults_are_off():
    config = ConverterConfig()
    assert not any(config.to_dict().values())


def test_from_dict_accepts_all_spellings():
    config = ConverterConfig.from_dict(
        {
            "use_serialization_annotations": True,
            "useValidationAnnotations": True,
            "useGraphQL": True,
            "separateRelationFields": True,
            "useUndefinedDefault": True,
            "unrelated": "ignored",
        }
    )
    assert config.use_serialization_annotations
    assert config.use_validation_annotations
    assert config.use_graph_annotations
    assert config.separate_relation_fields
    assert config.use_undefined_default
    assert not config.preserve_default_nullable


def test_legacy_aliases():
    config = ConverterConfig.from_dict({"useSwagger": True, "useClassValidator": True})
    assert config.use_serialization_annotations
    assert config.use_validation_annotations


def test_from_dict_rejects_non_boolean():
    with pytest.raises(ConfigError):
        ConverterConfig.from_dict({"useGraphQL": "yes"})


def test_round_trip_and_replace():
    config = ConverterConfig(use_graph_annotations=True)
    assert ConverterConfig.from_dict(config.to_dict()) == config
    changed = config.replace(separate_relation_fields=True)
    assert changed.separate_relation_fields and changed.use_graph_annotations
    assert not config.separate_relation_fields


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"useValidationAnnotations": True}))
    assert load_config(path).use_validation_annotations


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(broken)

    not_object = tmp_path / "list.json"
    not_object.write_text("[]")
    with pytest.raises(ConfigError):
        load_config(not_object)


def test_context_is_immutable():
    context = ConversionContext(document=SchemaDocument())
    assert context.config == ConverterConfig()
    with pytest.raises(AttributeError):
        context.config = ConverterConfig(use_graph_annotations=True)
