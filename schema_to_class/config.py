"""
Configuration for the converter.

Holds the options that decide which annotations are emitted and how
models are split into classes, plus the immutable context a conversion
runs under.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .schema.nodes import SchemaDocument


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration options for conversion."""

    # Emit exposure (ApiProperty) annotations
    use_serialization_annotations: bool = False

    # Emit validation (IsString, MinLength, ...) annotations
    use_validation_annotations: bool = False

    # Emit graph schema annotations, ObjectType and enum registrations
    use_graph_annotations: bool = False

    # Split every model into <Model>Relations and <Model>
    separate_relation_fields: bool = False

    # Passed through to FieldDescription for the renderer
    use_undefined_default: bool = False
    use_non_nullable_assertions: bool = False
    preserve_default_nullable: bool = False

    # Log and drop fields that fail to convert instead of aborting
    skip_invalid_fields: bool = False

    # Accepted alternative spellings -> field name
    ALIASES = {
        "useSerializationAnnotations": "use_serialization_annotations",
        "useValidationAnnotations": "use_validation_annotations",
        "useGraphAnnotations": "use_graph_annotations",
        "separateRelationFields": "separate_relation_fields",
        "useUndefinedDefault": "use_undefined_default",
        "useNonNullableAssertions": "use_non_nullable_assertions",
        "preserveDefaultNullable": "preserve_default_nullable",
        "skipInvalidFields": "skip_invalid_fields",
        "useSwagger": "use_serialization_annotations",
        "useClassValidator": "use_validation_annotations",
        "useGraphQL": "use_graph_annotations",
    }

    @staticmethod
    def from_dict(d: dict) -> ConverterConfig:
        """Create a config from a dictionary; unknown keys are ignored."""
        known = {f.name for f in fields(ConverterConfig)}
        values: dict[str, Any] = {}
        for k, v in d.items():
            name = ConverterConfig.ALIASES.get(k, k)
            if name not in known:
                continue
            if not isinstance(v, bool):
                raise ConfigError(f"Option '{k}' must be a boolean, got {v!r}")
            values[name] = v
        return ConverterConfig(**values)

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def replace(self, **changes: Any) -> ConverterConfig:
        """Return a copy with the given options changed."""
        return replace(self, **changes)


def load_config(path: str | Path) -> ConverterConfig:
    """Load a ConverterConfig from a JSON file."""
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    return ConverterConfig.from_dict(data)


@dataclass(frozen=True)
class ConversionContext:
    """The document and configuration a conversion runs under.

    Passed explicitly to every entry point; nothing is stored globally.
    """

    document: SchemaDocument
    config: ConverterConfig = ConverterConfig()
