"""
Schema document loader.

Turns a JSON-like dictionary (models, embedded types and their fields)
into immutable SchemaDocument nodes. No conversion logic lives here.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..exceptions import SchemaValidationError
from .nodes import DefaultFunction, Field, FieldKind, Model, SchemaDocument


class SchemaLoader:
    """Parses a schema dictionary into a SchemaDocument."""

    KINDS = {kind.value: kind for kind in FieldKind}

    def parse(self, data: dict[str, Any]) -> SchemaDocument:
        """
        Parse a schema dictionary.

        Args:
            data: Either ``{"datamodel": {"models": [...], "types": [...]}}``
                or the inner ``{"models": [...], "types": [...]}`` mapping

        Returns:
            SchemaDocument with models and embedded types in input order
        """
        if not isinstance(data, dict):
            raise SchemaValidationError(f"Schema document must be an object, got {type(data).__name__}")

        datamodel = data.get("datamodel", data)
        if not isinstance(datamodel, dict):
            raise SchemaValidationError("'datamodel' must be an object")

        models = tuple(self._parse_model(m) for m in datamodel.get("models") or [])
        types = tuple(self._parse_model(t) for t in datamodel.get("types") or [])

        seen: set[str] = set()
        for model in models + types:
            if model.name in seen:
                raise SchemaValidationError("duplicate model name", model_name=model.name)
            seen.add(model.name)

        return SchemaDocument(models=models, types=types)

    def _parse_model(self, raw: dict[str, Any]) -> Model:
        name = raw.get("name") if isinstance(raw, dict) else None
        if not isinstance(name, str) or not name:
            raise SchemaValidationError("model without a name")

        raw_fields = raw.get("fields") or []
        if not isinstance(raw_fields, list):
            raise SchemaValidationError("'fields' must be a list", model_name=name)

        return Model(name=name, fields=tuple(self._parse_field(f, name) for f in raw_fields))

    def _parse_field(self, raw: dict[str, Any], model_name: str) -> Field:
        if not isinstance(raw, dict) or not raw.get("name"):
            raise SchemaValidationError("field without a name", model_name=model_name)

        field_name = raw["name"]
        kind_name = raw.get("kind", "scalar")
        if kind_name not in self.KINDS:
            raise SchemaValidationError(f"unsupported field kind '{kind_name}'", model_name, field_name)

        return Field(
            name=field_name,
            type=str(raw.get("type", "")),
            kind=self.KINDS[kind_name],
            is_list=bool(raw.get("isList", False)),
            is_required=bool(raw.get("isRequired", True)),
            is_id=bool(raw.get("isId", False)),
            relation_name=raw.get("relationName") or None,
            default=self._parse_default(raw.get("default")),
            documentation=raw.get("documentation"),
        )

    def _parse_default(self, value: Any) -> Any:
        """Generator defaults arrive as ``{"name": "now", "args": []}``."""
        if isinstance(value, dict):
            return DefaultFunction(name=value.get("name", ""), args=tuple(value.get("args") or ()))
        if isinstance(value, list):
            return tuple(value)
        return value


def load_schema_document(path: str | Path) -> SchemaDocument:
    """Read a JSON schema document from disk."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaValidationError(f"Invalid JSON in schema document {path}: {e}") from e
    return SchemaLoader().parse(data)
