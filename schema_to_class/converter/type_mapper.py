"""Scalar type mapping from schema types to target language types."""

from __future__ import annotations

UNKNOWN_TYPE = "unknown"

JSON_SCALAR = "Json"

PRIMITIVE_TYPE_MAP = {
    "Int": "number",
    "String": "string",
    "DateTime": "Date",
    "Boolean": "boolean",
    "Json": "object",
    "BigInt": "BigInt",
    "Float": "number",
    "Decimal": "number",
    "Bytes": "Buffer",
}


def map_scalar_type(type_name: object) -> str:
    """Map a scalar type name to its target type, or UNKNOWN_TYPE."""
    if not isinstance(type_name, str):
        return UNKNOWN_TYPE
    return PRIMITIVE_TYPE_MAP.get(type_name, UNKNOWN_TYPE)


def is_known_scalar(type_name: object) -> bool:
    return map_scalar_type(type_name) != UNKNOWN_TYPE


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]
