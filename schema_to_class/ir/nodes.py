"""
IR (Intermediate Representation) node definitions.

These nodes describe the classes to generate: fields, resolved types,
default expressions and the annotations attached to them. They are
handed to a renderer, which turns them into source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ParamKind(Enum):
    """Kind of an annotation parameter."""

    LITERAL = "literal"  # Verbatim expression text or a plain value
    OPTIONS = "options"  # {key: param, ...}
    DEFERRED = "deferred"  # (type) => Target


def _literal_source(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


@dataclass
class LiteralParam:
    """A literal parameter.

    ``str`` values are emitted verbatim, so a quoted string literal must
    carry its own quotes (e.g. ``"'Role'"``). Other values are rendered
    as target-language literals (``True`` -> ``true``).
    """

    value: Any = None
    kind: ParamKind = field(default=ParamKind.LITERAL, init=False, repr=False)

    def to_source(self) -> str:
        return _literal_source(self.value)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}


@dataclass
class DeferredRef:
    """A lazily evaluated type reference (type resolver thunk)."""

    target: str = ""
    is_list: bool = False
    kind: ParamKind = field(default=ParamKind.DEFERRED, init=False, repr=False)

    def to_source(self) -> str:
        target = f"[{self.target}]" if self.is_list else self.target
        return f"(type) => {target}"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "target": self.target, "is_list": self.is_list}


@dataclass
class OptionsParam:
    """An object-valued parameter; keys keep insertion order."""

    options: dict[str, AnnotationParam] = field(default_factory=dict)
    kind: ParamKind = field(default=ParamKind.OPTIONS, init=False, repr=False)

    def to_source(self) -> str:
        if not self.options:
            return "{}"
        body = ", ".join(f"{key}: {value.to_source()}" for key, value in self.options.items())
        return f"{{ {body} }}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "options": {key: value.to_dict() for key, value in self.options.items()},
        }


AnnotationParam = LiteralParam | OptionsParam | DeferredRef


@dataclass
class Annotation:
    """A named, parameterized marker attached to a class or a field.

    ``origin`` names the library the annotation comes from; it is passed
    through to the renderer (for imports) and never interpreted here.
    """

    name: str = ""
    origin: str = ""
    params: list[AnnotationParam] = field(default_factory=list)

    def to_source(self) -> str:
        return f"{self.name}({', '.join(p.to_source() for p in self.params)})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "origin": self.origin,
            "params": [p.to_dict() for p in self.params],
        }


@dataclass
class FieldDescription:
    """A field of a generated class."""

    name: str = ""
    type: str = ""  # Resolved type name, list-wrapped when needed
    nullable: bool = False
    default: str | None = None  # Default expression text

    # serialization, then validation, then graph
    annotations: list[Annotation] = field(default_factory=list)

    # Renderer-only flags
    use_undefined_default: bool = False
    non_nullable_assertion: bool = False
    preserve_default_nullable: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "nullable": self.nullable,
            "default": self.default,
            "annotations": [a.to_dict() for a in self.annotations],
            "use_undefined_default": self.use_undefined_default,
            "non_nullable_assertion": self.non_nullable_assertion,
            "preserve_default_nullable": self.preserve_default_nullable,
        }


@dataclass
class ClassDescription:
    """A class to generate from one model (or one half of a split model)."""

    name: str = ""
    fields: list[FieldDescription] = field(default_factory=list)

    # Referenced type names, deduplicated, first-seen order
    relation_types: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)  # Embedded types
    enum_types: list[str] = field(default_factory=list)

    annotations: list[Annotation] = field(default_factory=list)

    # Trailing declarations (e.g. enum registration statements)
    extra: str = ""

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
            "relation_types": list(self.relation_types),
            "types": list(self.types),
            "enum_types": list(self.enum_types),
            "annotations": [a.to_dict() for a in self.annotations],
            "extra": self.extra,
        }
