"""
IR module.

Contains the class, field and annotation descriptions produced by the converter.
"""

from __future__ import annotations

from .nodes import (
    Annotation,
    AnnotationParam,
    ClassDescription,
    DeferredRef,
    FieldDescription,
    LiteralParam,
    OptionsParam,
    ParamKind,
)

__all__ = [
    "ClassDescription",
    "FieldDescription",
    "Annotation",
    "AnnotationParam",
    "LiteralParam",
    "OptionsParam",
    "DeferredRef",
    "ParamKind",
]
