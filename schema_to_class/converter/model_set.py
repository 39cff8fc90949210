"""
Model set conversion.

One model can produce several classes: with relation separation every
model is split into ``<Model>Relations`` (relation fields only) and
``<Model>`` (everything else).
"""

from __future__ import annotations

from ..config import ConversionContext
from ..gen_logging import get_logger
from ..ir.nodes import ClassDescription
from .class_builder import ClassBuilder

logger = get_logger(__name__)

RELATIONS_POSTFIX = "Relations"


def convert_models(context: ConversionContext) -> list[ClassDescription]:
    """
    Convert every model and embedded type of the document.

    Args:
        context: Schema document and configuration of this conversion

    Returns:
        Class descriptions: models first, embedded types last
    """
    builder = ClassBuilder(context)
    models = context.document.models
    types = context.document.types

    if context.config.separate_relation_fields:
        classes = [
            *(builder.build(model, extract_relation_fields=True, postfix=RELATIONS_POSTFIX) for model in models),
            *(builder.build(model, extract_relation_fields=False) for model in models),
            *(builder.build(t, extract_relation_fields=True) for t in types),
        ]
    else:
        classes = [
            *(builder.build(model) for model in models),
            *(builder.build(t) for t in types),
        ]

    logger.debug(f"Converted {len(models)} models and {len(types)} embedded types into {len(classes)} classes")
    return classes
