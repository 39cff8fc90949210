"""Schema to Class Generator

A Python package for converting a database schema document (models,
relations, enums and embedded types) into annotated class descriptions
ready to be rendered as data-transfer classes.
"""

__version__ = "0.1.0"

from .config import ConversionContext, ConverterConfig, load_config
from .converter import ClassBuilder, build_class, convert_field, convert_models
from .exceptions import ConfigError, DocumentationSyntaxError, SchemaToClassError, SchemaValidationError
from .schema import SchemaDocument, SchemaLoader, load_schema_document

__all__ = [
    "ConverterConfig",
    "ConversionContext",
    "load_config",
    "ClassBuilder",
    "build_class",
    "convert_field",
    "convert_models",
    "SchemaDocument",
    "SchemaLoader",
    "load_schema_document",
    "SchemaToClassError",
    "SchemaValidationError",
    "DocumentationSyntaxError",
    "ConfigError",
]
