"""
Exceptions raised while loading and converting a schema document.
"""

from __future__ import annotations


class SchemaToClassError(Exception):
    """Base class for every error raised by schema_to_class."""

    pass


class ConfigError(SchemaToClassError):
    """Raised for invalid configuration files or values."""

    pass


class SchemaValidationError(SchemaToClassError):
    """Raised when a model or field has a shape the converter cannot handle.

    The offending model and field names are kept on the exception and
    prefixed to the message, e.g. ``User.email: unknown scalar type 'Text'``.
    """

    def __init__(self, reason: str, model_name: str | None = None, field_name: str | None = None):
        self.reason = reason
        self.model_name = model_name
        self.field_name = field_name
        super().__init__(self._format())

    def _format(self) -> str:
        location = ".".join(part for part in (self.model_name, self.field_name) if part)
        if location:
            return f"{location}: {self.reason}"
        return self.reason

    def with_field(self, field_name: str) -> SchemaValidationError:
        """Attach the field name (once known) and refresh the message."""
        if self.field_name is None:
            self.field_name = field_name
            self.args = (self._format(),)
        return self

    def with_model(self, model_name: str) -> SchemaValidationError:
        """Attach the model name (once known) and refresh the message."""
        if self.model_name is None:
            self.model_name = model_name
            self.args = (self._format(),)
        return self


class DocumentationSyntaxError(SchemaValidationError):
    """Raised for a malformed rule token in a field's documentation (e.g. ``minLength:``)."""

    def __init__(self, token: str, reason: str, model_name: str | None = None, field_name: str | None = None):
        self.token = token
        super().__init__(f"{reason} in documentation token '{token}'", model_name, field_name)
