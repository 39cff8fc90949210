"""
Class building.

Converts one model into one class description: filters its fields,
collects the relation, embedded and enum types it references, and adds
the graph object type annotation and enum registrations when enabled.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..config import ConversionContext
from ..exceptions import SchemaValidationError
from ..gen_logging import get_logger
from ..ir.nodes import ClassDescription, FieldDescription
from ..schema.nodes import Field, FieldKind, Model
from .field_converter import convert_field
from .graph import object_type_annotation

logger = get_logger(__name__)

OBJECT_TYPE_DESCRIPTION = "generated by schema_to_class"


def uniquify(names: list[str]) -> list[str]:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(names))


class ClassBuilder:
    """Builds class descriptions for the models of one conversion context."""

    def __init__(self, context: ConversionContext):
        """
        Initialize the builder.

        Args:
            context: Schema document and configuration of this conversion
        """
        self.context = context
        self.config = context.config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.enum_registration_template = self.jinja_env.get_template("enum_registration.jinja2")

    def relation_types(self, model: Model) -> list[str]:
        """Related model names; self references only count when relations are split out."""
        return uniquify(
            [
                f.type
                for f in model.fields
                if f.is_relation and (self.config.separate_relation_fields or f.type != model.name)
            ]
        )

    def embedded_types(self, model: Model) -> list[str]:
        return uniquify([f.type for f in model.fields if f.kind == FieldKind.OBJECT and not f.is_relation and f.type != model.name])

    def enum_types(self, model: Model) -> list[str]:
        return uniquify([f.type for f in model.fields if f.kind == FieldKind.ENUM and f.type != model.name])

    @staticmethod
    def select_fields(model: Model, extract_relation_fields: bool | None) -> list[Field]:
        """
        Keep relation fields only (True), non-relation fields only (False),
        or everything (None). Source order is preserved.
        """
        if extract_relation_fields is True:
            return [f for f in model.fields if f.is_relation]
        if extract_relation_fields is False:
            return [f for f in model.fields if not f.is_relation]
        return list(model.fields)

    def convert_fields(self, model: Model, fields: list[Field]) -> list[FieldDescription]:
        descriptions = []
        for f in fields:
            try:
                descriptions.append(convert_field(f, self.config))
            except SchemaValidationError as e:
                e.with_field(f.name).with_model(model.name)
                if not self.config.skip_invalid_fields:
                    raise
                logger.warning(f"Skipping field {e}")
        return descriptions

    def render_enum_registrations(self, enum_types: list[str]) -> str:
        return self.enum_registration_template.render(enum_types=enum_types).rstrip("\n")

    def build(
        self,
        model: Model,
        extract_relation_fields: bool | None = None,
        postfix: str = "",
        use_graph: bool | None = None,
    ) -> ClassDescription:
        """
        Build the class description of a model.

        Args:
            model: The model to convert
            extract_relation_fields: Field filter, see select_fields
            postfix: Appended to the model name to form the class name
            use_graph: Emit graph annotations (defaults to the configuration)

        Returns:
            A freshly built ClassDescription
        """
        if use_graph is None:
            use_graph = self.config.use_graph_annotations

        class_desc = ClassDescription(name=f"{model.name}{postfix or ''}")
        class_desc.fields = self.convert_fields(model, self.select_fields(model, extract_relation_fields))
        class_desc.relation_types = [] if extract_relation_fields is False else self.relation_types(model)
        class_desc.enum_types = [] if extract_relation_fields is True else self.enum_types(model)
        class_desc.types = self.embedded_types(model)

        if use_graph:
            class_desc.annotations.append(object_type_annotation(OBJECT_TYPE_DESCRIPTION))
            if class_desc.enum_types:
                class_desc.extra = self.render_enum_registrations(class_desc.enum_types)

        logger.debug(f"Built class {class_desc.name} with {len(class_desc.fields)} fields")
        return class_desc


def build_class(
    model: Model,
    context: ConversionContext,
    extract_relation_fields: bool | None = None,
    postfix: str = "",
    use_graph: bool | None = None,
) -> ClassDescription:
    """Convenience function to build a single class description."""
    return ClassBuilder(context).build(model, extract_relation_fields, postfix, use_graph)
