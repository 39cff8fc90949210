import json

import click

from .config import ConversionContext, ConverterConfig, load_config
from .converter import convert_models
from .exceptions import SchemaToClassError
from .gen_logging import configure_gen_logging, get_logger
from .schema import load_schema_document

logger = get_logger()


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--swagger", is_flag=True, default=False, help="Add exposure annotations (ApiProperty)")
@click.option("--validation", is_flag=True, default=False, help="Add validation annotations read from field documentation")
@click.option("--graphql", is_flag=True, default=False, help="Add graph schema annotations and enum registrations")
@click.option("--separate-relation-fields", is_flag=True, default=False, help="Split every model into <Model>Relations and <Model>")
@click.option("--skip-invalid-fields", is_flag=True, default=False, help="Drop fields that cannot be converted instead of failing")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.option("--quiet", "-q", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def schema_to_class(config, swagger, validation, graphql, separate_relation_fields, skip_invalid_fields, verbose, quiet, path, output):
    configure_gen_logging(verbose=verbose, quiet=quiet)

    try:
        config = load_config(config) if config is not None else ConverterConfig()

        # CLI flags override the config file when set
        overrides = {
            "use_serialization_annotations": swagger,
            "use_validation_annotations": validation,
            "use_graph_annotations": graphql,
            "separate_relation_fields": separate_relation_fields,
            "skip_invalid_fields": skip_invalid_fields,
        }
        config = config.replace(**{k: v for k, v in overrides.items() if v})

        document = load_schema_document(path)
        classes = convert_models(ConversionContext(document=document, config=config))
    except SchemaToClassError as e:
        raise click.ClickException(str(e)) from e

    with open(output, "w", encoding="utf-8") as f:
        json.dump([c.to_dict() for c in classes], f, indent=2, ensure_ascii=False)
        f.write("\n")

    logger.info(f"Wrote {len(classes)} classes to {output}")
