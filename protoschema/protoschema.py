import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .config import RenderConfig
from .errors import SchemaError
from .loader import SchemaLoader
from .schema_ast.renderer import SchemaRenderer


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--add-generation-comment",
    is_flag=True,
    default=False,
    help="Prefix the output with the command line that generated it",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def protoschema(config, add_generation_comment, verbose, path, output):
    """Build and validate the declarations described in PATH and write canonical .proto text to OUTPUT."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    with open(path) as f:
        description = json.load(f)

    if config is not None:
        with open(config) as f:
            config = RenderConfig.from_dict(json.load(f))
    else:
        config = RenderConfig()

    # CLI flag overrides config file if set
    if add_generation_comment:
        config.add_generation_comment = True

    try:
        proto_file = SchemaLoader().load(description)
    except (SchemaError, KeyError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    generation_comment = ""
    if config.add_generation_comment:
        generation_comment = f"Generated by {reconstruct_command_line(protoschema)}"

    out = SchemaRenderer(config).render_file(proto_file, generation_comment)
    with open(output, "w") as f:
        f.write(out)
