import json
import logging
from pathlib import Path

import click

from .errors import GenerationError
from .pipeline import PipelineGenerator, parse_datamodel, resolve_config


def _option_value(value):
    # Host options are strings; JSON config files may use real booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _parse_assignments(ctx, param, values):
    options = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        options[key] = value
    return options


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True), help="JSON file of generator options")
@click.option("--option", "-o", "assignments", multiple=True, callback=_parse_assignments, help="Generator option as KEY=VALUE")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log generation steps")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def datamodel_to_ts(config, assignments, verbose, path, output):
    """Generate TypeScript declarations from the datamodel in PATH."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    with open(path, encoding="utf-8") as f:
        document = json.load(f)

    options = {}
    if config is not None:
        with open(config, encoding="utf-8") as f:
            options = {k: _option_value(v) for k, v in json.load(f).items()}

    # Command line options override the config file
    options.update(assignments)
    if output is not None:
        options["output"] = output

    try:
        generator = PipelineGenerator(parse_datamodel(document), resolve_config(options, Path(path).parent))
        written = generator.write()
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Wrote {written}")
