"""Command-line interface for flowbuilder."""

import logging
import sys

import click

from .config import ConfigError, load_settings
from .output.formatter import (
    OutputFormat,
    format_kinds,
    format_replay_result,
    format_verdict,
)
from .registry.errors import UnknownKindError
from .script.errors import ScriptLoadError, ScriptValidationError
from .script.replay import replay_file
from .validators.base import Reject
from .validators.connection import validate_connection


@click.group()
@click.version_option(package_name="flowbuilder")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
def main(log_level: str):
    """flowbuilder: an input → LLM → output workflow editor core."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def kinds(output_format: OutputFormat):
    """List the node kinds, their fields, and the connection rules."""
    click.echo(format_kinds(output_format))


@main.command()
@click.argument("source")
@click.argument("target")
def check(source: str, target: str):
    """Check whether a SOURCE node kind may connect to a TARGET node kind.

    Exit codes:
      0 - Connection allowed
      1 - Connection rejected
      2 - Unknown node kind
    """
    try:
        verdict = validate_connection(source, target)
    except UnknownKindError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo(format_verdict(verdict))
    sys.exit(1 if isinstance(verdict, Reject) else 0)


@main.command()
@click.argument("script_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(),
    envvar="FLOWBUILDER_CONFIG",
    default=None,
    help="Editor settings file (defaults to FLOWBUILDER_CONFIG env var)",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail if any connection was rejected",
)
def replay(
    script_file: str, output_format: OutputFormat, config_file: str | None, strict: bool
):
    """Replay an editor event script and report the resulting workflow.

    SCRIPT_FILE is the path to a YAML event script.

    Exit codes:
      0 - Replay finished
      1 - Connections were rejected (with --strict)
      2 - File, script, or settings error
    """
    try:
        settings = load_settings(config_file) if config_file else None
    except ConfigError as e:
        click.echo(f"Error loading settings: {e}", err=True)
        sys.exit(2)

    try:
        result = replay_file(script_file, settings)
    except ScriptLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except ScriptValidationError as e:
        click.echo(f"Script validation error: {e}", err=True)
        for problem in e.problems:
            click.echo(f"  - {problem}", err=True)
        sys.exit(2)

    click.echo(format_replay_result(result, output_format))

    if strict and result.has_rejections:
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
