"""Config command - show the effective decoder configuration."""

import json
import sys

import click

from ... import config as config_layer
from ...context import pass_context
from ...errors import GzdecError


@click.command(name="config")
@pass_context
def show_config(ctx):
    """Print the effective decoder configuration as JSON.

    The source is reported on stderr: the config file path, or "defaults"
    when no file was found.
    """
    try:
        cfg = ctx.load_config()
    except GzdecError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    path = config_layer.config_path()
    click.echo(f"# source: {path if path else 'defaults'}", err=True)
    click.echo(json.dumps(cfg.model_dump(), indent=2))
