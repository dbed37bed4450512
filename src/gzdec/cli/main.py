"""gzdec CLI main entry point with global options."""

from pathlib import Path

import click

from .. import __version__
from .. import config as config_layer
from ..context import GzdecContext
from .helpers import setup_logging


@click.group()
@click.version_option(__version__, prog_name="gzdec")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    help="Decoder config file (overrides $GZDEC_CONFIG and ./gzdec.json)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_file, verbose):
    """gzdec - streaming gzip decoder."""
    ctx.ensure_object(GzdecContext)

    # Every invocation resolves config afresh
    config_layer.reset()
    ctx.obj.config_path = Path(config_file) if config_file else None
    ctx.obj.verbose = verbose
    setup_logging(verbose)


# Register commands at module level so tests can import cli with commands attached
from .commands.config import show_config
from .commands.decode import decode

cli.add_command(decode)
cli.add_command(show_config)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
