"""Decode command - gunzip a file or stdin through the decoder element."""

import sys
from contextlib import ExitStack

import click

from ...context import pass_context
from ...element import FlowReturn, GzDecElement
from ...errors import GzdecError
from ...models import DecodeStatus
from ..helpers import iter_units, open_source


@click.command()
@click.argument("source", required=False)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write decoded bytes to this file instead of stdout",
)
@click.option(
    "--block-size",
    type=int,
    default=None,
    help="Split the input into units of this many bytes (default: one unit)",
)
@click.option(
    "--silent/--no-silent",
    default=None,
    help="Suppress the per-unit log lines",
)
@click.option(
    "--partial/--no-partial",
    default=None,
    help="Forward output of units that end mid-stream (default: on with --block-size)",
)
@pass_context
def decode(ctx, source, output, block_size, silent, partial):
    """Decompress a gzip stream.

    Examples:
        # From a file to stdout
        gzdec decode file.txt.gz > file.txt

        # From stdin, fed to the decoder in 4 KiB units
        cat file.txt.gz | gzdec decode --block-size 4096 -o file.txt
    """
    if block_size is not None and block_size <= 0:
        click.echo("Error: --block-size must be > 0", err=True)
        sys.exit(1)

    try:
        config = ctx.load_config()
        overrides = {}
        if silent is not None:
            overrides["silent"] = silent
        if partial is not None:
            overrides["forward_partial"] = partial
        elif block_size:
            overrides["forward_partial"] = True
        if overrides:
            config = config.model_copy(update=overrides)

        with ExitStack() as stack:
            stream = open_source(source)
            if source not in (None, "-"):
                stack.callback(stream.close)
            if output:
                sink = stack.enter_context(open(output, "wb"))
            else:
                sink = click.get_binary_stream("stdout")
            stack.callback(sink.flush)

            def push(data: bytes) -> FlowReturn:
                sink.write(data)
                return FlowReturn.OK

            with GzDecElement(push=push, config=config) as element:
                for unit in iter_units(stream, block_size):
                    ret = element.chain(unit)
                    if ret is not FlowReturn.OK:
                        if element.last_error is not None:
                            raise element.last_error
                        break
                if element.last_status is not DecodeStatus.OK:
                    click.echo("Error: gzip stream is incomplete", err=True)
                    sys.exit(1)

    except GzdecError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
