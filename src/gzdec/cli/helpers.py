"""CLI helper utilities shared across commands."""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

import click


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes through click.echo to stderr.

    Resolving stderr at emit time keeps output visible under CliRunner,
    which swaps the streams on every invocation.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the gzdec logger namespace for command line use."""
    logger = logging.getLogger("gzdec")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Avoid adding duplicate handlers on repeated calls
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    return logger


def iter_units(stream: BinaryIO, block_size: Optional[int]) -> Iterator[bytes]:
    """Split a binary stream into discrete data units.

    With no block size the whole stream is one unit.
    """
    if not block_size:
        yield stream.read()
        return
    while True:
        unit = stream.read(block_size)
        if not unit:
            break
        yield unit


def open_source(source: Optional[str]) -> BinaryIO:
    """Open SOURCE for binary reading, or stdin when omitted or '-'."""
    if source is None or source == "-":
        return click.get_binary_stream("stdin")
    path = Path(source)
    if not path.exists():
        click.echo(f"Error: File not found: {source}", err=True)
        sys.exit(1)
    return path.open("rb")
