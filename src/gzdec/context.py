"""gzdec context for passing state between commands."""

from pathlib import Path
from typing import Optional

import click

from . import config as config_layer
from .models import DecoderConfig


class GzdecContext:
    def __init__(self):
        self.config_path: Optional[Path] = None
        self.verbose = False

    def load_config(self) -> DecoderConfig:
        """Load the decoder config selected by --config, env or CWD."""
        return config_layer.ensure(self.config_path)


pass_context = click.make_pass_decorator(GzdecContext, ensure=True)
