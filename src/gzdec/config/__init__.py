"""Config layer facade: load, cache and persist the decoder config."""

from gzdec.models import DecoderConfig

from .core import config_path, ensure, load, persist, require, reset, use

set_config_path = use

__all__ = [
    "DecoderConfig",
    "config_path",
    "ensure",
    "load",
    "persist",
    "require",
    "reset",
    "set_config_path",
    "use",
]
