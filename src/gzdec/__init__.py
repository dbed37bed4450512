"""gzdec: streaming gzip decoder stage for byte pipelines."""

from .core import DecompressionContext, decode
from .element import Event, FlowReturn, GzDecElement
from .errors import (
    ConfigError,
    DataError,
    GzdecError,
    IncompleteStreamError,
    InitError,
    ResourceError,
    StateError,
    StreamError,
)
from .models import DecodeResult, DecodeStatus, DecoderConfig

__all__ = [
    "__version__",
    "ConfigError",
    "DataError",
    "DecodeResult",
    "DecodeStatus",
    "DecoderConfig",
    "DecompressionContext",
    "Event",
    "FlowReturn",
    "GzDecElement",
    "GzdecError",
    "IncompleteStreamError",
    "InitError",
    "ResourceError",
    "StateError",
    "StreamError",
    "decode",
]

__version__ = "0.1.0"
