"""Pydantic models for decoder configuration and results."""

from .config import CHUNK_SIZE, GZIP_WINDOW_BITS, DecoderConfig
from .result import DecodeResult, DecodeStatus, status_for_error

__all__ = [
    "CHUNK_SIZE",
    "DecodeResult",
    "DecodeStatus",
    "DecoderConfig",
    "GZIP_WINDOW_BITS",
    "status_for_error",
]
