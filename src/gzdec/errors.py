"""Exception hierarchy for the gzip decoder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.result import DecodeStatus


class GzdecError(Exception):
    """Base class for all decoder errors."""

    pass


class InitError(GzdecError):
    """Decompression context could not allocate or configure its window."""

    pass


class DataError(GzdecError):
    """Compressed bytes are malformed or fail the gzip trailer checks."""

    pass


class ResourceError(GzdecError):
    """Decompressor could not allocate internal working memory."""

    pass


class StateError(GzdecError):
    """Decompression context was driven out of order."""

    pass


class IncompleteStreamError(GzdecError):
    """All input was consumed without reaching the end-of-stream marker."""

    pass


class ConfigError(GzdecError):
    """Config file is missing, unreadable or fails validation."""

    pass


class StreamError(GzdecError):
    """A data unit failed inside the pipeline element."""

    def __init__(self, message: str, status: "DecodeStatus"):
        super().__init__(message)
        self.status = status


__all__ = [
    "ConfigError",
    "DataError",
    "GzdecError",
    "IncompleteStreamError",
    "InitError",
    "ResourceError",
    "StateError",
    "StreamError",
]
