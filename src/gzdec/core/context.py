"""Persistent decompression context wrapping a zlib inflate object.

The context keeps the inflate window and partial symbol state between
feeds, so one gzip stream can arrive across any number of chunks and
decode calls. It is not re-entrant: every logical stream needs its own
context.
"""

from __future__ import annotations

import logging
import re
import zlib
from enum import Enum
from typing import Optional

from ..errors import DataError, InitError, ResourceError, StateError
from ..models.config import GZIP_WINDOW_BITS

logger = logging.getLogger(__name__)

# zlib return codes as they appear in zlib.error messages
Z_NEED_DICT = 2
Z_STREAM_ERROR = -2
Z_DATA_ERROR = -3
Z_MEM_ERROR = -4

_ZLIB_CODE = re.compile(r"Error (-?\d+)")

GZIP_MAGIC = b"\x1f\x8b"


class DrainStatus(Enum):
    """What the context reported after one drain step."""

    NEEDS_INPUT = "needs_input"
    OUTPUT_FULL = "output_full"
    STREAM_END = "stream_end"


def _zlib_code(exc: zlib.error) -> Optional[int]:
    match = _ZLIB_CODE.search(str(exc))
    return int(match.group(1)) if match else None


def _translate(exc: zlib.error) -> Exception:
    """Map a zlib failure onto the decoder's error taxonomy."""
    code = _zlib_code(exc)
    if code == Z_MEM_ERROR:
        return ResourceError(f"inflate ran out of memory: {exc}")
    if code == Z_STREAM_ERROR:
        return StateError(f"inflate state is inconsistent: {exc}")
    if code == Z_NEED_DICT:
        return DataError(f"stream requires a preset dictionary: {exc}")
    return DataError(f"invalid gzip data: {exc}")


def describe_trailing(count: int, head: bytes) -> str:
    """Log text for ``count`` ignored bytes that follow the end of the stream."""
    if head.startswith(GZIP_MAGIC):
        return (
            f"Ignoring {count} byte(s) after the end of the gzip stream: "
            "they start an additional gzip member, which is not decoded"
        )
    return f"Ignoring {count} byte(s) after the end of the gzip stream"


class DecompressionContext:
    """Owns one inflate stream configured for gzip framing.

    Usage::

        with DecompressionContext() as ctx:
            ctx.feed(chunk)
            data, status = ctx.drain(256 * 1024)
    """

    def __init__(self, window_bits: int = GZIP_WINDOW_BITS):
        self.window_bits = window_bits
        self._inflate = None
        self._pending = b""
        self._initialized = False
        self._finalized = False
        self.ended = False
        self.busy = False
        self.trailing = 0
        self.trailing_head = b""

    @property
    def active(self) -> bool:
        """True between initialize() and finalize()."""
        return self._initialized and not self._finalized

    @property
    def pending(self) -> int:
        """Bytes fed but not yet consumed by inflate."""
        return len(self._pending)

    def initialize(self) -> None:
        """Allocate the inflate stream.

        Raises:
            InitError: If zlib cannot reserve or accept the window
            StateError: If the context was already initialized
        """
        if self._initialized:
            raise StateError("decompression context is already initialized")
        try:
            self._inflate = zlib.decompressobj(self.window_bits)
        except MemoryError as e:
            raise InitError("not enough memory for the inflate window") from e
        except (zlib.error, ValueError) as e:
            raise InitError(
                f"inflate rejected window_bits={self.window_bits}: {e}"
            ) from e
        self._initialized = True
        logger.debug("Initialized inflate context (wbits=%d)", self.window_bits)

    def finalize(self) -> None:
        """Release the inflate stream. Must be called exactly once."""
        if not self._initialized:
            raise StateError("decompression context was never initialized")
        if self._finalized:
            raise StateError("decompression context is already finalized")
        self._inflate = None
        self._pending = b""
        self._finalized = True
        logger.debug("Finalized inflate context")

    def _require_active(self) -> None:
        if not self._initialized:
            raise StateError("decompression context is not initialized")
        if self._finalized:
            raise StateError("decompression context has been finalized")

    def feed(self, buffer: bytes) -> None:
        """Make ``buffer`` visible as pending input."""
        self._require_active()
        if self.ended:
            raise StateError("input fed after the gzip stream already ended")
        self._pending = bytes(buffer)

    def drain(self, capacity: int) -> tuple[bytes, DrainStatus]:
        """Inflate up to ``capacity`` bytes from the pending input.

        Returns:
            Tuple of (produced bytes, DrainStatus)

        Raises:
            DataError: Corrupt data, bad trailer or missing dictionary
            ResourceError: zlib ran out of working memory
            StateError: Context not active or inflate state inconsistent
        """
        self._require_active()
        if self.ended:
            return b"", DrainStatus.STREAM_END

        try:
            produced = self._inflate.decompress(self._pending, capacity)
        except zlib.error as e:
            raise _translate(e) from e
        except MemoryError as e:
            raise ResourceError("not enough memory while inflating") from e

        # Anything inflate could not take because the output window filled up
        self._pending = self._inflate.unconsumed_tail

        if self._inflate.eof:
            self.ended = True
            self.trailing = len(self._inflate.unused_data)
            self.trailing_head = self._inflate.unused_data[:2]
            self._pending = b""
            return produced, DrainStatus.STREAM_END
        if len(produced) == capacity:
            return produced, DrainStatus.OUTPUT_FULL
        return produced, DrainStatus.NEEDS_INPUT

    def __enter__(self) -> "DecompressionContext":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.active:
            self.finalize()

    def __repr__(self) -> str:
        if not self._initialized:
            state = "new"
        elif self._finalized:
            state = "finalized"
        elif self.ended:
            state = "ended"
        else:
            state = "active"
        return f"DecompressionContext(window_bits={self.window_bits}, state={state})"


__all__ = ["DecompressionContext", "DrainStatus", "GZIP_MAGIC", "describe_trailing"]
