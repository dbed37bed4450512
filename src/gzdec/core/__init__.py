"""gzdec core decompression engine.

This package contains the decoding logic separated from the element and CLI:
- context: Persistent inflate state configured for gzip framing
- chain: Block arena that accumulates inflated output
- engine: Chunked feed/drain loop and linearization
"""

from .chain import OutputChain
from .context import DecompressionContext, DrainStatus
from .engine import decode

__all__ = [
    "DecompressionContext",
    "DrainStatus",
    "OutputChain",
    "decode",
]
