"""Decoder configuration model for gzdec.json."""

from __future__ import annotations

import zlib

from pydantic import BaseModel, Field, field_validator

# Unit of decoding. 256 KiB is what zlib recommends for inflate buffers.
CHUNK_SIZE = 256 * 1024

# 16 + MAX_WBITS asks zlib for gzip framing instead of raw deflate.
GZIP_WINDOW_BITS = 16 + zlib.MAX_WBITS


class DecoderConfig(BaseModel):
    """Chunk sizing and element behaviour for the decoder."""

    input_chunk_size: int = Field(default=CHUNK_SIZE, gt=0)
    output_chunk_size: int = Field(default=CHUNK_SIZE, gt=0)
    window_bits: int = GZIP_WINDOW_BITS
    silent: bool = False
    forward_partial: bool = False

    @field_validator("window_bits")
    @classmethod
    def gzip_framing(cls, v: int) -> int:
        """Accept gzip-only (25..31) or gzip/zlib auto-detect (40..47) windows."""

        if 25 <= v <= 31 or 40 <= v <= 47:
            return v
        raise ValueError(
            "window_bits must select gzip framing (25..31) or header "
            "auto-detection (40..47); raw deflate is not supported"
        )


__all__ = ["CHUNK_SIZE", "DecoderConfig", "GZIP_WINDOW_BITS"]
