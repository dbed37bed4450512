"""Chunked transfer engine: feed, drain and linearize.

``decode`` drives a ``DecompressionContext`` over an input of any size by
feeding it fixed-size input chunks and draining it in fixed-size output
windows. Drained bytes go into an ``OutputChain`` which is linearized into
the single result buffer once the loop finishes.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import GzdecError
from ..models.config import DecoderConfig
from ..models.result import DecodeResult, DecodeStatus, status_for_error
from .chain import OutputChain
from .context import DecompressionContext, DrainStatus, describe_trailing

logger = logging.getLogger(__name__)


def _abort(
    context: DecompressionContext, chain: OutputChain, exc: GzdecError
) -> DecodeResult:
    """Release everything this call allocated and tear the context down."""
    chain.release()
    if context.active:
        context.finalize()
    status = status_for_error(exc)
    logger.debug("Decode aborted (%s): %s", status.value, exc)
    return DecodeResult(status=status, error=str(exc))


def decode(
    context: DecompressionContext,
    data: bytes,
    config: Optional[DecoderConfig] = None,
) -> DecodeResult:
    """Decode one data unit against a persistent context.

    Args:
        context: Initialized context owned by the caller's stream
        data: Compressed bytes of this unit (may be part of a larger stream)
        config: Chunk sizing; defaults to ``DecoderConfig()``

    Returns:
        DecodeResult whose status is OK only if the end-of-stream marker
        was reached during this call. INCOMPLETE results still carry the
        bytes decoded so far.
    """
    config = config or DecoderConfig()

    if not context.active:
        return DecodeResult(
            status=DecodeStatus.STATE_ERROR,
            error=f"cannot decode with {context!r}",
        )
    if context.busy:
        # Do not tear down a context another call is still using
        return DecodeResult(
            status=DecodeStatus.STATE_ERROR,
            error="decompression context already has a decode in flight",
        )

    context.busy = True
    try:
        return _decode_locked(context, memoryview(data), config)
    finally:
        context.busy = False


def _decode_locked(
    context: DecompressionContext, source: memoryview, config: DecoderConfig
) -> DecodeResult:
    chain = OutputChain(config.output_chunk_size)
    remaining = len(source)
    cursor = 0
    ended = False
    feeds = 0

    while remaining > 0 and not ended:
        take = min(remaining, config.input_chunk_size)
        chunk = bytes(source[cursor : cursor + take])
        cursor += take
        remaining -= take
        if not chunk:
            break

        try:
            context.feed(chunk)
            feeds += 1
            while True:
                produced, status = context.drain(config.output_chunk_size)
                chain.append(produced)

                if status is DrainStatus.STREAM_END:
                    ended = True
                    break
                if status is DrainStatus.OUTPUT_FULL:
                    chain.start_node()
                    continue
                # NEEDS_INPUT: this node may never fill, so close it off
                chain.start_node()
                break
        except GzdecError as e:
            return _abort(context, chain, e)

    total = chain.total
    output = chain.linearize()
    logger.debug(
        "Decoded %d -> %d bytes in %d feed(s), ended=%s",
        len(source) - remaining,
        total,
        feeds,
        ended,
    )

    if ended:
        trailing = context.trailing + remaining
        if trailing:
            # Trailing bytes may straddle the last fed chunk and the unfed rest
            head = (context.trailing_head + bytes(source[cursor : cursor + 2]))[:2]
            logger.warning(describe_trailing(trailing, head))
        return DecodeResult(
            data=output, length=total, status=DecodeStatus.OK, trailing=trailing
        )

    return DecodeResult(
        data=output,
        length=total,
        status=DecodeStatus.INCOMPLETE,
        error="input exhausted before the end of the gzip stream",
    )


__all__ = ["decode"]
