"""gzip decoder filter element.

Receives a gzip compressed stream one data unit at a time and pushes the
uncompressed stream downstream. The element owns exactly one
``DecompressionContext`` for the lifetime between ``start()`` and
``stop()``; pads, caps and scheduling belong to the host pipeline, which
only hands us bytes through ``chain()`` and events through
``handle_event()``.

Example:
    with GzDecElement(push=sink.write) as gzdec:
        for unit in units:
            if gzdec.chain(unit) is not FlowReturn.OK:
                break
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .core import DecompressionContext, decode
from .core.context import describe_trailing
from .errors import StreamError
from .models import DecodeResult, DecodeStatus, DecoderConfig

logger = logging.getLogger(__name__)


class FlowReturn(Enum):
    """Result of handing a unit to the element or downstream."""

    OK = "ok"
    ERROR = "error"
    FLUSHING = "flushing"


@dataclass(frozen=True)
class Event:
    """Pipeline event forwarded unchanged through the element."""

    type: str
    payload: Dict[str, Any] = field(default_factory=dict)


PushFunc = Callable[[bytes], Optional[FlowReturn]]
EventFunc = Callable[[Event], bool]


class GzDecElement:
    """Filter stage that decodes each data unit with a persistent context."""

    def __init__(
        self,
        push: PushFunc,
        config: Optional[DecoderConfig] = None,
        on_event: Optional[EventFunc] = None,
    ):
        self.config = config or DecoderConfig()
        self.silent = self.config.silent
        self._push = push
        self._on_event = on_event
        self._context: Optional[DecompressionContext] = None
        self.last_error: Optional[StreamError] = None
        self.units = 0
        self.last_status: Optional[DecodeStatus] = None
        self.trailing = 0

    @property
    def started(self) -> bool:
        return self._context is not None

    def start(self) -> None:
        """Create and initialize the element's decompression context.

        Raises:
            InitError: If the context cannot allocate its window
        """
        if self._context is not None:
            self.stop()
        context = DecompressionContext(self.config.window_bits)
        context.initialize()
        self._context = context
        self.last_error = None
        self.units = 0
        self.last_status = None
        self.trailing = 0

    def stop(self) -> None:
        """Finalize the context if it is still alive."""
        if self._context is None:
            return
        if self._context.active:
            self._context.finalize()
        self._context = None

    def __enter__(self) -> "GzDecElement":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def process(self, buffer: bytes) -> DecodeResult:
        """Decode one unit without pushing it anywhere."""
        if self._context is None:
            return DecodeResult(
                status=DecodeStatus.STATE_ERROR, error="element is not started"
            )
        return decode(self._context, buffer, self.config)

    def chain(self, buffer: bytes) -> FlowReturn:
        """Decode one data unit and push the result downstream."""
        self.units += 1
        if not self.silent:
            logger.info("Have data of size %d bytes!", len(buffer))

        if self.last_status is DecodeStatus.OK:
            # The stream already ended; later units are trailing bytes
            head = bytes(buffer[:2]) if not self.trailing else b""
            self.trailing += len(buffer)
            if buffer:
                logger.warning(describe_trailing(len(buffer), head))
            return FlowReturn.OK

        result = self.process(buffer)
        self.last_status = result.status
        if result.ok:
            self.trailing = result.trailing

        if not result.ok:
            partial = (
                result.status is DecodeStatus.INCOMPLETE
                and self.config.forward_partial
            )
            if not partial:
                return self._fail(result)
            logger.debug(
                "Forwarding %d partial byte(s) from unit %d", result.length, self.units
            )

        if not self.silent:
            logger.info("Decoded message: %d bytes", result.length)

        if not result.data:
            return FlowReturn.OK
        ret = self._push(result.data)
        return FlowReturn.OK if ret is None else ret

    def _fail(self, result: DecodeResult) -> FlowReturn:
        message = f"Unit {self.units} failed: {result.error or result.status.value}"
        self.last_error = StreamError(message, result.status)
        logger.error(message)
        return FlowReturn.ERROR

    def handle_event(self, event: Event) -> bool:
        """Forward an event downstream."""
        logger.debug("Received %s event: %r", event.type, event.payload)
        if self._on_event is None:
            return True
        return self._on_event(event)


__all__ = ["Event", "FlowReturn", "GzDecElement"]
