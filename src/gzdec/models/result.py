"""Decode result model returned by the transfer engine."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, model_validator

from ..errors import (
    DataError,
    GzdecError,
    IncompleteStreamError,
    ResourceError,
    StateError,
)


class DecodeStatus(str, Enum):
    """Outcome of one decode call."""

    OK = "ok"
    INCOMPLETE = "incomplete"
    DATA_ERROR = "data_error"
    RESOURCE_ERROR = "resource_error"
    STATE_ERROR = "state_error"


_STATUS_ERRORS: dict[DecodeStatus, type[GzdecError]] = {
    DecodeStatus.INCOMPLETE: IncompleteStreamError,
    DecodeStatus.DATA_ERROR: DataError,
    DecodeStatus.RESOURCE_ERROR: ResourceError,
    DecodeStatus.STATE_ERROR: StateError,
}


def status_for_error(exc: GzdecError) -> DecodeStatus:
    """Map a decoder exception back to its result status."""
    for status, error_type in _STATUS_ERRORS.items():
        if isinstance(exc, error_type):
            return status
    return DecodeStatus.STATE_ERROR


class DecodeResult(BaseModel):
    """Decoded bytes plus the status that says whether they are usable."""

    data: bytes = b""
    length: int = 0
    status: DecodeStatus
    error: str | None = None
    trailing: int = 0

    @model_validator(mode="after")
    def length_matches_data(self) -> "DecodeResult":
        if self.length != len(self.data):
            raise ValueError(
                f"length {self.length} does not match {len(self.data)} data bytes"
            )
        return self

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.OK

    def raise_for_status(self) -> None:
        """Raise the matching ``GzdecError`` subclass unless the status is OK."""
        if self.ok:
            return
        error_type = _STATUS_ERRORS[self.status]
        raise error_type(self.error or self.status.value)


__all__ = ["DecodeResult", "DecodeStatus", "status_for_error"]
