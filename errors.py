"""
Error taxonomy of the LZSS decoder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DecodeStatus(Enum):
    OK = "ok"
    NOT_A_CONTAINER = "not a container"
    TRUNCATED_STREAM = "truncated stream"
    INVALID_BACK_REFERENCE = "invalid back-reference"
    LENGTH_MISMATCH = "length mismatch"


@dataclass
class DecodeResult:
    """
    Outcome of a decode: either OK with exactly the declared number of
    bytes, or a failure status with no data.
    """

    status: DecodeStatus
    data: Optional[bytes] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.OK

    def raise_for_status(self):
        if not self.ok:
            raise ERRORS_BY_STATUS[self.status](self.message or self.status.value)


class LZSSError(ValueError):
    """Base class for every failure reported by the codec."""

    status = None


class NotAContainerError(LZSSError):
    status = DecodeStatus.NOT_A_CONTAINER


class CorruptStreamError(LZSSError):
    """Raised when a recognised container cannot be decoded."""


class TruncatedStreamError(CorruptStreamError):
    status = DecodeStatus.TRUNCATED_STREAM


class InvalidBackReferenceError(CorruptStreamError):
    status = DecodeStatus.INVALID_BACK_REFERENCE


class LengthMismatchError(CorruptStreamError):
    status = DecodeStatus.LENGTH_MISMATCH


ERRORS_BY_STATUS = {
    DecodeStatus.NOT_A_CONTAINER: NotAContainerError,
    DecodeStatus.TRUNCATED_STREAM: TruncatedStreamError,
    DecodeStatus.INVALID_BACK_REFERENCE: InvalidBackReferenceError,
    DecodeStatus.LENGTH_MISMATCH: LengthMismatchError,
}
