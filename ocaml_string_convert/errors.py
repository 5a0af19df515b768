"""
Transcoding Errors
==================

Every failure of the transcoding layer is raised as a subclass of
`TranscodeError`. Errors are never recovered internally; they propagate to
the caller with the diagnostic of the codec that detected them.

ERROR STATES:
- DecodeError: reconstructed bytes are not well-formed UTF-8
- CarrierRangeError: a unit does not fit in one byte (strict unit policy only)
- EncodeError: a `str` is not a well-formed host string (lone surrogate)
- UnitSequenceError: a UTF-16 code-unit sequence is malformed
"""

from __future__ import annotations
from enum import Enum
from typing import Optional


class DecodeErrorCode(Enum):
    """
    Explicit decode failure codes.

    Derived from the reason reported by the UTF-8 codec, so callers can
    branch on the kind of corruption without parsing messages.
    """
    INVALID_START_BYTE = "invalid_start_byte"
    INVALID_CONTINUATION_BYTE = "invalid_continuation_byte"
    UNEXPECTED_END = "unexpected_end"
    UNIT_OUT_OF_RANGE = "unit_out_of_range"
    UNKNOWN = "unknown"


_REASON_CODES = {
    "invalid start byte": DecodeErrorCode.INVALID_START_BYTE,
    "invalid continuation byte": DecodeErrorCode.INVALID_CONTINUATION_BYTE,
    "unexpected end of data": DecodeErrorCode.UNEXPECTED_END,
}


class TranscodeError(ValueError):
    """Base class for all transcoding failures."""


class DecodeError(TranscodeError):
    """
    Malformed UTF-8 byte sequence.

    Raised by `narrow` and `repair`. When the codec supplies one, `offset`
    is the byte offset of the first offending byte and `bad_bytes` holds
    the bytes the codec rejected.
    """

    def __init__(
        self,
        message: str,
        code: DecodeErrorCode = DecodeErrorCode.UNKNOWN,
        offset: Optional[int] = None,
        bad_bytes: bytes = b"",
        reason: Optional[str] = None
    ):
        super().__init__(message)
        self.code = code
        self.offset = offset
        self.bad_bytes = bad_bytes
        self.reason = reason

    @classmethod
    def from_unicode_error(cls, exc: UnicodeDecodeError) -> DecodeError:
        """Build a DecodeError carrying the codec's diagnostic."""
        bad_bytes = bytes(exc.object[exc.start:exc.end])
        code = _REASON_CODES.get(exc.reason, DecodeErrorCode.UNKNOWN)
        message = (
            f"malformed UTF-8 byte sequence at offset {exc.start}: "
            f"{exc.reason} (bytes {bad_bytes.hex() or '<none>'})"
        )
        return cls(
            message,
            code=code,
            offset=exc.start,
            bad_bytes=bad_bytes,
            reason=exc.reason
        )


class CarrierRangeError(DecodeError):
    """A carrier unit exceeds 255 and cannot be read as a byte."""

    def __init__(self, offset: int, value: int):
        super().__init__(
            f"unit at offset {offset} has value {value:#x}, "
            f"which does not fit in one byte",
            code=DecodeErrorCode.UNIT_OUT_OF_RANGE,
            offset=offset,
            reason="unit out of range"
        )
        self.value = value

    def __reduce__(self):
        return (type(self), (self.offset, self.value))


class EncodeError(TranscodeError):
    """The input `str` cannot be encoded as UTF-8 (lone surrogate)."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index

    @classmethod
    def from_unicode_error(cls, exc: UnicodeEncodeError) -> EncodeError:
        char = exc.object[exc.start]
        return cls(
            f"string is not well-formed at index {exc.start}: "
            f"{exc.reason} (U+{ord(char):04X})",
            index=exc.start
        )


class UnitSequenceError(TranscodeError):
    """Malformed UTF-16 code-unit sequence."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index
