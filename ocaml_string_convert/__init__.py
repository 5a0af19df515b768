"""
ocaml-string-convert

Transcoding between host strings and the UTF-8 byte strings seen by code
compiled from OCaml, which treats strings as byte arrays.

    >>> from ocaml_string_convert import widen, narrow, repair
    >>> widen("foo·bar").units
    (102, 111, 111, 194, 183, 98, 97, 114)
    >>> narrow(widen("foo·bar"))
    'foo·bar'
    >>> repair("fooÂ·bar")
    'foo·bar'

DESIGN PRINCIPLES:
==================
1. Pure functions - no hidden state, no I/O
2. The UTF-8 codec is injected, never implemented here
3. Encoding state is tracked with nominal types (ByteCarrier,
   CorruptedString) to keep carriers from being widened twice
4. Malformed input raises DecodeError, never a best-effort string
"""

from .contracts import (
    ByteCarrier,
    CorruptedString,
)

from .errors import (
    TranscodeError,
    DecodeError,
    DecodeErrorCode,
    CarrierRangeError,
    EncodeError,
    UnitSequenceError,
)

from .config import TranscoderConfig

from .transcoder import (
    Transcoder,
    TranscoderInfo,
    default_transcoder,
    reset_default_transcoder,
    widen,
    narrow,
    repair,
)

from .units import (
    to_code_units,
    from_code_units,
)

__version__ = "1.0.0"

__all__ = [
    # Contracts
    'ByteCarrier', 'CorruptedString',
    # Errors
    'TranscodeError', 'DecodeError', 'DecodeErrorCode', 'CarrierRangeError',
    'EncodeError', 'UnitSequenceError',
    # Transcoder
    'TranscoderConfig', 'Transcoder', 'TranscoderInfo',
    'default_transcoder', 'reset_default_transcoder',
    'widen', 'narrow', 'repair',
    # Units
    'to_code_units', 'from_code_units',
]
