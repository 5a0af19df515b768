"""
UTF-8 Codec Provider Abstraction
================================

Abstract interface for the UTF-8 codec capability the transcoder is
built on. The transcoder owns no codec logic; it is handed a provider.

BOUNDARY ENFORCEMENT:
- Providers are stateless (or internally synchronized) and safe to call
  from many threads at once
- `encode` is total over well-formed text
- `decode` raises UnicodeDecodeError on malformed input, never replaces
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CodecInfo:
    """
    Immutable description of a codec provider.

    Reported by `Transcoder.info` so a caller can tell which
    implementation produced a result.
    """
    codec_id: str          # "builtin" | "lookup" | "mock"
    encoding: str          # normalized encoding name, always "utf-8"
    implementation: str    # human-readable description


class UTF8Codec(ABC):
    """
    Abstract UTF-8 codec capability.

    GUARANTEES:
    - encode(text) returns the UTF-8 bytes of `text`
    - decode(data) returns the text whose UTF-8 bytes are `data`
    - Failures are exceptions from the stdlib codec machinery:
      UnicodeEncodeError for lone surrogates, UnicodeDecodeError for
      malformed bytes (with start offset and reason)
    """

    @abstractmethod
    def encode(self, text: str) -> bytes:
        pass

    @abstractmethod
    def decode(self, data: bytes) -> str:
        pass

    @abstractmethod
    def get_info(self) -> CodecInfo:
        """Get codec description."""
        pass

    @property
    @abstractmethod
    def codec_id(self) -> str:
        """Unique provider identifier."""
        pass
