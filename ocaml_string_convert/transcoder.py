"""
Transcoder
==========

Bidirectional transcoding between host strings and UTF-8 byte carriers.

    widen:  str             -> ByteCarrier   (UTF-8 encode, one unit per byte)
    narrow: ByteCarrier     -> str           (read units as bytes, UTF-8 decode)
    repair: CorruptedString -> str           (same as narrow; differs only in
                                              what the caller claims to hold)

GUARANTEES:
===========
1. narrow(widen(s)) == s for every well-formed s
2. Value-equal inputs give value-equal outputs
3. No shared mutable state: the codec is acquired once, then only read
4. Failures raise TranscodeError subclasses; nothing is replaced or masked
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union
import functools
import logging

from .config import TranscoderConfig
from .contracts import ByteCarrier, CorruptedString
from .errors import DecodeError, EncodeError
from .providers.base import CodecInfo, UTF8Codec
from .registry import get_codec
from .units import Units, reinterpret_units


logger = logging.getLogger(__name__)


CarrierInput = Union[ByteCarrier, bytes, bytearray, memoryview, Units]
CorruptedInput = Union[CorruptedString, str, Units]


@dataclass(frozen=True)
class TranscoderInfo:
    """Which codec a transcoder holds and how it reads units."""
    codec: CodecInfo
    strict_units: bool


class Transcoder:
    """
    Stateless widen / narrow / repair over an injected UTF-8 codec.

    Safe to share between threads: the only state is the codec handle and
    the frozen config, neither of which changes after construction.
    """

    def __init__(
        self,
        codec: Optional[UTF8Codec] = None,
        config: Optional[TranscoderConfig] = None
    ):
        """
        Args:
            codec: UTF-8 codec capability. If omitted, the codec named by
                `config.codec_name` is taken from the registry.
            config: Transcoder configuration (defaults if omitted)
        """
        self._config = config if config is not None else TranscoderConfig()
        self._codec = codec if codec is not None else get_codec(self._config.codec_name)
        logger.info(
            "Acquired UTF-8 codec %r (strict_units=%s)",
            self._codec.codec_id, self._config.strict_units
        )

    @classmethod
    def from_config(cls, config: TranscoderConfig) -> Transcoder:
        return cls(config=config)

    @property
    def config(self) -> TranscoderConfig:
        return self._config

    @property
    def info(self) -> TranscoderInfo:
        return TranscoderInfo(
            codec=self._codec.get_info(),
            strict_units=self._config.strict_units
        )

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def widen(self, text: str) -> ByteCarrier:
        """
        Encode a host string into a byte carrier.

        The carrier's units are, in order, the UTF-8 bytes of `text`.
        ASCII text widens to units equal to its code points.

        Raises:
            TypeError: `text` is not a str (a carrier or corrupted string
                must not be widened again)
            EncodeError: `text` contains a lone surrogate
        """
        if not isinstance(text, str):
            raise TypeError(f"widen() expects str, got {type(text).__name__}")

        try:
            data = self._codec.encode(text)
        except UnicodeEncodeError as exc:
            raise EncodeError.from_unicode_error(exc) from exc

        return ByteCarrier(data)

    def narrow(self, carrier: CarrierInput) -> str:
        """
        Decode a byte carrier back into a host string.

        Accepts a ByteCarrier, any bytes-like object, or an iterable of
        integer units. Strings are rejected: a string holding byte values
        is a corrupted string and goes through `repair`.

        Raises:
            DecodeError: the bytes are not well-formed UTF-8
            CarrierRangeError: a unit exceeds 255 (strict unit policy)
        """
        if isinstance(carrier, (str, CorruptedString)):
            raise TypeError(
                "narrow() expects a byte carrier; use repair() for strings"
            )
        if isinstance(carrier, ByteCarrier):
            data = carrier.data
        else:
            data = reinterpret_units(carrier, strict=self._config.strict_units)
        return self._decode(data)

    def repair(self, corrupted: CorruptedInput) -> str:
        """
        Reconstruct the intended string from a corrupted one.

        Each unit of `corrupted` is read as one UTF-8 byte and the result
        is decoded, so `repair("fooÂ·bar") == "foo·bar"`.

        Raises:
            DecodeError: the reinterpreted bytes are not well-formed UTF-8
            CarrierRangeError: a unit exceeds 255 (strict unit policy)
        """
        if isinstance(corrupted, CorruptedString):
            corrupted = corrupted.text
        data = reinterpret_units(corrupted, strict=self._config.strict_units)
        return self._decode(data)

    def _decode(self, data: bytes) -> str:
        try:
            return self._codec.decode(data)
        except UnicodeDecodeError as exc:
            logger.debug(
                "UTF-8 decode failed at offset %d of %d bytes: %s",
                exc.start, len(data), exc.reason
            )
            raise DecodeError.from_unicode_error(exc) from exc


# =============================================================================
# PROCESS-WIDE DEFAULT
# =============================================================================

@functools.lru_cache(maxsize=None)
def default_transcoder() -> Transcoder:
    """
    Get the process-wide transcoder, built from the environment on first use.
    """
    return Transcoder.from_config(TranscoderConfig.from_env())


def reset_default_transcoder():
    """Drop the cached default so the next call re-reads the environment."""
    default_transcoder.cache_clear()


def widen(text: str) -> ByteCarrier:
    return default_transcoder().widen(text)


def narrow(carrier: CarrierInput) -> str:
    return default_transcoder().narrow(carrier)


def repair(corrupted: CorruptedInput) -> str:
    return default_transcoder().repair(corrupted)
