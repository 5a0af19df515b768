"""
Codec-Registry UTF-8 Provider
=============================

Resolves the codec once through `codecs.lookup` and keeps the resulting
`codecs.CodecInfo` for the lifetime of the provider.

GUARANTEES:
- Only aliases of UTF-8 are accepted ("utf8", "UTF-8", "u8", ...)
- Decoding is final: a truncated trailing sequence is an error
"""

from __future__ import annotations
import codecs

from .base import CodecInfo, UTF8Codec


class LookupUTF8Codec(UTF8Codec):
    """UTF-8 codec resolved from the interpreter's codec registry."""

    def __init__(self, name: str = "utf-8"):
        """
        Args:
            name: Encoding name or alias to look up

        Raises:
            LookupError: `name` is not a known encoding
            ValueError: `name` resolves to an encoding other than UTF-8
        """
        resolved = codecs.lookup(name)
        if resolved.name != "utf-8":
            raise ValueError(
                f"Codec {name!r} resolves to {resolved.name!r}, not 'utf-8'"
            )
        self._codec = resolved
        self._info = CodecInfo(
            codec_id="lookup",
            encoding=resolved.name,
            implementation=f"codecs.lookup({name!r})"
        )

    @property
    def codec_id(self) -> str:
        return "lookup"

    def get_info(self) -> CodecInfo:
        return self._info

    def encode(self, text: str) -> bytes:
        data, _ = self._codec.encode(text, "strict")
        return data

    def decode(self, data: bytes) -> str:
        text, _ = self._codec.decode(data, "strict")
        return text
