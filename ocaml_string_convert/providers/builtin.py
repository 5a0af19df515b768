"""
Builtin UTF-8 Codec
===================

Codec backed by `str.encode` / `bytes.decode` with strict error handling.
This is the default provider.
"""

from __future__ import annotations

from .base import CodecInfo, UTF8Codec


class BuiltinUTF8Codec(UTF8Codec):
    """Strict UTF-8 through the interpreter's built-in string methods."""

    def __init__(self):
        self._info = CodecInfo(
            codec_id="builtin",
            encoding="utf-8",
            implementation="str.encode / bytes.decode (strict)"
        )

    @property
    def codec_id(self) -> str:
        return "builtin"

    def get_info(self) -> CodecInfo:
        return self._info

    def encode(self, text: str) -> bytes:
        return text.encode("utf-8", "strict")

    def decode(self, data: bytes) -> str:
        return data.decode("utf-8", "strict")
