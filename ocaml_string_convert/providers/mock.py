"""
Mock UTF-8 Codec
================

Instrumented codec for testing.

GUARANTEES:
- Delegates to a real codec, so results are correct unless a failure
  mode is configured
- Counts every invocation (thread-safe)
- Explicit failure mode: every decode raises UnicodeDecodeError
"""

from __future__ import annotations
import threading
from typing import Optional

from .base import CodecInfo, UTF8Codec
from .builtin import BuiltinUTF8Codec


class MockUTF8Codec(UTF8Codec):
    """
    Counting wrapper around another codec.
    """

    def __init__(
        self,
        inner: Optional[UTF8Codec] = None,
        fail_decode: bool = False
    ):
        """
        Args:
            inner: Codec to delegate to (BuiltinUTF8Codec if omitted)
            fail_decode: If set, all decodes fail
        """
        self._inner = inner if inner is not None else BuiltinUTF8Codec()
        self._fail_decode = fail_decode
        self._lock = threading.Lock()
        self._encode_calls = 0
        self._decode_calls = 0
        self._info = CodecInfo(
            codec_id="mock",
            encoding="utf-8",
            implementation=f"mock over {self._inner.codec_id}"
        )

    @property
    def codec_id(self) -> str:
        return "mock"

    def get_info(self) -> CodecInfo:
        return self._info

    @property
    def encode_calls(self) -> int:
        return self._encode_calls

    @property
    def decode_calls(self) -> int:
        return self._decode_calls

    def encode(self, text: str) -> bytes:
        with self._lock:
            self._encode_calls += 1
        return self._inner.encode(text)

    def decode(self, data: bytes) -> str:
        with self._lock:
            self._decode_calls += 1

        if self._fail_decode:
            raise UnicodeDecodeError(
                "utf-8", data, 0, len(data), "mock decoder configured to fail"
            )

        return self._inner.decode(data)
