"""
UTF-8 Codec Providers Package
=============================

Provider implementations of the UTF-8 codec capability.

Available providers:
- BuiltinUTF8Codec: str.encode / bytes.decode (default)
- LookupUTF8Codec: codec resolved through codecs.lookup
- MockUTF8Codec: counting wrapper with an explicit failure mode
"""

from .base import (
    CodecInfo,
    UTF8Codec,
)
from .builtin import BuiltinUTF8Codec
from .lookup import LookupUTF8Codec
from .mock import MockUTF8Codec

__all__ = [
    'CodecInfo',
    'UTF8Codec',
    'BuiltinUTF8Codec',
    'LookupUTF8Codec',
    'MockUTF8Codec',
]
