"""
Codec Registry
==============

IMMUTABLE registry of codec providers selectable by name.
The mock provider is not registered; tests inject it directly.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from .providers.base import UTF8Codec
from .providers.builtin import BuiltinUTF8Codec
from .providers.lookup import LookupUTF8Codec


@dataclass(frozen=True)
class RegisteredCodec:
    name: str
    factory: Callable[[], UTF8Codec]
    description: str


_REGISTRY = (
    RegisteredCodec(
        name="builtin",
        factory=BuiltinUTF8Codec,
        description="str.encode / bytes.decode"
    ),
    RegisteredCodec(
        name="lookup",
        factory=LookupUTF8Codec,
        description="codecs.lookup('utf-8')"
    ),
)


def get_all_codecs() -> Tuple[RegisteredCodec, ...]:
    """Return all registered codecs."""
    return _REGISTRY


def registered_codecs() -> Tuple[str, ...]:
    return tuple(entry.name for entry in _REGISTRY)


def get_codec(name: str) -> UTF8Codec:
    """Instantiate the codec registered as `name` or raise error."""
    for entry in _REGISTRY:
        if entry.name == name:
            return entry.factory()
    raise ValueError(
        f"Unknown codec: {name!r} (registered: {', '.join(registered_codecs())})"
    )
