"""
Transcoding Contracts
=====================

Nominal value types for the three encoding states a string can be in.

- `str`: a known-good host string
- ByteCarrier: the UTF-8 bytes of a host string, ready for the byte side
- CorruptedString: byte values the byte side emitted as if they were text

BOUNDARY ENFORCEMENT:
=====================
- All types are frozen dataclasses (immutable, value-equal, hashable)
- The wrappers exist so that a carrier is never widened twice and a
  corrupted string is never mistaken for a correct one
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from .units import Units, reinterpret_units


@dataclass(frozen=True)
class ByteCarrier:
    """
    UTF-8 bytes of a host string.

    INVARIANT: every unit is in [0, 255]; `bytes` guarantees it.

    Equal carriers hash equally, so a carrier can serve as a cache or
    mapping key in place of the string it was made from.
    """
    data: bytes = b""

    def __post_init__(self):
        if isinstance(self.data, (bytearray, memoryview)):
            object.__setattr__(self, "data", bytes(self.data))
        elif not isinstance(self.data, bytes):
            raise TypeError(
                f"ByteCarrier data must be bytes, got {type(self.data).__name__}"
            )

    @classmethod
    def from_units(cls, units: Units, strict: bool = False) -> ByteCarrier:
        """Build a carrier from byte-valued units (ints or a latin-1 style str)."""
        return cls(reinterpret_units(units, strict=strict))

    @property
    def units(self) -> Tuple[int, ...]:
        return tuple(self.data)

    def as_latin1(self) -> str:
        """The string-shaped representation: one code point per byte."""
        return self.data.decode("latin-1")

    def hex(self) -> str:
        return self.data.hex()

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __getitem__(self, index: Union[int, slice]) -> Union[int, ByteCarrier]:
        if isinstance(index, slice):
            return ByteCarrier(self.data[index])
        return self.data[index]


@dataclass(frozen=True)
class CorruptedString:
    """
    A string whose code points are really UTF-8 byte values.

    Produced when a non-UTF-8-aware component promotes every byte of a
    carrier to one character. Structurally it is a carrier; only its
    provenance differs.
    """
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(
                f"CorruptedString text must be str, got {type(self.text).__name__}"
            )

    @classmethod
    def from_units(cls, units: Iterable[int]) -> CorruptedString:
        return cls("".join(chr(unit) for unit in units))

    @property
    def units(self) -> Tuple[int, ...]:
        return tuple(ord(char) for char in self.text)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text
