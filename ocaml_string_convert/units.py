"""
Code Unit Helpers
=================

Conversions between `str` and the integer unit sequences a foreign
runtime hands across the boundary:

- UTF-16 code units (16-bit host strings, surrogate pairs above the BMP)
- byte units (a carrier or corrupted string read one byte per unit)
"""

from __future__ import annotations
import struct
from typing import Iterable, Tuple, Union

from .errors import CarrierRangeError, UnitSequenceError


Units = Union[str, bytes, bytearray, memoryview, Iterable[int]]


def to_code_units(text: str) -> Tuple[int, ...]:
    """Return the UTF-16 code units of `text`."""
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def from_code_units(units: Iterable[int]) -> str:
    """
    Build a `str` from UTF-16 code units.

    Surrogate pairs are combined into one scalar. A lone surrogate, or a
    unit outside [0, 0xFFFF], raises UnitSequenceError.
    """
    values = list(units)
    for index, unit in enumerate(values):
        if not isinstance(unit, int):
            raise TypeError(f"code unit at index {index} is not an int: {unit!r}")
        if not 0 <= unit <= 0xFFFF:
            raise UnitSequenceError(
                f"code unit at index {index} is out of range: {unit:#x}",
                index=index
            )

    data = struct.pack(f"<{len(values)}H", *values)
    try:
        return data.decode("utf-16-le")
    except UnicodeDecodeError as exc:
        index = exc.start // 2
        raise UnitSequenceError(
            f"unpaired surrogate at index {index}: {values[index]:#06x}",
            index=index
        ) from exc


def reinterpret_units(units: Units, strict: bool = False) -> bytes:
    """
    Read every unit's numeric value as one byte.

    With `strict`, a unit above 255 raises CarrierRangeError. Otherwise
    units are truncated to their low 8 bits.
    """
    if isinstance(units, (bytes, bytearray, memoryview)):
        return bytes(units)

    if isinstance(units, str):
        if not strict:
            return bytes(ord(char) & 0xFF for char in units)
        try:
            return units.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise CarrierRangeError(exc.start, ord(units[exc.start])) from exc

    out = bytearray()
    for offset, unit in enumerate(units):
        if not isinstance(unit, int):
            raise TypeError(f"unit at offset {offset} is not an int: {unit!r}")
        if 0 <= unit <= 0xFF:
            out.append(unit)
        elif strict:
            raise CarrierRangeError(offset, unit)
        else:
            out.append(unit & 0xFF)
    return bytes(out)
