"""Byte-size helpers and raw byte views of numbers."""

from __future__ import annotations

import struct
import sys

_ULL_MASK = (1 << 64) - 1
_INT_SIZES = frozenset({1, 2, 4, 8, 16})
_FLOAT_FORMATS = {4: "=f", 8: "=d"}


def to_bytes(value: int | float, size: int = 4, signed: bool = False) -> bytes:
    """Return the in-memory bytes of ``value`` in the host's byte order.

    Integers may be 1, 2, 4, 8 or 16 bytes wide; floats 4 or 8. Raises
    ValueError for other sizes and OverflowError if an integer does not fit.
    """
    if isinstance(value, float):
        try:
            fmt = _FLOAT_FORMATS[size]
        except KeyError:
            raise ValueError(f"unsupported float size {size}") from None
        return struct.pack(fmt, value)

    if size not in _INT_SIZES:
        raise ValueError(f"unsupported integer size {size}")
    return int(value).to_bytes(size, sys.byteorder, signed=signed)


def kib(count: int) -> int:
    """Number of bytes in ``count`` kibibytes, as a 64-bit unsigned value."""
    return (count * 1024) & _ULL_MASK


def mib(count: int) -> int:
    """Number of bytes in ``count`` mebibytes, as a 64-bit unsigned value."""
    return kib((count * 1024) & _ULL_MASK)


def gib(count: int) -> int:
    """Number of bytes in ``count`` gibibytes, as a 64-bit unsigned value."""
    return mib((count * 1024) & _ULL_MASK)