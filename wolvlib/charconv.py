"""Parsing of integers and floating point numbers from text."""

from __future__ import annotations

import math
import re

_SPACE_CHARS = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}

_FLOAT_PATTERN = re.compile(
    r"""
    (?P<sign>-)?
    (?:
        (?P<number>(?P<mantissa>\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
      | (?P<inf>inf(?:inity)?)
      | (?P<nan>nan)(?:\([A-Za-z0-9_]*\))?
    )
    """,
    re.IGNORECASE | re.VERBOSE,
)


def parse_int(string: str, base: int = 0) -> int:
    """Parse the leading integer of ``string``.

    With ``base`` 0 the text is trimmed and a ``0x``, ``0o`` or ``0b`` prefix
    selects the base, defaulting to decimal. Trailing characters after the
    digits are ignored. Raises ValueError if no digits can be read.
    """
    if base == 0:
        string = string.strip(_SPACE_CHARS)
        base = _PREFIXES.get(string[:2].lower(), 10)
        if base != 10:
            string = string[2:]

    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")

    negative = string.startswith("-")
    if negative:
        string = string[1:]

    valid = _DIGITS[:base]
    value = 0
    count = 0
    for char in string:
        digit = valid.find(char.lower())
        if digit < 0:
            break
        value = value * base + digit
        count += 1

    if count == 0:
        raise ValueError(f"no digits to parse in base {base}")
    return -value if negative else value


def parse_float(string: str) -> float:
    """Parse the leading floating point number of ``string``.

    Accepts decimal and exponent notation, ``inf``, ``infinity`` and ``nan``.
    Leading whitespace and a ``+`` sign are not accepted; trailing characters
    are ignored. Raises ValueError if nothing can be parsed or the value is
    out of range.
    """
    match = _FLOAT_PATTERN.match(string)
    if match is None:
        raise ValueError(f"cannot parse {string!r} as a float")

    sign = -1.0 if match.group("sign") else 1.0
    if match.group("inf"):
        return sign * math.inf
    if match.group("nan"):
        return math.copysign(math.nan, sign)

    value = float(match.group("number"))
    if math.isinf(value):
        raise ValueError(f"{string!r} is out of range")
    if value == 0.0 and any(char in "123456789" for char in match.group("mantissa")):
        raise ValueError(f"{string!r} is out of range")
    return sign * value