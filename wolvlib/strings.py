"""String helpers: splitting, joining, replacing, wrapping and UTF conversions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from string import punctuation as _PUNCTUATION

_TRIM_CHARS = " \t\n\r\0"


def split_string(string: str, delimiter: str, remove_empty: bool = False) -> list[str]:
    """Split ``string`` at every occurrence of ``delimiter``.

    An empty string or an empty delimiter yields a list holding the input alone.
    """
    if not delimiter or not string:
        return [string]

    parts = string.split(delimiter)
    if remove_empty:
        parts = [part for part in parts if part]
    return parts


def combine_strings(strings: Iterable[str], delimiter: str) -> str:
    """Join ``strings`` with ``delimiter`` between each pair."""
    return delimiter.join(strings)


def replace_strings(string: str, search: str, replace: str) -> str:
    """Replace every occurrence of ``search``; an empty search leaves the input as is."""
    if not search:
        return string
    return string.replace(search, replace)


def _expand_line_tabs(line: str, tab_size: int) -> str:
    pieces: list[str] = []
    column = 0
    for char in line:
        if char == "\t":
            spaces = tab_size - (column % tab_size)
            pieces.append(" " * spaces)
            column += spaces
        else:
            pieces.append(char)
            column += 1
    return "".join(pieces)


def replace_tabs_with_spaces(string: str, tab_size: int = 4) -> str:
    """Expand tab characters to the next multiple of ``tab_size`` on each line."""
    if tab_size == 0 or not string or "\t" not in string:
        return string

    lines = split_string(string, "\n", False)
    return "\n".join(_expand_line_tabs(line, tab_size) for line in lines)


def preprocess_text(code: str) -> str:
    """Normalise line endings to ``\\n`` and expand tabs to four spaces."""
    result = replace_strings(code, "\r\n", "\n")
    result = replace_strings(result, "\r", "\n")
    return replace_tabs_with_spaces(result, 4)


def _is_break_candidate(char: str) -> bool:
    return char == " " or char in _PUNCTUATION


def wrap_monospaced_string(string: str, char_width: float, max_width: float) -> str:
    """Insert line breaks so no line is wider than ``max_width``.

    Lines are broken after the last space or punctuation mark that fits;
    words longer than a line are split. Nonsensical arguments return the
    input unchanged.
    """
    if not string or char_width < 0 or max_width < 0:
        return string

    pieces: list[str] = []
    line_start = 0
    candidate = 0
    width = 0.0

    for index, char in enumerate(string):
        if width + char_width <= max_width:
            width += char_width
        elif candidate > 0:
            pieces.append(string[line_start:candidate + 1])
            pieces.append("\n")
            line_start = candidate + 1
            candidate = 0
            width = (index - line_start + 1) * char_width
        else:
            pieces.append(string[line_start:index])
            pieces.append("\n")
            line_start = index
            candidate = 0
            width = char_width

        if _is_break_candidate(char):
            candidate = index

    pieces.append(string[line_start:])
    return "".join(pieces)


def _upper_first(part: str) -> str:
    if part and part[0].isascii():
        return part[0].upper() + part[1:]
    return part


def capitalize_string(string: str) -> str:
    """Upper-case the first letter of every word separated by ``_``, ``-`` or space."""
    for delimiter in ("_", "-", " "):
        parts = split_string(string, delimiter)
        string = combine_strings((_upper_first(part) for part in parts), delimiter)
    return string


def _encode_utf8(codepoint: int) -> bytes:
    if codepoint <= 0x7F:
        return bytes((codepoint,))
    if codepoint <= 0x7FF:
        return bytes(((0xC0 | (codepoint >> 6)) & 0xFF, 0x80 | (codepoint & 0x3F)))
    if codepoint <= 0xFFFF:
        return bytes((
            (0xE0 | (codepoint >> 12)) & 0xFF,
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ))
    return bytes((
        (0xF0 | (codepoint >> 18)) & 0xFF,
        0x80 | ((codepoint >> 12) & 0x3F),
        0x80 | ((codepoint >> 6) & 0x3F),
        0x80 | (codepoint & 0x3F),
    ))


def utf16_to_utf8(units: Iterable[int]) -> bytes:
    """Encode UTF-16 code units as UTF-8.

    Raises ValueError when a surrogate is not followed by a low surrogate.
    """
    output = bytearray()
    pending: int | None = None

    for unit in units:
        if pending is not None:
            if 0xDC00 <= unit <= 0xDFFF:
                full = ((pending - 0xD800) << 10) + (unit - 0xDC00) + 0x10000
                output += _encode_utf8(full)
                pending = None
                continue
            raise ValueError(f"unpaired surrogate 0x{pending:04X}")

        if 0xD800 <= unit <= 0xDFFF:
            pending = unit
        else:
            output += _encode_utf8(unit)

    if pending is not None:
        raise ValueError(f"unpaired surrogate 0x{pending:04X}")
    return bytes(output)


def _utf8_codepoints(data: bytes, allow_invalid: bool) -> Iterator[int]:
    stream = iter(data)
    for byte in stream:
        if byte <= 0x7F:
            yield byte
            continue
        if byte & 0xE0 == 0xC0:
            codepoint, extra = byte & 0x1F, 1
        elif byte & 0xF0 == 0xE0:
            codepoint, extra = byte & 0x0F, 2
        elif byte & 0xF8 == 0xF0:
            codepoint, extra = byte & 0x07, 3
        elif allow_invalid:
            yield byte
            continue
        else:
            raise ValueError(f"invalid UTF-8 lead byte 0x{byte:02X}")

        continuation = list(islice(stream, extra))
        if len(continuation) < extra:
            raise ValueError("truncated UTF-8 sequence")
        for follow in continuation:
            codepoint = (codepoint << 6) | (follow & 0x3F)
        yield codepoint


def utf8_to_utf16(data: bytes) -> list[int]:
    """Decode UTF-8 bytes into UTF-16 code units.

    Raises ValueError on an invalid lead byte or a truncated sequence.
    """
    output: list[int] = []
    for codepoint in _utf8_codepoints(data, False):
        if codepoint > 0xFFFF:
            offset = codepoint - 0x10000
            output.append((0xD800 + (offset >> 10)) & 0xFFFF)
            output.append(0xDC00 + (offset & 0x3FF))
        else:
            output.append(codepoint)
    return output


def utf8_to_utf32(data: bytes, allow_invalid: bool = False) -> list[int]:
    """Decode UTF-8 bytes into code points.

    Invalid lead bytes raise ValueError unless ``allow_invalid`` is set, in
    which case they are passed through as code points. Truncated sequences
    always raise ValueError.
    """
    return list(_utf8_codepoints(data, allow_invalid))


def utf32_to_utf8(codepoints: Iterable[int] | str) -> bytes:
    """Encode code points as UTF-8; values above 0x10FFFF raise ValueError."""
    if isinstance(codepoints, str):
        codepoints = map(ord, codepoints)

    output = bytearray()
    for codepoint in codepoints:
        if codepoint > 0x10FFFF:
            raise ValueError(f"code point 0x{codepoint:X} out of range")
        output += _encode_utf8(codepoint)
    return bytes(output)


def strnlen(data: bytes | str, limit: int) -> int:
    """Count items before the first NUL, looking at no more than ``limit`` items."""
    zero: int | str = 0 if isinstance(data, (bytes, bytearray, memoryview)) else "\0"
    count = 0
    for item in islice(data, limit):
        if item == zero:
            break
        count += 1
    return count


def trim(string: str) -> str:
    """Strip spaces, tabs, newlines, carriage returns and NULs from both ends."""
    return string.strip(_TRIM_CHARS)