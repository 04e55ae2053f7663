import pytest

from wolvlib.strings import (
    capitalize_string,
    combine_strings,
    preprocess_text,
    replace_strings,
    replace_tabs_with_spaces,
    split_string,
    strnlen,
    trim,
    utf8_to_utf16,
    utf8_to_utf32,
    utf16_to_utf8,
    utf32_to_utf8,
    wrap_monospaced_string,
)


def _utf16_units(text):
    raw = text.encode("utf-16-le")
    return [int.from_bytes(raw[pos:pos + 2], "little") for pos in range(0, len(raw), 2)]


@pytest.mark.parametrize(
    "string, delimiter, expected",
    [
        ("house window tree", " ", ["house", "window", "tree"]),
        ("houseawindowatree", "a", ["house", "window", "tree"]),
        ("housewindowtree", "", ["housewindowtree"]),
        ("", " ", [""]),
    ],
)
def test_split_string(string, delimiter, expected):
    assert split_string(string, delimiter) == expected


def test_split_string_keeps_and_removes_empty():
    assert split_string("a,,b,", ",") == ["a", "", "b", ""]
    assert split_string("a,,b,", ",", True) == ["a", "b"]


@pytest.mark.parametrize(
    "strings, delimiter, expected",
    [
        (["house", "window", "tree"], " ", "house window tree"),
        (["house", "window", "tree"], "b", "housebwindowbtree"),
        ([], " ", ""),
        (["house", "window", "tree"], "", "housewindowtree"),
        ([], "", ""),
    ],
)
def test_combine_strings(strings, delimiter, expected):
    assert combine_strings(strings, delimiter) == expected


@pytest.mark.parametrize(
    "string, search, replace, expected",
    [
        ("house tree mirror", "kitchen", "bedroom", "house tree mirror"),
        ("house tree mirror", "tree", "mirror", "house mirror mirror"),
        ("house window tree window mirror", "window", "glass", "house glass tree glass mirror"),
    ],
)
def test_replace_strings(string, search, replace, expected):
    assert replace_strings(string, search, replace) == expected


def test_replace_strings_empty_search_is_identity():
    assert replace_strings("house", "", "x") == "house"


def test_trim():
    assert trim("house") == "house"
    assert trim("  house  ") == "house"
    assert trim("\t\r\n\0house\0 ") == "house"
    assert trim(" \t ") == ""


@pytest.mark.parametrize(
    "data, limit, expected",
    [
        (b"\x01\x7F\x7F\x00", 255, 3),
        (b"\x01\x7F\x7F\x00", 2, 2),
        (b"\x7F\x7F\x00\x7F\x00", 255, 2),
        (b"\x00\x7F\x7F\x7F", 255, 0),
    ],
)
def test_strnlen(data, limit, expected):
    assert strnlen(data, limit) == expected


def test_strnlen_on_str():
    assert strnlen("ab\0cd", 10) == 2


@pytest.mark.parametrize(
    "string, char_width, max_width, expected",
    [
        ("house", 1, 6, "house"),
        ("house", 1, 2, "ho\nus\ne"),
        ("house", 0.5, 2, "hous\ne"),
        ("house", 0.5, 1, "ho\nus\ne"),
        ("house", 0.6532, 1.577, "ho\nus\ne"),
        ("house", 0.5783, 1.577, "ho\nus\ne"),
        (
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed non risus. Suspendisse",
            1,
            10,
            "Lorem \nipsum \ndolor sit \namet, \nconsectetu\nr \nadipiscing\n elit. \nSed non \nrisus. \nSuspendiss\ne",
        ),
        ("house", -1, 10, "house"),
        ("house", 1, -10, "house"),
    ],
)
def test_wrap_monospaced_string(string, char_width, max_width, expected):
    assert wrap_monospaced_string(string, char_width, max_width) == expected


def test_wrap_monospaced_empty():
    assert wrap_monospaced_string("", 1, 10) == ""


def test_replace_tabs_with_spaces():
    assert replace_tabs_with_spaces("a\tb") == "a   b"
    assert replace_tabs_with_spaces("\tx\n ab\ty", 4) == "    x\n ab y"
    assert replace_tabs_with_spaces("a\tb", 0) == "a\tb"
    assert replace_tabs_with_spaces("no tabs", 4) == "no tabs"


def test_preprocess_text():
    assert preprocess_text("a\r\nb\rc\td") == "a\nb\nc   d"


def test_capitalize_string():
    assert capitalize_string("hello_world-foo bar") == "Hello_World-Foo Bar"
    assert capitalize_string("") == ""
    assert capitalize_string("__a") == "__A"


@pytest.mark.parametrize("text", ["hello", "h\u00e9llo", "\u20ac uro", "smile \U0001F600!"])
def test_utf_round_trips(text):
    encoded = text.encode("utf-8")
    units = utf8_to_utf16(encoded)
    assert units == _utf16_units(text)
    assert utf16_to_utf8(units) == encoded

    codepoints = utf8_to_utf32(encoded)
    assert codepoints == [ord(c) for c in text]
    assert utf32_to_utf8(codepoints) == encoded
    assert utf32_to_utf8(text) == encoded


def test_utf16_unpaired_surrogate_raises():
    with pytest.raises(ValueError):
        utf16_to_utf8([0xD800])
    with pytest.raises(ValueError):
        utf16_to_utf8([0xD800, 0x0041])


def test_utf8_to_utf16_errors():
    with pytest.raises(ValueError):
        utf8_to_utf16(b"\xc3")
    with pytest.raises(ValueError):
        utf8_to_utf16(b"\xff")


def test_utf8_to_utf32_invalid_bytes():
    with pytest.raises(ValueError):
        utf8_to_utf32(b"a\xffb")
    assert utf8_to_utf32(b"a\xffb", True) == [ord("a"), 0xFF, ord("b")]


def test_utf32_out_of_range_raises():
    with pytest.raises(ValueError):
        utf32_to_utf8([0x110000])