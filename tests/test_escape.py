import pytest

from pyinifile.ini.escape import (
    add_quotes,
    escape,
    needs_quotes,
    strip_quotes,
    unescape,
)


def test_escape():
    assert escape("a\\b\n\t") == "a\\\\b\\n\\t"
    assert escape("\0\a\b\r\f\v") == "\\0\\a\\b\\r\\f\\v"
    assert escape("plain ü") == "plain ü"


def test_unescape_untouched():
    text = "no backslash here"
    assert unescape(text) is text
    assert unescape("") == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (r"a\tb", "a\tb"),
        (r"\\\0\a\b\n\r\f\v", "\\\0\a\b\n\r\f\v"),
        (r"A\x42", "AB"),
        (r"\u00e9t\u00e9", "été"),
        (r"\cA\ca\c[", "\x01\x01\x1b"),
        (r"\c1", "?"),
        (r"\uZZZZ!", "?!"),
        (r"\x4G", "?"),
        (r"\q", "\\q"),
        ("tail\\", "tail\\"),
        (r"\u12", "\\u12"),
        (r"\x", "\\x"),
        (r"\c", "\\c"),
    ],
)
def test_unescape(raw, expected):
    assert unescape(raw) == expected


def test_escape_reversible():
    text = "line1\nline2\t\\end\0"
    assert unescape(escape(text)) == text


def test_quotes():
    assert strip_quotes('"a"') == "a"
    assert strip_quotes('"a') == "a"
    assert strip_quotes('a"') == "a"
    assert strip_quotes('""') == ""
    assert strip_quotes('"') == ""
    assert strip_quotes('""a""') == '"a"'
    assert add_quotes("a") == '"a"'


def test_needs_quotes():
    assert needs_quotes(" a")
    assert needs_quotes("a ")
    assert needs_quotes('"a')
    assert not needs_quotes("a b")
    assert not needs_quotes("")
