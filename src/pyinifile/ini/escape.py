# -*- encoding: utf-8 -*-
# @File   : escape.py
# @Time   : 2025/02/08 22:41:19
# @Author : Kariko Lin

ESCAPES = {
    '\\': '\\\\',
    '\0': '\\0',
    '\a': '\\a',
    '\b': '\\b',
    '\n': '\\n',
    '\r': '\\r',
    '\f': '\\f',
    '\t': '\\t',
    '\v': '\\v',
}
UNESCAPES = {v[1]: k for k, v in ESCAPES.items()}
# number of hex digits following `\u` and `\x`.
HEX_WIDTHS = {'u': 4, 'x': 2}


def escape(value: str) -> str:
    """Replace control characters (and `\\`) with backslash sequences."""
    return ''.join(ESCAPES.get(c, c) for c in value)


def unhex(digits: str) -> str:
    """Character of the given hex code point, `?` if any digit is bad."""
    code = 0
    for c in digits:
        if c not in '0123456789abcdefABCDEF':
            return '?'
        code = (code << 4) + int(c, 16)
    return chr(code)


def control(c: str) -> str:
    """`\\cX`: the ASCII control code of letter `X`."""
    code = ord(c.upper() if 'a' <= c <= 'z' else c) - 0x40
    return chr(code) if 0 <= code < 0x20 else '?'


def unescape(value: str) -> str:
    """Interpret backslash sequences.

    Unknown sequences stay as they are (backslash included), and so does
    a lone trailing backslash. `\\u` and `\\x` without enough characters
    left are treated as unknown.
    """
    i = value.find('\\')
    if i < 0:
        return value

    length = len(value)
    ret = [value[:i]]
    while i < length:
        c = value[i]
        if c != '\\':
            ret.append(c)
            i += 1
            continue
        if i + 1 >= length:
            ret.append(c)
            break

        c = value[i + 1]
        width = HEX_WIDTHS.get(c, 0)
        if c in UNESCAPES:
            ret.append(UNESCAPES[c])
            i += 2
        elif width and i + 2 + width <= length:
            ret.append(unhex(value[i + 2:i + 2 + width]))
            i += 2 + width
        elif c == 'c' and i + 2 < length:
            ret.append(control(value[i + 2]))
            i += 3
        else:
            ret.append('\\' + c)
            i += 2
    return ''.join(ret)


def strip_quotes(value: str) -> str:
    """Drop at most one leading and one trailing double quote."""
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def add_quotes(value: str) -> str:
    return f'"{value}"'


def needs_quotes(value: str) -> bool:
    """Whether `value` would be altered by a read without quotes around it."""
    return (
        value != value.strip()
        or value.startswith('"')
        or value.endswith('"')
    )
