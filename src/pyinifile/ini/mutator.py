# -*- encoding: utf-8 -*-
# @File   : mutator.py
# @Time   : 2025/02/09 01:03:38
# @Author : Kariko Lin

"""Write side: splice new values into the text instead of re-serializing.

Only the `value` span of a matched entry is replaced, so indentation,
delimiter spacing and trailing comments of that line stay as they are.
New entries are inserted next to the ones already in their section.
"""

import logging
import re
import warnings
from typing import Mapping

from .consts import COMMENT_MARKERS
from .escape import add_quotes, escape, needs_quotes
from .options import IniOptions
from .scanner import ScanState
from .tokens import Token, TokenKind, tokenize

VALID_KEY = re.compile(r'[^=\s\[\]#;][^=\r\n\[\]]*(?<=[^\s=\[\]])')


class UnsafeIniWrite(UserWarning):
    """The written text will not read back as the same key or value."""
    pass


def splice(text: str, start: int, end: int, new: str) -> str:
    return f'{text[:start]}{new}{text[end:]}'


def encode_value(value: str, options: IniOptions, quoted: bool = False) -> str:
    """Turn `value` into its on-disk form.

    `quoted` keeps the quotes of a value being replaced.
    """
    if options.allow_escape_chars:
        value = escape(value)
    if options.trim_value_quotes and (quoted or needs_quotes(value)):
        value = add_quotes(value)
    return value


def check_pair(key: str, value: str, options: IniOptions) -> None:
    if not VALID_KEY.fullmatch(key):
        warnings.warn(
            f'key {key!r} cannot be read back as an INI key.',
            UnsafeIniWrite, stacklevel=3)
    unsafe = COMMENT_MARKERS
    if not options.allow_escape_chars:
        unsafe += '\r\n'
    if any(c in value for c in unsafe):
        warnings.warn(
            f'value of {key!r} contains one of {unsafe!r} '
            'and will be cut short on read.',
            UnsafeIniWrite, stacklevel=3)
    # unquoted, the blanks are eaten by the tokenizer.
    if not options.trim_value_quotes and value != value.strip():
        warnings.warn(
            f'value of {key!r} has leading or trailing blanks '
            'that are lost on read without quote trimming.',
            UnsafeIniWrite, stacklevel=3)


def section_header(section: str, options: IniOptions) -> str:
    if (options.require_section_brackets
            and section.startswith('[') and section.endswith(']')):
        return section
    return f'[{section}]'


def line_end(token: Token) -> int:
    """Where the line of `token` stops, a bare `\\r` included."""
    cr = token.text.find('\r')
    return token.end if cr < 0 else token.start + cr


def write_key_value(
    text: str, options: IniOptions, linebreak: str,
    section: str | None, key: str, value: str
) -> str:
    """Set `key` to `value` and return the updated text.

    The first matching entry in scope gets its value replaced. Otherwise a
    new `key = value` line goes right after the line of the last entry of
    the section (or of its header if it has no entries), trailing comment
    included, or into a new section appended at the end of the text.
    A global pair with no global entry yet is put above the first section
    header, so that it still reads back as global.
    """
    check_pair(key, value, options)
    state = ScanState(options, section)
    insert_at = -1   # end of the last line the new pair may follow
    first_header: Token | None = None

    for token in tokenize(text):
        match token.kind:
            case TokenKind.SECTION if state.is_global:
                first_header = token
                break
            case TokenKind.SECTION:
                if state.enter(token):
                    insert_at = token.end
            case TokenKind.ENTRY if state.in_scope:
                if options.comparison.equals(token.key, key):
                    old = token.value or ''
                    quoted = len(old) > 1 and old[0] == old[-1] == '"'
                    start, end = token.span('value')
                    return splice(text, start, end,
                                  encode_value(value, options, quoted))
                insert_at = token.end
            case (TokenKind.WHITESPACE | TokenKind.COMMENT
                  | TokenKind.UNDEFINED) if token.start == insert_at:
                # rest of the anchor line, up to its line break.
                insert_at = line_end(token)

    line = f'{key}{options.delimiter}{encode_value(value, options)}'
    if insert_at >= 0:
        logging.debug(f'appending {key!r} after offset {insert_at}.')
        return splice(text, insert_at, insert_at, linebreak + line)
    if not section:
        if first_header is not None:
            pos = first_header.start
            return splice(text, pos, pos, line + linebreak)
        return f'{text}{linebreak}{line}{linebreak}'

    logging.debug(f'section {section!r} not found, appending it.')
    return (f'{text}{linebreak}{section_header(section, options)}'
            f'{linebreak}{line}{linebreak}')


def write_keys_values(
    text: str, options: IniOptions, linebreak: str,
    section: str | None, pairs: Mapping[str, str]
) -> str:
    """Apply `write_key_value` for each pair, in order.

    Each pair is resolved against the text left by the previous one.
    """
    for key, value in pairs.items():
        text = write_key_value(text, options, linebreak, section, key, value)
    return text
