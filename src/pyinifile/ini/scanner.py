# -*- encoding: utf-8 -*-
# @File   : scanner.py
# @Time   : 2025/02/09 00:12:56
# @Author : Kariko Lin

"""Read side: a scoped walk over the token stream.

Every function here tokenizes `text` afresh and keeps its state in a
`ScanState` local to the call. Section `None` (or `''`) means the global
scope, i.e. entries above the first section header; the walk ends at that
header. A named section may occur several times; all its runs count.
"""

import base64
import hashlib
from dataclasses import dataclass, field
from typing import Iterator, Sequence
from uuid import uuid1 as guid

from .escape import strip_quotes, unescape
from .options import IniOptions
from .tokens import Token, TokenKind, tokenize


@dataclass
class ScanState:
    options: IniOptions
    section: str | None = None
    defaults: Sequence[str] | None = None
    in_section: bool = False
    cursor: int = 0
    renamed: int = 0
    # shared by all suffixes of one call, so they differ between calls.
    salt: bytes = field(default_factory=lambda: guid().bytes, repr=False)

    @property
    def is_global(self) -> bool:
        return not self.section

    @property
    def in_scope(self) -> bool:
        return self.is_global or self.in_section

    def enter(self, token: Token) -> bool:
        """Recompute `in_section` at section header `token`."""
        name = (token.header if self.options.require_section_brackets
                else token.name)
        self.in_section = (
            not self.is_global
            and self.options.comparison.equals(name, self.section))
        return self.in_section

    def clean(self, text: str | None) -> str:
        """Strip quotes, then unescape, as the options say."""
        if not text:
            return ''
        if self.options.trim_value_quotes:
            text = strip_quotes(text)
        if self.options.allow_escape_chars:
            text = unescape(text)
        return text

    def fill(self, value: str) -> str:
        """Substitute a default for an empty value.

        A single default applies to every empty value, a longer list is
        consumed one item per empty value and then runs dry.
        """
        if value or not self.defaults:
            return value
        if len(self.defaults) == 1:
            return self.defaults[0]
        i = self.cursor
        self.cursor += 1
        return self.defaults[i] if i < len(self.defaults) else value

    def suffix(self) -> str:
        self.renamed += 1
        digest = hashlib.sha256(
            self.salt + self.renamed.to_bytes(4, 'little')).digest()
        return base64.b64encode(digest[:6]).decode('ascii')[:6]

    def fold(self, results: dict[str, str], key: str, value: str) -> None:
        """Add a pair to `results`, resolving a repeated key."""
        if key in results:
            if not self.options.allow_duplicate_keys:
                return
            while key in results:
                key = f'{key}_{self.suffix()}'
        results[key] = self.fill(value)


def walk(
    text: str,
    state: ScanState,
    kind: TokenKind = TokenKind.ENTRY
) -> Iterator[Token]:
    """Yield tokens of `kind` lying in the scope of `state`."""
    for token in tokenize(text):
        match token.kind:
            case TokenKind.SECTION if state.is_global:
                return
            case TokenKind.SECTION:
                state.enter(token)
            case _ if token.kind is kind and state.in_scope:
                yield token


def read_value(
    text: str, options: IniOptions,
    section: str | None, key: str, default: str | None = None
) -> str:
    """First value of `key`; `default` if it is missing or empty."""
    state = ScanState(options, section)
    for token in walk(text, state):
        if options.comparison.equals(token.key, key):
            value = state.clean(token.value)
            break
    else:
        value = ''
    if not value and default is not None:
        return default
    return value


def read_key(
    text: str, options: IniOptions, section: str | None, value: str
) -> str:
    """First key holding `value`, `''` if there is none."""
    state = ScanState(options, section)
    for token in walk(text, state):
        if options.comparison.equals(state.clean(token.value), value):
            return state.clean(token.key)
    return ''


def read_values_by_key(
    text: str, options: IniOptions,
    section: str | None, key: str, defaults: Sequence[str] | None = None
) -> list[str]:
    state = ScanState(options, section, defaults)
    return [
        state.fill(state.clean(token.value))
        for token in walk(text, state)
        if options.comparison.equals(token.key, key)
    ]


def read_keys_by_value(
    text: str, options: IniOptions, section: str | None, value: str
) -> list[str]:
    state = ScanState(options, section)
    return [
        state.clean(token.key)
        for token in walk(text, state)
        if options.comparison.equals(state.clean(token.value), value)
    ]


def read_values(
    text: str, options: IniOptions,
    section: str | None, defaults: Sequence[str] | None = None
) -> list[str]:
    state = ScanState(options, section, defaults)
    return [state.fill(state.clean(token.value))
            for token in walk(text, state)]


def read_keys(text: str, options: IniOptions, section: str | None) -> list[str]:
    state = ScanState(options, section)
    return [state.clean(token.key) for token in walk(text, state)]


def read_keys_values(
    text: str, options: IniOptions,
    section: str | None, defaults: Sequence[str] | None = None
) -> dict[str, str]:
    """Pairs of a section as a dict, in document order.

    Repeated keys get a `_XXXXXX` suffix if `allow_duplicate_keys`,
    otherwise only the first occurrence is kept.
    """
    state = ScanState(options, section, defaults)
    ret: dict[str, str] = {}
    for token in walk(text, state):
        state.fold(ret, state.clean(token.key), state.clean(token.value))
    return ret


def read_all_keys_values(
    text: str, options: IniOptions, defaults: Sequence[str] | None = None
) -> dict[str, str]:
    """Like `read_keys_values`, but over every section at once."""
    state = ScanState(options, None, defaults)
    ret: dict[str, str] = {}
    for token in tokenize(text):
        if token.kind is TokenKind.ENTRY:
            state.fold(ret, state.clean(token.key), state.clean(token.value))
    return ret


def read_sections(text: str, options: IniOptions | None = None) -> list[str]:
    """Section names in document order, repeated ones included.

    They come as `[name]` if `require_section_brackets` is set, the way
    such sections are addressed.
    """
    brackets = options is not None and options.require_section_brackets
    return [token.header if brackets else token.name
            for token in tokenize(text)
            if token.kind is TokenKind.SECTION]


def read_comments(
    text: str, options: IniOptions, section: str | None = None
) -> list[str]:
    """Comment texts, without markers. No section means the whole file."""
    if not section:
        return [token.note for token in tokenize(text)
                if token.kind is TokenKind.COMMENT]
    state = ScanState(options, section)
    return [token.note for token in walk(text, state, TokenKind.COMMENT)]
