# -*- encoding: utf-8 -*-
# @File   : tokens.py
# @Time   : 2025/02/08 22:10:31
# @Author : Kariko Lin

"""Single pass INI tokenizer.

Every character of the input ends up in exactly one token, so joining the
`text` of all tokens gives the input back. Nothing here raises on content:
lines that are neither comments, sections nor entries become `UNDEFINED`.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, Self

from ..utils import RegexEnum


class TokenKind(RegexEnum):
    # order matters, the first alternative matching at a position wins.
    # fmt: off
    COMMENT    = r'(?=\S)(?P<marker>[#;]+)[^\S\r\n]*(?P<note>[^\r\n]*)(?<=\S)'
    SECTION    = (r'(?P<open>\[)[^\S\r\n]*'
                  r'(?P<name>[^\]\r\n]*[^\s\]])[^\S\r\n]*(?P<close>\])')
    ENTRY      = (r'(?=\S)(?P<key>[^=\r\n\[\]]*[^\s=\[\]])[^\S\r\n]*'
                  r'(?P<delimiter>[:=])[^\S\r\n]*(?P<value>[^#;\r\n]*)(?<=\S)')
    UNDEFINED  = r'(?=\S)[^\r\n]+(?<=\S)'
    LINEBREAK  = r'\r\n|\n'
    WHITESPACE = r'(?:[^\S\r\n]|\r(?!\n))+'
    # fmt: on


@dataclass(slots=True)
class Token:
    kind: TokenKind
    start: int
    end: int
    match: re.Match[str] = field(repr=False, compare=False)

    @classmethod
    def from_match(cls, match: re.Match[str]) -> Self:
        return cls(TokenKind.of(match), match.start(), match.end(), match)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def text(self) -> str:
        return self.match.string[self.start:self.end]

    def group(self, name: str) -> str | None:
        """Text of subcapture `name`, `None` if this kind has none."""
        return self.match.group(name)

    def span(self, name: str) -> tuple[int, int]:
        """Buffer offsets of subcapture `name`, `(-1, -1)` if absent."""
        return self.match.span(name)

    @property
    def key(self) -> str | None:
        return self.group('key')

    @property
    def delimiter(self) -> str | None:
        return self.group('delimiter')

    @property
    def value(self) -> str | None:
        return self.group('value')

    @property
    def name(self) -> str | None:
        return self.group('name')

    @property
    def header(self) -> str | None:
        """Section header as `[name]`, whitespace inside brackets dropped."""
        return None if self.name is None else f'[{self.name}]'

    @property
    def marker(self) -> str | None:
        return self.group('marker')

    @property
    def note(self) -> str | None:
        return self.group('note')

    def __str__(self) -> str:
        return self.text


def tokenize(text: str) -> Iterator[Token]:
    """Split `text` into adjacent tokens, lazily and from the start."""
    for match in TokenKind.finditer(text):
        yield Token.from_match(match)
