# -*- encoding: utf-8 -*-
# @File   : options.py
# @Time   : 2025/02/08 21:52:47
# @Author : Kariko Lin

from dataclasses import dataclass

from .consts import Comparison


@dataclass(frozen=True, kw_only=True)
class IniOptions:
    """Per-file settings, fixed once an `IniFile` is built.

    - `comparison`: rule for matching sections, keys and values.
    - `trim_value_quotes`: strip one leading and one trailing `"` on read,
      re-quote on write where stripping would lose data.
    - `require_section_brackets`: sections are addressed as `[name]`
      rather than `name`.
    - `allow_escape_chars`: unescape backslash sequences on read and
      escape control characters on write.
    - `allow_duplicate_keys`: rename repeated keys with a hash suffix in
      folded reads, instead of keeping only the first one.
    - `pad_delimiters`: write new entries as `key = value`.
    - `encoding`: file encoding, `None` to auto-detect on load.
    """
    comparison: Comparison = Comparison.IGNORE_CASE
    trim_value_quotes: bool = True
    require_section_brackets: bool = False
    allow_escape_chars: bool = False
    allow_duplicate_keys: bool = True
    pad_delimiters: bool = True
    encoding: str | None = None

    @property
    def delimiter(self) -> str:
        return ' = ' if self.pad_delimiters else '='
