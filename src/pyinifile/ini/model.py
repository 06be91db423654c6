# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2025/02/09 01:47:22
# @Author : Kariko Lin

"""
INI text that is read and edited in place.

No document tree is ever built: each call re-tokenizes the current
`content`, so editing `content` by hand between calls is fine. Writes
replace `content` as a whole once the new text is ready.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable, overload

from . import mutator, scanner
from .consts import detect_linebreak
from .options import IniOptions
from .tokens import Token, tokenize

TRUTHY = ('1', 'y', 't')


class IniFile:
    """Format preserving INI document. Section `None` addresses the
    global pairs above the first section header.

    ```ini
    key = val      ; ini.read_value(None, 'key')
    [section]
    key = "val2"   ; ini.read_value('section', 'key') -> val2
    ```

    Not thread safe; callers serialize access themselves.
    """
    def __init__(
        self, content: str | None = None, options: IniOptions | None = None
    ) -> None:
        self.options = IniOptions() if options is None else options
        self._content = content or ''
        self.linebreak = detect_linebreak(self._content)

    @classmethod
    def create(cls, options: IniOptions | None = None) -> 'IniFile':
        return cls('', options)

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str | None) -> None:
        self._content = value or ''

    def tokens(self) -> list[Token]:
        return list(tokenize(self._content))

    # reading.
    def read_value(
        self, section: str | None, key: str, default: str | None = None
    ) -> str:
        """Value of `key`; the first one if repeated."""
        return scanner.read_value(
            self._content, self.options, section, key, default)

    def read_key(self, section: str | None, value: str) -> str:
        """Key of the first entry holding `value`."""
        return scanner.read_key(self._content, self.options, section, value)

    def read_values_by_key(
        self, section: str | None, key: str,
        defaults: Sequence[str] | None = None
    ) -> list[str]:
        return scanner.read_values_by_key(
            self._content, self.options, section, key, defaults)

    def read_keys_by_value(self, section: str | None, value: str) -> list[str]:
        return scanner.read_keys_by_value(
            self._content, self.options, section, value)

    def read_values(
        self, section: str | None, defaults: Sequence[str] | None = None
    ) -> list[str]:
        return scanner.read_values(
            self._content, self.options, section, defaults)

    def read_keys(self, section: str | None) -> list[str]:
        return scanner.read_keys(self._content, self.options, section)

    def read_keys_values(
        self, section: str | None, defaults: Sequence[str] | None = None
    ) -> dict[str, str]:
        return scanner.read_keys_values(
            self._content, self.options, section, defaults)

    def read_all_keys_values(
        self, defaults: Sequence[str] | None = None
    ) -> dict[str, str]:
        return scanner.read_all_keys_values(
            self._content, self.options, defaults)

    def read_sections(self) -> list[str]:
        return scanner.read_sections(self._content, self.options)

    def read_comments(self, section: str | None = None) -> list[str]:
        return scanner.read_comments(self._content, self.options, section)

    # writing.
    def write_key_value(self, section: str | None, key: str, value: str) -> str:
        self._content = mutator.write_key_value(
            self._content, self.options, self.linebreak, section, key, value)
        return self._content

    def write_keys_values(
        self, section: str | None, pairs: Mapping[str, str]
    ) -> str:
        self._content = mutator.write_keys_values(
            self._content, self.options, self.linebreak, section, pairs)
        return self._content

    # `ini[section]`, `ini[section, defaults]`
    @overload
    def __getitem__(self, key: str | None) -> dict[str, str]: ...
    @overload
    def __getitem__(
        self, key: tuple[str | None, Sequence[str] | None]
    ) -> dict[str, str]: ...

    def __getitem__(self, key: Any) -> dict[str, str]:
        if isinstance(key, tuple):
            return self.read_keys_values(*key)
        return self.read_keys_values(key)

    def __setitem__(self, section: str | None, pairs: Mapping[str, str]) -> None:
        self.write_keys_values(section, pairs)

    def __contains__(self, section: object) -> bool:
        """Whether a section header of that name exists."""
        if not isinstance(section, str):
            return False
        names = self.read_sections()
        return any(self.options.comparison.equals(i, section) for i in names)

    # typed access, on top of the string primitives.
    def get(
        self, section: str | None, key: str,
        converter: Callable[[str], Any] = str, default: Any = None
    ) -> Any:
        if converter is list:
            return self.getlist(section, key)
        if converter is bool:
            return self.getbool(section, key, default)
        value = self.read_value(section, key)
        return default if value == '' else converter(value)

    def getbool(
        self, section: str | None, key: str, default: bool | None = None
    ) -> bool | None:
        value = self.read_value(section, key)
        return default if value == '' else value[0].lower() in TRUTHY

    def getlist(
        self, section: str | None, key: str, sep: str = ','
    ) -> list[str]:
        value = self.read_value(section, key)
        return [] if value == '' else [i.strip() for i in value.split(sep)]

    def set(self, section: str | None, key: str, value: Any) -> str:
        """`write_key_value` with bools and sequences formatted first."""
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        elif isinstance(value, Sequence) and not isinstance(value, str):
            value = ','.join(str(i) for i in value)
        return self.write_key_value(section, key, str(value))

    def __str__(self) -> str:
        return self._content

    def __repr__(self) -> str:
        return '<IniFile sections=%d length=%d>' % (
            len(self.read_sections()), len(self._content))
