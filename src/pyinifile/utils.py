# -*- encoding: utf-8 -*-
# @File   : utils.py
# @Time   : 2025/02/08 21:37:12
# @Author : Kariko Lin

import enum
import re
from typing import TYPE_CHECKING, Any, Self


if TYPE_CHECKING:
    # let type checkers see `re.Pattern` methods on the enum class itself.
    class RegexEnumMeta(enum.EnumType, re.Pattern[str]):  # type: ignore[misc]
        pass
else:
    class RegexEnumMeta(enum.EnumType):
        def __getattr__(self, name: str) -> Any:
            if self is RegexEnum:
                return getattr(super(), name)
            attr = getattr(self._re, name)
            setattr(self, name, attr)
            return attr


class RegexEnum(enum.IntEnum, metaclass=RegexEnumMeta):
    """Enum whose members are alternatives of one compiled regex.

    Each member is wrapped into a named group called after the member,
    and the members are joined with `|` in definition order, so the first
    member that matches at a position wins. `match.lastgroup` then names
    the member (inner groups close before the outer one does).
    """
    _ignore_ = "pattern"

    pattern: str

    def __new__(cls, value: str) -> Self:
        index = len(cls) + 1
        obj = int.__new__(cls, index)
        obj._value_ = index
        obj.pattern = value
        return obj

    def __init_subclass__(cls) -> None:
        for member in cls:
            member.pattern = f"(?P<{member.name}>{member.pattern})"
        cls._re = re.compile(  # type: ignore[attr-defined]
            "|".join(member.pattern for member in cls))

    @classmethod
    def of(cls, match: re.Match[str]) -> Self:
        """Member that produced `match`."""
        if match.lastgroup is None:
            raise ValueError("match did not capture any member group")
        return cls[match.lastgroup]
