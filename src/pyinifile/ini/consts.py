# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2025/02/08 21:40:03
# @Author : Kariko Lin

import os
from enum import Enum

COMMENT_MARKERS = '#;'


class Comparison(str, Enum):
    """How section names, keys and values are compared."""
    ORDINAL = 'ordinal'
    IGNORE_CASE = 'ignore_case'

    def equals(self, a: str | None, b: str | None) -> bool:
        if a is None or b is None:
            return a is b
        if self is Comparison.IGNORE_CASE:
            return a.casefold() == b.casefold()
        return a == b


def detect_linebreak(text: str | None) -> str:
    """Guess the line break style from the first `\\r` and `\\n` seen.

    Both present means `\\r\\n`, no matter whether they are adjacent.
    Text without any of them gets the platform default.
    """
    if not text:
        return os.linesep
    cr = '\r' in text
    lf = '\n' in text
    if lf:
        return '\r\n' if cr else '\n'
    return '\r' if cr else os.linesep
