# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/02/08 21:30:51
# @Author : Kariko Lin

import logging

from .abstract import InvalidIniPath
from .ini import (
    Comparison,
    IniFile,
    IniJsonParser,
    IniOptions,
    IniParser,
    IniYamlParser,
    Token,
    TokenKind,
    UnsafeIniWrite,
    tokenize
)

__all__ = [
    'IniFile', 'IniOptions', 'Comparison',
    'IniParser', 'IniJsonParser', 'IniYamlParser',
    'Token', 'TokenKind', 'tokenize',
    'InvalidIniPath', 'UnsafeIniWrite'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
