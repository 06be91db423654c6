# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/02/08 21:33:09
# @Author : Kariko Lin

from .consts import Comparison, detect_linebreak
from .escape import escape, unescape
from .export import IniJsonParser, IniYamlParser
from .model import IniFile
from .mutator import UnsafeIniWrite
from .options import IniOptions
from .parser import IniParser
from .tokens import Token, TokenKind, tokenize
