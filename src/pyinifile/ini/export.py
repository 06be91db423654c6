# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2025/02/10 20:31:48
# @Author : Kariko Lin

"""Dump an `IniFile` into JSON or YAML and back.

Both formats use one mapping: section name -> pairs, where the key `''`
holds the global pairs. Comments and layout do not survive, this is for
data exchange only.
"""

import json
from os import PathLike
from typing import Any

import yaml

from ..abstract import FileHandler
from .model import IniFile
from .options import IniOptions

GLOBAL = ''


def to_sections(ini: IniFile) -> dict[str, dict[str, str]]:
    ret = {GLOBAL: ini.read_keys_values(None)}
    for i in ini.read_sections():
        # repeated sections get merged by `read_keys_values` anyway.
        ret.setdefault(i, ini.read_keys_values(i))
    if not ret[GLOBAL]:
        del ret[GLOBAL]
    return ret


def from_sections(
    data: dict[str, Any] | None, options: IniOptions | None = None
) -> IniFile:
    ret = IniFile.create(options)
    if not data:
        return ret
    # global pairs first, they have to stay above all headers.
    if GLOBAL in data:
        ret.write_keys_values(None, _stringify(data[GLOBAL]))
    for section, pairs in data.items():
        if section != GLOBAL:
            ret.write_keys_values(str(section), _stringify(pairs))
    return ret


def _stringify(pairs: dict[Any, Any] | None) -> dict[str, str]:
    # may there be some pure digits considered as int, or `null`s.
    if not pairs:
        return {}
    return {str(k): '' if v is None else str(v) for k, v in pairs.items()}


class IniJsonParser(FileHandler[IniFile]):
    def __init__(
        self,
        filename: str | PathLike[str],
        options: IniOptions | None = None,
        encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self.options = options
        self._codec = encoding

    def read(self) -> IniFile:
        with open(self.resolve(True), 'r', encoding=self._codec) as fp:
            return from_sections(json.load(fp), self.options)

    def write(self, instance: IniFile, indent: int = 2) -> None:
        with open(self.resolve(), 'w', encoding=self._codec) as fp:
            json.dump(to_sections(instance), fp,
                      ensure_ascii=False, indent=indent)


class IniYamlParser(FileHandler[IniFile]):
    def __init__(
        self,
        filename: str | PathLike[str],
        options: IniOptions | None = None,
        encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self.options = options
        self._codec = encoding

    def read(self) -> IniFile:
        with open(self.resolve(True), 'r', encoding=self._codec) as fp:
            return from_sections(yaml.load(fp, yaml.FullLoader), self.options)

    def write(self, instance: IniFile) -> None:
        with open(self.resolve(), 'w', encoding=self._codec) as fp:
            yaml.dump(to_sections(instance), fp,
                      allow_unicode=True, sort_keys=False)
