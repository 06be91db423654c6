# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

import errno
import os
from abc import ABCMeta, abstractmethod
from os import PathLike
from typing import TypeVar

T = TypeVar('T')


class InvalidIniPath(ValueError):
    """The file name is empty, blank, or not a usable path at all."""
    pass


class FileHandler[T](metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = filename

    def resolve(self, check_exists: bool = False) -> str:
        """Validate the handled file name and return its absolute path.

        Raises `InvalidIniPath` for names that cannot denote a file, and
        `FileNotFoundError` if `check_exists` is set but nothing is there.
        """
        fn = os.fspath(self._fn)
        if not fn or fn.isspace() or '\0' in fn:
            raise InvalidIniPath(f'invalid file name: {fn!r}')
        if check_exists and not os.path.isfile(fn):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), fn)
        return os.path.abspath(fn)

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return os.fspath(self._fn)
