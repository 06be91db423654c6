# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2025/02/09 02:20:05
# @Author : Kariko Lin

"""Loading and saving `IniFile`s.

The text is handed over untouched: files are opened with `newline=''`,
so the line break style of the file survives a read and a write.
"""

import codecs
import logging
import os
from io import TextIOBase
from os import PathLike

import chardet

from ..abstract import FileHandler
from .model import IniFile
from .options import IniOptions

# longest first, UTF-32 LE starts with the UTF-16 LE mark.
BOMS = (
    (codecs.BOM_UTF32_BE, 'utf-32'),
    (codecs.BOM_UTF32_LE, 'utf-32'),
    (codecs.BOM_UTF8, 'utf-8-sig'),
    (codecs.BOM_UTF16_BE, 'utf-16'),
    (codecs.BOM_UTF16_LE, 'utf-16'),
)
MIN_CONFIDENCE = 0.8


class IniParser(FileHandler[IniFile]):
    def __init__(
        self,
        filename: str | PathLike[str],
        options: IniOptions | None = None
    ) -> None:
        super().__init__(filename)
        self.options = IniOptions() if options is None else options

    @staticmethod
    def readstream(
        buf: TextIOBase, options: IniOptions | None = None
    ) -> IniFile:
        """Read an already decoded text stream."""
        return IniFile(buf.read(), options)

    @staticmethod
    def writestream(instance: IniFile, buf: TextIOBase) -> None:
        """Write the text of `instance` as is into a text stream."""
        buf.write(instance.content)

    @staticmethod
    def guess_encoding(raw: bytes) -> str:
        for bom, codec in BOMS:
            if raw.startswith(bom):
                return codec
        guess = chardet.detect(raw)
        if guess['encoding'] is None or guess['confidence'] < MIN_CONFIDENCE:
            return 'utf-8'
        return guess['encoding']

    @classmethod
    def decode(cls, raw: bytes) -> str:
        codec = cls.guess_encoding(raw)
        try:
            return raw.decode(codec)
        except (UnicodeDecodeError, LookupError) as e:
            logging.warning(f'failed to decode as {codec}, '
                            f'falling back to latin-1.\n  {e}')
            return raw.decode('latin-1')

    def read(self) -> IniFile:
        """Read the file, which must exist.

        With `options.encoding` unset, the encoding is guessed from a BOM
        or by `chardet`.
        """
        path = self.resolve(check_exists=True)
        if self.options.encoding is not None:
            with open(path, 'r', encoding=self.options.encoding,
                      newline='') as fp:
                return self.readstream(fp, self.options)
        with open(path, 'rb') as fp:
            return IniFile(self.decode(fp.read()), self.options)

    def read_or_create(self) -> IniFile:
        """Like `read()`, but a missing file gives an empty document."""
        if not os.path.isfile(self.resolve()):
            logging.info(f'"{self}" not found, starting empty.')
            return IniFile.create(self.options)
        return self.read()

    def write(self, instance: IniFile, encoding: str | None = None) -> None:
        encoding = encoding or self.options.encoding or 'utf-8'
        with open(self.resolve(), 'w', encoding=encoding, newline='') as fp:
            self.writestream(instance, fp)

    def __str__(self) -> str:
        return super().__str__() + f' ({self.options.encoding or "auto"})'
