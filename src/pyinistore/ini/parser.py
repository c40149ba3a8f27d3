# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/18 14:25:03
# @Author : Kariko Lin

"""Reading and writing plain INI text.

We do parsing based on the following grammar:

    ```ini
    ; comment lines start with a semicolon
    [section]
    key = value
    ```

Every pair MUST live in a section, there's no global header here.
Values are taken as-is (trimmed), so no quoting, escaping or
multi-line continuation.
"""

import logging
from collections.abc import Iterable, Mapping
from io import TextIOBase
from os import PathLike, fspath
from warnings import warn

import chardet

from ..abstract import FileHandler
from ..errors import (
    FileExtensionError,
    InvalidFormatError,
    InvalidKeyFormatError,
    OpeningFileError,
    RedefiningKeyError,
    SectionNameEmptyError,
)

__all__ = ['IniSections', 'IniParser', 'readstream', 'dumps', 'check_extension']

logger = logging.getLogger(__name__)

type IniSections = dict[str, dict[str, str]]

INI_EXTENSION = '.ini'
COMMENT = ';'
DELIMITER = '='
DEFAULT_ENCODING = 'utf-8'


def check_extension(path: str | PathLike[str]) -> str:
    """Return `path` as `str`, or raise if it isn't an `.ini` one."""
    path = fspath(path)
    if not path.endswith(INI_EXTENSION):
        raise FileExtensionError(path)
    return path


def readstream(buf: TextIOBase | Iterable[str]) -> IniSections:
    """Parse decoded text, line by line, into a brand new dict.

    Nothing outside is touched, so a failure half way leaves
    whatever the caller held intact.
    """
    ret: IniSections = {}
    this_sect: dict[str, str] | None = None
    for lineno, raw in enumerate(buf, 1):
        i = raw.strip()
        if not i or i[0] == COMMENT:
            continue

        if i[0] == '[':
            if i[-1] != ']':
                raise InvalidFormatError(lineno, i)
            name = i[1:-1].strip()
            if not name:
                raise SectionNameEmptyError(lineno, i)
            if name in ret:
                warn(f'[{name}] is declared more than once, '
                     f'line {lineno} reopens it.')
            this_sect = ret.setdefault(name, {})
            continue

        if this_sect is None:
            # no implicit global section
            raise InvalidFormatError(lineno, i)
        if DELIMITER not in i:
            raise InvalidKeyFormatError(lineno, i)
        key, val = (j.strip() for j in i.split(DELIMITER, 1))
        if not key:
            raise InvalidKeyFormatError(lineno, i)
        if key in this_sect:
            raise RedefiningKeyError(lineno, i)
        this_sect[key] = val
    return ret


def _output_section(
    name: str, pairs: Mapping[str, str], delimiter: str
) -> str:
    ret = f'[{name}]'
    for k, v in pairs.items():
        ret += f'\n{k}{delimiter}{v}'
    return ret


def dumps(
    sections: Mapping[str, Mapping[str, str]], *,
    delimiter: str = ' = ',
    blank_lines: int = 1
) -> str:
    """Render sections back to INI text.

    Comments are gone since parsing, so they never come back.
    """
    return ('\n' * (blank_lines + 1)).join(
        _output_section(name, pairs, delimiter)
        for name, pairs in sections.items()
    ) + ('\n' if sections else '')


class IniParser(FileHandler[str]):
    """File glue around `readstream()` and `dumps()`.

    Both `read()` and `write()` refuse anything but `.ini` paths
    before the file system is touched. The same codec (`utf-8` unless
    told otherwise) is used for both directions.
    """

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(check_extension(filename))
        self._codec = encoding or DEFAULT_ENCODING

    @property
    def encoding(self) -> str:
        return self._codec

    def _decode_file(self) -> str:
        with open(self.filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': DEFAULT_ENCODING}
        logger.warning('%s is not %s, decoding as %s instead.',
                       self.filename, self._codec, codec['encoding'])

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            return raw.decode('latin-1')

    def read(self) -> str:
        """Read the whole file as text."""
        try:
            # when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            try:
                with open(self.filename, 'r', encoding=self._codec) as fp:
                    return fp.read()
            except UnicodeDecodeError:
                return self._decode_file()
        except OSError as e:
            raise OpeningFileError(self.filename, e.strerror or e) from e
        except LookupError as e:
            raise OpeningFileError(self.filename, e) from e

    def write(self, instance: str) -> None:
        """Create or truncate the file, then write `instance` into it.

        Text the codec can't represent fails before the file is opened,
        so an existing file is left as it was.
        """
        try:
            raw = instance.encode(self._codec)
        except (UnicodeEncodeError, LookupError) as e:
            raise OpeningFileError(self.filename, e) from e
        try:
            with open(self.filename, 'wb') as fp:
                fp.write(raw)
        except OSError as e:
            raise OpeningFileError(self.filename, e.strerror or e) from e
        logger.debug('wrote %d bytes to %s', len(raw), self.filename)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
