# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/18 15:11:48
# @Author : Kariko Lin

"""
Basically INI Structure: sections of `str: str` pairs, nothing more.

As for reading/writing the text, just see `ini.parser`.
"""

import logging
from collections.abc import Iterator, Mapping
from io import StringIO
from os import PathLike
from types import MappingProxyType

from ..errors import KeyNameError, SectionNotFoundError
from .parser import IniParser, IniSections, dumps, readstream

__all__ = ['IniStore']

logger = logging.getLogger(__name__)


class IniStore(Mapping[str, Mapping[str, str]]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        ; comment, dropped while loading
        [section]
        key = val
        ```

    Loading (`load_from_string()`, `load_from_file()`) swaps the whole
    content at once, and only when the text is fully valid.
    Single pairs may be upserted with `set()`.

    Item access yields read-only snapshots, e.g. `store['server']['port']`.
    """

    def __init__(self, encoding: str | None = None) -> None:
        self._codec = encoding
        self.__sections: IniSections = {}

    @classmethod
    def from_string(cls, text: str) -> 'IniStore':
        ret = cls()
        ret.load_from_string(text)
        return ret

    @classmethod
    def from_file(
        cls, path: str | PathLike[str], encoding: str | None = None
    ) -> 'IniStore':
        ret = cls(encoding)
        ret.load_from_file(path)
        return ret

    def __getitem__(self, key: str) -> Mapping[str, str]:
        return MappingProxyType(self.__sections[key].copy())

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return '<IniStore { .sections = %d }>' % len(self.__sections)

    def load_from_string(self, text: str) -> None:
        """Parse `text` and replace everything held by this store.

        Raises one of the `IniFormatError` kinds on bad text,
        in which case the store stays as it was.
        """
        sections = readstream(StringIO(text))
        # commit only after the whole text got parsed.
        self.__sections = sections
        logger.debug('loaded %d sections', len(sections))

    def load_from_file(self, path: str | PathLike[str]) -> None:
        """Same as `load_from_string()`, reading `path` first.

        `path` must end in `.ini`, else `FileExtensionError`;
        `OpeningFileError` if it can't be read.
        """
        parser = IniParser(path, self._codec)
        logger.debug('loading %s', parser)
        self.load_from_string(parser.read())

    def get_sections(self) -> IniSections:
        """A deep copy of all sections. Editing it won't affect the store."""
        return {k: v.copy() for k, v in self.__sections.items()}

    def get_section_names(self) -> list[str]:
        return list(self.__sections)

    def has_section(self, section: str) -> bool:
        return section in self.__sections

    def get(self, section: str, key: str) -> str:
        """Look up `key` of `section`.

        Unlike `Mapping.get()`, there's no default: raises
        `SectionNotFoundError` or `KeyNameError` instead.
        """
        if section not in self.__sections:
            raise SectionNotFoundError(section)
        pairs = self.__sections[section]
        if key not in pairs:
            raise KeyNameError(section, key)
        return pairs[key]

    def set(self, section: str, key: str, value: str) -> None:
        """Upsert a pair, creating `section` when needed. Never raises."""
        self.__sections.setdefault(section, {})[key] = value

    def dumps(self, *, delimiter: str = ' = ', blank_lines: int = 1) -> str:
        return dumps(
            self.__sections, delimiter=delimiter, blank_lines=blank_lines)

    def __str__(self) -> str:
        return self.dumps()

    def save_to_file(
        self, path: str | PathLike[str], *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        """Write this store to `path`, creating or truncating it.

        `path` must end in `.ini`, else `FileExtensionError`.
        Comments loaded before are NOT restored.
        """
        parser = IniParser(path, self._codec)
        parser.write(self.dumps(delimiter=delimiter, blank_lines=blank_lines))
