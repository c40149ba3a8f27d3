# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/18 14:10:37
# @Author : Kariko Lin

"""Every failure the package reports is one of the classes below.

Callers may catch `IniError` for everything, `IniFormatError` for
anything wrong with the text itself, or a single kind.
"""

__all__ = [
    'IniError', 'IniFormatError',
    'FileExtensionError', 'OpeningFileError',
    'InvalidFormatError', 'SectionNameEmptyError',
    'InvalidKeyFormatError', 'RedefiningKeyError',
    'SectionNotFoundError', 'KeyNameError',
]


class IniError(Exception):
    """Base of all errors raised by `pyinistore`."""
    pass


class FileExtensionError(IniError, ValueError):
    """The path handed to a file operation does not end in `.ini`."""

    def __init__(self, path: str) -> None:
        super().__init__(f'not an .ini file: {path!r}')
        self.path = path


class OpeningFileError(IniError, OSError):
    """The file could not be opened, read, decoded or written."""

    def __init__(self, path: str, reason: object = None) -> None:
        msg = f'error opening file {path!r}'
        if reason is not None:
            msg += f': {reason}'
        super().__init__(msg)
        self.path = path


class IniFormatError(IniError):
    """Raised while parsing. Knows where the parser gave up."""
    message = 'invalid ini text'

    def __init__(self, lineno: int | None = None, line: str | None = None):
        self.lineno = lineno
        self.line = line
        super().__init__(lineno, line)

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f'{self.message} (line {self.lineno}: {self.line!r})'


class InvalidFormatError(IniFormatError):
    # also covers content placed before the first section header
    message = 'invalid format'


class SectionNameEmptyError(IniFormatError):
    message = 'section name is empty'


class InvalidKeyFormatError(IniFormatError):
    message = 'invalid key format'


class RedefiningKeyError(IniFormatError):
    message = 'key redefined within section'


class SectionNotFoundError(IniError, KeyError):
    def __init__(self, section: str) -> None:
        super().__init__(section)
        self.section = section

    def __str__(self) -> str:
        return f'section not found: {self.section!r}'


class KeyNameError(IniError, KeyError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(key)
        self.section = section
        self.key = key

    def __str__(self) -> str:
        return f'key {self.key!r} not found in [{self.section}]'
