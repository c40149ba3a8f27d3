# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 15:41:02
# @Author : Kariko Lin

import logging

from .errors import (
    IniError,
    IniFormatError,
    FileExtensionError,
    OpeningFileError,
    InvalidFormatError,
    SectionNameEmptyError,
    InvalidKeyFormatError,
    RedefiningKeyError,
    SectionNotFoundError,
    KeyNameError,
)
from .ini import IniStore, IniParser, IniSections, dumps, readstream

__all__ = [
    'IniStore', 'IniParser', 'IniSections', 'dumps', 'readstream',
    'IniError', 'IniFormatError',
    'FileExtensionError', 'OpeningFileError',
    'InvalidFormatError', 'SectionNameEmptyError',
    'InvalidKeyFormatError', 'RedefiningKeyError',
    'SectionNotFoundError', 'KeyNameError',
]

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
