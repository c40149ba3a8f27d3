# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 15:40:20
# @Author : Kariko Lin

from .model import IniStore
from .parser import IniParser, IniSections, dumps, readstream
