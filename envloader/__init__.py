"""Load key/value pairs from .env files into the process environment."""
from __future__ import annotations

from .environ import Environment, MappingEnvironment, ProcessEnvironment
from .loader import DEFAULT_FILENAME, load, load_file, read, read_file
from .parser import (
    EmptyLineError,
    FormatError,
    SeparatorError,
    is_ignored_line,
    parse_line,
)
from .types import Entry, EnvMap

__all__ = [
    "DEFAULT_FILENAME",
    "EmptyLineError",
    "Entry",
    "EnvMap",
    "Environment",
    "FormatError",
    "MappingEnvironment",
    "ProcessEnvironment",
    "SeparatorError",
    "is_ignored_line",
    "load",
    "load_file",
    "parse_line",
    "read",
    "read_file",
]
