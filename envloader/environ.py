"""Accessors for the environment variable table that loaders write into."""
from __future__ import annotations

import os
from typing import Dict, Optional, Protocol


class Environment(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class ProcessEnvironment:
    """Reads and writes the real process environment via ``os.environ``."""

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value


class MappingEnvironment:
    """Isolated environment table backed by a plain dict."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def __repr__(self) -> str:
        return f"MappingEnvironment({self.values!r})"


def default_environment() -> Environment:
    return ProcessEnvironment()


def has_value(environment: Environment, key: str) -> bool:
    # An empty string counts as unset.
    return bool(environment.get(key))
