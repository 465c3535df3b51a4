"""Core datatypes for parsed .env declarations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

EnvMap = Dict[str, str]


@dataclass(frozen=True)
class Entry:
    """A single key/value declaration taken from one line of a .env file."""

    key: str
    value: str

    def as_pair(self) -> tuple[str, str]:
        return (self.key, self.value)
