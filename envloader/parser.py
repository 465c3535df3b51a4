"""Parsing of individual .env lines into key/value entries."""
from __future__ import annotations

import enum
import logging
from typing import Iterable, Iterator

from .types import Entry

LOGGER = logging.getLogger(__name__)

EXPORT_PREFIX = "export"
QUOTE_CHARS = "\"'"


class FormatError(ValueError):
    """Raised when a line cannot be turned into a key/value entry."""


class EmptyLineError(FormatError):
    """Raised when the parser is handed a zero-length line."""


class SeparatorError(FormatError):
    """Raised when a line has no unambiguous ``=`` or ``:`` separator."""


class QuoteState(enum.Enum):
    OUTSIDE = "outside-quote"
    INSIDE = "inside-quote"


def is_ignored_line(line: str) -> bool:
    """Return True for blank lines and comment-only lines."""

    trimmed = line.strip(" \n\t")
    return not trimmed or trimmed.startswith("#")


def _has_lone_quote(segment: str) -> bool:
    return segment.count('"') == 1 or segment.count("'") == 1


def strip_comment(line: str) -> str:
    """Drop trailing ``# comments`` while keeping ``#`` inside quoted values.

    The line is split on every ``#``. A segment holding a single quote
    character toggles between OUTSIDE and INSIDE; the first segment is
    always kept and later ones only while a quoted span is open (or on the
    segment that closes it).
    """

    if "#" not in line:
        return line

    state = QuoteState.OUTSIDE
    kept: list[str] = []
    for segment in line.split("#"):
        if _has_lone_quote(segment):
            if state is QuoteState.INSIDE:
                state = QuoteState.OUTSIDE
                kept.append(segment)
            else:
                state = QuoteState.INSIDE

        if not kept or state is QuoteState.INSIDE:
            kept.append(segment)

    return "#".join(kept)


def _split_key_value(line: str) -> list[str]:
    parts = line.split("=")
    if len(parts) != 2:
        # YAML style "KEY: value"
        parts = line.split(":")
    if len(parts) != 2:
        raise SeparatorError("can't separate key from value")
    return parts


def _normalize_key(raw: str) -> str:
    if raw.startswith(EXPORT_PREFIX):
        raw = raw[len(EXPORT_PREFIX):]
    return raw.strip(" ")


def _normalize_value(raw: str) -> str:
    value = raw.strip(" ")
    if value.count('"') != 2 and value.count("'") != 2:
        return value

    if value and value[0] in QUOTE_CHARS:
        value = value[1:]
    if value and value[-1] in QUOTE_CHARS:
        value = value[:-1]

    value = value.replace('\\"', '"')
    return value.replace("\\n", "\n")


def parse_line(line: str) -> Entry:
    """Parse one significant .env line.

    Raises ``EmptyLineError`` for a zero-length line and ``SeparatorError``
    when the key cannot be separated from the value.
    """

    if len(line) == 0:
        raise EmptyLineError("zero length string")

    raw_key, raw_value = _split_key_value(strip_comment(line))
    key = _normalize_key(raw_key)
    if not key:
        raise FormatError("missing key before separator")

    return Entry(key=key, value=_normalize_value(raw_value))


def parse_lines(lines: Iterable[str]) -> Iterator[Entry]:
    """Yield entries for every line that parses, skipping the rest."""

    for number, line in enumerate(lines, start=1):
        if is_ignored_line(line):
            continue
        try:
            yield parse_line(line)
        except FormatError as exc:
            LOGGER.debug("Skipping line %s: %s", number, exc)
