"""Helpers for reading .env files and loading them into the environment."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .environ import Environment, default_environment, has_value
from .parser import parse_lines
from .types import EnvMap

LOGGER = logging.getLogger(__name__)

DEFAULT_FILENAME = ".env"
DEFAULT_ENCODING = "utf-8"

PathLike = Union[str, Path]


def filenames_or_default(paths: Iterable[PathLike]) -> list[PathLike]:
    filenames = list(paths)
    if not filenames:
        return [DEFAULT_FILENAME]
    return filenames


def read_file(
    path: PathLike,
    environ: Optional[Environment] = None,
    encoding: str = DEFAULT_ENCODING,
) -> EnvMap:
    """Parse a single .env file into a mapping.

    Keys that already have a value in ``environ`` are left out of the
    result. Malformed lines are skipped; errors opening or reading the file
    propagate to the caller. Bytes that do not decode are kept as lone
    surrogates so ``os.environ`` writes them back unchanged.
    """

    if environ is None:
        environ = default_environment()
    # No newline translation: only "\n" ends a line.
    content = Path(path).read_bytes().decode(encoding, errors="surrogateescape")

    env_map: EnvMap = {}
    for entry in parse_lines(content.split("\n")):
        if has_value(environ, entry.key):
            LOGGER.debug("Keeping existing value for %s", entry.key)
            continue
        env_map[entry.key] = entry.value
    return env_map


def read(*paths: PathLike, environ: Optional[Environment] = None) -> EnvMap:
    """Merge several .env files into one mapping, later files winning."""

    if environ is None:
        environ = default_environment()
    merged: EnvMap = {}
    for path in filenames_or_default(paths):
        merged.update(read_file(path, environ=environ))
    return merged


def load_file(path: PathLike, environ: Optional[Environment] = None) -> EnvMap:
    if environ is None:
        environ = default_environment()
    loaded: EnvMap = {}
    for key, value in read_file(path, environ=environ).items():
        try:
            environ.set(key, value)
        except ValueError as exc:
            # e.g. an embedded NUL byte, which the OS refuses
            LOGGER.debug("Skipping %s from %s: %s", key, path, exc)
            continue
        loaded[key] = value
    LOGGER.info("Loaded %s variable(s) from %s", len(loaded), path)
    return loaded


def load(*paths: PathLike, environ: Optional[Environment] = None) -> None:
    """Populate the environment with values from .env-style files.

    Variables that are already set are never overridden. Files are loaded
    in order and the first file that cannot be read aborts the rest.
    """

    if environ is None:
        environ = default_environment()
    for path in filenames_or_default(paths):
        load_file(path, environ=environ)
