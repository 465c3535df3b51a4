# Pytest fixtures shared by the loader tests.
import os
from pathlib import Path

import pytest

from envloader import MappingEnvironment

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# Locate the bundled .env fixture files.
@pytest.fixture()
def fixture_path():
    def _path(name: str) -> str:
        return str(FIXTURES_DIR / name)

    return _path


# Provide an empty environment table that never touches os.environ.
@pytest.fixture()
def isolated_env():
    return MappingEnvironment()


# Clear OPTION_* variables from the real process environment for one test.
@pytest.fixture()
def clean_environ(monkeypatch):
    for key in list(os.environ):
        if key.startswith("OPTION_"):
            monkeypatch.delenv(key)
    yield os.environ
    for key in list(os.environ):
        if key.startswith("OPTION_"):
            del os.environ[key]
