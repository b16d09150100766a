"""Shared fixtures for gofr-dotenv tests."""

import os
from pathlib import Path
from typing import Dict, Iterator, List

import pytest

pytest_plugins = ["gofr_dotenv.testing.pytest_fixtures"]

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Every key the fixture files define; removed before each test so results
# never depend on the developer's shell.
FIXTURE_KEYS = [
    "DOTENV", "PLAIN", "OPTION_A", "OPTION_B", "OPTION_C", "OPTION_D", "OPTION_E",
    "BOM", "DUPLICATE", "VALID", "AFTER", "MULTI_DOUBLE", "MULTI_SINGLE",
    "EXPORTED_ONE", "EXPORTED_TWO", "EXPORTED_THREE",
    "QUOTED_SINGLE", "QUOTED_DOUBLE", "QUOTED_ESCAPED", "QUOTED_EMPTY",
    "QUOTED_WITH_COMMENT", "QUOTED_HASH",
    "SUB_HOST", "SUB_PORT", "SUB_URL", "SUB_LITERAL", "SUB_ESCAPED", "SUB_UNKNOWN",
    "SUB_DOES_NOT_EXIST",
    "GOFR_DOTENV_DEFAULT_FILE", "GOFR_DOTENV_ENCODING",
    "GOFR_DOTENV_LOG_LEVEL", "GOFR_DOTENV_LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def _clean_state(clean_dotenv: Dict[str, str]) -> Iterator[None]:
    """Isolate os.environ, the default loader and settings for every test."""
    for key in FIXTURE_KEYS:
        os.environ.pop(key, None)
    yield


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def in_fixtures_dir(monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the fixtures directory as working directory."""
    monkeypatch.chdir(FIXTURES_DIR)
    return FIXTURES_DIR


@pytest.fixture
def env_keys() -> List[str]:
    """Sorted keys of os.environ at the start of the test (after cleanup)."""
    return sorted(os.environ)
