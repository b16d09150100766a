"""Test helpers for projects that load env files with gofr-dotenv.

Usage in a project's conftest.py:
    pytest_plugins = ["gofr_dotenv.testing.pytest_fixtures"]

Then request the fixtures:
    def test_something(isolated_environ, reset_dotenv_state):
        gofr_dotenv.load("tests/fixtures/app.env")
"""

import os
from contextlib import contextmanager
from typing import Dict, Iterator


def replace_environ(values: Dict[str, str]) -> None:
    """Make os.environ exactly equal to ``values``."""
    for key in [key for key in os.environ if key not in values]:
        del os.environ[key]
    os.environ.update(values)


@contextmanager
def preserved_environ() -> Iterator[Dict[str, str]]:
    """Save os.environ on entry and fully restore it on exit.

    Yields the saved copy.
    """
    saved = dict(os.environ)
    try:
        yield dict(saved)
    finally:
        replace_environ(saved)


__all__ = ["preserved_environ", "replace_environ"]
