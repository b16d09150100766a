"""Capture and restore of the environment as it was before any env file was loaded.

The snapshot is taken at most once, the first time a load runs (or when
``ensure_original_env_saved()`` is called explicitly). Clearing it with
``set_original_env(None)`` allows a fresh capture.
"""

import os
from typing import Dict, Mapping, Optional

from gofr_dotenv.config import get_settings
from gofr_dotenv.logger import Logger


class EnvironmentSnapshot:
    """Holds a copy of os.environ captured once per process.

    Reads hand out copies, so nothing a caller does to the returned dict or
    to os.environ changes the held snapshot.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._original: Optional[Dict[str, str]] = None
        self._logger = logger

    @property
    def logger(self) -> Logger:
        if self._logger is None:
            self._logger = get_settings().log.create_logger()
        return self._logger

    @property
    def is_saved(self) -> bool:
        return self._original is not None

    def ensure_original_env_saved(self) -> None:
        """Capture os.environ unless a snapshot is already held."""
        if self._original is not None:
            return
        self._original = dict(os.environ)
        self.logger.debug("Captured original environment", keys=len(self._original))

    def get_original_env(self) -> Optional[Dict[str, str]]:
        """Return a copy of the snapshot, or None if nothing was captured."""
        if self._original is None:
            return None
        return dict(self._original)

    def set_original_env(self, value: Optional[Mapping[str, str]]) -> None:
        """Replace the snapshot; None clears it so the next save recaptures."""
        self._original = None if value is None else dict(value)

    def restore_original_env(self) -> None:
        """Make os.environ exactly equal to the snapshot.

        Variables added since the capture are removed and changed ones are
        reset. With no snapshot held, the current environment is captured
        first, which makes the restore a no-op.
        """
        self.ensure_original_env_saved()
        original = self._original or {}

        removed = [key for key in os.environ if key not in original]
        for key in removed:
            del os.environ[key]
        for key, value in original.items():
            if os.environ.get(key) != value:
                os.environ[key] = value

        self.logger.debug("Restored original environment", removed=len(removed))


__all__ = ["EnvironmentSnapshot"]
