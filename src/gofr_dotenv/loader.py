"""Loading env files into os.environ.

Three call modes share the same path handling and differ in how they treat
missing files and existing variables:

    load(*paths)         skip missing files, keep existing variables
    load_strict(*paths)  raise on the first missing file, keep existing variables
    overload(*paths)     skip missing files, replace existing variables

Every mode saves the original environment before touching anything, so
``restore_original_env()`` can undo all loads. Each call returns an ordered
dict of what it applied; when several files set the same key the last file
wins in that dict.

Missing files are detected with an existence check before the file is
opened. The check and the open are not atomic; a file removed in between is
treated as missing by ``load()`` and ``overload()``.

Usage:
    import gofr_dotenv

    gofr_dotenv.load()                          # ./.env
    gofr_dotenv.load(".env.local", "~/.env")    # first file wins for existing keys
    gofr_dotenv.overload(".env.test")
    gofr_dotenv.require_keys("DATABASE_URL")
"""

import inspect
import os
from typing import Any, Dict, List, Optional, Sequence

from gofr_dotenv.config import DotenvSettings, get_settings
from gofr_dotenv.environment import Environment, PathLike
from gofr_dotenv.exceptions import EnvFileNotFoundError, MissingKeysError
from gofr_dotenv.instrumentation import (
    LOAD_EVENT,
    OVERLOAD_EVENT,
    InstrumentationPayload,
    Instrumenter,
    NullInstrumenter,
)
from gofr_dotenv.logger import Logger
from gofr_dotenv.snapshot import EnvironmentSnapshot


class Loader:
    """Applies env files to os.environ and owns the original-environment snapshot.

    Most code uses the module-level functions, which delegate to a shared
    default instance (see ``get_loader()``). A separate instance is useful
    for tests or when a different default file or instrumenter is wanted.

    Args:
        settings: Loader settings (default: ``get_settings()`` at call time)
        snapshot: Snapshot holder (default: a new ``EnvironmentSnapshot`` sharing the logger)
        instrumenter: Hook run around each file (default: ``NullInstrumenter``)
        logger: Logger (default: built from ``settings.log`` on first use)
    """

    def __init__(
        self,
        settings: Optional[DotenvSettings] = None,
        snapshot: Optional[EnvironmentSnapshot] = None,
        instrumenter: Optional[Instrumenter] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._settings = settings
        self._logger = logger
        self._snapshot = snapshot
        self._instrumenter: Any = NullInstrumenter()
        if instrumenter is not None:
            self.set_instrumenter(instrumenter)

    @property
    def settings(self) -> DotenvSettings:
        return self._settings or get_settings()

    @property
    def logger(self) -> Logger:
        if self._logger is None:
            self._logger = self.settings.log.create_logger()
        return self._logger

    @property
    def snapshot(self) -> EnvironmentSnapshot:
        if self._snapshot is None:
            self._snapshot = EnvironmentSnapshot(self.logger)
        return self._snapshot

    # -- instrumentation -------------------------------------------------

    def get_instrumenter(self) -> Any:
        return self._instrumenter

    def set_instrumenter(self, instrumenter: Any) -> None:
        """Install an instrumenter; None restores the no-op default.

        Any object with an ``instrument(name, payload, operation)`` method is
        accepted.

        Raises:
            TypeError: If the object has no callable ``instrument`` taking
                ``(name, payload, operation)``
        """
        if instrumenter is None:
            self._instrumenter = NullInstrumenter()
            return
        instrument = getattr(instrumenter, "instrument", None)
        if not callable(instrument):
            raise TypeError(
                f"Instrumenter must define an instrument() method, got {type(instrumenter).__name__}"
            )
        try:
            inspect.signature(instrument).bind("name", None, None)
        except TypeError as e:
            raise TypeError(
                "instrument() must accept (name, payload, operation), "
                f"got {type(instrumenter).__name__}.instrument{inspect.signature(instrument)}"
            ) from e
        self._instrumenter = instrumenter

    def clear_instrumenter(self) -> None:
        self._instrumenter = NullInstrumenter()

    # -- loading ---------------------------------------------------------

    def resolve_paths(self, paths: Sequence[PathLike]) -> List[str]:
        """Expand ``~`` and make each path absolute against the current directory.

        With no paths, the configured default file is used.
        """
        if not paths:
            paths = (self.settings.default_file,)
        return [os.path.abspath(os.path.expanduser(os.fspath(path))) for path in paths]

    def load(self, *paths: PathLike) -> Dict[str, str]:
        """Load files without replacing existing variables; missing files are skipped."""
        return self._load_all(paths, overwrite=False, strict=False)

    def load_strict(self, *paths: PathLike) -> Dict[str, str]:
        """Like ``load()`` but raise on the first missing file.

        Files before the missing one stay applied.

        Raises:
            EnvFileNotFoundError: If a file does not exist
        """
        return self._load_all(paths, overwrite=False, strict=True)

    def overload(self, *paths: PathLike) -> Dict[str, str]:
        """Load files, replacing existing variables; missing files are skipped."""
        return self._load_all(paths, overwrite=True, strict=False)

    def parse(self, *paths: PathLike) -> Dict[str, str]:
        """Return the merged pairs of the given files without touching os.environ.

        Missing files are skipped as in ``load()``. No snapshot is taken and
        no instrumenter runs.
        """
        result: Dict[str, str] = {}
        for path in self.resolve_paths(paths):
            env = self._open(path, overwrite=False, strict=False)
            if env is not None:
                result.update(env)
        return result

    def require_keys(self, *keys: str) -> None:
        """Check that every key is set in os.environ.

        Raises:
            MissingKeysError: Listing all keys that are not set
        """
        missing = [key for key in keys if key not in os.environ]
        if missing:
            raise MissingKeysError(missing)

    def _load_all(
        self, paths: Sequence[PathLike], overwrite: bool, strict: bool
    ) -> Dict[str, str]:
        resolved = self.resolve_paths(paths)
        self.snapshot.ensure_original_env_saved()

        result: Dict[str, str] = {}
        for path in resolved:
            env = self._open(path, overwrite=overwrite, strict=strict)
            if env is None:
                continue
            result.update(self._apply(env, overwrite))
        return result

    def _open(self, path: str, overwrite: bool, strict: bool) -> Optional[Environment]:
        if not strict and not os.path.exists(path):
            self.logger.debug("Skipping missing env file", path=path)
            return None
        try:
            return Environment(path, overwrite=overwrite, encoding=self.settings.encoding)
        except EnvFileNotFoundError:
            if strict:
                raise
            self.logger.debug("Env file disappeared before it could be read", path=path)
            return None

    def _apply(self, env: Environment, overwrite: bool) -> Dict[str, str]:
        if overwrite:
            name, operation = OVERLOAD_EVENT, env.apply_override
        else:
            name, operation = LOAD_EVENT, env.apply
        result = self._instrumenter.instrument(name, InstrumentationPayload(env=env), operation)
        return dict(result or {})


# Shared instance behind the module-level functions
_default_loader: Optional[Loader] = None


def get_loader() -> Loader:
    """Get (creating on first use) the process-wide default loader."""
    global _default_loader
    if _default_loader is None:
        _default_loader = Loader()
    return _default_loader


def reset_loader() -> None:
    """Drop the default loader, forgetting its snapshot and instrumenter (for tests)."""
    global _default_loader
    _default_loader = None


def load(*paths: PathLike) -> Dict[str, str]:
    return get_loader().load(*paths)


def load_strict(*paths: PathLike) -> Dict[str, str]:
    return get_loader().load_strict(*paths)


def overload(*paths: PathLike) -> Dict[str, str]:
    return get_loader().overload(*paths)


def parse(*paths: PathLike) -> Dict[str, str]:
    return get_loader().parse(*paths)


def require_keys(*keys: str) -> None:
    get_loader().require_keys(*keys)


def ensure_original_env_saved() -> None:
    get_loader().snapshot.ensure_original_env_saved()


def get_original_env() -> Optional[Dict[str, str]]:
    return get_loader().snapshot.get_original_env()


def set_original_env(value: Optional[Dict[str, str]]) -> None:
    get_loader().snapshot.set_original_env(value)


def restore_original_env() -> None:
    get_loader().snapshot.restore_original_env()


def set_instrumenter(instrumenter: Any) -> None:
    get_loader().set_instrumenter(instrumenter)


def clear_instrumenter() -> None:
    get_loader().clear_instrumenter()


def get_instrumenter() -> Any:
    return get_loader().get_instrumenter()


__all__ = [
    "Loader",
    "get_loader",
    "reset_loader",
    "load",
    "load_strict",
    "overload",
    "parse",
    "require_keys",
    "ensure_original_env_saved",
    "get_original_env",
    "set_original_env",
    "restore_original_env",
    "set_instrumenter",
    "clear_instrumenter",
    "get_instrumenter",
]
