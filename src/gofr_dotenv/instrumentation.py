"""Instrumentation hook wrapped around each env file's load.

An instrumenter receives the event name (``dotenv.load`` or
``dotenv.overload``), a payload holding the parsed ``Environment`` and the
zero-argument operation that applies it. Whatever it returns is used as
that file's result, so an instrumenter can time, log or even veto a load.

Example:
    class TimingInstrumenter(Instrumenter):
        def instrument(self, name, payload, operation):
            started = time.perf_counter()
            try:
                return operation()
            finally:
                record(name, payload.env.filename, time.perf_counter() - started)

    gofr_dotenv.set_instrumenter(TimingInstrumenter())
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional

from gofr_dotenv.config import get_settings
from gofr_dotenv.logger import Logger

if TYPE_CHECKING:
    from gofr_dotenv.environment import Environment

LOAD_EVENT = "dotenv.load"
OVERLOAD_EVENT = "dotenv.overload"

Operation = Callable[[], Dict[str, str]]


@dataclass(frozen=True)
class InstrumentationPayload:
    """Data handed to an instrumenter for one file."""

    env: "Environment"


class Instrumenter(ABC):
    """Observer invoked once per existing env file."""

    @abstractmethod
    def instrument(
        self, name: str, payload: InstrumentationPayload, operation: Operation
    ) -> Dict[str, str]:
        """Run (or skip) ``operation`` and return the file's result."""


class NullInstrumenter(Instrumenter):
    """Default instrumenter: runs the operation and passes its result through."""

    def instrument(
        self, name: str, payload: InstrumentationPayload, operation: Operation
    ) -> Dict[str, str]:
        return operation()


class LoggingInstrumenter(Instrumenter):
    """Logs each file load at DEBUG level with key count and duration.

    Only key names are ever logged, never values.
    """

    def __init__(self, logger: Optional[Logger] = None, log_keys: bool = False) -> None:
        self._logger = logger or get_settings().log.create_logger()
        self.log_keys = log_keys

    def instrument(
        self, name: str, payload: InstrumentationPayload, operation: Operation
    ) -> Dict[str, str]:
        started = time.perf_counter()
        result = operation()
        duration_ms = round((time.perf_counter() - started) * 1000, 3)

        fields = {
            "event": name,
            "path": payload.env.filename,
            "parsed": len(payload.env),
            "applied": len(result),
            "duration_ms": duration_ms,
        }
        if self.log_keys:
            fields["keys"] = ",".join(result)
        self._logger.debug("Env file loaded", **fields)
        return result


__all__ = [
    "LOAD_EVENT",
    "OVERLOAD_EVENT",
    "InstrumentationPayload",
    "Instrumenter",
    "NullInstrumenter",
    "LoggingInstrumenter",
]
