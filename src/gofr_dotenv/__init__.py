"""gofr-dotenv - Load .env files into the process environment.

This package provides:
- loader: load / load_strict / overload of one or more env files
- snapshot: capture and full restore of the original environment
- instrumentation: optional hook around each file's load
- parser: the .env file format (quotes, escapes, export, ${VAR} substitution)
- config: typed settings read from GOFR_DOTENV_* variables
- logger: structured logging with session tracking and JSON support
- exceptions: structured exceptions with code, message and details

Example:
    import gofr_dotenv

    gofr_dotenv.load()                      # ./.env, existing variables win
    gofr_dotenv.overload(".env.test")       # file values win
    gofr_dotenv.restore_original_env()      # back to the pre-load environment
"""

__version__ = "1.0.0"

from gofr_dotenv.config import (
    DotenvSettings,
    LogSettings,
    get_settings,
    reset_settings,
)

from gofr_dotenv.environment import Environment

from gofr_dotenv.exceptions import (
    ConfigurationError,
    DotenvError,
    EnvFileNotFoundError,
    EnvFilePermissionError,
    EnvFileReadError,
    MissingKeysError,
    ParseError,
)

from gofr_dotenv.instrumentation import (
    InstrumentationPayload,
    Instrumenter,
    LoggingInstrumenter,
    NullInstrumenter,
)

from gofr_dotenv.loader import (
    Loader,
    clear_instrumenter,
    ensure_original_env_saved,
    get_instrumenter,
    get_loader,
    get_original_env,
    load,
    load_strict,
    overload,
    parse,
    require_keys,
    reset_loader,
    restore_original_env,
    set_instrumenter,
    set_original_env,
)

from gofr_dotenv.parser import Parser, parse_bytes

from gofr_dotenv.snapshot import EnvironmentSnapshot

from gofr_dotenv.substitutions import Substitution, VariableSubstitution

__all__ = [
    "__version__",
    # Loading
    "load",
    "load_strict",
    "overload",
    "parse",
    "require_keys",
    "Loader",
    "get_loader",
    "reset_loader",
    # Original environment
    "ensure_original_env_saved",
    "get_original_env",
    "set_original_env",
    "restore_original_env",
    "EnvironmentSnapshot",
    # Instrumentation
    "set_instrumenter",
    "clear_instrumenter",
    "get_instrumenter",
    "Instrumenter",
    "NullInstrumenter",
    "LoggingInstrumenter",
    "InstrumentationPayload",
    # Parsing
    "Environment",
    "Parser",
    "parse_bytes",
    "Substitution",
    "VariableSubstitution",
    # Config
    "DotenvSettings",
    "LogSettings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "DotenvError",
    "EnvFileNotFoundError",
    "EnvFilePermissionError",
    "EnvFileReadError",
    "ParseError",
    "MissingKeysError",
    "ConfigurationError",
]
