"""Core types: results, hints, cause-chain formatting."""

from .chain import CAUSED_BY, CauseLinked, cause_of, format_error, iter_causes
from .config import ColorMode, Config, ConfigError, load_config, load_config_or_default
from .errors import ExitCode
from .hint import Hint, HintedError
from .result import (
    Err,
    Ok,
    Result,
    attach_example,
    attach_hint,
    attempt,
    is_err,
    is_ok,
)

__all__ = [
    # chain
    "CAUSED_BY",
    "CauseLinked",
    "cause_of",
    "format_error",
    "iter_causes",
    # config
    "ColorMode",
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    # errors
    "ExitCode",
    # hint
    "Hint",
    "HintedError",
    # result
    "Err",
    "Ok",
    "Result",
    "attach_example",
    "attach_hint",
    "attempt",
    "is_err",
    "is_ok",
]
