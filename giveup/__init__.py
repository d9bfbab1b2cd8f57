"""giveup: user-geared termination for command-line programs.

A replacement for `unwrap()` and raw tracebacks when an error ends the
program: the error, its causes and an optional hint are printed on
stderr and the process exits with status 1.

    from giveup import giveup

    config = giveup(
        read_config(path).hint("Create a configuration file").example(f"touch {path}"),
        "Missing configuration file",
    )
"""

from .core import (
    Err,
    ExitCode,
    Hint,
    HintedError,
    Ok,
    Result,
    attach_example,
    attach_hint,
    attempt,
    format_error,
    is_err,
    is_ok,
    iter_causes,
)
from .terminate import giveup, giving_up, report_failure

__version__ = "0.1.0"

__all__ = [
    "Err",
    "ExitCode",
    "Hint",
    "HintedError",
    "Ok",
    "Result",
    "__version__",
    "attach_example",
    "attach_hint",
    "attempt",
    "format_error",
    "giveup",
    "giving_up",
    "is_err",
    "is_ok",
    "iter_causes",
    "report_failure",
]
