"""User-geared program termination.

`giveup` replaces `unwrap()` (or a bare traceback) for errors that end a
command-line program. The value of an Ok result is returned; an Err is
reported on stderr and the process exits with status 1:

    config = giveup(
        load(path).hint("Create a configuration file").example(f"touch {path}"),
        "Missing configuration file",
    )

prints

    Missing configuration file: config.toml not found
    Caused by: [Errno 2] No such file or directory: 'config.toml'
    Create a configuration file: `touch config.toml`

Code that raises instead of returning results can use `giving_up`:

    with giving_up("Cannot read input", hint="Check the file permissions"):
        data = path.read_text()
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from contextlib import ContextDecorator
from types import TracebackType
from typing import NoReturn

from giveup.core.chain import format_error
from giveup.core.config import load_config_or_default
from giveup.core.errors import ExitCode
from giveup.core.result import Err, Ok, Result
from giveup.output.console import ConsoleProtocol, RichConsole

__all__ = ["Exiter", "giveup", "giving_up", "report_failure"]

type Exiter = Callable[[int], NoReturn]


def report_failure(message: str, error: object) -> str:
    """Build the report `giveup` would write for `error`, without writing it."""
    return f"{message}: {format_error(error)}"


def giveup[T, E](
    result: Result[T, E],
    message: str,
    *,
    console: ConsoleProtocol | None = None,
    exit: Exiter | None = None,
) -> T:
    """Return the value of an Ok result, or report the error and exit.

    Args:
        result: Outcome of a fallible computation.
        message: Short description of what failed, shown in bold.
        console: Where to write the report; defaults to stderr.
        exit: Called with the exit status; defaults to `sys.exit`.

    Returns:
        The success value. Never returns for an Err.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            _terminate(message, error, console, exit)


def _terminate(
    message: str,
    error: object,
    console: ConsoleProtocol | None,
    exit: Exiter | None,
) -> NoReturn:
    exit = exit or sys.exit
    try:
        body = format_error(error)
        if console is None:
            console = RichConsole(load_config_or_default())
        console.failure(message, body)
    finally:
        # A failed write to stderr still ends the process.
        exit(int(ExitCode.FAILURE))
    raise AssertionError("exit hook returned")


class giving_up(ContextDecorator):
    """Context manager and decorator that gives up on escaping exceptions.

    Any `Exception` leaving the block is reported like an Err passed to
    `giveup`, hinted first when `hint` is set. `SystemExit` and
    `KeyboardInterrupt` are left alone.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        example: str | None = None,
        console: ConsoleProtocol | None = None,
        exit: Exiter | None = None,
    ) -> None:
        if example is not None and hint is None:
            raise TypeError("giving_up() got an example without a hint")
        self.message = message
        self.hint = hint
        self.example = example
        self._console = console
        self._exit = exit

    def __enter__(self) -> giving_up:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if not isinstance(exc, Exception):
            return False

        result: Result[object, object] = Err(exc)
        if self.hint is not None:
            result = result.hint(self.hint)
            if self.example is not None:
                result = result.example(self.example)
        giveup(result, self.message, console=self._console, exit=self._exit)
        return False
