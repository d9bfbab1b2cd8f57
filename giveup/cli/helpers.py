"""Typer integration.

Inside a Typer command, ending the process directly would skip Typer's
own teardown (result callbacks, context cleanup). `exit_on_error` writes
the same report as `giveup` and raises `typer.Exit` instead.
"""

from __future__ import annotations

import typer

from giveup.core.chain import format_error
from giveup.core.config import load_config_or_default
from giveup.core.errors import ExitCode
from giveup.core.result import Err, Ok, Result
from giveup.output.console import ConsoleProtocol, RichConsole

__all__ = ["exit_on_error"]


def exit_on_error[T, E](
    result: Result[T, E],
    message: str,
    console: ConsoleProtocol | None = None,
) -> T:
    """Return the value of an Ok result, or report the error and exit the command.

    This helper reduces boilerplate for the common pattern:
        match result:
            case Err(e):
                console.failure(message, format_error(e))
                raise typer.Exit(code=1)
            case Ok(value):
                ...

    Raises:
        typer.Exit: With code 1 when the result is Err.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            console = console or RichConsole(load_config_or_default())
            console.failure(message, format_error(error))
            raise typer.Exit(code=int(ExitCode.FAILURE))
