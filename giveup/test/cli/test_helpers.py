from __future__ import annotations

import typer
from typer.testing import CliRunner

from giveup.cli.helpers import exit_on_error
from giveup.core.result import Err, Ok, Result
from giveup.output.console import MockConsole


def make_app(console: MockConsole) -> typer.Typer:
    app = typer.Typer(add_completion=False)

    def parse(raw: str) -> Result[int, ValueError]:
        try:
            return Ok(int(raw))
        except ValueError as exc:
            return Err(exc)

    @app.command()
    def double(raw: str) -> None:
        value = exit_on_error(
            parse(raw).hint("Pass a whole number").example("double 21"),
            "Invalid number",
            console,
        )
        typer.echo(value * 2)

    return app


def test_ok_continues_command() -> None:
    console = MockConsole()
    result = CliRunner().invoke(make_app(console), ["21"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "42"
    assert console.outputs == []


def test_err_exits_with_failure_code() -> None:
    console = MockConsole()
    result = CliRunner().invoke(make_app(console), ["abc"])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert console.text == (
        "Invalid number: invalid literal for int() with base 10: 'abc'\n"
        "Pass a whole number: `double 21`\n"
    )
