"""Console output abstraction.

Failure reports go through a `ConsoleProtocol` so the termination path
can be exercised in tests with `MockConsole` instead of writing to the
real stderr. `RichConsole` is the production backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from giveup.core.config import ColorMode, Config

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
]


class ConsoleProtocol(Protocol):
    """Protocol for diagnostic output."""

    def failure(self, message: str, body: str) -> None:
        """Print `<message>: <body>` with the message emphasized.

        Args:
            message: Short description of what failed.
            body: Formatted error; newline-terminated, may span lines.
        """
        ...


class RichConsole:
    """Console writing to stderr through Rich.

    Only the message goes through Rich, as `Text` rather than markup. The
    body is written to the stream verbatim: Rich would expand tabs and
    drop control characters.
    """

    def __init__(self, config: Config | None = None) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        config = config or Config()
        match config.color:
            case ColorMode.ALWAYS:
                self._console = Console(stderr=True, force_terminal=True)
            case ColorMode.NEVER:
                self._console = Console(stderr=True, color_system=None)
            case _:
                self._console = Console(stderr=True)

    def failure(self, message: str, body: str) -> None:
        from rich.text import Text

        self._console.print(
            Text(message, style="bold", end=""), end="", soft_wrap=True, highlight=False
        )
        stream = self._console.file
        stream.write(f": {body}")
        stream.flush()


@dataclass
class OutputRecord:
    """A single failure report captured by MockConsole."""

    message: str
    body: str

    @property
    def text(self) -> str:
        return f"{self.message}: {self.body}"


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def failure(self, message: str, body: str) -> None:
        self.outputs.append(OutputRecord(message, body))

    @property
    def text(self) -> str:
        """All output exactly as it would have been written."""
        return "".join(o.text for o in self.outputs)
