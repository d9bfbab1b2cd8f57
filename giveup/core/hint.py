"""Hints attached to errors.

A hint is a short remediation text shown to the user below the error it
belongs to, optionally followed by an example of the recommended action:

    Missing configuration file: config.toml not found
    Create a configuration file: `touch config.toml`
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Hint", "HintedError"]


@dataclass(slots=True)
class Hint:
    """Remediation text with an optional example.

    Attributes:
        hint: What the user should do.
        example: A concrete command or action, rendered in backticks.
    """

    hint: str
    example: str | None = None

    def __str__(self) -> str:
        if self.example is None:
            return self.hint
        return f"{self.hint}: `{self.example}`"


class HintedError[E](Exception):
    """An error value carrying a hint for the user.

    The wrapped error is owned by the wrapper and left untouched; its
    cause chain stays reachable through `cause`.
    """

    def __init__(self, error: E, hint: Hint) -> None:
        super().__init__(error, hint)
        self.error = error
        self.hint = hint

    @classmethod
    def with_hint(cls, error: E, hint: str) -> HintedError[E]:
        return cls(error, Hint(hint))

    @property
    def cause(self) -> E:
        return self.error

    def set_example(self, example: str) -> None:
        """Set (or replace) the example shown after the hint."""
        self.hint.example = example

    def __str__(self) -> str:
        return f"{self.error}\n{self.hint}"

    def __repr__(self) -> str:
        return f"HintedError({self.error!r}, {self.hint!r})"
