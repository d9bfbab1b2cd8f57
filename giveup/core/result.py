"""Result type for fallible computations.

A Result is either `Ok(value)` or `Err(error)`, similar to Rust's
Result<T, E>. Besides the usual accessors it carries the hint helpers
used to prepare an error for display:

    config = giveup(
        read_config(path)
        .hint("Create a configuration file")
        .example(f"touch {path}"),
        "Missing configuration file",
    )

Pattern matching works as well:

    match read_config(path):
        case Ok(config):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard, TypeVar

from .hint import Hint, HintedError

__all__ = [
    "Err",
    "Ok",
    "Result",
    "attach_example",
    "attach_hint",
    "attempt",
    "is_err",
    "is_ok",
]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> None:
        """Raises ValueError since this is Ok."""
        raise ValueError(f"called unwrap_err on Ok: {self.value}")

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def hint(self, hint: str) -> Ok[T]:
        """Returns self unchanged; only errors carry hints."""
        return self

    def example(self, example: str) -> Ok[T]:
        """Returns self unchanged; only errors carry examples."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError with the error."""
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        return self

    def hint(self, hint: str) -> Err[HintedError[E]]:
        """Wraps the error together with a hint for the user.

        Args:
            hint: Remediation text shown below the error.

        Returns:
            Err holding a HintedError that owns the original error.
        """
        return Err(HintedError(self.error, Hint(hint)))

    def example(self, example: str) -> Err[E]:
        """Adds an example to the hint of a hinted error.

        Calling it again replaces the previous example.

        Args:
            example: Concrete command or action, shown in backticks.

        Returns:
            Self, with the hint updated in place.

        Raises:
            TypeError: If the error was not given a hint first.
        """
        if not isinstance(self.error, HintedError):
            raise TypeError(
                f"example() requires a hinted error, got {type(self.error).__name__}; "
                "call hint() first"
            )
        self.error.set_example(example)
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that checks if a Result is Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that checks if a Result is Err."""
    return isinstance(result, Err)


def attach_hint[T, E](result: Result[T, E], hint: str) -> Result[T, HintedError[E]]:
    """Function form of `Ok.hint` / `Err.hint`."""
    return result.hint(hint)


def attach_example[T, E](
    result: Result[T, HintedError[E]], example: str
) -> Result[T, HintedError[E]]:
    """Function form of `Ok.example` / `Err.example`."""
    return result.example(example)


def attempt[T](func: Callable[..., T], *args: object, **kwargs: object) -> Result[T, Exception]:
    """Call `func` and capture a raised exception as Err.

    Only `Exception` subclasses are captured; `SystemExit` and
    `KeyboardInterrupt` propagate.

    Example:
        data = giveup(attempt(path.read_text, encoding="utf-8"), "Cannot read input")
    """
    try:
        return Ok(func(*args, **kwargs))
    except Exception as exc:
        return Err(exc)
