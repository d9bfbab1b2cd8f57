"""Cause-chain formatting.

An error is rendered as its own description followed by one line per
underlying cause, nearest cause first:

    disk full
    Caused by: no space on device

Any object can be formatted. Exceptions expose their causes through the
interpreter's chaining attributes (`raise ... from ...` and implicit
context); other error values can expose one through a `cause` attribute.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from .hint import HintedError

__all__ = [
    "CAUSED_BY",
    "CauseLinked",
    "cause_of",
    "format_error",
    "iter_causes",
]

CAUSED_BY = "Caused by: "


@runtime_checkable
class CauseLinked(Protocol):
    """An error value that knows which error caused it."""

    @property
    def cause(self) -> object | None: ...


def cause_of(error: object) -> object | None:
    """Return the error that directly caused `error`, if any."""
    match error:
        case HintedError():
            return error.cause
        case BaseException():
            if error.__cause__ is not None:
                return error.__cause__
            if error.__suppress_context__:
                return None
            return error.__context__
        case CauseLinked():
            return error.cause
        case _:
            return None


def iter_causes(error: object) -> Iterator[object]:
    """Yield the causes of `error`, nearest first.

    Stops before an error that was already yielded, since exception
    contexts can form cycles.
    """
    seen = {id(error)}
    current = cause_of(error)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = cause_of(current)


def format_error(error: object) -> str:
    """Format an error and its causes for a CLI user.

    Every line, the last one included, ends with a newline. A hinted
    error renders the wrapped error with its whole chain first and the
    hint on the final line.
    """
    if isinstance(error, HintedError):
        return f"{format_error(error.error)}{error.hint}\n"

    lines = [f"{error}\n"]
    lines.extend(f"{CAUSED_BY}{cause}\n" for cause in iter_causes(error))
    return "".join(lines)
