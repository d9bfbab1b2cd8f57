"""Process exit codes.

`giveup` only ever terminates with `FAILURE`; `OK` is listed so callers
can compare against a complete set.
"""

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    """Exit codes produced by this package. Values are stable."""

    OK = 0
    FAILURE = 1
