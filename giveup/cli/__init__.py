"""Command-line framework integrations."""

from .helpers import exit_on_error

__all__ = ["exit_on_error"]
