"""Configuration read from the environment.

Only presentation is configurable; the failure format and the exit
status are fixed.

    GIVEUP_COLOR=auto|always|never

`NO_COLOR` and `FORCE_COLOR` are honored by the console backend itself.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .result import Err, Ok, Result

__all__ = [
    "COLOR_ENV_VAR",
    "ColorMode",
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

COLOR_ENV_VAR = "GIVEUP_COLOR"


class ColorMode(Enum):
    """When to style the diagnostic output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when a configuration value is invalid."""

    message: str
    variable: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    color: ColorMode = ColorMode.AUTO

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> Result[Config, ConfigError]:
        raw = environ.get(COLOR_ENV_VAR, "").strip().lower()
        if not raw:
            return Ok(cls())
        try:
            color = ColorMode(raw)
        except ValueError:
            allowed = ", ".join(mode.value for mode in ColorMode)
            return Err(
                ConfigError(
                    f"Invalid {COLOR_ENV_VAR} value {raw!r} (expected one of: {allowed})",
                    variable=COLOR_ENV_VAR,
                )
            )
        return Ok(cls(color=color))


def load_config(environ: Mapping[str, str] | None = None) -> Result[Config, ConfigError]:
    """Load configuration from environment variables.

    Args:
        environ: Mapping to read from; defaults to `os.environ`.

    Returns:
        Ok(Config) on success, Err(ConfigError) on an invalid value.
    """
    return Config.from_env(os.environ if environ is None else environ)


def load_config_or_default(environ: Mapping[str, str] | None = None) -> Config:
    """Load config, or return the default config if it is invalid.

    Used on the termination path, which must not fail on its own.
    """
    result = load_config(environ)
    if isinstance(result, Ok):
        return result.value
    return Config()
