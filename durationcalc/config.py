"""Defaults for the command line, read from the environment.

A ``.env`` file in the working directory is loaded first, so the same
variables can be kept there instead of in the shell profile.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "DURATIONCALC_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _get_str(name: str, default: str = "") -> str:
    return os.getenv(ENV_PREFIX + name, default)


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {ENV_PREFIX + name}: {value!r}")


@dataclass(frozen=True, kw_only=True)
class Settings:
    compact: bool = False
    total_prefix: str = ""
    stdin_prefix: str = ""
    log_level: str = "WARNING"


def load_config() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        compact=_get_bool("COMPACT"),
        total_prefix=_get_str("TOTAL_PREFIX"),
        stdin_prefix=_get_str("STDIN_PREFIX"),
        log_level=_get_str("LOG_LEVEL", "WARNING").upper(),
    )
