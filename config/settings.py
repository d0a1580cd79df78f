from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Logging options read from the environment (and a `.env` file, if any).

    `log_level` is normalised to an upper-case stdlib level name on
    construction; unknown names raise `ValueError`.
    """

    log_level: str = "WARNING"
    log_json: bool = False

    def __post_init__(self) -> None:
        log_level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level}")
        object.__setattr__(self, "log_level", log_level)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build `Settings` from `environ`, defaulting to `os.environ`.

    A `.env` file is only consulted when reading the real process
    environment.
    """

    if environ is None:
        load_dotenv()
        environ = os.environ

    log_json = environ.get("LOG_JSON", "").strip().lower() in _TRUTHY
    return Settings(log_level=environ.get("LOG_LEVEL", "WARNING"), log_json=log_json)
