"""Logging settings read from ``FOLLOWNET_*`` environment variables.

Keyword overrides passed to :func:`follownet.config.logging.configure_logging`
win over the environment, which wins over the defaults below.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """How the ``follownet`` loggers render and filter output.

    Attributes:
        verbose: DEBUG output for the ``follownet`` logger; WARNING otherwise.
        log_json: JSON lines instead of console output.
        log_level: Explicit level for the ``follownet`` logger; wins over
            *verbose*.
        quiet_loggers: Third-party loggers pinned to WARNING.
    """

    model_config = {"frozen": True, "env_prefix": "FOLLOWNET_"}

    verbose: bool = False
    log_json: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None
    quiet_loggers: list[str] = Field(default_factory=list)

    @property
    def app_level(self) -> int:
        """Numeric level for the ``follownet`` logger."""
        if self.log_level is not None:
            return logging.getLevelNamesMapping()[self.log_level]
        return logging.DEBUG if self.verbose else logging.WARNING
