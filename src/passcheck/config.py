"""
Configuration for passcheck.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import os
from dataclasses import dataclass, field

from passcheck import __version__
from passcheck.validation import DEFAULT_MIN_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.pwnedpasswords.com"
DEFAULT_TIMEOUT = 30.0


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        value = None
    if value is None or value < 0:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default
    return value


@dataclass
class PasscheckConfig:
    """Settings for the breach checker and its HTTP transport."""

    api_base: str = DEFAULT_API_BASE
    user_agent: str = field(default_factory=lambda: f"passcheck/{__version__}")

    # Transport timeout in seconds, 0 or None disables; the checker itself never times out
    timeout: float | None = DEFAULT_TIMEOUT

    min_length: int = DEFAULT_MIN_LENGTH

    @classmethod
    def from_env(cls) -> "PasscheckConfig":
        """Load configuration from environment variables."""
        config = cls(
            api_base=os.environ.get("PASSCHECK_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            timeout=_env_number("PASSCHECK_TIMEOUT", DEFAULT_TIMEOUT, float),
            min_length=_env_number("PASSCHECK_MIN_LENGTH", DEFAULT_MIN_LENGTH, int),
        )
        user_agent = os.environ.get("PASSCHECK_USER_AGENT")
        if user_agent:
            config.user_agent = user_agent
        return config

    def validate(self) -> list[str]:
        """Validate configuration, returning a list of problems."""
        errors = []
        if not self.api_base.startswith(("http://", "https://")):
            errors.append(f"api_base must be an http(s) URL: {self.api_base}")
        if self.timeout is not None and self.timeout < 0:
            errors.append("timeout must not be negative")
        if self.min_length < 0:
            errors.append("min_length must be non-negative")
        if not self.user_agent:
            errors.append("user_agent must not be empty")
        return errors
