"""
Client configuration.

Values come from the environment and can be overridden by CLI flags:
    MASTERMIND_API_URL      Base URL of the game service
    MASTERMIND_TIMEOUT      Request timeout in seconds
    MASTERMIND_LOG_LEVEL    Logging level name (DEBUG, INFO, WARNING, ...)
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://mastermind.darkube.app"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

# Environment configuration
MASTERMIND_API_URL = os.getenv("MASTERMIND_API_URL", DEFAULT_API_URL)
MASTERMIND_TIMEOUT = os.getenv("MASTERMIND_TIMEOUT")
MASTERMIND_LOG_LEVEL = os.getenv("MASTERMIND_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def parse_timeout(value: str | float | None) -> float:
    """Parse a timeout in seconds, falling back to the default on bad input."""
    if value is None or value == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid timeout %r, using %.1fs", value, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning("Timeout must be positive, got %r; using %.1fs", value, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def parse_log_level(name: str | None) -> int:
    """Map a level name to a logging level, defaulting to WARNING."""
    level = logging.getLevelName((name or DEFAULT_LOG_LEVEL).upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True)
class ClientConfig:
    """Resolved settings for one client process."""
    base_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: int = logging.WARNING

    @classmethod
    def from_env(
        cls,
        base_url: str | None = None,
        timeout: str | float | None = None,
        verbose: bool = False,
    ) -> ClientConfig:
        """
        Build a config from the environment, letting explicit values win.

        Args:
            base_url: Overrides MASTERMIND_API_URL
            timeout: Overrides MASTERMIND_TIMEOUT
            verbose: Forces DEBUG logging

        Returns:
            ClientConfig
        """
        url = (base_url or MASTERMIND_API_URL or DEFAULT_API_URL).rstrip("/")
        return cls(
            base_url=url,
            timeout=parse_timeout(timeout if timeout is not None else MASTERMIND_TIMEOUT),
            log_level=logging.DEBUG if verbose else parse_log_level(MASTERMIND_LOG_LEVEL),
        )
