"""
Service configuration loaded from the environment.
"""
import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Defaults
HASH_DELAY_SECONDS = 5
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS = 30


def _env_number(name: str, default, cast=int):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid value for {name}: {raw!r}")
        return default
    if value < 0:
        logger.warning(f"Ignoring negative value for {name}: {raw!r}")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the hash service."""
    hash_delay_seconds: float = HASH_DELAY_SECONDS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    shutdown_timeout_seconds: int = GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from HASH_SERVER_* environment variables.

        Missing or malformed values fall back to the defaults.
        """
        return cls(
            hash_delay_seconds=_env_number("HASH_SERVER_DELAY_SECONDS", HASH_DELAY_SECONDS, float),
            host=os.getenv("HASH_SERVER_HOST", DEFAULT_HOST),
            port=_env_number("HASH_SERVER_PORT", DEFAULT_PORT),
            shutdown_timeout_seconds=_env_number(
                "HASH_SERVER_SHUTDOWN_TIMEOUT", GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS
            ),
        )
