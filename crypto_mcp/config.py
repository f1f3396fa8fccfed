"""
Environment-driven settings for the crypto MCP server.

Values are read from the process environment, with a local .env file
loaded first when present.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from crypto_mcp.errors import ConfigError


DEFAULT_API_URL = "https://api.coingecko.com/api/v3"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


def parse_timeout(value: str | None, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigError(f"COINGECKO_TIMEOUT must be a number, got {value!r}") from None
    if timeout <= 0:
        raise ConfigError(f"COINGECKO_TIMEOUT must be positive, got {value!r}")
    return timeout


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env() -> "Settings":
        # load environment variables from .env file
        load_dotenv()

        return Settings(
            api_url=os.getenv("COINGECKO_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=parse_timeout(os.getenv("COINGECKO_TIMEOUT"), DEFAULT_TIMEOUT),
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
