"""Configuration management for minds-mcp.

Handles the Minds API endpoint, the bearer token, and log verbosity.
"""

from dataclasses import dataclass
from typing import Optional
import os


DEFAULT_BASE_URL = "https://mdb.ai"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class MindsConfig:
    """Runtime configuration for minds-mcp.

    Configuration precedence (highest to lowest):
    1. CLI flags (--base-url, --api-key, --log-level)
    2. Environment variables (MINDS_BASE_URL, MINDS_API_KEY, MINDS_LOG_LEVEL)
    3. Defaults
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "MindsConfig":
        """Create config from explicit overrides and the environment.

        Args:
            base_url: Explicit API base URL (highest precedence)
            api_key: Explicit API token
            log_level: Explicit log level name

        Returns:
            Configured MindsConfig instance

        Raises:
            ValueError: If the log level is not a known level name
        """
        resolved_url = base_url or os.environ.get("MINDS_BASE_URL") or DEFAULT_BASE_URL
        resolved_key = api_key if api_key is not None else os.environ.get("MINDS_API_KEY", "")
        resolved_level = (
            log_level or os.environ.get("MINDS_LOG_LEVEL") or DEFAULT_LOG_LEVEL
        ).upper()

        if resolved_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {resolved_level}. "
                f"Use one of: {', '.join(LOG_LEVELS)}"
            )

        return cls(
            base_url=resolved_url.rstrip("/"),
            api_key=resolved_key,
            log_level=resolved_level,
        )

    @property
    def has_api_key(self) -> bool:
        """Check if an API token is configured."""
        return bool(self.api_key)

    @property
    def masked_api_key(self) -> str:
        """The API token with all but its last four characters hidden."""
        if not self.api_key:
            return ""
        if len(self.api_key) <= 4:
            return "*" * len(self.api_key)
        return "*" * (len(self.api_key) - 4) + self.api_key[-4:]
