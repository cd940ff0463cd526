"""Client configuration and endpoint constants.

The API key is carried as an explicit configuration value handed to the
client constructor. Nothing here reads process state unless ``from_env`` is
called.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

BASE_URL = "https://api.stockfighter.io/ob/api"

# Header the exchange reads the API key from.
AUTH_HEADER = "X-Starfighter-Authorization"

DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "STOCKFIGHTER_API_KEY"
ENV_BASE_URL = "STOCKFIGHTER_BASE_URL"
ENV_TIMEOUT = "STOCKFIGHTER_TIMEOUT"
ENV_AUTH_HEADER = "STOCKFIGHTER_AUTH_HEADER"


@dataclass(frozen=True)
class StockfighterConfig:
    """Static settings for one client instance."""

    api_key: str = ""
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    auth_header: str = AUTH_HEADER

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        # Paths are appended with a leading slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> StockfighterConfig:
        """Build a config from ``STOCKFIGHTER_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests)

        Returns:
            Config with defaults for every unset variable

        Raises:
            ValueError: If ``STOCKFIGHTER_TIMEOUT`` is not a positive number
        """
        env = os.environ if environ is None else environ
        timeout_raw = env.get(ENV_TIMEOUT)
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"Invalid {ENV_TIMEOUT}: {timeout_raw!r}") from e
        return cls(
            api_key=env.get(ENV_API_KEY, ""),
            base_url=env.get(ENV_BASE_URL) or BASE_URL,
            timeout=timeout,
            auth_header=env.get(ENV_AUTH_HEADER) or AUTH_HEADER,
        )

    def auth_headers(self) -> dict[str, str]:
        """Headers that authenticate a request; empty when no key is set."""
        if not self.api_key:
            return {}
        return {self.auth_header: self.api_key}
