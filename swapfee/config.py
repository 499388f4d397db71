"""Runtime settings for the token registry and the HTTP service."""

import os
from dataclasses import dataclass

from swapfee.constants import (
    DEFAULT_TOKEN_CACHE_TTL_SECONDS,
    DEFAULT_TOKEN_REGISTRY_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_REGISTRY_URL,
)


@dataclass(frozen=True)
class RegistryConfig:
    """Settings for the HTTP-backed token registry.

    Attributes:
        url: Endpoint returning a JSON array of tokens
        cache_ttl_seconds: How long a fetched token list stays fresh
        timeout_seconds: HTTP timeout for a single fetch
    """

    url: str = DEFAULT_TOKEN_REGISTRY_URL
    cache_ttl_seconds: float = DEFAULT_TOKEN_CACHE_TTL_SECONDS
    timeout_seconds: float = DEFAULT_TOKEN_REGISTRY_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Build from SWAPFEE_TOKEN_* environment variables, falling back to defaults."""
        return cls(
            url=os.environ.get("SWAPFEE_TOKEN_REGISTRY_URL", DEFAULT_TOKEN_REGISTRY_URL),
            cache_ttl_seconds=float(
                os.environ.get(
                    "SWAPFEE_TOKEN_CACHE_TTL_SECONDS", str(DEFAULT_TOKEN_CACHE_TTL_SECONDS)
                )
            ),
            timeout_seconds=float(
                os.environ.get(
                    "SWAPFEE_TOKEN_REGISTRY_TIMEOUT_SECONDS",
                    str(DEFAULT_TOKEN_REGISTRY_TIMEOUT_SECONDS),
                )
            ),
        )


@dataclass(frozen=True)
class ServiceConfig:
    """Settings for the HTTP service.

    Attributes:
        host: Interface to bind
        port: Port to bind
        debug: Enable reload mode
        config_path: Fee configuration JSON file, if any
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    config_path: str | None = None

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Build from SWAPFEE_* environment variables, falling back to defaults."""
        return cls(
            host=os.environ.get("SWAPFEE_HOST", "0.0.0.0"),
            port=int(os.environ.get("SWAPFEE_PORT", "8000")),
            debug=os.environ.get("SWAPFEE_DEBUG", "false").lower() in ("true", "1", "yes"),
            config_path=os.environ.get("SWAPFEE_CONFIG_PATH") or None,
        )


# Default configuration instance
DEFAULT_REGISTRY_CONFIG = RegistryConfig()
