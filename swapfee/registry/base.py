"""Token registry interface and errors."""

from typing import Protocol

from swapfee.models.token import Token


class RegistryNotReadyError(RuntimeError):
    """Matching was attempted before the token registry loaded any data."""


class TokenRegistryFetchError(RuntimeError):
    """The token list could not be fetched or parsed."""


class TokenRegistry(Protocol):
    """Protocol for resolving asset ids to tokens.

    Lookups must be synchronous and in-memory once the registry is ready.
    ensure_fresh() must be idempotent and safe to call concurrently.
    """

    def get_token(self, asset_id: str) -> Token | None:
        """Resolve an asset id, or return None if unknown."""
        ...

    def is_ready(self) -> bool:
        """True once token data has been loaded at least once."""
        ...

    def is_fresh(self) -> bool:
        """True if the loaded token data is within its freshness window."""
        ...

    async def ensure_fresh(self) -> None:
        """Reload token data if it is missing or stale."""
        ...
