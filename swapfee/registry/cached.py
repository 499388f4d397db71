"""HTTP-backed token registry with a TTL cache.

The registry fetches the full token list from a JSON endpoint and serves
lookups from memory. Concurrent refresh requests share one in-flight
fetch; every caller awaits the same outcome.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from swapfee.config import DEFAULT_REGISTRY_CONFIG, RegistryConfig
from swapfee.models.token import Token
from swapfee.registry.base import TokenRegistryFetchError

logger = structlog.get_logger()


class CachedTokenRegistry:
    """Token registry backed by an HTTP token list.

    Attributes:
        config: Registry settings (URL, TTL, timeout)

    Args:
        config: Registry settings. Uses DEFAULT_REGISTRY_CONFIG if not provided.
        client: Optional shared httpx.AsyncClient. If None, a client is
                created for each fetch.
        clock: Monotonic time source in seconds, injectable for tests
    """

    def __init__(
        self,
        config: RegistryConfig | None = None,
        client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or DEFAULT_REGISTRY_CONFIG
        self._client = client
        self._clock = clock
        self._tokens: dict[str, Token] = {}
        self._last_fetch: float | None = None
        self._inflight: asyncio.Task[None] | None = None

    def get_token(self, asset_id: str) -> Token | None:
        return self._tokens.get(asset_id)

    def all_tokens(self) -> list[Token]:
        return list(self._tokens.values())

    @property
    def size(self) -> int:
        return len(self._tokens)

    def is_ready(self) -> bool:
        """True once a fetch has succeeded."""
        return self._last_fetch is not None

    def is_fresh(self) -> bool:
        """True if the last successful fetch is younger than the TTL."""
        if self._last_fetch is None:
            return False
        return self._clock() - self._last_fetch < self.config.cache_ttl_seconds

    async def ensure_fresh(self) -> None:
        """Refresh the token list if it is missing or stale."""
        if not self.is_fresh():
            await self.refresh()

    async def refresh(self) -> None:
        """Fetch the token list, joining a fetch already in progress.

        Raises:
            TokenRegistryFetchError: If the fetch fails. The previous token
                list, if any, is kept.
        """
        task = self._inflight
        if task is None:
            task = asyncio.ensure_future(self._refresh())
            task.add_done_callback(self._clear_inflight)
            self._inflight = task
        await asyncio.shield(task)

    def _clear_inflight(self, task: asyncio.Task[None]) -> None:
        # Runs even when every awaiting caller was cancelled
        if self._inflight is task:
            self._inflight = None
        if not task.cancelled():
            task.exception()

    async def _refresh(self) -> None:
        payload = await self._fetch()
        tokens = self._parse(payload)
        self._tokens = tokens
        self._last_fetch = self._clock()
        logger.info(
            "token_registry_refreshed",
            url=self.config.url,
            token_count=len(tokens),
        )

    async def _fetch(self) -> Any:
        try:
            if self._client is not None:
                response = await self._client.get(self.config.url)
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                    response = await client.get(self.config.url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as err:
            logger.warning(
                "token_registry_fetch_failed",
                url=self.config.url,
                status_code=err.response.status_code,
            )
            raise TokenRegistryFetchError(
                f"Failed to fetch tokens: {err.response.status_code} "
                f"{err.response.reason_phrase}"
            ) from err
        except httpx.HTTPError as err:
            logger.warning(
                "token_registry_fetch_failed",
                url=self.config.url,
                error=str(err),
            )
            raise TokenRegistryFetchError(f"Failed to fetch tokens: {err}") from err
        except ValueError as err:
            logger.warning(
                "token_registry_invalid_json",
                url=self.config.url,
                error=str(err),
            )
            raise TokenRegistryFetchError(f"Token list is not valid JSON: {err}") from err

    def _parse(self, payload: Any) -> dict[str, Token]:
        if not isinstance(payload, list):
            raise TokenRegistryFetchError(
                f"Token list must be a JSON array, got {type(payload).__name__}"
            )

        tokens: dict[str, Token] = {}
        skipped = 0
        for entry in payload:
            try:
                token = Token.model_validate(entry)
            except ValidationError:
                skipped += 1
                continue
            tokens[token.asset_id] = token

        if skipped:
            logger.warning(
                "token_registry_entries_skipped",
                url=self.config.url,
                skipped=skipped,
                token_count=len(tokens),
            )
        return tokens
