"""Rule engine: the entry point for fee decisions on swap requests.

The RuleEngine composes configuration validation, the token registry and
the rule selector. It holds no matching logic of its own.

Usage:
    engine = RuleEngine(raw_config)          # raises ConfigValidationError
    await engine.initialize()                 # warm the token registry

    result = engine.match(SwapRequest(originAsset=a, destinationAsset=b))
    fee = calculate_fee(amount, total_bps(result.fee))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from swapfee.config import RegistryConfig
from swapfee.matching.selector import Clock, RuleSelector
from swapfee.models.fee import FeeSpec
from swapfee.models.results import MatchDetails, MatchResult, SwapRequest
from swapfee.models.rules import FeeConfig, Rule
from swapfee.registry.base import RegistryNotReadyError, TokenRegistry
from swapfee.registry.cached import CachedTokenRegistry
from swapfee.validation import ValidationResult, parse_fee_config, validate_config

logger = structlog.get_logger()


class RuleEngine:
    """Fee rule engine for cross-chain swaps.

    Args:
        fee_config: Parsed FeeConfig, or a raw configuration mapping which is
                    validated first.
        registry: Token registry used to resolve asset ids. If None, a
                  CachedTokenRegistry is built from registry_config.
        registry_config: Settings for the default registry.
        clock: Time source for rule validity windows (defaults to UTC now).

    Raises:
        ConfigValidationError: If a raw configuration has any issue; every
            issue is listed.
    """

    def __init__(
        self,
        fee_config: FeeConfig | Mapping[str, Any],
        registry: TokenRegistry | None = None,
        *,
        registry_config: RegistryConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        if isinstance(fee_config, FeeConfig):
            self._fee_config = fee_config
        else:
            self._fee_config = parse_fee_config(fee_config)

        self._registry: TokenRegistry = (
            registry if registry is not None else CachedTokenRegistry(registry_config)
        )
        self._selector = RuleSelector(self._fee_config.rules, clock=clock)

        logger.info(
            "rule_engine_created",
            version=self._fee_config.version,
            rule_count=len(self._selector),
        )

    @staticmethod
    def validate(raw: Any) -> ValidationResult:
        """Validate a raw configuration without building an engine."""
        return validate_config(raw)

    @property
    def fee_config(self) -> FeeConfig:
        return self._fee_config

    @property
    def default_fee(self) -> FeeSpec:
        return self._fee_config.default_fee

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order (priority descending, then config order)."""
        return self._selector.rules

    @property
    def registry(self) -> TokenRegistry:
        return self._registry

    @property
    def token_registry_size(self) -> int | None:
        """Number of known tokens, if the registry exposes it."""
        return getattr(self._registry, "size", None)

    async def initialize(self) -> None:
        """Force a token registry load, regardless of freshness."""
        refresh = getattr(self._registry, "refresh", None)
        if refresh is not None:
            await refresh()
        else:
            await self._registry.ensure_fresh()

    async def ensure_ready(self) -> None:
        """Load or reload the token registry if it is missing or stale."""
        await self._registry.ensure_fresh()

    def match(self, request: SwapRequest) -> MatchResult:
        """Decide the fee for a swap request.

        This is the synchronous hot path; the registry must already hold
        token data.

        Args:
            request: Origin and destination asset ids

        Returns:
            MatchResult with the matched rule's fee, or the default fee when no
            rule applies or an asset is unknown

        Raises:
            RegistryNotReadyError: If the registry has not loaded any data yet
        """
        if not self._registry.is_ready():
            raise RegistryNotReadyError(
                "Token registry is not ready; call initialize() or use match_with_refresh()"
            )

        origin = self._registry.get_token(request.origin_asset)
        destination = self._registry.get_token(request.destination_asset)

        if origin is None or destination is None:
            logger.debug(
                "asset_unresolved",
                origin_asset=request.origin_asset,
                destination_asset=request.destination_asset,
                origin_resolved=origin is not None,
                destination_resolved=destination is not None,
            )
            return MatchResult(matched=False, fee=self.default_fee)

        selected = self._selector.select(origin, destination)
        if selected is None:
            return MatchResult(
                matched=False,
                fee=self.default_fee,
                match_details=MatchDetails(origin_token=origin, destination_token=destination),
            )

        return MatchResult(
            matched=True,
            rule=selected.rule,
            fee=selected.rule.fee,
            match_details=MatchDetails(
                origin_token=origin,
                destination_token=destination,
                in_=selected.in_match,
                out=selected.out_match,
            ),
        )

    async def match_with_refresh(self, request: SwapRequest) -> MatchResult:
        """Ensure the registry is fresh, then match."""
        await self.ensure_ready()
        return self.match(request)
