"""Test helpers module for shared test utilities.

- constants: asset ids, token list and registry payload
- factories: raw rule and configuration builders
"""

from tests.helpers.constants import (
    ARB_USDC,
    ETH_USDC,
    ETH_WBTC,
    FEE_RECIPIENT,
    POLYGON_USDC,
    SOL_USDC,
    TOKEN_LIST_PAYLOAD,
    TOKENS,
    TOKENS_BY_ID,
    UNKNOWN_ASSET,
)
from tests.helpers.factories import make_config, make_fee, make_rule

__all__ = [
    # Constants
    "ARB_USDC",
    "ETH_USDC",
    "ETH_WBTC",
    "FEE_RECIPIENT",
    "POLYGON_USDC",
    "SOL_USDC",
    "TOKENS",
    "TOKENS_BY_ID",
    "TOKEN_LIST_PAYLOAD",
    "UNKNOWN_ASSET",
    # Factories
    "make_config",
    "make_fee",
    "make_rule",
]
