"""Pydantic models for fee rule configuration and matching."""

from swapfee.models.fee import FeeShare, FeeSpec, SplitFee
from swapfee.models.results import MatchDetails, MatchResult, SwapRequest, TokenMatchInfo
from swapfee.models.rules import FeeConfig, Rule, RuleMatch, TokenMatcher
from swapfee.models.token import Token
from swapfee.models.types import AccountId, Bps, PatternField, Timestamp, is_valid_near_account

__all__ = [
    # Types
    "AccountId",
    "Bps",
    "PatternField",
    "Timestamp",
    "is_valid_near_account",
    # Tokens
    "Token",
    # Fees
    "FeeShare",
    "FeeSpec",
    "SplitFee",
    # Configuration
    "FeeConfig",
    "Rule",
    "RuleMatch",
    "TokenMatcher",
    # Matching
    "SwapRequest",
    "MatchResult",
    "MatchDetails",
    "TokenMatchInfo",
]
