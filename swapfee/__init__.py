"""Swap fee rule engine.

Decides which fee applies to a cross-chain swap from a versioned set of
matching rules, and computes exact fee amounts.
"""

from swapfee.engine import RuleEngine
from swapfee.fees import calculate_amount_after_fee, calculate_fee, total_bps
from swapfee.models import FeeConfig, MatchResult, SwapRequest, Token
from swapfee.validation import ConfigValidationError, validate_config

__version__ = "0.1.0"
__all__ = [
    "RuleEngine",
    "ConfigValidationError",
    "FeeConfig",
    "MatchResult",
    "SwapRequest",
    "Token",
    "calculate_fee",
    "calculate_amount_after_fee",
    "total_bps",
    "validate_config",
    "__version__",
]
