"""Token matcher: applies a TokenMatcher's patterns to a resolved token."""

from swapfee.models.results import TokenMatchInfo
from swapfee.models.rules import TokenMatcher
from swapfee.models.token import Token
from swapfee.patterns import matches

# (wire name, matcher attribute, token attribute), in evaluation order
_CONSTRAINED_FIELDS = (
    ("assetId", "asset_id", "asset_id"),
    ("blockchain", "blockchain", "blockchain"),
    ("symbol", "symbol", "symbol"),
)


def match_token(matcher: TokenMatcher, token: Token) -> TokenMatchInfo | None:
    """Check a token against every constraint present in the matcher.

    Constraints are ANDed and evaluated assetId, blockchain, symbol,
    stopping at the first failure.

    Args:
        matcher: Constraints for one side of the swap
        token: Resolved token

    Returns:
        TokenMatchInfo recording the constraints that were checked, or None
        if any constraint failed
    """
    matched_by: dict[str, bool] = {}
    for wire_name, matcher_attr, token_attr in _CONSTRAINED_FIELDS:
        pattern = getattr(matcher, matcher_attr)
        if pattern is None:
            continue
        if not matches(pattern, getattr(token, token_attr)):
            return None
        matched_by[wire_name] = True
    return TokenMatchInfo(token=token, matched_by=matched_by)
