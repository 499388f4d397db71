"""Rule matching: token matchers and the priority-ordered rule selector."""

from swapfee.matching.selector import (
    RuleSelector,
    SelectedRule,
    is_rule_active,
    sort_rules_by_priority,
    utc_now,
)
from swapfee.matching.token_matcher import match_token

__all__ = [
    "RuleSelector",
    "SelectedRule",
    "is_rule_active",
    "match_token",
    "sort_rules_by_priority",
    "utc_now",
]
