"""Priority-ordered rule selection.

Rules are sorted once, at construction, by priority descending. Python's
sort is stable, so rules of equal priority keep their configuration order;
that order is the documented tie-break. The first enabled, currently valid
rule whose `in` matcher accepts the origin token and whose `out` matcher
accepts the destination token wins.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from swapfee.matching.token_matcher import match_token
from swapfee.models.results import TokenMatchInfo
from swapfee.models.rules import Rule
from swapfee.models.token import Token

logger = structlog.get_logger()

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(UTC)


def sort_rules_by_priority(rules: Iterable[Rule]) -> tuple[Rule, ...]:
    """Sort rules by priority descending, keeping configuration order on ties."""
    return tuple(sorted(rules, key=lambda rule: -rule.effective_priority))


def is_rule_active(rule: Rule, now: datetime) -> bool:
    """True if the rule is enabled and `now` is inside its validity window."""
    return rule.enabled and rule.is_active_at(now)


@dataclass(frozen=True)
class SelectedRule:
    """A rule chosen for a token pair, with the per-side match evidence."""

    rule: Rule
    in_match: TokenMatchInfo
    out_match: TokenMatchInfo


class RuleSelector:
    """Selects the rule that applies to an origin/destination token pair.

    A selector is immutable: reloading configuration means building a new
    selector.

    Args:
        rules: Rules in configuration order
        clock: Returns the current time; read once per select() call
    """

    def __init__(self, rules: Iterable[Rule], clock: Clock | None = None) -> None:
        self._rules = sort_rules_by_priority(rules)
        self._clock = clock or utc_now

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order."""
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def select(self, origin: Token, destination: Token) -> SelectedRule | None:
        """Return the first rule matching the pair, or None.

        Args:
            origin: Resolved origin token (checked against `match.in`)
            destination: Resolved destination token (checked against `match.out`)
        """
        now = self._clock()
        for rule in self._rules:
            if not is_rule_active(rule, now):
                continue

            in_match = match_token(rule.match.in_, origin)
            if in_match is None:
                continue
            out_match = match_token(rule.match.out, destination)
            if out_match is None:
                continue

            logger.debug(
                "rule_matched",
                rule_id=rule.id,
                priority=rule.effective_priority,
                origin=origin.asset_id,
                destination=destination.asset_id,
            )
            return SelectedRule(rule=rule, in_match=in_match, out_match=out_match)

        return None
