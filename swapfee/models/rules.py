"""Pydantic models for the fee rule configuration document.

A configuration is a version string, a default fee and a flat, ordered
list of rules:

    {
      "version": "1.0.0",
      "default_fee": {"type": "bps", "bps": 20, "recipient": "fees.near"},
      "rules": [
        {
          "id": "usdc-swaps",
          "enabled": true,
          "priority": 200,
          "match": {"in": {"symbol": "USDC"}, "out": {"blockchain": ["arb", "!eth"]}},
          "fee": {"type": "bps", "bps": 10, "recipient": "fees.near"},
          "valid_from": "2024-01-01T00:00:00Z"
        }
      ]
    }
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, model_validator

from swapfee.constants import DEFAULT_PRIORITY
from swapfee.models.fee import FeeSpec
from swapfee.models.types import PatternField, Timestamp


class TokenMatcher(BaseModel):
    """Constraints over one side of a swap.

    An absent field leaves that attribute unconstrained; at least one field
    must be present.
    """

    asset_id: PatternField | None = Field(default=None, alias="assetId")
    blockchain: PatternField | None = None
    symbol: PatternField | None = None

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def require_identifier(self) -> "TokenMatcher":
        if self.asset_id is None and self.blockchain is None and self.symbol is None:
            raise ValueError("At least one of blockchain, symbol, or assetId must be defined")
        return self


class RuleMatch(BaseModel):
    """Origin-side (`in`) and destination-side (`out`) token matchers."""

    in_: TokenMatcher = Field(alias="in")
    out: TokenMatcher

    model_config = {"populate_by_name": True, "frozen": True}


class Rule(BaseModel):
    """A single fee rule."""

    id: StrictStr = Field(min_length=1)
    enabled: StrictBool
    priority: Annotated[StrictInt, Field(ge=0)] | None = None
    description: str | None = None
    match: RuleMatch
    fee: FeeSpec
    valid_from: Timestamp | None = None
    valid_until: Timestamp | None = None

    model_config = {"frozen": True}

    @property
    def effective_priority(self) -> int:
        """Priority used for ordering (default 100)."""
        return DEFAULT_PRIORITY if self.priority is None else self.priority

    @model_validator(mode="after")
    def check_window(self) -> "Rule":
        if (
            self.valid_from is not None
            and self.valid_until is not None
            and self.valid_from > self.valid_until
        ):
            raise ValueError("valid_from must not be later than valid_until")
        return self

    def is_active_at(self, now: datetime) -> bool:
        """True if `now` lies inside the inclusive validity window."""
        if self.valid_from is not None and now < self.valid_from:
            return False
        if self.valid_until is not None and now > self.valid_until:
            return False
        return True


class FeeConfig(BaseModel):
    """A complete fee configuration document."""

    version: StrictStr = Field(min_length=1)
    default_fee: FeeSpec
    rules: list[Rule]

    model_config = {"frozen": True}
