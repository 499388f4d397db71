"""Swap request and match result models."""

from pydantic import BaseModel, Field

from swapfee.models.fee import FeeSpec
from swapfee.models.rules import Rule
from swapfee.models.token import Token


class SwapRequest(BaseModel):
    """A proposed swap, identified by its two asset ids."""

    origin_asset: str = Field(alias="originAsset")
    destination_asset: str = Field(alias="destinationAsset")

    model_config = {"populate_by_name": True, "frozen": True}


class TokenMatchInfo(BaseModel):
    """Evidence of which matcher fields were checked to accept a token.

    Keys of `matched_by` are the wire names of the constrained attributes
    (`assetId`, `blockchain`, `symbol`).
    """

    token: Token
    matched_by: dict[str, bool] = Field(alias="matchedBy")

    model_config = {"populate_by_name": True, "frozen": True}


class MatchDetails(BaseModel):
    """Diagnostic detail attached to a match result."""

    origin_token: Token = Field(alias="originToken")
    destination_token: Token = Field(alias="destinationToken")
    in_: TokenMatchInfo | None = Field(default=None, alias="in")
    out: TokenMatchInfo | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class MatchResult(BaseModel):
    """Outcome of matching a swap request against the rule set."""

    matched: bool
    rule: Rule | None = None
    fee: FeeSpec
    match_details: MatchDetails | None = Field(default=None, alias="matchDetails")

    model_config = {"populate_by_name": True, "frozen": True}
