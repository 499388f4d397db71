"""Token metadata as served by the token registry."""

from pydantic import BaseModel, Field


class Token(BaseModel):
    """Resolved token attributes.

    Tokens come from the registry only; rule matching never builds or
    modifies them. Extra fields in registry payloads (prices, contract
    addresses) are ignored.
    """

    asset_id: str = Field(alias="assetId", min_length=1)
    blockchain: str
    symbol: str
    decimals: int = Field(ge=0)

    model_config = {"populate_by_name": True, "frozen": True}
