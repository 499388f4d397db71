"""Fee models.

A fee is either a single recipient share or a split across several
recipients. The two arms are distinguished by input shape (object vs
list) and consumers are expected to handle both explicitly.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, RootModel, Tag

from swapfee.models.types import AccountId, Bps


class FeeShare(BaseModel):
    """A fee rate paid to one recipient."""

    type: Literal["bps"] = "bps"
    bps: Bps
    recipient: AccountId

    model_config = {"frozen": True}


class SplitFee(RootModel[list[FeeShare]]):
    """A non-empty, ordered list of fee shares.

    The effective rate is the sum of the member rates; each member's amount
    is computed against the full input amount.
    """

    root: list[FeeShare] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    def __iter__(self):  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


def _fee_shape(value: Any) -> str:
    if isinstance(value, list | tuple | SplitFee):
        return "split"
    return "single"


FeeSpec = Annotated[
    Union[
        Annotated[FeeShare, Tag("single")],
        Annotated[SplitFee, Tag("split")],
    ],
    Discriminator(_fee_shape),
]
