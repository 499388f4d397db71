"""Fee computation result types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShareAmount:
    """Amount owed to one recipient of a (possibly split) fee.

    Attributes:
        recipient: Account receiving the share
        bps: The share's rate
        amount: floor(input_amount * bps / 10000)
    """

    recipient: str
    bps: int
    amount: int


@dataclass(frozen=True)
class FeeBreakdown:
    """Exact fee split for an input amount.

    `fee_amount` is computed once from the summed rate, so
    `fee_amount + amount_after_fee == amount` always holds. The per-share
    amounts are each computed against the full input and, because of
    truncation, may sum to less than `fee_amount`.

    Attributes:
        amount: Input amount
        total_bps: Summed rate of all shares
        fee_amount: floor(amount * total_bps / 10000)
        amount_after_fee: amount - fee_amount
        shares: Per-recipient amounts, in configuration order
    """

    amount: int
    total_bps: int
    fee_amount: int
    amount_after_fee: int
    shares: tuple[ShareAmount, ...]
