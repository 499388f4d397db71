"""Fee calculation module.

Pure, exact arithmetic for turning a basis-point rate into fee amounts.

Usage:
    from swapfee.fees import calculate_fee, calculate_amount_after_fee, total_bps

    rate = total_bps(result.fee)
    fee = calculate_fee("1000000", rate)               # "2000" at 20 bps
    remainder = calculate_amount_after_fee("1000000", rate)

For split fees:
    from swapfee.fees import compute_fee_breakdown

    breakdown = compute_fee_breakdown(amount, result.fee)
    for share in breakdown.shares:
        pay(share.recipient, share.amount)
"""

from swapfee.fees.calculator import (
    calculate_amount_after_fee,
    calculate_fee,
    compute_fee_breakdown,
    fee_shares,
    parse_amount,
    split_fee_amounts,
    total_bps,
    validate_bps,
)
from swapfee.fees.errors import FeeInputError, InvalidAmountError, InvalidBpsError
from swapfee.fees.result import FeeBreakdown, ShareAmount

__all__ = [
    # Calculator
    "calculate_fee",
    "calculate_amount_after_fee",
    "compute_fee_breakdown",
    "fee_shares",
    "parse_amount",
    "split_fee_amounts",
    "total_bps",
    "validate_bps",
    # Errors
    "FeeInputError",
    "InvalidAmountError",
    "InvalidBpsError",
    # Results
    "FeeBreakdown",
    "ShareAmount",
]
