"""Exact fee arithmetic.

All computation uses SafeInt over Python integers:

    fee = floor(amount * bps / 10000)
    amount_after_fee = amount - fee

Floats are never involved, so 18-decimal token amounts are exact. Inputs
are checked strictly and rejected rather than coerced or clamped.
"""

from __future__ import annotations

from swapfee.constants import BPS_DENOMINATOR, MAX_BPS
from swapfee.fees.errors import InvalidAmountError, InvalidBpsError
from swapfee.fees.result import FeeBreakdown, ShareAmount
from swapfee.models.fee import FeeShare, FeeSpec, SplitFee
from swapfee.safe_int import S, SafeInt

Amount = int | str


def parse_amount(amount: Amount) -> SafeInt:
    """Validate an amount and wrap it for arithmetic.

    Args:
        amount: Non-negative int, or a string of ASCII decimal digits

    Raises:
        InvalidAmountError: For negative ints, bools, other types, and strings
            that are empty or contain anything but digits (including
            whitespace and signs)
    """
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Amount must be an integer, got bool: {amount!r}")
    if isinstance(amount, int):
        if amount < 0:
            raise InvalidAmountError(f"Amount must be non-negative: {amount}")
        return S(amount)
    if isinstance(amount, str):
        try:
            return SafeInt.from_str(amount)
        except ValueError as err:
            raise InvalidAmountError(
                f"Amount must be a string of decimal digits: {amount!r}"
            ) from err
    raise InvalidAmountError(
        f"Amount must be an int or decimal string, got {type(amount).__name__}"
    )


def validate_bps(bps: int) -> int:
    """Check a rate is an integer in [0, 10000].

    Raises:
        InvalidBpsError: For bools, floats (even integral ones), other
            types, and out-of-range values
    """
    if isinstance(bps, bool) or not isinstance(bps, int):
        raise InvalidBpsError(f"bps must be an integer, got {type(bps).__name__}: {bps!r}")
    if bps < 0 or bps > MAX_BPS:
        raise InvalidBpsError(f"bps must be between 0 and {MAX_BPS}, got {bps}")
    return bps


def _fee(amount: SafeInt, bps: int) -> SafeInt:
    return (amount * bps) // BPS_DENOMINATOR


def calculate_fee(amount: Amount, bps: int) -> str:
    """Fee owed on an amount at a basis-point rate, truncated.

    Examples:
        calculate_fee("1000000", 20) == "2000"
        calculate_fee("100", 3) == "0"

    Returns:
        The fee as a decimal string
    """
    return str(_fee(parse_amount(amount), validate_bps(bps)))


def calculate_amount_after_fee(amount: Amount, bps: int) -> str:
    """Amount remaining after deducting calculate_fee(amount, bps).

    Returns:
        The remainder as a decimal string
    """
    value = parse_amount(amount)
    return str(value - _fee(value, validate_bps(bps)))


def fee_shares(fee: FeeSpec) -> tuple[FeeShare, ...]:
    """Flatten either fee arm into its ordered shares."""
    match fee:
        case FeeShare():
            return (fee,)
        case SplitFee():
            return tuple(fee.root)
    raise TypeError(f"Unknown fee type: {type(fee).__name__}")


def total_bps(fee: FeeSpec) -> int:
    """Effective rate of a fee: its own bps, or the sum over a split."""
    match fee:
        case FeeShare(bps=bps):
            return bps
        case SplitFee():
            return sum(share.bps for share in fee.root)
    raise TypeError(f"Unknown fee type: {type(fee).__name__}")


def split_fee_amounts(amount: Amount, fee: FeeSpec) -> tuple[ShareAmount, ...]:
    """Per-recipient amounts, each computed against the full input amount."""
    value = parse_amount(amount)
    return tuple(
        ShareAmount(
            recipient=share.recipient,
            bps=share.bps,
            amount=_fee(value, validate_bps(share.bps)).value,
        )
        for share in fee_shares(fee)
    )


def compute_fee_breakdown(amount: Amount, fee: FeeSpec) -> FeeBreakdown:
    """Full fee breakdown for an amount under a single or split fee.

    Raises:
        InvalidAmountError: If the amount is malformed
        InvalidBpsError: If the summed rate of a split exceeds 10000
    """
    value = parse_amount(amount)
    rate = validate_bps(total_bps(fee))
    fee_amount = _fee(value, rate)
    return FeeBreakdown(
        amount=value.value,
        total_bps=rate,
        fee_amount=fee_amount.value,
        amount_after_fee=(value - fee_amount).value,
        shares=split_fee_amounts(value.value, fee),
    )
