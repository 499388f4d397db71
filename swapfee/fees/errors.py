"""Fee calculator input errors."""


class FeeInputError(ValueError):
    """Base class for invalid fee calculator input."""


class InvalidAmountError(FeeInputError):
    """Amount is not a non-negative integer or decimal-digit string."""


class InvalidBpsError(FeeInputError):
    """Rate is not an integer basis-point value in [0, 10000]."""
