"""Shared field types for fee configuration models."""

import re
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer, PlainValidator, StrictInt

from swapfee.constants import MAX_BPS
from swapfee.patterns import Pattern, parse_pattern, pattern_to_raw

NEAR_ACCOUNT_REGEX = re.compile(r"^(?:[a-z\d]+[-_])*[a-z\d]+(?:\.[a-z\d]+[-_]*[a-z\d]+)*$")
NEAR_IMPLICIT_ACCOUNT_REGEX = re.compile(r"^[a-f0-9]{64}$")


def is_valid_near_account(account: str) -> bool:
    """Check if a string is a valid NEAR account id (named or implicit).

    Args:
        account: String to validate

    Returns:
        True if valid NEAR account id
    """
    if not isinstance(account, str):
        return False
    if len(account) < 2 or len(account) > 64:
        return False
    return bool(NEAR_ACCOUNT_REGEX.match(account) or NEAR_IMPLICIT_ACCOUNT_REGEX.match(account))


def validate_account_id(value: Any) -> str:
    """Validate a fee recipient account id."""
    if not isinstance(value, str) or not value:
        raise ValueError("recipient is required and must be a string")
    if not is_valid_near_account(value):
        raise ValueError(f"recipient must be a valid NEAR account: {value!r}")
    return value


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 date or date-time into an aware UTC datetime.

    Accepts "2024-01-01", "2024-01-01T12:00:00", "2024-01-01T12:00:00Z",
    "2024-01-01T12:00:00.000Z" and explicit offsets. Values without an
    offset are taken as UTC.

    Raises:
        ValueError: If the value is not a valid date string
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as err:
            raise ValueError(f"{value!r} is not a valid date string") from err
    else:
        raise ValueError(f"{value!r} is not a valid date string")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def format_timestamp(value: datetime) -> str:
    """Format a validity bound as ISO 8601 with a Z suffix."""
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


# Fee rate in basis points; bools and floats are rejected
Bps = Annotated[StrictInt, Field(ge=0, le=MAX_BPS)]

# NEAR account receiving a fee share
AccountId = Annotated[str, PlainValidator(validate_account_id)]

# Token attribute pattern, parsed at load and rendered back on dump
PatternField = Annotated[
    Pattern,
    PlainValidator(parse_pattern),
    PlainSerializer(pattern_to_raw),
]

# Rule validity bound
Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp),
]
