"""Fee configuration validation and loading.

Validation enumerates every problem in a document instead of stopping at
the first one. Structural checks come from the pydantic models; duplicate
rule ids are checked separately on the raw document so they are reported
even when other fields of the same rules are invalid.

Usage:
    result = validate_config(raw)
    if not result.valid:
        for issue in result.errors:
            print(issue.path, issue.message)

    config = parse_fee_config(raw)   # raises ConfigValidationError
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from swapfee.models.rules import FeeConfig

logger = structlog.get_logger()

# Union tags and root-model segments pydantic inserts into error locations
_INTERNAL_LOC_SEGMENTS = frozenset({"single", "split", "root"})


@dataclass(frozen=True)
class ValidationIssue:
    """A single configuration problem.

    Attributes:
        path: Location in the document, e.g. "rules[0].fee.bps"
        message: Human-readable description
    """

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a configuration document."""

    errors: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        """True if no issues were found."""
        return not self.errors


class ConfigValidationError(ValueError):
    """Raised when a fee configuration is rejected.

    Attributes:
        errors: Every issue found in the document
    """

    def __init__(self, errors: Sequence[ValidationIssue]) -> None:
        self.errors = tuple(errors)
        details = "; ".join(str(issue) for issue in self.errors)
        super().__init__(f"Invalid fee config: {details}")


def format_loc(loc: Sequence[int | str]) -> str:
    """Render a pydantic error location as a document path.

    ("rules", 0, "fee", "split", 1, "bps") -> "rules[0].fee[1].bps"
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif segment in _INTERNAL_LOC_SEGMENTS:
            continue
        elif path:
            path += f".{segment}"
        else:
            path = segment
    return path


def _issues_from_pydantic(err: ValidationError) -> list[ValidationIssue]:
    issues = []
    for detail in err.errors(include_url=False):
        message = detail["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, ") :]
        issues.append(ValidationIssue(path=format_loc(detail["loc"]), message=message))
    return issues


def _duplicate_rule_ids(raw: Mapping[str, Any]) -> list[ValidationIssue]:
    rules = raw.get("rules")
    if not isinstance(rules, list):
        return []

    issues = []
    seen: set[str] = set()
    for index, rule in enumerate(rules):
        if not isinstance(rule, Mapping):
            continue
        rule_id = rule.get("id")
        if not isinstance(rule_id, str) or not rule_id:
            continue
        if rule_id in seen:
            issues.append(
                ValidationIssue(path=f"rules[{index}].id", message=f"Duplicate rule id: {rule_id}")
            )
        seen.add(rule_id)
    return issues


def _validate(raw: Any) -> tuple[FeeConfig | None, list[ValidationIssue]]:
    if not isinstance(raw, Mapping):
        return None, [ValidationIssue(path="", message="config must be an object")]

    config: FeeConfig | None = None
    issues: list[ValidationIssue] = []
    try:
        config = FeeConfig.model_validate(raw)
    except ValidationError as err:
        issues.extend(_issues_from_pydantic(err))
    issues.extend(_duplicate_rule_ids(raw))
    return (config if not issues else None), issues


def validate_config(raw: Any) -> ValidationResult:
    """Validate a raw configuration document, collecting every issue."""
    _, issues = _validate(raw)
    return ValidationResult(errors=tuple(issues))


def parse_fee_config(raw: Any) -> FeeConfig:
    """Validate and parse a raw configuration document.

    Raises:
        ConfigValidationError: If the document has any issue
    """
    config, issues = _validate(raw)
    if config is None:
        logger.warning(
            "fee_config_invalid",
            error_count=len(issues),
            errors=[str(issue) for issue in issues],
        )
        raise ConfigValidationError(issues)
    return config


def load_fee_config(path: str | Path) -> FeeConfig:
    """Read and parse a JSON configuration file.

    Raises:
        ConfigValidationError: If the file is not valid JSON or the document
            has any issue
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path) as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as err:
            raise ConfigValidationError(
                [ValidationIssue(path="", message=f"{path} is not valid JSON: {err}")]
            ) from err

    config = parse_fee_config(raw)
    logger.info(
        "fee_config_loaded",
        path=str(path),
        version=config.version,
        rule_count=len(config.rules),
    )
    return config
