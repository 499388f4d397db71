"""Tests for fee configuration validation."""

import json

import pytest

from swapfee.models import FeeShare, SplitFee
from swapfee.patterns import AnyOf, Literal, Negated
from swapfee.validation import (
    ConfigValidationError,
    ValidationIssue,
    format_loc,
    load_fee_config,
    parse_fee_config,
    validate_config,
)
from tests.helpers import make_config, make_fee, make_rule


def paths(raw) -> list[str]:
    return [issue.path for issue in validate_config(raw).errors]


def issue_at(raw, path: str) -> ValidationIssue:
    for issue in validate_config(raw).errors:
        if issue.path == path:
            return issue
    raise AssertionError(f"no issue at {path}: {paths(raw)}")


class TestValidConfigs:
    """Configurations that must be accepted."""

    def test_minimal(self):
        result = validate_config(make_config())
        assert result.valid
        assert result.errors == ()

    def test_with_rules(self):
        config = make_config(
            rules=[
                make_rule("usdc", priority=150, description="USDC swaps"),
                make_rule("arb", in_={"blockchain": ["arb", "!eth"]}, out={"assetId": "*"}),
            ]
        )
        assert validate_config(config).valid

    def test_type_defaults_to_bps(self):
        config = make_config(default_fee={"bps": 20, "recipient": "fees.near"})
        assert validate_config(config).valid

    def test_max_bps(self):
        assert validate_config(make_config(default_bps=10_000)).valid

    def test_fee_array(self):
        config = make_config(
            default_fee=[make_fee(10, "a.near"), make_fee(5, "b.near")],
            rules=[make_rule(fee=[make_fee(3)])],
        )
        assert validate_config(config).valid

    def test_asset_id_array(self):
        config = make_config(rules=[make_rule(in_={"assetId": ["a.near", "b.near"]})])
        assert validate_config(config).valid

    @pytest.mark.parametrize(
        "recipient",
        [
            "fees.near",
            "alice.near",
            "my-account.near",
            "sub.account.near",
            "a_b.testnet",
            "ab",
            "a" * 64,
            "0123456789abcdef" * 4,
        ],
    )
    def test_near_accounts(self, recipient):
        assert validate_config(make_config(default_fee=make_fee(20, recipient))).valid

    @pytest.mark.parametrize(
        "timestamp",
        [
            "2024-01-01",
            "2024-01-01T12:00:00",
            "2024-01-01T12:00:00Z",
            "2024-01-01T12:00:00.000Z",
            "2024-01-01T12:00:00+02:00",
        ],
    )
    def test_timestamps(self, timestamp):
        config = make_config(rules=[make_rule(valid_from=timestamp)])
        assert validate_config(config).valid


class TestTopLevel:
    """Top-level document checks."""

    def test_not_an_object(self):
        result = validate_config(["not", "a", "config"])
        assert not result.valid

    def test_requires_version(self):
        config = make_config()
        del config["version"]
        assert "version" in paths(config)

    def test_version_must_be_string(self):
        assert "version" in paths(make_config(version=1))  # type: ignore[arg-type]

    def test_requires_default_fee(self):
        config = make_config()
        del config["default_fee"]
        assert "default_fee" in paths(config)

    def test_rules_must_be_array(self):
        config = make_config()
        config["rules"] = {"id": "x"}
        assert "rules" in paths(config)


class TestFees:
    """Fee checks for default and rule fees."""

    def test_negative_bps(self):
        assert "default_fee.bps" in paths(make_config(default_bps=-1))

    def test_bps_over_max(self):
        issue = issue_at(make_config(default_bps=10_001), "default_fee.bps")
        assert "10000" in issue.message

    def test_bps_must_be_integer(self):
        config = make_config(default_fee={"type": "bps", "bps": 2.5, "recipient": "fees.near"})
        assert "default_fee.bps" in paths(config)

    def test_rule_bps_over_max(self):
        assert "rules[0].fee.bps" in paths(make_config(rules=[make_rule(bps=10_001)]))

    def test_wrong_type(self):
        config = make_config(default_fee={"type": "flat", "bps": 20, "recipient": "fees.near"})
        assert "default_fee.type" in paths(config)

    def test_requires_recipient(self):
        config = make_config(default_fee={"type": "bps", "bps": 20})
        assert "default_fee.recipient" in paths(config)

    @pytest.mark.parametrize(
        "recipient", ["a", "UPPER.near", "has space.near", "-lead.near", "a" * 65, "bad..near"]
    )
    def test_invalid_recipient(self, recipient):
        issue = issue_at(make_config(default_fee=make_fee(20, recipient)), "default_fee.recipient")
        assert "NEAR account" in issue.message

    def test_empty_fee_array(self):
        assert "default_fee" in paths(make_config(default_fee=[]))

    def test_fee_array_members_validated_independently(self):
        config = make_config(
            default_fee=[make_fee(-1, "a.near"), make_fee(5, "b.near"), make_fee(5, "X")]
        )
        result_paths = paths(config)
        assert "default_fee[0].bps" in result_paths
        assert "default_fee[2].recipient" in result_paths
        assert not any(p.startswith("default_fee[1]") for p in result_paths)

    def test_rule_requires_fee(self):
        rule = make_rule()
        del rule["fee"]
        assert "rules[0].fee" in paths(make_config(rules=[rule]))


class TestRules:
    """Per-rule checks."""

    def test_requires_id(self):
        rule = make_rule()
        del rule["id"]
        assert "rules[0].id" in paths(make_config(rules=[rule]))

    def test_empty_id(self):
        assert "rules[0].id" in paths(make_config(rules=[make_rule("")]))

    def test_requires_enabled(self):
        rule = make_rule()
        del rule["enabled"]
        assert "rules[0].enabled" in paths(make_config(rules=[rule]))

    def test_enabled_must_be_boolean(self):
        rule = make_rule()
        rule["enabled"] = "yes"
        assert "rules[0].enabled" in paths(make_config(rules=[rule]))

    def test_negative_priority(self):
        assert "rules[1].priority" in paths(
            make_config(rules=[make_rule("a"), make_rule("b", priority=-1)])
        )

    def test_requires_match(self):
        rule = make_rule()
        del rule["match"]
        assert "rules[0].match" in paths(make_config(rules=[rule]))

    def test_requires_match_out(self):
        rule = make_rule()
        del rule["match"]["out"]
        assert "rules[0].match.out" in paths(make_config(rules=[rule]))

    def test_matcher_needs_an_identifier(self):
        issue = issue_at(make_config(rules=[make_rule(in_={})]), "rules[0].match.in")
        assert "At least one of blockchain, symbol, or assetId" in issue.message

    def test_out_matcher_needs_an_identifier(self):
        assert "rules[0].match.out" in paths(make_config(rules=[make_rule(out={})]))

    @pytest.mark.parametrize("field", ["blockchain", "symbol", "assetId"])
    def test_empty_pattern_array(self, field):
        config = make_config(rules=[make_rule(in_={field: []})])
        assert f"rules[0].match.in.{field}" in paths(config)

    def test_empty_string_in_pattern_array(self):
        config = make_config(rules=[make_rule(in_={"blockchain": ["eth", ""]})])
        assert "rules[0].match.in.blockchain" in paths(config)

    def test_invalid_valid_from(self):
        config = make_config(rules=[make_rule(valid_from="not-a-valid-date")])
        issue = issue_at(config, "rules[0].valid_from")
        assert "not a valid date string" in issue.message

    def test_invalid_valid_until(self):
        config = make_config(rules=[make_rule(valid_until="garbage-date")])
        issue = issue_at(config, "rules[0].valid_until")
        assert "not a valid date string" in issue.message

    def test_inverted_window(self):
        config = make_config(
            rules=[make_rule(valid_from="2024-12-31", valid_until="2024-01-01")]
        )
        assert "rules[0]" in paths(config)

    def test_duplicate_ids(self):
        config = make_config(rules=[make_rule("dup"), make_rule("other"), make_rule("dup")])
        issue = issue_at(config, "rules[2].id")
        assert issue.message == "Duplicate rule id: dup"


class TestAggregation:
    """Every violation is reported, not just the first."""

    def test_collects_all_issues(self):
        config = {
            "default_fee": {"type": "bps", "bps": 20000, "recipient": "X"},
            "rules": [
                make_rule("dup", in_={}),
                make_rule("dup", bps=-5, valid_from="nope"),
            ],
        }
        result_paths = paths(config)
        for expected in [
            "version",
            "default_fee.bps",
            "default_fee.recipient",
            "rules[0].match.in",
            "rules[1].fee.bps",
            "rules[1].valid_from",
            "rules[1].id",
        ]:
            assert expected in result_paths

    def test_parse_raises_with_every_issue(self):
        config = make_config(default_bps=-1, rules=[make_rule(in_={})])
        with pytest.raises(ConfigValidationError, match="Invalid fee config") as exc_info:
            parse_fee_config(config)
        assert {issue.path for issue in exc_info.value.errors} == {
            "default_fee.bps",
            "rules[0].match.in",
        }
        assert "default_fee.bps" in str(exc_info.value)
        assert "rules[0].match.in" in str(exc_info.value)


class TestParseFeeConfig:
    """Parsed configurations carry typed values."""

    def test_patterns_and_fees_parsed(self):
        config = parse_fee_config(
            make_config(
                default_fee=[make_fee(10, "a.near"), make_fee(5, "b.near")],
                rules=[make_rule(in_={"blockchain": ["arb", "!eth"]}, out={"symbol": "USDC"})],
            )
        )
        assert isinstance(config.default_fee, SplitFee)
        assert isinstance(config.rules[0].fee, FeeShare)
        assert config.rules[0].match.in_.blockchain == AnyOf((Literal("arb"), Negated("eth")))
        assert config.rules[0].match.out.symbol == Literal("USDC")

    def test_round_trips_to_configuration_form(self):
        raw = make_config(
            rules=[make_rule(in_={"blockchain": ["arb", "!eth"]}, valid_from="2024-01-01T00:00:00Z")]
        )
        dumped = parse_fee_config(raw).model_dump(by_alias=True, exclude_none=True, mode="json")
        assert dumped["rules"][0]["match"]["in"] == {"blockchain": ["arb", "!eth"]}
        assert dumped["rules"][0]["valid_from"] == "2024-01-01T00:00:00Z"


class TestLoadFeeConfig:
    """Tests for loading configuration files."""

    def test_loads_json(self, tmp_path):
        path = tmp_path / "fees.json"
        path.write_text(json.dumps(make_config(rules=[make_rule()])))
        config = load_fee_config(path)
        assert config.version == "1.0.0"
        assert len(config.rules) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "fees.json"
        path.write_text("{not json")
        with pytest.raises(ConfigValidationError, match="not valid JSON"):
            load_fee_config(path)


class TestFormatLoc:
    """Tests for pydantic location rendering."""

    def test_indices_and_union_tags(self):
        assert format_loc(("rules", 0, "fee", "split", 1, "bps")) == "rules[0].fee[1].bps"
        assert format_loc(("default_fee", "single", "recipient")) == "default_fee.recipient"
        assert format_loc(()) == ""
