"""Tests for ticketlint.lint module."""

import logging

import pytest

from ticketlint.config import LintConfig
from ticketlint.exceptions import UnknownRuleError
from ticketlint.lint import LintReport, RuleOutcome, lint_commit
from ticketlint.registry import RuleRegistry, default_registry
from ticketlint.rules import (
    SUBJECT_PREFIX_RULE_NAME,
    ParsedCommit,
    RuleApplicability,
    RuleSetting,
    RuleSeverity,
    Verdict,
)


def _config(severity, applicability=RuleApplicability.ALWAYS):
    return LintConfig(rules={SUBJECT_PREFIX_RULE_NAME: RuleSetting(severity, applicability)})


class TestLintCommit:
    """Tests for lint_commit."""

    def test_valid_commit_with_defaults(self, valid_commit):
        """Test that a prefixed subject passes the default configuration."""
        report = lint_commit(valid_commit)
        assert report.valid is True
        assert report.errors == []
        assert len(report.outcomes) == 1

    def test_invalid_commit_is_error(self, invalid_commit):
        """Test that a missing prefix is an error by default."""
        report = lint_commit(invalid_commit)
        assert report.valid is False
        assert [o.name for o in report.errors] == [SUBJECT_PREFIX_RULE_NAME]
        assert "Your subject: fulfill this feature" in report.errors[0].verdict.message

    def test_warning_does_not_invalidate(self, invalid_commit):
        """Test that warning-level failures keep the report valid."""
        report = lint_commit(invalid_commit, _config(RuleSeverity.WARNING))
        assert report.valid is True
        assert len(report.warnings) == 1

    def test_off_rule_is_skipped(self, invalid_commit):
        """Test that disabled rules are not evaluated."""
        report = lint_commit(invalid_commit, _config(RuleSeverity.OFF))
        assert report.outcomes == []
        assert report.valid is True

    def test_never_keeps_rule_verdict(self, valid_commit, invalid_commit):
        """Test that "never" is recorded but does not invert the rule's verdict."""
        config = _config(RuleSeverity.ERROR, RuleApplicability.NEVER)

        assert lint_commit(valid_commit, config).valid is True

        report = lint_commit(invalid_commit, config)
        assert report.valid is False
        assert report.errors[0].applicability == RuleApplicability.NEVER
        assert "Your subject: fulfill this feature" in report.errors[0].verdict.message

    def test_outcome_records_applicability(self, valid_commit):
        """Test that outcomes carry the configured applicability."""
        report = lint_commit(valid_commit)
        assert report.outcomes[0].applicability == RuleApplicability.ALWAYS

    def test_unknown_rule_raises(self, valid_commit):
        """Test that enabled rules must be registered."""
        config = LintConfig(rules={"type-enum": RuleSetting(RuleSeverity.ERROR)})
        with pytest.raises(UnknownRuleError):
            lint_commit(valid_commit, config)

    def test_unknown_off_rule_is_ignored(self, valid_commit):
        """Test that disabled unknown rules are not looked up."""
        config = LintConfig(rules={"type-enum": RuleSetting(RuleSeverity.OFF)})
        assert lint_commit(valid_commit, config).outcomes == []

    def test_empty_registry_is_respected(self, valid_commit):
        """Test that an explicitly empty registry is not replaced by the default."""
        with pytest.raises(UnknownRuleError):
            lint_commit(valid_commit, registry=RuleRegistry())

    def test_custom_rule(self, valid_commit):
        """Test that custom registered rules are evaluated in config order."""
        registry = default_registry()
        registry.register("body-required", lambda commit: Verdict(bool(commit.body), "body is required"))
        config = LintConfig(
            rules={
                SUBJECT_PREFIX_RULE_NAME: RuleSetting(RuleSeverity.ERROR),
                "body-required": RuleSetting(RuleSeverity.WARNING),
            }
        )

        report = lint_commit(valid_commit, config, registry)

        assert [o.name for o in report.outcomes] == [SUBJECT_PREFIX_RULE_NAME, "body-required"]
        assert report.valid is True
        assert report.warnings[0].verdict.message == "body is required"

    def test_dict_commit(self):
        """Test linting a plain mapping from the host."""
        assert lint_commit({"subject": "[ABC-1] x"}).valid is True
        assert lint_commit({"subject": None}).valid is False

    def test_idempotent(self, invalid_commit):
        """Test that repeated linting gives identical reports."""
        assert lint_commit(invalid_commit) == lint_commit(invalid_commit)

    def test_logs_rule_results(self, invalid_commit, caplog):
        """Test that rule evaluation is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="ticketlint.lint"):
            lint_commit(invalid_commit)
        assert f"Rule {SUBJECT_PREFIX_RULE_NAME} (error, always): failed" in caplog.text


class TestLintReport:
    """Tests for LintReport."""

    def test_empty_report_is_valid(self):
        """Test that a report without outcomes is valid."""
        assert LintReport().valid is True

    def test_outcome_passed(self):
        """Test that RuleOutcome exposes its verdict."""
        outcome = RuleOutcome(name="r", severity=RuleSeverity.ERROR, verdict=Verdict(False, "bad"))
        assert outcome.passed is False
        assert LintReport(outcomes=[outcome]).errors == [outcome]

    def test_parsed_commit_input(self):
        """Test linting a ParsedCommit built by a host."""
        commit = ParsedCommit(type="fix", subject="[PROJ-42] handle empty input")
        assert lint_commit(commit).valid is True
