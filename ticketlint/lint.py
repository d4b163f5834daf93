"""Evaluate configured rules against a parsed commit.

Contains:
- RuleOutcome: Verdict of one configured rule
- LintReport: All outcomes for one commit
- lint_commit: Run every enabled rule and collect the outcomes

Reporting and exit codes are left to the host linter.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ticketlint.config import LintConfig
from ticketlint.registry import RuleRegistry, default_registry
from ticketlint.rules import RuleApplicability, RuleSeverity, Verdict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleOutcome:
    """Verdict produced by one configured rule."""

    name: str
    severity: RuleSeverity
    verdict: Verdict
    applicability: RuleApplicability = RuleApplicability.ALWAYS

    @property
    def passed(self) -> bool:
        return self.verdict.passed


@dataclass
class LintReport:
    """Outcomes of all enabled rules for a single commit."""

    outcomes: list[RuleOutcome] = field(default_factory=list)

    @property
    def errors(self) -> list[RuleOutcome]:
        return [o for o in self.outcomes if not o.passed and o.severity == RuleSeverity.ERROR]

    @property
    def warnings(self) -> list[RuleOutcome]:
        return [o for o in self.outcomes if not o.passed and o.severity == RuleSeverity.WARNING]

    @property
    def valid(self) -> bool:
        """True if no error-level rule failed."""
        return not self.errors


def lint_commit(
    commit: Any,
    config: Optional[LintConfig] = None,
    registry: Optional[RuleRegistry] = None,
) -> LintReport:
    """Evaluate all enabled rules of a configuration against a commit.

    Severity decides whether a failure is an error or a warning. Applicability
    is recorded on each outcome but not interpreted here, the same as a
    commitlint host with a rule that ignores `when`: the subject prefix rule
    requires the ticket prefix under both "always" and "never".

    Args:
        commit: The parsed commit.
        config: Lint configuration. Defaults to LintConfig().
        registry: Rule evaluators. Defaults to default_registry().

    Returns:
        LintReport with one outcome per enabled rule, in config order.

    Raises:
        UnknownRuleError: If an enabled rule has no registered evaluator.
    """
    if config is None:
        config = LintConfig()
    if registry is None:
        registry = default_registry()

    report = LintReport()
    for name, setting in config.rules.items():
        if not setting.enabled:
            logger.debug("Skipping disabled rule %s", name)
            continue

        evaluator = registry.get(name)
        verdict = evaluator(commit)
        logger.debug(
            "Rule %s (%s, %s): %s",
            name,
            setting.severity.name.lower(),
            setting.applicability.value,
            "passed" if verdict.passed else "failed",
        )
        report.outcomes.append(
            RuleOutcome(
                name=name,
                severity=setting.severity,
                verdict=verdict,
                applicability=setting.applicability,
            )
        )

    return report
