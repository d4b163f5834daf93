"""Data models for ticketlint rules.

Contains:
- ParsedCommit: Pydantic model for a commit parsed by the host linter
- Verdict: Pass/fail result of a single rule evaluation
- RuleSetting: Severity and applicability configured for a rule name
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ticketlint.exceptions import RuleConfigError
from ticketlint.rules.constants import RuleApplicability, RuleSeverity


class ParsedCommit(BaseModel):
    """A commit message already split into conventional-commit fields.

    The host linter owns parsing; rules only read the fields they need.
    Unknown fields supplied by the host are kept but ignored.

    Attributes:
        header: The first line of the commit message.
        type: Conventional commit type (feat, fix, docs, etc.).
        scope: Scope of the change, if any.
        subject: Header text after the type/scope prefix.
        body: Message body.
        footer: Message footer.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    header: Optional[str] = None
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None


@dataclass(frozen=True)
class Verdict:
    """Result of evaluating one rule against one commit."""

    passed: bool
    message: str = ""

    def as_tuple(self) -> tuple[bool, str]:
        """Return the verdict as a (passed, message) pair."""
        return (self.passed, self.message)


@dataclass(frozen=True)
class RuleSetting:
    """Configured severity and applicability for a rule."""

    severity: RuleSeverity = RuleSeverity.ERROR
    applicability: RuleApplicability = RuleApplicability.ALWAYS

    @property
    def enabled(self) -> bool:
        return self.severity != RuleSeverity.OFF

    @classmethod
    def from_value(cls, value: Any) -> "RuleSetting":
        """Build a RuleSetting from a host config entry.

        Accepts `[level]`, `[level, "always"|"never"]` or a bare level,
        where level is 0, 1, 2 or the names "off", "warning", "error".

        Args:
            value: The raw config entry.

        Returns:
            RuleSetting instance.

        Raises:
            RuleConfigError: If the entry cannot be interpreted.
        """
        if isinstance(value, (list, tuple)):
            if not 1 <= len(value) <= 2:
                raise RuleConfigError(f"Invalid rule setting: {value!r}")
            level = value[0]
            when = value[1] if len(value) == 2 else RuleApplicability.ALWAYS.value
        else:
            level = value
            when = RuleApplicability.ALWAYS.value

        return cls(
            severity=_parse_severity(level),
            applicability=_parse_applicability(when),
        )

    def to_value(self) -> list:
        """Return the setting as a `[level, "always"|"never"]` entry."""
        return [int(self.severity), self.applicability.value]


def _parse_severity(level: Any) -> RuleSeverity:
    # bool is an int subclass; True/False are not valid levels
    if isinstance(level, bool):
        raise RuleConfigError(f"Invalid rule severity: {level!r}")
    if isinstance(level, RuleSeverity):
        return level
    if isinstance(level, int):
        try:
            return RuleSeverity(level)
        except ValueError:
            raise RuleConfigError(f"Invalid rule severity: {level!r}") from None
    if isinstance(level, str):
        try:
            return RuleSeverity[level.strip().upper()]
        except KeyError:
            raise RuleConfigError(f"Invalid rule severity: {level!r}") from None
    raise RuleConfigError(f"Invalid rule severity: {level!r}")


def _parse_applicability(when: Any) -> RuleApplicability:
    if isinstance(when, RuleApplicability):
        return when
    try:
        return RuleApplicability(when)
    except ValueError:
        raise RuleConfigError(f"Invalid rule applicability: {when!r}") from None
