"""Commit rules for ticketlint.

This package provides:
- constants: RuleSeverity, RuleApplicability, rule name and prefix pattern
- models: ParsedCommit, Verdict, RuleSetting
- base: Rule abstract base class
- subject_prefix: the JIRA ticket prefix rule
"""

# Constants
from ticketlint.rules.constants import (
    CONVENTIONAL_BASE_RULESET,
    CONVENTIONAL_HEADER_PATTERN,
    JIRA_TICKET_PREFIX_PATTERN,
    SUBJECT_PREFIX_MESSAGE_TEMPLATE,
    SUBJECT_PREFIX_RULE_NAME,
    RuleApplicability,
    RuleSeverity,
)

# Models
from ticketlint.rules.models import (
    ParsedCommit,
    RuleSetting,
    Verdict,
)

# Rules
from ticketlint.rules.base import Rule
from ticketlint.rules.subject_prefix import (
    SubjectPrefixRule,
    format_subject_prefix_message,
    get_subject,
    has_ticket_prefix,
    subject_prefix_with_jira_ticket_id,
)


__all__ = [
    # Constants
    "RuleSeverity",
    "RuleApplicability",
    "SUBJECT_PREFIX_RULE_NAME",
    "JIRA_TICKET_PREFIX_PATTERN",
    "SUBJECT_PREFIX_MESSAGE_TEMPLATE",
    "CONVENTIONAL_BASE_RULESET",
    "CONVENTIONAL_HEADER_PATTERN",
    # Models
    "ParsedCommit",
    "Verdict",
    "RuleSetting",
    # Rules
    "Rule",
    "SubjectPrefixRule",
    "subject_prefix_with_jira_ticket_id",
    # Utilities
    "get_subject",
    "has_ticket_prefix",
    "format_subject_prefix_message",
]
