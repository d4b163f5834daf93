"""Constants for ticketlint rules.

Contains:
- RuleSeverity: Configured strictness of a rule (off, warning, error)
- RuleApplicability: Whether a rule must (always) or must not (never) hold
- SUBJECT_PREFIX_RULE_NAME: Registered name of the ticket prefix rule
- JIRA_TICKET_PREFIX_PATTERN: Compiled pattern for the subject prefix
- SUBJECT_PREFIX_MESSAGE_TEMPLATE: Diagnostic shown for a rejected subject
- CONVENTIONAL_HEADER_PATTERN: Splits a commit title into type, scope and subject
"""

import re
from enum import Enum, IntEnum


class RuleSeverity(IntEnum):
    """Severity levels understood by the host linter."""

    OFF = 0
    WARNING = 1
    ERROR = 2


class RuleApplicability(Enum):
    """Applicability of a configured rule."""

    ALWAYS = "always"
    NEVER = "never"


SUBJECT_PREFIX_RULE_NAME = "subject-prefix-with-jira-ticket-id"

# Same set as ECMAScript \s: ASCII whitespace plus Unicode space separators,
# line/paragraph separators and the BOM.
SEPARATOR_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

# [ + 3-5 uppercase ASCII letters + - + ASCII digits + ] + one whitespace.
# Always applied with .match() so the prefix is anchored at position 0.
JIRA_TICKET_PREFIX_PATTERN = re.compile(rf"\[[A-Z]{{3,5}}-[0-9]+\][{SEPARATOR_WHITESPACE}]")

SUBJECT_PREFIX_MESSAGE_TEMPLATE = """The commit message's subject must be prefixed with an uppercase JIRA ticket ID.
    A correct commit message should be like: feat: [JIRA-1234] fulfill this feature
    Your subject: {subject}
    Please revise your commit message.
"""

# Base rule bundle the default configuration extends (evaluated by the host)
CONVENTIONAL_BASE_RULESET = "@commitlint/config-conventional"

# Conventional commit header: type(scope)!: subject
CONVENTIONAL_HEADER_PATTERN = re.compile(r"^([A-Za-z0-9_]*)(?:\((.*)\))?!?: (.*)$")
