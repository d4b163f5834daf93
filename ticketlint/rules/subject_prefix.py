"""Subject prefix rule: require an uppercase JIRA ticket ID.

Accepted subject:
    [ABCD-1234] fulfill this feature

Rejected subjects:
    [abcd-1234] lowercase key
    [AB-1] key too short
    [ABCD-1234]missing separator
    fulfill this feature [ABCD-1234]
"""

from collections.abc import Mapping
from typing import Any, Optional

from ticketlint.rules.base import Rule
from ticketlint.rules.constants import (
    JIRA_TICKET_PREFIX_PATTERN,
    SUBJECT_PREFIX_MESSAGE_TEMPLATE,
    SUBJECT_PREFIX_RULE_NAME,
)
from ticketlint.rules.models import Verdict


def get_subject(commit: Any) -> Optional[Any]:
    """Read the raw `subject` field from a parsed commit.

    Args:
        commit: A ParsedCommit, a mapping, or any object with `subject`.

    Returns:
        The subject value as supplied (not type-checked), or None.
    """
    if commit is None:
        return None
    if isinstance(commit, Mapping):
        return commit.get("subject")
    return getattr(commit, "subject", None)


def has_ticket_prefix(subject: Any) -> bool:
    """Check whether a subject starts with a `[KEY-123] ` ticket prefix.

    Args:
        subject: The commit subject. Non-string values never match.

    Returns:
        True if the prefix is present at the start of the subject.
    """
    if not isinstance(subject, str) or not subject:
        return False
    return JIRA_TICKET_PREFIX_PATTERN.match(subject) is not None


def format_subject_prefix_message(subject: Any) -> str:
    """Render the diagnostic for a rejected subject."""
    return SUBJECT_PREFIX_MESSAGE_TEMPLATE.format(subject=subject)


def subject_prefix_with_jira_ticket_id(commit: Any) -> Verdict:
    """Require the commit subject to be prefixed with an uppercase ticket ID.

    Args:
        commit: The parsed commit.

    Returns:
        Verdict(True, "") when the prefix is present, otherwise a failing
        verdict whose message restates the received subject.
    """
    subject = get_subject(commit)
    if has_ticket_prefix(subject):
        return Verdict(passed=True, message="")
    return Verdict(passed=False, message=format_subject_prefix_message(subject))


class SubjectPrefixRule(Rule):
    """Rule object wrapping subject_prefix_with_jira_ticket_id."""

    name = SUBJECT_PREFIX_RULE_NAME

    def evaluate(self, commit: Any) -> Verdict:
        return subject_prefix_with_jira_ticket_id(commit)
