"""gitlint user rules for ticketlint.

Load the ticket prefix rule into gitlint with:

    gitlint --extra-path /path/to/site-packages/ticketlint/gitlint_rules.py

or in the repository's .gitlint file:

    [general]
    extra-path=/path/to/site-packages/ticketlint/gitlint_rules.py
"""

from typing import Optional

from gitlint.rules import CommitMessageTitle, LineRule, RuleViolation

from ticketlint.rules import (
    CONVENTIONAL_HEADER_PATTERN,
    SUBJECT_PREFIX_RULE_NAME,
    ParsedCommit,
    subject_prefix_with_jira_ticket_id,
)


def parse_title(title: str) -> ParsedCommit:
    """Split a conventional commit title into type, scope and subject.

    Args:
        title: The first line of the commit message.

    Returns:
        ParsedCommit with header set. Type, scope and subject are None when
        the title is not in `type(scope): subject` form.
    """
    match = CONVENTIONAL_HEADER_PATTERN.match(title or "")
    if not match:
        return ParsedCommit(header=title)

    commit_type, scope, subject = match.groups()
    return ParsedCommit(
        header=title,
        type=commit_type or None,
        scope=scope,
        subject=subject,
    )


class SubjectPrefixWithJiraTicketId(LineRule):
    """Require the subject after `type(scope): ` to start with `[KEY-123] `."""

    name = SUBJECT_PREFIX_RULE_NAME
    id = "JT1"
    target = CommitMessageTitle

    def validate(self, line: str, _commit) -> Optional[list[RuleViolation]]:
        verdict = subject_prefix_with_jira_ticket_id(parse_title(line))
        if verdict.passed:
            return None
        return [RuleViolation(self.id, verdict.message, line)]
