"""Exception classes for ticketlint.

Contains:
- TicketLintError: Base exception for all ticketlint errors
- RuleRegistrationError: Raised for invalid rule registration or lookup
- DuplicateRuleError: Raised when a rule name is registered twice
- UnknownRuleError: Raised when a configured rule has no evaluator
- RuleConfigError: Raised when lint configuration is invalid or unreadable

Rule failures are never raised; they are returned as failing verdicts.
"""


class TicketLintError(Exception):
    """Base exception for ticketlint errors."""

    pass


class RuleRegistrationError(TicketLintError):
    """Raised when a rule cannot be registered or looked up."""

    pass


class DuplicateRuleError(RuleRegistrationError):
    """Raised when a rule name is already registered."""

    pass


class UnknownRuleError(RuleRegistrationError):
    """Raised when no evaluator is registered under a rule name."""

    pass


class RuleConfigError(TicketLintError):
    """Raised when there's an error with lint configuration."""

    pass
