"""Rule registration for ticketlint.

Contains:
- RuleRegistry: Maps unique rule names to evaluators
- default_registry: Registry preloaded with the built-in rules
"""

from typing import Any, Callable, Union

from ticketlint.exceptions import DuplicateRuleError, RuleRegistrationError, UnknownRuleError
from ticketlint.rules import Rule, SubjectPrefixRule, Verdict

Evaluator = Callable[[Any], Verdict]


class RuleRegistry:
    """A set of named rule evaluators, as consumed by the host linter."""

    def __init__(self) -> None:
        self._rules: dict[str, Evaluator] = {}

    def register(self, name: str, evaluator: Union[Rule, Evaluator]) -> None:
        """Register an evaluator under a unique rule name.

        Args:
            name: The rule name (e.g., "subject-prefix-with-jira-ticket-id").
            evaluator: A Rule instance or a callable taking a parsed commit
                and returning a Verdict.

        Raises:
            RuleRegistrationError: If the name is empty or the evaluator is not callable.
            DuplicateRuleError: If the name is already registered.
        """
        if not isinstance(name, str) or not name.strip():
            raise RuleRegistrationError(f"Invalid rule name: {name!r}")
        if not callable(evaluator):
            raise RuleRegistrationError(f"Evaluator for '{name}' is not callable")
        if name in self._rules:
            raise DuplicateRuleError(f"Rule '{name}' is already registered")
        self._rules[name] = evaluator

    def register_rule(self, rule: Rule) -> None:
        """Register a Rule instance under its own name."""
        self.register(rule.name, rule)

    def get(self, name: str) -> Evaluator:
        """Look up the evaluator for a rule name.

        Raises:
            UnknownRuleError: If no evaluator is registered under the name.
        """
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(f"Unknown rule: {name}")

    def names(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def default_registry() -> RuleRegistry:
    """Get a registry with the built-in rules registered.

    Returns:
        A new RuleRegistry containing subject-prefix-with-jira-ticket-id.
    """
    registry = RuleRegistry()
    registry.register_rule(SubjectPrefixRule())
    return registry
