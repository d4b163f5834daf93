"""Base class for ticketlint rules."""

from abc import ABC, abstractmethod
from typing import Any

from ticketlint.rules.models import Verdict


class Rule(ABC):
    """A named predicate evaluated against a parsed commit.

    Subclasses set `name` and implement `evaluate`. Rules are stateless:
    evaluating the same commit twice must give the same verdict.
    """

    name: str = ""

    @abstractmethod
    def evaluate(self, commit: Any) -> Verdict:
        """Evaluate the rule against a parsed commit.

        Args:
            commit: The parsed commit (ParsedCommit, mapping, or any object
                exposing the fields the rule reads).

        Returns:
            The rule's verdict. Failures are returned, never raised.
        """
        pass

    def __call__(self, commit: Any) -> Verdict:
        return self.evaluate(commit)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
