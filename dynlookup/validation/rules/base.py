"""Abstract ValidationRule interface."""

from __future__ import annotations

import abc
from typing import Any

from dynlookup.validation.result import ValidationResult


def is_blank(value: Any) -> bool:
    """True for ``None`` and for values whose text is empty or whitespace."""
    if value is None:
        return True
    return str(value).strip() == ""


class ValidationRule(abc.ABC):
    """Base class for all validation rules.

    A rule inspects one target (a property, a property sequence or a
    table) and records failures in a :class:`ValidationResult`.
    """

    stop_on_failure: bool = False
    """When True, a failing rule ends evaluation of its rule set."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short rule identifier."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable description."""

    @abc.abstractmethod
    def check(self, target: Any) -> ValidationResult:
        """Run this rule against *target*.

        Returns a result that is valid when the rule passes.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def run_rules(rules: list[ValidationRule], target: Any) -> ValidationResult:
    """Apply *rules* in order, merging their results.

    Evaluation stops after the first failing rule that has
    ``stop_on_failure`` set.
    """
    result = ValidationResult()
    for rule in rules:
        outcome = rule.check(target)
        result.append(outcome)
        if rule.stop_on_failure and not outcome.is_valid:
            break
    return result
