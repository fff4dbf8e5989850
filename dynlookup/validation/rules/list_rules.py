"""Rules applied to an ordered sequence of properties."""

from __future__ import annotations

from collections import Counter
from typing import Any, Sequence

from dynlookup import config
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.rules.base import ValidationRule, is_blank, run_rules


class NonEmptyList(ValidationRule):
    """The sequence must hold at least one property."""

    stop_on_failure = True

    def __init__(
        self,
        key: str = config.KEY_PROPERTIES,
        message: str = config.MSG_PROPERTIES_REQUIRED,
    ) -> None:
        self.key = key
        self.message = message

    @property
    def name(self) -> str:
        return "list.non_empty"

    @property
    def description(self) -> str:
        return "Property list must not be empty."

    def check(self, target: Sequence[Any] | None) -> ValidationResult:
        result = ValidationResult()
        if not target:
            result.add_error(self.key, self.message)
        return result


class UniqueNames(ValidationRule):
    """Non-blank names must not repeat (exact string equality).

    One error per distinct duplicated name, in order of first appearance.
    """

    @property
    def name(self) -> str:
        return "list.unique_names"

    @property
    def description(self) -> str:
        return "Property names must be unique."

    def check(self, target: Sequence[Any] | None) -> ValidationResult:
        result = ValidationResult()
        names = [p.name for p in target or [] if not is_blank(p.name)]
        counts = Counter(names)
        for name, count in counts.items():
            if count > 1:
                result.add_error(config.KEY_NAME, config.MSG_DUPLICATE_NAME.format(name=name))
        return result


class IndexedItemRules(ValidationRule):
    """Run item rules on each property, prefixing keys with its position.

    ``Name`` on the third item becomes ``Properties[2].Name``.
    """

    def __init__(self, item_rules: list[ValidationRule], prefix: str = config.KEY_PROPERTIES) -> None:
        self.item_rules = item_rules
        self.prefix = prefix

    @property
    def name(self) -> str:
        return "list.items"

    @property
    def description(self) -> str:
        return "Every property passes its own rules."

    def check(self, target: Sequence[Any] | None) -> ValidationResult:
        result = ValidationResult()
        for index, item in enumerate(target or []):
            for field, message in run_rules(self.item_rules, item).items():
                result.add_error(f"{self.prefix}[{index}].{field}", message)
        return result


class ListRules:
    """Factory for the built-in property-list rule set."""

    @staticmethod
    def all_rules(item_rules: list[ValidationRule]) -> list[ValidationRule]:
        return [NonEmptyList(), UniqueNames(), IndexedItemRules(item_rules)]
