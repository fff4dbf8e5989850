"""Rules applied to a whole lookup table."""

from __future__ import annotations

from typing import Any

from dynlookup import config
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.rules.base import ValidationRule, is_blank, run_rules
from dynlookup.validation.rules.list_rules import UniqueNames


class ActionNameRequired(ValidationRule):
    """A table must be bound to a named action."""

    @property
    def name(self) -> str:
        return "table.action_name"

    @property
    def description(self) -> str:
        return "Action name must not be empty."

    def check(self, target: Any) -> ValidationResult:
        result = ValidationResult()
        if is_blank(target.action_name):
            result.add_error(config.KEY_ACTION_NAME, config.MSG_ACTION_NAME_REQUIRED)
        return result


class HasProperties(ValidationRule):
    """A table needs at least one property.  Does not short-circuit."""

    @property
    def name(self) -> str:
        return "table.has_properties"

    @property
    def description(self) -> str:
        return "At least one property is required."

    def check(self, target: Any) -> ValidationResult:
        result = ValidationResult()
        if target.property_count() == 0:
            result.add_error(config.KEY_PROPERTIES, config.MSG_TABLE_PROPERTIES_REQUIRED)
        return result


class TablePropertyRules(ValidationRule):
    """Run item rules on each owned property, keeping their own keys."""

    def __init__(self, item_rules: list[ValidationRule]) -> None:
        self.item_rules = item_rules

    @property
    def name(self) -> str:
        return "table.properties"

    @property
    def description(self) -> str:
        return "Every owned property passes its own rules."

    def check(self, target: Any) -> ValidationResult:
        result = ValidationResult()
        for prop in target.properties or []:
            result.append(run_rules(self.item_rules, prop))
        return result


class TableUniqueNames(ValidationRule):
    """Duplicate-name check over a table's properties (opt-in)."""

    def __init__(self) -> None:
        self._inner = UniqueNames()

    @property
    def name(self) -> str:
        return "table.unique_names"

    @property
    def description(self) -> str:
        return "Property names within a table must be unique."

    def check(self, target: Any) -> ValidationResult:
        return self._inner.check(target.properties)


class TableRules:
    """Factory for the built-in table rule set."""

    @staticmethod
    def all_rules(item_rules: list[ValidationRule]) -> list[ValidationRule]:
        return [ActionNameRequired(), HasProperties(), TablePropertyRules(item_rules)]
