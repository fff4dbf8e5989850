"""Validator — main entry point for property and lookup-table validation.

Usage::

    from dynlookup.validation import Validator

    v = Validator()
    result = v.validate_table(table)
    if not result.is_valid:
        print(result.all_messages())
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from dynlookup import config
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.rules.base import ValidationRule, is_blank, run_rules
from dynlookup.validation.rules.list_rules import ListRules
from dynlookup.validation.rules.property_rules import PropertyRules
from dynlookup.validation.rules.table_rules import TableRules, TableUniqueNames

logger = logging.getLogger(__name__)

RULE_SETS = ("property", "list", "table")


class Validator:
    """Validation engine with one ordered rule set per call site.

    * ``property`` rules check a single property.
    * ``list`` rules check a standalone property sequence; item errors
      are re-keyed ``Properties[<i>].<key>``.
    * ``table`` rules check a lookup table; item errors keep their keys
      and duplicate names are only checked when requested.

    Additional rules can be registered via :meth:`add_rule`.
    """

    def __init__(self, strict_names: bool = False) -> None:
        self.property_rules: list[ValidationRule] = PropertyRules.all_rules(strict_names)
        self.list_rules: list[ValidationRule] = ListRules.all_rules(self.property_rules)
        self.table_rules: list[ValidationRule] = TableRules.all_rules(self.property_rules)

    @classmethod
    def from_settings(cls, settings: config.Settings | None = None) -> Validator:
        settings = settings or config.load_settings()
        return cls(strict_names=settings.strict_names)

    def add_rule(self, rule_set: str, rule: ValidationRule) -> None:
        """Append *rule* to the ``property``, ``list`` or ``table`` rule set.

        Property rules are shared, so they also apply to list items and
        table properties.
        """
        if rule_set not in RULE_SETS:
            raise ValueError(f"Unknown rule set '{rule_set}', expected one of {RULE_SETS}")
        getattr(self, f"{rule_set}_rules").append(rule)
        logger.debug("Added rule %s to %s rules", rule.name, rule_set)

    def validate_property(self, prop: Any) -> ValidationResult:
        """All property rules run; a property can report several errors."""
        if prop is None:
            raise TypeError("prop must not be None")
        return run_rules(self.property_rules, prop)

    def validate_property_list(self, properties: Sequence[Any] | None) -> ValidationResult:
        """Validate a standalone sequence: non-empty, unique names, items."""
        result = run_rules(self.list_rules, properties)
        logger.debug(
            "Validated %d properties: %d errors",
            len(properties or []),
            result.error_count,
        )
        return result

    def validate_table(
        self,
        table: Any,
        check_duplicate_names: bool = False,
    ) -> ValidationResult:
        """Validate a lookup table.

        Parameters
        ----------
        table:
            The table to check.
        check_duplicate_names:
            Also reject repeated property names within the table.
        """
        if table is None:
            raise TypeError("table must not be None")
        rules = list(self.table_rules)
        if check_duplicate_names:
            rules.append(TableUniqueNames())
        result = run_rules(rules, table)
        logger.debug(
            "Validated table %r: %d errors",
            table.action_name,
            result.error_count,
        )
        return result

    def validate_lookup_table_data(
        self,
        input_properties: Sequence[Any] | None,
        lookup_properties: Sequence[Any] | None,
    ) -> ValidationResult:
        """Check an input/lookup column split before it is written out.

        Both sides must be non-empty and no name may appear twice across
        the combined columns.
        """
        result = ValidationResult()
        if not input_properties:
            result.add_error("InputProperties", "Input property list must not be empty")
        if not lookup_properties:
            result.add_error("LookupProperties", "Lookup property list must not be empty")

        seen: dict[str, int] = {}
        for prop in list(input_properties or []) + list(lookup_properties or []):
            if not is_blank(prop.name):
                seen[prop.name] = seen.get(prop.name, 0) + 1
        duplicates = [name for name, count in seen.items() if count > 1]
        if duplicates:
            result.add_error(
                config.KEY_NAME,
                f"Duplicate property names: {', '.join(duplicates)}",
            )
        return result
