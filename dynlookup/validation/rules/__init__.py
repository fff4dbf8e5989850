"""Validation rules — property, property-list and table rule sets."""

from dynlookup.validation.rules.base import ValidationRule, is_blank, run_rules
from dynlookup.validation.rules.list_rules import ListRules, UniqueNames
from dynlookup.validation.rules.property_rules import PropertyRules
from dynlookup.validation.rules.table_rules import TableRules, TableUniqueNames

__all__ = [
    "ValidationRule",
    "ListRules",
    "PropertyRules",
    "TableRules",
    "TableUniqueNames",
    "UniqueNames",
    "is_blank",
    "run_rules",
]
