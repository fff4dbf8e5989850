"""Rules applied to a single property, independent of its siblings."""

from __future__ import annotations

from typing import Any

from dynlookup import config
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.rules.base import ValidationRule, is_blank
from dynlookup.validation.values import validate_identifier


class RequiredField(ValidationRule):
    """An attribute must hold a non-blank value."""

    def __init__(self, attribute: str, key: str, message: str) -> None:
        self.attribute = attribute
        self.key = key
        self.message = message

    @property
    def name(self) -> str:
        return f"property.required.{self.attribute}"

    @property
    def description(self) -> str:
        return f"'{self.attribute}' must not be empty."

    def check(self, target: Any) -> ValidationResult:
        result = ValidationResult()
        if is_blank(getattr(target, self.attribute, None)):
            result.add_error(self.key, self.message)
        return result


class LookupDisplayValueRequired(ValidationRule):
    """Lookup properties need a display value; input properties do not."""

    @property
    def name(self) -> str:
        return "property.lookup_display_value"

    @property
    def description(self) -> str:
        return "Lookup properties must carry a display value."

    def check(self, target: Any) -> ValidationResult:
        result = ValidationResult()
        if target.is_lookup and is_blank(target.display_value):
            result.add_error(config.KEY_DISPLAY_VALUE, config.MSG_DISPLAY_VALUE_REQUIRED)
        return result


class IdentifierName(ValidationRule):
    """Name must be identifier-shaped.  Blank names are left to RequiredField."""

    @property
    def name(self) -> str:
        return "property.identifier_name"

    @property
    def description(self) -> str:
        return "Property names use letters, digits and underscores only."

    def check(self, target: Any) -> ValidationResult:
        result = ValidationResult()
        if not is_blank(target.name) and not validate_identifier(target.name):
            result.add_error(config.KEY_NAME, config.MSG_INVALID_IDENTIFIER)
        return result


class PropertyRules:
    """Factory for the built-in property rule set."""

    @staticmethod
    def all_rules(strict_names: bool = False) -> list[ValidationRule]:
        rules: list[ValidationRule] = [
            RequiredField("name", config.KEY_NAME, config.MSG_NAME_REQUIRED),
            RequiredField(
                "display_name", config.KEY_DISPLAY_NAME, config.MSG_DISPLAY_NAME_REQUIRED
            ),
            RequiredField("value", config.KEY_VALUE, config.MSG_VALUE_REQUIRED),
            LookupDisplayValueRequired(),
        ]
        if strict_names:
            rules.append(IdentifierName())
        return rules
