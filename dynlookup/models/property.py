"""Property — a single named input or lookup attribute of a lookup table.

Input properties are the independent variables a caller supplies; lookup
properties are the dependent output side of a rule row.  Every effective
field change marks the property modified until :meth:`Property.reset`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, Sequence

from dynlookup import config
from dynlookup.tracking import ChangeTracker
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.rules.base import is_blank
from dynlookup.validation.validator import Validator

logger = logging.getLogger(__name__)


class PropertyKind(str, Enum):
    """Which side of a lookup row a property sits on."""

    INPUT = "input"
    LOOKUP = "lookup"

    @classmethod
    def coerce(cls, value: PropertyKind | str) -> PropertyKind:
        """Accept an enum member or its name/value in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown property kind: {value!r}")

    @property
    def label(self) -> str:
        return config.KIND_LABELS[self.value]


class Property(ChangeTracker):
    """A named, typed attribute with a value and a modified flag."""

    _tracked_fields = (
        "name",
        "display_name",
        "description",
        "value",
        "display_value",
        "kind",
    )

    def __init__(
        self,
        name: str = "",
        display_name: str = "",
        kind: PropertyKind | str = PropertyKind.INPUT,
        description: str = "",
        value: Any = "",
        display_value: Any = "",
    ) -> None:
        super().__init__()
        self._name = name
        self._display_name = display_name
        self._description = description
        self._value = value
        self._display_value = display_value
        self._kind = PropertyKind.coerce(kind)

    # -- fields ----------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._assign("name", value)

    @property
    def display_name(self) -> str:
        return self._display_name

    @display_name.setter
    def display_name(self, value: str) -> None:
        self._assign("display_name", value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._assign("description", value)

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._assign("value", value)

    @property
    def display_value(self) -> Any:
        return self._display_value

    @display_value.setter
    def display_value(self, value: Any) -> None:
        self._assign("display_value", value)

    @property
    def kind(self) -> PropertyKind:
        return self._kind

    @kind.setter
    def kind(self, value: PropertyKind | str) -> None:
        self._assign("kind", PropertyKind.coerce(value))

    @property
    def is_input(self) -> bool:
        return self._kind is PropertyKind.INPUT

    @property
    def is_lookup(self) -> bool:
        return self._kind is PropertyKind.LOOKUP

    # -- lifecycle ---------------------------------------------------------

    def reset(self) -> None:
        """Clear the modified flag; no other field changes."""
        self._set_modified(False)

    reset_modified = reset

    def clone(self) -> Property:
        """Independent copy with the same values, unmodified, no observers."""
        return Property(
            name=self._name,
            display_name=self._display_name,
            kind=self._kind,
            description=self._description,
            value=self._value,
            display_value=self._display_value,
        )

    def validate(self, validator: Validator | None = None) -> ValidationResult:
        """Check this property on its own; all checks run."""
        return (validator or Validator.from_settings()).validate_property(self)

    def kind_display_name(self) -> str:
        return self._kind.label

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def create_from_names(
        names: Iterable[str],
        kind: PropertyKind | str = PropertyKind.INPUT,
    ) -> list[Property]:
        """One property per non-blank name, with name = display name = value.

        Blank names are skipped silently.
        """
        if names is None:
            raise TypeError("names must not be None")
        kind = PropertyKind.coerce(kind)
        created = [
            Property(name=n, display_name=n, kind=kind, value=n)
            for n in names
            if not is_blank(n)
        ]
        logger.debug("Created %d %s properties from names", len(created), kind.value)
        return created

    @staticmethod
    def validate_list(
        properties: Sequence[Property] | None,
        validator: Validator | None = None,
    ) -> ValidationResult:
        """Validate a standalone sequence of properties.

        An empty sequence yields a single ``Properties`` error.  Otherwise
        duplicate names are reported under ``Name`` and each item's errors
        are merged under ``Properties[<i>].<key>``.
        """
        return (validator or Validator.from_settings()).validate_property_list(properties)

    def __str__(self) -> str:
        return f"{self._display_name} ({self.kind_display_name()}) = {self._display_value}"

    def __repr__(self) -> str:
        return (
            f"Property(name={self._name!r}, kind={self._kind.value!r}, "
            f"value={self._value!r}, modified={self._modified})"
        )
