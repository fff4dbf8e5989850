"""LookupTable — an ordered set of properties bound to a host action.

The table stores host-issued identifiers (``parameter_ref``,
``action_ref``) and selected entity references without interpreting them.

Modified-state rules:

* Changing ``action_name`` or ``description`` marks the table modified.
* A property's own modified flag is *not* reflected in
  :attr:`LookupTable.is_modified`; use :meth:`any_property_modified`.
* :meth:`reset_modified` clears the table and every owned property.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from dynlookup import config
from dynlookup.models.property import Property, PropertyKind
from dynlookup.tracking import ChangeTracker
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.validator import Validator

logger = logging.getLogger(__name__)


class LookupTable(ChangeTracker):
    """Named collection of properties representing one parametric rule set."""

    _tracked_fields = ("action_name", "description")

    def __init__(
        self,
        action_name: str = "",
        description: str = "",
        parameter_ref: Any = None,
        action_ref: Any = None,
        selection: Iterable[Any] | None = None,
        properties: Iterable[Property] | None = None,
    ) -> None:
        super().__init__()
        self._action_name = action_name
        self._description = description
        self.parameter_ref = parameter_ref
        self.action_ref = action_ref
        self.selection: list[Any] | None = list(selection or [])
        self.properties: list[Property] | None = list(properties or [])
        for prop in self.properties:
            if not isinstance(prop, Property):
                raise TypeError(f"Expected Property, got {type(prop).__name__}")

    # -- fields ----------------------------------------------------------

    @property
    def action_name(self) -> str:
        return self._action_name

    @action_name.setter
    def action_name(self, value: str) -> None:
        self._assign("action_name", value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._assign("description", value)

    # -- counts and queries ------------------------------------------------

    def property_count(self) -> int:
        return len(self.properties or [])

    def selection_size(self) -> int:
        return len(self.selection or [])

    def input_properties(self) -> list[Property]:
        return [p for p in self.properties or [] if p.kind is PropertyKind.INPUT]

    def lookup_properties(self) -> list[Property]:
        return [p for p in self.properties or [] if p.kind is PropertyKind.LOOKUP]

    def find(self, name: str) -> Property | None:
        """First property named *name*, or ``None``."""
        for prop in self.properties or []:
            if prop.name == name:
                return prop
        return None

    def any_property_modified(self) -> bool:
        """True if any owned property has unsaved changes."""
        return any(p.is_modified for p in self.properties or [])

    # -- mutation ------------------------------------------------------------

    def add_property(self, prop: Property) -> None:
        """Append *prop* and mark the table modified."""
        if not isinstance(prop, Property):
            raise TypeError(f"Expected Property, got {type(prop).__name__}")
        if self.properties is None:
            self.properties = []
        self.properties.append(prop)
        self._notify("properties", None, prop)
        self._set_modified(True)

    def remove_property(self, name: str) -> bool:
        """Remove the first property named *name*; False if absent."""
        prop = self.find(name)
        if prop is None:
            return False
        self.properties.remove(prop)
        self._notify("properties", prop, None)
        self._set_modified(True)
        return True

    def add_selection(self, ref: Any) -> None:
        """Append an opaque entity reference; duplicates are kept."""
        if self.selection is None:
            self.selection = []
        self.selection.append(ref)
        self._notify("selection", None, ref)
        self._set_modified(True)

    # -- lifecycle ---------------------------------------------------------

    def clone(self) -> LookupTable:
        """Deep copy of the properties, value copy of the selection.

        External refs are shared as-is.  The clone starts unmodified.
        """
        return LookupTable(
            action_name=self._action_name,
            description=self._description,
            parameter_ref=self.parameter_ref,
            action_ref=self.action_ref,
            selection=list(self.selection or []),
            properties=[p.clone() for p in self.properties or []],
        )

    def reset_modified(self) -> None:
        """Clear the table's flag and every owned property's flag."""
        self._set_modified(False)
        for prop in self.properties or []:
            prop.reset()

    def validate(
        self,
        check_duplicate_names: bool | None = None,
        validator: Validator | None = None,
    ) -> ValidationResult:
        """Check the action name, property presence and every property.

        Property errors keep their own keys (``Name``, ``Value`` ...).
        Duplicate names are checked only when *check_duplicate_names* is
        true; ``None`` uses the ``DYNLOOKUP_TABLE_DUPLICATE_CHECK`` setting.
        """
        if check_duplicate_names is None:
            check_duplicate_names = config.load_settings().table_duplicate_check
        validator = validator or Validator.from_settings()
        return validator.validate_table(self, check_duplicate_names=check_duplicate_names)

    def summary(self) -> str:
        return (
            f"{self._action_name} (properties: {self.property_count()}, "
            f"selection: {self.selection_size()})"
        )

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return (
            f"LookupTable(action_name={self._action_name!r}, "
            f"properties={self.property_count()}, modified={self._modified})"
        )


class LookupTableBuilder:
    """Fluent construction of a clean :class:`LookupTable`.

    Usage::

        table = (
            LookupTableBuilder("A1")
            .add_input("Size", "10")
            .add_lookup("Color", "c1", display_value="Red")
            .build()
        )
    """

    def __init__(self, action_name: str = "") -> None:
        self._action_name = action_name
        self._description = ""
        self._parameter_ref: Any = None
        self._action_ref: Any = None
        self._selection: list[Any] = []
        self._properties: list[Property] = []

    def description(self, text: str) -> LookupTableBuilder:
        self._description = text
        return self

    def refs(self, parameter_ref: Any = None, action_ref: Any = None) -> LookupTableBuilder:
        self._parameter_ref = parameter_ref
        self._action_ref = action_ref
        return self

    def select(self, *refs: Any) -> LookupTableBuilder:
        self._selection.extend(refs)
        return self

    def add(self, prop: Property) -> LookupTableBuilder:
        if not isinstance(prop, Property):
            raise TypeError(f"Expected Property, got {type(prop).__name__}")
        self._properties.append(prop)
        return self

    def add_input(
        self,
        name: str,
        value: Any,
        display_name: str | None = None,
        description: str = "",
    ) -> LookupTableBuilder:
        return self.add(Property(
            name=name,
            display_name=display_name if display_name is not None else name,
            kind=PropertyKind.INPUT,
            description=description,
            value=value,
        ))

    def add_lookup(
        self,
        name: str,
        value: Any,
        display_value: Any,
        display_name: str | None = None,
        description: str = "",
    ) -> LookupTableBuilder:
        return self.add(Property(
            name=name,
            display_name=display_name if display_name is not None else name,
            kind=PropertyKind.LOOKUP,
            description=description,
            value=value,
            display_value=display_value,
        ))

    def build(self) -> LookupTable:
        """Each call returns a table with its own property copies."""
        table = LookupTable(
            action_name=self._action_name,
            description=self._description,
            parameter_ref=self._parameter_ref,
            action_ref=self._action_ref,
            selection=self._selection,
            properties=[p.clone() for p in self._properties],
        )
        logger.debug("Built %r", table)
        return table
