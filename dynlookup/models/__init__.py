"""Lookup data model — properties and lookup tables."""

from dynlookup.models.lookup_table import LookupTable, LookupTableBuilder
from dynlookup.models.property import Property, PropertyKind

__all__ = ["LookupTable", "LookupTableBuilder", "Property", "PropertyKind"]
