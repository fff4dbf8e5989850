"""Dynamic block lookup — properties, lookup tables and their validation."""

__version__ = "1.0.0"

from dynlookup.commands import CommandRegistry, default_registry
from dynlookup.config import Settings, configure_logging, load_settings
from dynlookup.models.lookup_table import LookupTable, LookupTableBuilder
from dynlookup.models.property import Property, PropertyKind
from dynlookup.tracking import ChangeEvent
from dynlookup.validation.report import ValidationReport
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.validator import Validator

__all__ = [
    "__version__",
    # Model
    "LookupTable",
    "LookupTableBuilder",
    "Property",
    "PropertyKind",
    "ChangeEvent",
    # Validation
    "ValidationReport",
    "ValidationResult",
    "Validator",
    # Host integration
    "CommandRegistry",
    "default_registry",
    # Configuration
    "Settings",
    "configure_logging",
    "load_settings",
]
