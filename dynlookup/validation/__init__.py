"""Validation engine for lookup properties and tables.

Field-keyed error accumulation, pluggable rule sets and typed-value checks.
"""

from dynlookup.validation.report import ValidationReport
from dynlookup.validation.result import ValidationResult
from dynlookup.validation.validator import Validator

__all__ = ["ValidationReport", "ValidationResult", "Validator"]
