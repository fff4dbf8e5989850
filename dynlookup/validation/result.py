"""ValidationResult — field-keyed accumulator of validation error messages."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping


class ValidationResult:
    """Collects error messages keyed by field name.

    Keys keep first-insertion order and each key's messages keep the order
    in which they were added.  A result with no keys is valid.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    @property
    def is_valid(self) -> bool:
        return len(self._errors) == 0

    @property
    def errors(self) -> Mapping[str, list[str]]:
        """Read-only view of the field -> messages mapping."""
        return MappingProxyType(self._errors)

    @property
    def error_count(self) -> int:
        """Total number of messages across all fields."""
        return sum(len(msgs) for msgs in self._errors.values())

    def add_error(self, field: str, message: str) -> None:
        """Append *message* to the list for *field*."""
        self._errors.setdefault(field, []).append(message)

    def append(self, other: ValidationResult) -> None:
        """Merge every (field, message) pair of *other* into this result."""
        for field, message in other.items():
            self.add_error(field, message)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (field, message) pairs in mapping-then-list order."""
        for field, messages in self._errors.items():
            for message in messages:
                yield field, message

    def all_messages(self) -> list[str]:
        """Flatten to ``"field: message"`` strings."""
        return [f"{field}: {message}" for field, message in self.items()]

    def messages_for(self, field: str) -> list[str]:
        return list(self._errors.get(field, []))

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": {k: list(v) for k, v in self._errors.items()},
        }

    def __repr__(self) -> str:
        return f"ValidationResult(is_valid={self.is_valid}, errors={self.error_count})"
