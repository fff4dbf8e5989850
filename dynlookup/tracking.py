"""Change notification and modified-state tracking for editable models."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class ChangeEvent:
    """A single effective mutation of a tracked object."""

    def __init__(
        self,
        source: Any,
        field: str,
        old_value: Any = None,
        new_value: Any = None,
    ) -> None:
        self.source = source
        self.field = field
        self.old_value = old_value
        self.new_value = new_value

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": type(self.source).__name__,
            "field": self.field,
            "old_value": self.old_value,
            "new_value": self.new_value,
        }

    def __repr__(self) -> str:
        return (
            f"ChangeEvent(field={self.field!r}, "
            f"old={self.old_value!r}, new={self.new_value!r})"
        )


ChangeCallback = Callable[[ChangeEvent], None]


class ChangeTracker:
    """Mixin holding a modified flag and synchronous change observers.

    Subclasses call :meth:`_assign` from their setters.  Assigning a value
    equal to the stored one is a no-op: no flag change, no notification.
    """

    _tracked_fields: tuple[str, ...] = ()

    def __init__(self) -> None:
        self._modified = False
        self._observers: list[ChangeCallback] = []

    # -- observers ---------------------------------------------------------

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register *callback*; returns a function that unsubscribes it."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self, field: str, old_value: Any, new_value: Any) -> None:
        logger.debug(
            "%s.%s changed: %r -> %r", type(self).__name__, field, old_value, new_value
        )
        if not self._observers:
            return
        event = ChangeEvent(self, field, old_value, new_value)
        for callback in list(self._observers):
            callback(event)

    # -- modified flag -----------------------------------------------------

    @property
    def is_modified(self) -> bool:
        return self._modified

    def _set_modified(self, value: bool) -> None:
        old = self._modified
        self._modified = value
        if old != value:
            self._notify("is_modified", old, value)

    def _assign(self, field: str, value: Any) -> bool:
        """Store *value* in ``_<field>``; return True if it changed."""
        attr = f"_{field}"
        old = getattr(self, attr)
        if old == value:
            return False
        setattr(self, attr, value)
        self._notify(field, old, value)
        self._set_modified(True)
        return True

    # -- generic field access ----------------------------------------------

    def _check_field(self, field: str) -> None:
        if field not in self._tracked_fields:
            raise AttributeError(
                f"{type(self).__name__} has no tracked field '{field}'"
            )

    def get(self, field: str) -> Any:
        """Return the value of a tracked field by name."""
        self._check_field(field)
        return getattr(self, field)

    def set(self, field: str, value: Any) -> bool:
        """Set a tracked field by name; returns True if the value changed."""
        self._check_field(field)
        before = getattr(self, field)
        setattr(self, field, value)
        return getattr(self, field) != before
