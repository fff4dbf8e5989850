"""CommandRegistry — explicit name -> command mapping for host integration.

A host plugin registers its commands once at startup and dispatches by
name; there is no runtime type lookup.
"""

from __future__ import annotations

import abc
import logging
from typing import Any

from dynlookup.models.lookup_table import LookupTable
from dynlookup.validation.result import ValidationResult

logger = logging.getLogger(__name__)


class Command(abc.ABC):
    """Base class for all registered commands."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Command name as typed by the operator (e.g. 'LOOKUPVALIDATE')."""

    @property
    def description(self) -> str:
        return ""

    @abc.abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Run the command."""


class ValidateTableCommand(Command):
    """Validate a table and return the result."""

    @property
    def name(self) -> str:
        return "LOOKUPVALIDATE"

    @property
    def description(self) -> str:
        return "Validate a lookup table before saving."

    def execute(self, table: LookupTable, check_duplicate_names: bool | None = None) -> ValidationResult:
        result = table.validate(check_duplicate_names=check_duplicate_names)
        if not result.is_valid:
            logger.info(
                "Lookup table %r failed validation: %s",
                table.action_name,
                "; ".join(result.all_messages()),
            )
        return result


class ResetTableCommand(Command):
    """Mark a table and its properties as saved."""

    @property
    def name(self) -> str:
        return "LOOKUPRESET"

    @property
    def description(self) -> str:
        return "Clear modified flags after a successful save."

    def execute(self, table: LookupTable) -> LookupTable:
        table.reset_modified()
        return table


class CloneTableCommand(Command):
    """Return an independent editing copy of a table."""

    @property
    def name(self) -> str:
        return "LOOKUPCLONE"

    @property
    def description(self) -> str:
        return "Copy a lookup table for editing."

    def execute(self, table: LookupTable) -> LookupTable:
        return table.clone()


class CommandRegistry:
    """Central registry of named commands."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command, name: str | None = None) -> None:
        """Add *command* under *name* (defaults to ``command.name``)."""
        key = (name or command.name).upper()
        if key in self._commands:
            raise ValueError(f"Command already registered: {key}")
        self._commands[key] = command
        logger.info("Registered command: %s", key)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name.upper())

    def names(self) -> list[str]:
        return sorted(self._commands)

    def execute(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the command registered under *name*."""
        command = self.get(name)
        if command is None:
            raise KeyError(f"Command not found: {name}")
        logger.debug("Executing command %s", name.upper())
        return command.execute(*args, **kwargs)

    def __contains__(self, name: str) -> bool:
        return name.upper() in self._commands

    def __len__(self) -> int:
        return len(self._commands)


def default_registry() -> CommandRegistry:
    """Registry holding the built-in table commands."""
    registry = CommandRegistry()
    for command_cls in [ValidateTableCommand, ResetTableCommand, CloneTableCommand]:
        registry.register(command_cls())
    return registry
