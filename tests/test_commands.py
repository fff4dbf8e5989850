"""Tests for the command registry and built-in table commands."""

from __future__ import annotations

from typing import Any

import pytest

from dynlookup.commands import (
    CloneTableCommand,
    Command,
    CommandRegistry,
    ResetTableCommand,
    ValidateTableCommand,
    default_registry,
)
from dynlookup.models.lookup_table import LookupTable, LookupTableBuilder
from dynlookup.validation.result import ValidationResult


class _EchoCommand(Command):

    @property
    def name(self) -> str:
        return "ECHO"

    def execute(self, *args: Any, **kwargs: Any) -> Any:
        return args, kwargs


@pytest.fixture
def table() -> LookupTable:
    return LookupTableBuilder("A1").add_input("Size", "10").build()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestCommandRegistry:

    def test_register_and_execute(self):
        registry = CommandRegistry()
        registry.register(_EchoCommand())
        assert "ECHO" in registry
        assert registry.execute("echo", 1, key="v") == ((1,), {"key": "v"})

    def test_register_under_alias(self):
        registry = CommandRegistry()
        registry.register(_EchoCommand(), name="say")
        assert registry.names() == ["SAY"]
        assert registry.get("Say") is not None

    def test_duplicate_registration(self):
        registry = CommandRegistry()
        registry.register(_EchoCommand())
        with pytest.raises(ValueError):
            registry.register(_EchoCommand())

    def test_unknown_command(self):
        with pytest.raises(KeyError):
            CommandRegistry().execute("MISSING")

    def test_get_unknown_returns_none(self):
        assert CommandRegistry().get("MISSING") is None

    def test_default_registry(self):
        registry = default_registry()
        assert registry.names() == ["LOOKUPCLONE", "LOOKUPRESET", "LOOKUPVALIDATE"]
        assert len(registry) == 3


# ---------------------------------------------------------------------------
# Built-in commands
# ---------------------------------------------------------------------------

class TestBuiltinCommands:

    def test_validate(self, table: LookupTable):
        result = default_registry().execute("LOOKUPVALIDATE", table)
        assert isinstance(result, ValidationResult)
        assert result.is_valid

    def test_validate_failure(self):
        result = ValidateTableCommand().execute(LookupTable())
        assert list(result.errors) == ["ActionName", "Properties"]

    def test_validate_with_duplicate_check(self, table: LookupTable):
        table.add_property(table.properties[0].clone())
        command = ValidateTableCommand()
        assert command.execute(table, check_duplicate_names=False).is_valid
        assert not command.execute(table, check_duplicate_names=True).is_valid

    def test_reset(self, table: LookupTable):
        table.action_name = "A2"
        table.properties[0].value = "20"
        returned = ResetTableCommand().execute(table)
        assert returned is table
        assert not table.is_modified
        assert not table.any_property_modified()

    def test_clone(self, table: LookupTable):
        table.action_name = "A2"
        clone = CloneTableCommand().execute(table)
        assert clone is not table
        assert clone.action_name == "A2"
        assert clone.is_modified is False

    def test_descriptions(self):
        registry = default_registry()
        for name in registry.names():
            assert registry.get(name).description
