"""Tests for JSON and CSV import/export of lookup tables."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dynlookup import serialization
from dynlookup.models.lookup_table import LookupTable, LookupTableBuilder
from dynlookup.models.property import PropertyKind


@pytest.fixture
def table() -> LookupTable:
    return (
        LookupTableBuilder("A1")
        .description("Door sizes")
        .refs(parameter_ref="P-1", action_ref=42)
        .select("E-1", "E-2")
        .add_input("Width", "900")
        .add_input("Height", "2100", display_name="Door height")
        .add_lookup("Size", "s1", display_value="Standard", description="Catalogue size")
        .build()
    )


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

class TestJson:

    def test_to_json_structure(self, table: LookupTable):
        data = json.loads(serialization.to_json(table))
        assert data["action_name"] == "A1"
        assert data["parameter_ref"] == "P-1"
        assert data["action_ref"] == 42
        assert data["selection"] == ["E-1", "E-2"]
        assert [p["name"] for p in data["properties"]] == ["Width", "Height", "Size"]
        assert data["properties"][2]["kind"] == "lookup"

    def test_from_json_restores_table(self, table: LookupTable):
        loaded = serialization.from_json(serialization.to_json(table))
        assert loaded.action_name == "A1"
        assert loaded.description == "Door sizes"
        assert [p.name for p in loaded.properties] == ["Width", "Height", "Size"]
        assert loaded.find("Height").display_name == "Door height"
        size = loaded.find("Size")
        assert size.kind is PropertyKind.LOOKUP
        assert size.display_value == "Standard"
        assert size.description == "Catalogue size"

    def test_loaded_table_is_clean(self, table: LookupTable):
        table.action_name = "A2"
        loaded = serialization.from_json(serialization.to_json(table))
        assert loaded.is_modified is False
        assert loaded.any_property_modified() is False

    def test_opaque_refs_written_as_text(self):
        class Handle:
            def __str__(self) -> str:
                return "handle-7"

        t = LookupTable(action_name="A1", parameter_ref=Handle())
        data = json.loads(serialization.to_json(t))
        assert data["parameter_ref"] == "handle-7"

    @pytest.mark.parametrize("text", ["", "   ", "{not json", "[1, 2]"])
    def test_invalid_json_raises(self, text):
        with pytest.raises(ValueError):
            serialization.from_json(text)

    def test_unknown_kind_raises(self):
        text = json.dumps({"action_name": "A1", "properties": [{"name": "x", "kind": "output"}]})
        with pytest.raises(ValueError):
            serialization.from_json(text)

    def test_save_and_load(self, table: LookupTable, tmp_path: Path):
        path = serialization.save_json(table, tmp_path / "table.json")
        assert path.is_file()
        loaded = serialization.load_json(path)
        assert loaded.property_count() == 3
        assert loaded.validate().is_valid

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            serialization.load_json(tmp_path / "missing.json")


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

class TestCsv:

    def test_export_header_and_rows(self, table: LookupTable, tmp_path: Path):
        path = serialization.export_properties_csv(table, tmp_path / "props.csv")
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == ",".join(serialization.CSV_FIELDS)
        assert len(lines) == 4
        assert lines[1].startswith("Width,Width,input,900")

    def test_round_trip_preserves_order_and_kind(self, table: LookupTable, tmp_path: Path):
        path = serialization.export_properties_csv(table, tmp_path / "props.csv")
        props = serialization.import_properties_csv(path)
        assert [p.name for p in props] == ["Width", "Height", "Size"]
        assert [p.kind for p in props] == [
            PropertyKind.INPUT,
            PropertyKind.INPUT,
            PropertyKind.LOOKUP,
        ]
        assert all(not p.is_modified for p in props)

    def test_unknown_kind_rows_skipped(self):
        text = "name,kind,value\nA,input,1\nB,output,2\nC,Lookup,3\n"
        props = serialization.properties_from_csv(text)
        assert [p.name for p in props] == ["A", "C"]

    def test_missing_columns_raise(self):
        with pytest.raises(ValueError, match="kind"):
            serialization.properties_from_csv("name,value\nA,1\n")

    def test_optional_columns_default_empty(self):
        props = serialization.properties_from_csv("name,kind,value\nA,input,1\n")
        assert props[0].display_name == ""
        assert props[0].display_value == ""

    def test_empty_table_exports_header_only(self, tmp_path: Path):
        path = serialization.export_properties_csv(LookupTable(), tmp_path / "empty.csv")
        assert path.read_text(encoding="utf-8").strip() == ",".join(serialization.CSV_FIELDS)

    def test_import_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            serialization.import_properties_csv(tmp_path / "missing.csv")
