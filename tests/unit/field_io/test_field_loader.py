"""Unit tests for FieldDefinitionLoader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from simplecsv.core.field_binding import bind_fields
from simplecsv.exceptions import FieldDefinitionLoadError
from simplecsv.io.field_loader import FieldDefinitionLoader

SCHEMA_YAML = """\
fields:
  - name: id
    type: int
    required: true
  - name: active
    type: bool
    format: "Y,N"
    flags: 2
  - name: price
    type: decimal
    format: ",.2f"
"""


@pytest.fixture
def yaml_schema(tmp_path: Path) -> Path:
    path = tmp_path / "schema.yaml"
    path.write_text(SCHEMA_YAML, encoding="utf-8")
    return path


class TestLoad:
    def test_load_yaml(self, yaml_schema: Path) -> None:
        definitions = FieldDefinitionLoader.load(yaml_schema)
        assert [d.name for d in definitions] == ["id", "active", "price"]
        assert definitions[0].required is True
        assert definitions[1].format == "Y,N"
        assert definitions[1].flags == 2
        assert definitions[2].format == ",.2f"

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.json"
        path.write_text(
            json.dumps({"fields": [{"name": "on", "type": "boolean"}]}),
            encoding="utf-8",
        )
        (definition,) = FieldDefinitionLoader.load(str(path))
        assert definition.name == "on"
        assert definition.format is None
        assert definition.flags == 0

    def test_loaded_definitions_bind(self, yaml_schema: Path) -> None:
        bindings = bind_fields(FieldDefinitionLoader.load(yaml_schema))
        assert bindings["active"].parse("Y").value is True
        assert bindings["price"].to_text(None) == ""


class TestErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FieldDefinitionLoadError, match="File not found"):
            FieldDefinitionLoader.load(tmp_path / "nope.yaml")

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.toml"
        path.write_text("fields = []", encoding="utf-8")
        with pytest.raises(FieldDefinitionLoadError, match="Unsupported extension"):
            FieldDefinitionLoader.load(path)

    def test_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(FieldDefinitionLoadError, match="Cannot parse broken.json"):
            FieldDefinitionLoader.load(path)

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(FieldDefinitionLoadError, match="must be a mapping"):
            FieldDefinitionLoader.load(path)

    def test_fields_must_be_list(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.yml"
        path.write_text("fields: nope\n", encoding="utf-8")
        with pytest.raises(FieldDefinitionLoadError, match="'fields' must be a list"):
            FieldDefinitionLoader.load(path)

    def test_invalid_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.yaml"
        path.write_text("fields:\n  - name: x\n    type: int\n    flags: -1\n")
        with pytest.raises(FieldDefinitionLoadError, match=r"invalid fields\[0\]"):
            FieldDefinitionLoader.load(path)

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.yaml"
        path.write_text("fields:\n  - name: x\n    type: int\n    colour: red\n")
        with pytest.raises(FieldDefinitionLoadError):
            FieldDefinitionLoader.load(path)
