"""Tests for schema field loading."""

import json

import pytest

from dpp_csv_mapper.domain.entities.schema_field import SchemaField
from dpp_csv_mapper.infrastructure.io import DataSourceNotFoundError
from dpp_csv_mapper.infrastructure.repositories import (
    SchemaFieldLoadError,
    SchemaFieldRepository,
    load_schema_fields,
    parse_schema_fields,
)


class TestParseSchemaFields:
    def test_list_of_descriptors(self):
        fields = parse_schema_fields(
            [
                {"path": "documents.title", "isArray": True, "required": True},
                "tradeName",
            ]
        )

        assert fields == [
            SchemaField(path="documents.title", isArray=True, required=True),
            SchemaField(path="tradeName"),
        ]

    def test_object_with_fields_key(self):
        fields = parse_schema_fields({"fields": ["tradeName"]})

        assert [f.path for f in fields] == ["tradeName"]

    @pytest.mark.parametrize("data", [{"other": []}, "tradeName", None, 42])
    def test_rejects_other_shapes(self, data):
        with pytest.raises(SchemaFieldLoadError, match="must be a JSON list"):
            parse_schema_fields(data)

    def test_rejects_duplicate_paths(self):
        with pytest.raises(SchemaFieldLoadError, match="Duplicate schema field path: a"):
            parse_schema_fields(["a", {"path": "a"}])


class TestLoadSchemaFields:
    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceNotFoundError):
            load_schema_fields(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text("[")

        with pytest.raises(SchemaFieldLoadError, match="Invalid JSON"):
            load_schema_fields(path)

    def test_invalid_descriptor(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text(json.dumps([{"required": True}]))

        with pytest.raises(SchemaFieldLoadError, match="Invalid schema field"):
            load_schema_fields(path)


class TestSchemaFieldRepository:
    def test_load_fields_is_cached(self, fields_file, product_fields):
        repository = SchemaFieldRepository()

        first = repository.load_fields(fields_file)
        fields_file.write_text("[]")
        second = repository.load_fields(fields_file)

        assert first == product_fields
        assert second == product_fields

    def test_returned_list_is_a_copy(self, fields_file):
        repository = SchemaFieldRepository()

        repository.load_fields(fields_file).clear()

        assert repository.load_fields(fields_file) != []

    def test_clear_cache(self, fields_file):
        repository = SchemaFieldRepository()
        repository.load_fields(fields_file)
        fields_file.write_text('["tradeName"]')

        repository.clear_cache()

        assert repository.load_fields(fields_file) == [SchemaField(path="tradeName")]
