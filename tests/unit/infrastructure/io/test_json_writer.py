"""Tests for JSON output."""

import json

import pytest

from dpp_csv_mapper.infrastructure.io import DataWriteError, JSONRecordWriter, write_json


class TestWriteJson:
    def test_writes_indented_utf8(self, tmp_path):
        path = tmp_path / "out.json"

        result = write_json({"name": "Müller"}, path)

        assert result == path
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "name": "Müller"\n}\n'

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "out.json"

        write_json([], path)

        assert path.exists()

    def test_unserializable_payload(self, tmp_path):
        with pytest.raises(DataWriteError, match="Failed to write"):
            write_json({"value": object()}, tmp_path / "out.json")

    def test_target_is_a_directory(self, tmp_path):
        with pytest.raises(DataWriteError):
            write_json({}, tmp_path)


class TestJSONRecordWriter:
    def test_writes_record_list(self, tmp_path):
        records = [{"@context": ["ctx"], "productName": "Drill"}]

        path = JSONRecordWriter().write(records, str(tmp_path / "records.json"))

        assert json.loads(path.read_text(encoding="utf-8")) == records
