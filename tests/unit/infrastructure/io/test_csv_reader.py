"""Tests for CSVReader."""

import pandas as pd
import pytest

from dpp_csv_mapper.domain.entities import CSVTable
from dpp_csv_mapper.infrastructure.io import (
    CSVReader,
    CSVReadOptions,
    DataParseError,
    DataSourceNotFoundError,
    table_from_frame,
)


@pytest.fixture
def reader():
    return CSVReader()


class TestCSVReader:
    """Tests for reading product CSV exports."""

    def test_reads_values_as_strings(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text("EAN,Weight,Name\n0400638133393,10.50,Drill\n", encoding="utf-8")

        df = reader.read(csv_file)

        assert list(df.columns) == ["EAN", "Weight", "Name"]
        assert df.iloc[0]["EAN"] == "0400638133393"
        assert df.iloc[0]["Weight"] == "10.50"

    def test_empty_cells_stay_empty_strings(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text("A,B\nNA,\n", encoding="utf-8")

        table = reader.read_table(csv_file)

        assert table.rows == [{"A": "NA", "B": ""}]

    def test_headers_are_trimmed(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text(" EAN , Name\n1,Drill\n", encoding="utf-8")

        table = reader.read_table(csv_file)

        assert table.headers == ["EAN", "Name"]
        assert table.rows == [{"EAN": "1", "Name": "Drill"}]

    def test_header_trimming_can_be_disabled(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text(" EAN\n1\n", encoding="utf-8")

        df = reader.read(csv_file, CSVReadOptions(normalize_headers=False))

        assert list(df.columns) == [" EAN"]

    def test_custom_delimiter(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text("EAN;Name\n1;Drill\n", encoding="utf-8")

        table = reader.read_table(csv_file, CSVReadOptions(delimiter=";"))

        assert table.headers == ["EAN", "Name"]

    def test_quoted_values(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text('Name,Notes\n"Drill, cordless","say ""hi"""\n', encoding="utf-8")

        table = reader.read_table(csv_file)

        assert table.rows == [{"Name": "Drill, cordless", "Notes": 'say "hi"'}]

    def test_blank_lines_are_skipped(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text("A\n1\n\n2\n", encoding="utf-8")

        assert reader.read_table(csv_file).row_count == 2

    def test_table_source_is_file_name(self, reader, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text("A\n1\n", encoding="utf-8")

        assert reader.read_table(csv_file).source == "products.csv"

    def test_missing_file(self, reader, tmp_path):
        with pytest.raises(DataSourceNotFoundError, match="File not found"):
            reader.read(tmp_path / "missing.csv")

    def test_directory_is_rejected(self, reader, tmp_path):
        with pytest.raises(DataSourceNotFoundError, match="Not a file"):
            reader.read(tmp_path)

    def test_empty_file(self, reader, tmp_path):
        csv_file = tmp_path / "empty.csv"
        csv_file.write_text("", encoding="utf-8")

        with pytest.raises(DataParseError, match="empty"):
            reader.read(csv_file)

    def test_bad_encoding(self, reader, tmp_path):
        csv_file = tmp_path / "latin1.csv"
        csv_file.write_bytes("Name\nM\xfcller\n".encode("latin-1"))

        with pytest.raises(DataParseError):
            reader.read(csv_file)

    def test_other_encodings_can_be_selected(self, reader, tmp_path):
        csv_file = tmp_path / "latin1.csv"
        csv_file.write_bytes("Name\nM\xfcller\n".encode("latin-1"))

        table = reader.read_table(csv_file, CSVReadOptions(encoding="latin-1"))

        assert table.rows == [{"Name": "M\xfcller"}]


class TestTableFromFrame:
    def test_converts_nan_and_numbers(self):
        df = pd.DataFrame({"A": [1, None], "B": ["x", "y"]})

        table = table_from_frame(df, source="memory")

        assert isinstance(table, CSVTable)
        assert table.headers == ["A", "B"]
        assert table.rows == [{"A": "1.0", "B": "x"}, {"A": "", "B": "y"}]
        assert table.source == "memory"
