"""Tests for CsvMappingUseCase.

The use case runs against the real file adapters in a temporary directory;
only the logger is replaced so calls can be inspected.
"""

import json

import pytest

from dpp_csv_mapper.application.mapping_use_case import (
    CsvMappingUseCase,
    MappingDependencies,
)
from dpp_csv_mapper.application.models import (
    AutoMapRequest,
    GenerateRequest,
    ProfileRequest,
    ValidateRequest,
)
from dpp_csv_mapper.config import MapperConfig
from dpp_csv_mapper.constants import ContextUrls
from dpp_csv_mapper.domain.entities.column_types import ColumnTypeInfo
from dpp_csv_mapper.infrastructure.io import CSVReader, JSONRecordWriter
from dpp_csv_mapper.infrastructure.repositories import (
    MappingConfigRepository,
    SchemaFieldRepository,
)


class RecordingLogger:
    """Logger double that keeps every call."""

    def __init__(self):
        self.messages = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def log_csv_loaded(self, filename, row_count, column_count=None):
        self.messages.append(("csv_loaded", filename, row_count))

    def log_schema_loaded(self, field_count, source=None):
        self.messages.append(("schema_loaded", field_count))

    def log_mapping_summary(self, mapped_count, header_count, unmapped):
        self.messages.append(("mapping_summary", mapped_count, header_count, unmapped))

    def log_validation_issues(self, issues):
        self.messages.append(("validation", len(issues)))

    def log_records_generated(self, record_count, output_path=None):
        self.messages.append(("records_generated", record_count, output_path))

    def log_final_stats(self):
        self.messages.append(("final_stats",))

    def of_kind(self, kind):
        return [message for message in self.messages if message[0] == kind]


@pytest.fixture
def logger():
    return RecordingLogger()


def _use_case(logger, config=None, record_writer=True):
    return CsvMappingUseCase(
        MappingDependencies(
            logger=logger,
            csv_reader=CSVReader(),
            field_repository=SchemaFieldRepository(),
            mapping_repository=MappingConfigRepository(),
            record_writer=JSONRecordWriter() if record_writer else None,
            config=config or MapperConfig(),
        )
    )


@pytest.fixture
def use_case(logger):
    return _use_case(logger)


@pytest.fixture
def mapping_file(tmp_path):
    path = tmp_path / "mapping.json"
    path.write_text(
        json.dumps(
            {
                "EAN": "identifiers.gtin",
                "Weight": "physicalDimensions.weight",
                "Documents 1 Title": "documents[0].title",
                "Documents 2 Title": "documents[1].title",
            }
        )
    )
    return path


EXPECTED_MAPPING = {
    "EAN": "identifiers.gtin",
    "Weight": "physicalDimensions.weight",
    "Documents 1 Title": "documents[0].title",
    "Documents 2 Title": "documents[1].title",
}


class TestProfile:
    def test_profiles_every_column(self, use_case, logger, product_csv):
        response = use_case.profile(ProfileRequest(csv_path=product_csv))

        assert response.success
        assert response.row_count == 2
        assert response.headers == list(EXPECTED_MAPPING)
        assert response.column_types["EAN"] == ColumnTypeInfo("integer")
        assert response.column_types["Weight"] == ColumnTypeInfo("number")
        assert response.column_types["Documents 2 Title"] == ColumnTypeInfo("string")
        assert logger.of_kind("csv_loaded") == [("csv_loaded", "products.csv", 2)]

    def test_missing_file_fails_softly(self, use_case, logger, tmp_path):
        response = use_case.profile(ProfileRequest(csv_path=tmp_path / "missing.csv"))

        assert not response.success
        assert "File not found" in response.error
        assert logger.of_kind("error")


class TestAutoMap:
    def test_suggests_mapping(self, use_case, logger, product_csv, fields_file):
        response = use_case.auto_map(
            AutoMapRequest(csv_path=product_csv, fields_path=fields_file)
        )

        assert response.success, response.error
        assert response.config.mappings == EXPECTED_MAPPING
        assert response.mapped_count == 4
        assert response.unmapped_headers == []
        assert [column.score for column in response.columns][:2] == [0.05, 0.05]
        assert response.issues == []
        assert logger.of_kind("mapping_summary") == [("mapping_summary", 4, 4, [])]

    def test_unmapped_headers_are_listed(self, use_case, tmp_path, fields_file):
        csv_file = tmp_path / "extra.csv"
        csv_file.write_text("EAN,Colour Code\n1,red\n")

        response = use_case.auto_map(
            AutoMapRequest(csv_path=csv_file, fields_path=fields_file)
        )

        assert response.config.mappings == {"EAN": "identifiers.gtin", "Colour Code": ""}
        assert response.unmapped_headers == ["Colour Code"]
        assert response.columns[1].score is None

    def test_saves_mapping(self, use_case, logger, product_csv, fields_file, tmp_path):
        output = tmp_path / "out" / "mapping.json"

        response = use_case.auto_map(
            AutoMapRequest(csv_path=product_csv, fields_path=fields_file, output_path=output)
        )

        assert response.output_path == output
        saved = json.loads(output.read_text(encoding="utf-8"))
        assert saved["mappings"] == EXPECTED_MAPPING
        assert ("success", f"Saved mapping to {output}") in logger.messages

    def test_existing_mapping_is_kept(self, use_case, product_csv, fields_file, tmp_path):
        existing = tmp_path / "existing.json"
        existing.write_text(
            json.dumps({"mappings": {"Weight": "tradeName"}, "sectors": ["battery"]})
        )

        response = use_case.auto_map(
            AutoMapRequest(
                csv_path=product_csv,
                fields_path=fields_file,
                existing_mapping_path=existing,
            )
        )

        mappings = response.config.mappings
        assert mappings["Weight"] == "tradeName"
        assert mappings["EAN"] == "identifiers.gtin"
        assert response.config.sectors == ["battery"]

    def test_suggestion_for_taken_path_is_dropped(
        self, use_case, product_csv, fields_file, tmp_path
    ):
        existing = tmp_path / "existing.json"
        existing.write_text(json.dumps({"Weight": "identifiers.gtin"}))

        response = use_case.auto_map(
            AutoMapRequest(
                csv_path=product_csv,
                fields_path=fields_file,
                existing_mapping_path=existing,
            )
        )

        assert response.config.mappings["EAN"] == ""

    def test_score_cutoff_override(self, use_case, product_csv, fields_file):
        response = use_case.auto_map(
            AutoMapRequest(csv_path=product_csv, fields_path=fields_file, score_cutoff=1.0)
        )

        assert response.unmapped_headers == ["Documents 1 Title", "Documents 2 Title"]

    def test_missing_fields_file_fails(self, use_case, product_csv, tmp_path):
        response = use_case.auto_map(
            AutoMapRequest(csv_path=product_csv, fields_path=tmp_path / "missing.json")
        )

        assert not response.success
        assert "not found" in response.error


class TestValidate:
    def test_valid_mapping(self, use_case, logger, product_csv, fields_file, mapping_file):
        response = use_case.validate(
            ValidateRequest(
                csv_path=product_csv, fields_path=fields_file, mapping_path=mapping_file
            )
        )

        assert response.success
        assert response.issues == []
        assert not response.has_errors
        assert logger.of_kind("validation") == [("validation", 0)]

    def test_reports_errors_and_unknown_headers(
        self, use_case, logger, product_csv, fields_file, tmp_path
    ):
        mapping = tmp_path / "mapping.json"
        mapping.write_text(json.dumps({"EAN": "granularity", "Gone": "tradeName"}))

        response = use_case.validate(
            ValidateRequest(csv_path=product_csv, fields_path=fields_file, mapping_path=mapping)
        )

        assert response.unknown_headers == ["Gone"]
        assert [issue.rule_id for issue in response.issues] == ["MAP004"]
        assert response.error_count == 1
        assert response.warning_count == 0
        assert response.has_errors
        assert logger.of_kind("warning") == [
            ("warning", "Mapping references headers not in the CSV: Gone")
        ]


class TestGenerate:
    def test_generates_records(self, use_case, logger, product_csv, mapping_file):
        response = use_case.generate(
            GenerateRequest(
                csv_path=product_csv, mapping_path=mapping_file, sectors=["battery"]
            )
        )

        assert response.success, response.error
        assert response.record_count == 2
        first = response.records[0]
        assert first["@context"] == [
            ContextUrls.BASE + "dpp-core.context.jsonld",
            ContextUrls.BASE + "dpp-battery.context.jsonld",
        ]
        assert first["identifiers"] == {"gtin": 4006381333931}
        assert first["physicalDimensions"] == {"weight": 10.5}
        assert first["documents"] == [{"title": "Manual"}, {"title": "Safety Sheet"}]
        assert response.records[1]["documents"] == [{"title": "Guide"}]
        assert logger.of_kind("records_generated") == [("records_generated", 2, None)]

    def test_writes_output_file(self, use_case, product_csv, mapping_file, tmp_path):
        output = tmp_path / "passports.json"

        response = use_case.generate(
            GenerateRequest(
                csv_path=product_csv,
                mapping_path=mapping_file,
                sectors=["battery"],
                output_path=output,
            )
        )

        assert response.output_path == output
        assert json.loads(output.read_text(encoding="utf-8")) == response.records

    def test_refuses_empty_mapping(self, use_case, product_csv, tmp_path):
        mapping = tmp_path / "mapping.json"
        mapping.write_text(json.dumps({"EAN": ""}))

        response = use_case.generate(
            GenerateRequest(csv_path=product_csv, mapping_path=mapping, sectors=["battery"])
        )

        assert not response.success
        assert response.error == "Mapping is empty; map at least one column first"

    def test_refuses_without_sector(self, use_case, product_csv, mapping_file):
        response = use_case.generate(
            GenerateRequest(csv_path=product_csv, mapping_path=mapping_file, sectors=[" "])
        )

        assert not response.success
        assert response.error == "At least one sector must be selected (use --sector)"

    def test_sectors_fall_back_to_mapping_config(self, use_case, product_csv, tmp_path):
        mapping = tmp_path / "mapping.json"
        mapping.write_text(
            json.dumps({"mappings": {"EAN": "identifiers.gtin"}, "sectors": ["textile"]})
        )

        response = use_case.generate(GenerateRequest(csv_path=product_csv, mapping_path=mapping))

        assert response.sectors == ["textile"]

    def test_sectors_fall_back_to_config(self, logger, product_csv, mapping_file):
        use_case = _use_case(
            logger, MapperConfig(default_sectors=("construction", "construction"))
        )

        response = use_case.generate(
            GenerateRequest(csv_path=product_csv, mapping_path=mapping_file)
        )

        assert response.sectors == ["construction"]

    def test_blocking_issues_refuse_generation(
        self, use_case, product_csv, fields_file, tmp_path
    ):
        mapping = tmp_path / "mapping.json"
        mapping.write_text(json.dumps({"EAN": "granularity"}))

        response = use_case.generate(
            GenerateRequest(
                csv_path=product_csv,
                mapping_path=mapping,
                sectors=["battery"],
                fields_path=fields_file,
            )
        )

        assert not response.success
        assert "blocking validation errors" in response.error
        assert [issue.rule_id for issue in response.issues] == ["MAP004"]

    def test_force_generates_despite_errors(
        self, use_case, logger, product_csv, fields_file, tmp_path
    ):
        mapping = tmp_path / "mapping.json"
        mapping.write_text(json.dumps({"EAN": "granularity"}))

        response = use_case.generate(
            GenerateRequest(
                csv_path=product_csv,
                mapping_path=mapping,
                sectors=["battery"],
                fields_path=fields_file,
                force=True,
            )
        )

        assert response.success
        assert response.record_count == 2
        assert ("warning", "Generating despite validation errors (--force)") in logger.messages

    def test_custom_context_base(self, logger, product_csv, mapping_file):
        use_case = _use_case(logger, MapperConfig(context_base_url="http://localhost/ctx/"))

        response = use_case.generate(
            GenerateRequest(csv_path=product_csv, mapping_path=mapping_file, sectors=["battery"])
        )

        assert response.records[0]["@context"][0] == "http://localhost/ctx/dpp-core.context.jsonld"

    def test_output_without_writer_fails(self, logger, product_csv, mapping_file, tmp_path):
        use_case = _use_case(logger, record_writer=False)

        response = use_case.generate(
            GenerateRequest(
                csv_path=product_csv,
                mapping_path=mapping_file,
                sectors=["battery"],
                output_path=tmp_path / "out.json",
            )
        )

        assert not response.success
        assert response.error == "No record writer configured"
