from __future__ import annotations

from dataclasses import dataclass, field
import traceback
from typing import TYPE_CHECKING

from ..config import MapperConfig
from ..domain.entities.mapping import MappingConfig, merge_mappings
from ..domain.services.column_profiler import profile_columns
from ..domain.services.constraint_validator import strip_indices
from ..domain.services.mapping import build_mapping, compute_match_score
from ..domain.services.record_materializer import generate_records
from ..validators.mapping_validators import MappingValidator, has_blocking_issues
from .models import (
    AutoMapResponse,
    GenerateResponse,
    MappedColumn,
    ProfileResponse,
    ValidateResponse,
)

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.csv_table import CSVTable
    from ..domain.entities.schema_field import SchemaField
    from .models import AutoMapRequest, GenerateRequest, ProfileRequest, ValidateRequest
    from .ports.repositories import (
        CSVReaderPort,
        MappingConfigRepositoryPort,
        SchemaFieldRepositoryPort,
    )
    from .ports.services import LoggerPort, RecordWriterPort

VERBOSE_TRACEBACK_LEVEL = 2


class GenerationRefusedError(Exception):
    """Raised when record generation is not allowed for the given input."""


@dataclass(slots=True)
class MappingDependencies:
    logger: LoggerPort
    csv_reader: CSVReaderPort
    field_repository: SchemaFieldRepositoryPort
    mapping_repository: MappingConfigRepositoryPort
    record_writer: RecordWriterPort | None = None
    config: MapperConfig = field(default_factory=MapperConfig)
    verbose: int = 0


class CsvMappingUseCase:
    """Orchestrates CSV profiling, auto-mapping, validation and generation.

    Every public method returns a response object instead of raising; a
    failed step sets ``success=False`` and ``error`` on the response.
    """

    def __init__(self, dependencies: MappingDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self.config = dependencies.config
        self._csv_reader = dependencies.csv_reader
        self._field_repository = dependencies.field_repository
        self._mapping_repository = dependencies.mapping_repository
        self._record_writer = dependencies.record_writer
        self._verbose = dependencies.verbose
        self._validator = MappingValidator(sample_limit=self.config.sample_limit)

    def profile(self, request: ProfileRequest) -> ProfileResponse:
        response = ProfileResponse()
        try:
            table = self._load_csv(request)
            limit = request.sample_limit or self.config.sample_limit
            response.headers = list(table.headers)
            response.row_count = table.row_count
            response.column_types = profile_columns(
                table.rows, table.headers, limit=limit
            )
        except Exception as exc:
            self._fail(response, exc)
        return response

    def auto_map(self, request: AutoMapRequest) -> AutoMapResponse:
        response = AutoMapResponse()
        try:
            table = self._load_csv(request)
            fields = self._load_fields(request.fields_path)
            cutoff = request.score_cutoff or self.config.score_cutoff
            suggested = build_mapping(table.headers, fields, score_cutoff=cutoff)

            if request.existing_mapping_path is not None:
                config = self._mapping_repository.load(request.existing_mapping_path)
                taken = set(config.mapped_paths)
                fresh = {h: p for h, p in suggested.items() if p not in taken}
                config = merge_mappings(config, fresh)
            else:
                config = MappingConfig(mappings=suggested)
            config = config.with_headers(table.headers)

            column_types = profile_columns(
                table.rows, table.headers, limit=self.config.sample_limit
            )
            response.config = config
            response.columns = [
                MappedColumn(
                    header=header,
                    path=path,
                    score=(
                        compute_match_score(header, strip_indices(path))
                        if path
                        else None
                    ),
                    column_type=column_types.get(header),
                )
                for header, path in config.mappings.items()
            ]
            self.logger.log_mapping_summary(
                response.mapped_count, len(table.headers), response.unmapped_headers
            )

            response.issues = self._validator.validate(
                config.active(), fields, table.rows, column_types
            )
            self.logger.log_validation_issues(response.issues)

            if request.output_path is not None:
                self._mapping_repository.save(config, request.output_path)
                response.output_path = request.output_path
                self.logger.success(f"Saved mapping to {request.output_path}")
        except Exception as exc:
            self._fail(response, exc)
        return response

    def validate(self, request: ValidateRequest) -> ValidateResponse:
        response = ValidateResponse()
        try:
            table = self._load_csv(request)
            fields = self._load_fields(request.fields_path)
            config = self._mapping_repository.load(request.mapping_path)
            mapping = config.active()

            known = set(table.headers)
            response.unknown_headers = [h for h in mapping if h not in known]
            if response.unknown_headers:
                listed = ", ".join(response.unknown_headers)
                self.logger.warning(f"Mapping references headers not in the CSV: {listed}")

            response.issues = self._validator.validate(mapping, fields, table.rows)
            self.logger.log_validation_issues(response.issues)
        except Exception as exc:
            self._fail(response, exc)
        return response

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        response = GenerateResponse()
        try:
            table = self._load_csv(request)
            config = self._mapping_repository.load(request.mapping_path)
            mapping = config.active()
            if not mapping:
                raise GenerationRefusedError(
                    "Mapping is empty; map at least one column first"
                )

            sectors = self._resolve_sectors(request, config)
            if not sectors:
                raise GenerationRefusedError(
                    "At least one sector must be selected (use --sector)"
                )
            response.sectors = sectors

            if request.fields_path is not None:
                fields = self._load_fields(request.fields_path)
                response.issues = self._validator.validate(mapping, fields, table.rows)
                self.logger.log_validation_issues(response.issues)
                if has_blocking_issues(response.issues):
                    if not request.force:
                        raise GenerationRefusedError(
                            "Mapping has blocking validation errors; "
                            "fix them or use --force"
                        )
                    self.logger.warning("Generating despite validation errors (--force)")

            response.records = generate_records(
                table.rows,
                mapping,
                sectors,
                context_base=self.config.context_base_url,
            )
            if request.output_path is not None:
                if self._record_writer is None:
                    raise RuntimeError("No record writer configured")
                response.output_path = self._record_writer.write(
                    response.records, request.output_path
                )
            self.logger.log_records_generated(
                response.record_count, response.output_path
            )
        except Exception as exc:
            self._fail(response, exc)
        return response

    def _resolve_sectors(
        self, request: GenerateRequest, config: MappingConfig
    ) -> list[str]:
        for candidates in (request.sectors, config.sectors, self.config.default_sectors):
            sectors = [s.strip() for s in candidates if s and s.strip()]
            if sectors:
                return list(dict.fromkeys(sectors))
        return []

    def _load_csv(
        self, request: ProfileRequest | AutoMapRequest | ValidateRequest | GenerateRequest
    ) -> CSVTable:
        table = self._csv_reader.read_table(request.csv_path)
        self.logger.log_csv_loaded(
            request.csv_path.name, table.row_count, len(table.headers)
        )
        return table

    def _load_fields(self, path: Path) -> list[SchemaField]:
        fields = self._field_repository.load_fields(path)
        self.logger.log_schema_loaded(len(fields), str(path))
        return fields

    def _fail(
        self,
        response: ProfileResponse | AutoMapResponse | ValidateResponse | GenerateResponse,
        exc: Exception,
    ) -> None:
        response.success = False
        response.error = str(exc)
        self.logger.error(str(exc))
        if self._verbose >= VERBOSE_TRACEBACK_LEVEL:
            self.logger.error(traceback.format_exc())
