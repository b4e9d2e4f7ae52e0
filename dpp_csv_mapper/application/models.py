from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.column_types import ColumnTypeInfo
    from ..domain.entities.mapping import MappingConfig
    from ..validators.mapping_validators import ValidationIssue


def _empty_str_list() -> list[str]:
    return []


def _empty_issue_list() -> list[ValidationIssue]:
    return []


def _empty_column_types() -> dict[str, ColumnTypeInfo]:
    return {}


@dataclass(slots=True)
class ProfileRequest:
    csv_path: Path
    sample_limit: int | None = None


@dataclass(slots=True)
class ProfileResponse:
    success: bool = True
    headers: list[str] = field(default_factory=_empty_str_list)
    row_count: int = 0
    column_types: dict[str, ColumnTypeInfo] = field(default_factory=_empty_column_types)
    error: str | None = None


@dataclass(slots=True)
class AutoMapRequest:
    csv_path: Path
    fields_path: Path
    existing_mapping_path: Path | None = None
    output_path: Path | None = None
    score_cutoff: float | None = None


@dataclass(slots=True)
class MappedColumn:
    header: str
    path: str
    score: float | None = None
    column_type: ColumnTypeInfo | None = None

    @property
    def is_mapped(self) -> bool:
        return bool(self.path)


@dataclass(slots=True)
class AutoMapResponse:
    success: bool = True
    config: MappingConfig | None = None
    columns: list[MappedColumn] = field(default_factory=list)
    issues: list[ValidationIssue] = field(default_factory=_empty_issue_list)
    output_path: Path | None = None
    error: str | None = None

    @property
    def mapped_count(self) -> int:
        return sum(1 for column in self.columns if column.is_mapped)

    @property
    def unmapped_headers(self) -> list[str]:
        return [column.header for column in self.columns if not column.is_mapped]


@dataclass(slots=True)
class ValidateRequest:
    csv_path: Path
    fields_path: Path
    mapping_path: Path


@dataclass(slots=True)
class ValidateResponse:
    success: bool = True
    issues: list[ValidationIssue] = field(default_factory=_empty_issue_list)
    unknown_headers: list[str] = field(default_factory=_empty_str_list)
    error: str | None = None

    @property
    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self.issues)

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.is_error)

    @property
    def warning_count(self) -> int:
        return len(self.issues) - self.error_count


@dataclass(slots=True)
class GenerateRequest:
    csv_path: Path
    mapping_path: Path
    sectors: list[str] = field(default_factory=_empty_str_list)
    fields_path: Path | None = None
    output_path: Path | None = None
    force: bool = False


@dataclass(slots=True)
class GenerateResponse:
    success: bool = True
    records: list[dict[str, Any]] = field(default_factory=list)
    sectors: list[str] = field(default_factory=_empty_str_list)
    issues: list[ValidationIssue] = field(default_factory=_empty_issue_list)
    output_path: Path | None = None
    error: str | None = None

    @property
    def record_count(self) -> int:
        return len(self.records)
