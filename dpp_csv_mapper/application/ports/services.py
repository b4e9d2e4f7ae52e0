from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...validators.mapping_validators import ValidationIssue


@runtime_checkable
class RecordWriterPort(Protocol):
    pass

    def write(self, records: list[dict[str, Any]], path: str | Path) -> Path: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_csv_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_schema_loaded(self, field_count: int, source: str | None = None) -> None: ...

    def log_mapping_summary(
        self, mapped_count: int, header_count: int, unmapped: list[str]
    ) -> None: ...

    def log_validation_issues(self, issues: list[ValidationIssue]) -> None: ...

    def log_records_generated(
        self, record_count: int, output_path: Path | None = None
    ) -> None: ...

    def log_final_stats(self) -> None: ...
