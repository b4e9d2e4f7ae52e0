from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...validators.mapping_validators import ValidationIssue


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_csv_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        return None

    @override
    def log_schema_loaded(self, field_count: int, source: str | None = None) -> None:
        return None

    @override
    def log_mapping_summary(
        self, mapped_count: int, header_count: int, unmapped: list[str]
    ) -> None:
        return None

    @override
    def log_validation_issues(self, issues: list[ValidationIssue]) -> None:
        return None

    @override
    def log_records_generated(
        self, record_count: int, output_path: Path | None = None
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
