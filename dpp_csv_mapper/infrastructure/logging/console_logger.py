from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...validators.mapping_validators import ValidationIssue

MAX_LISTED_HEADERS = 10


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    csv_file: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "files_processed": 0,
        "rows_processed": 0,
        "headers_mapped": 0,
        "records_generated": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_csv_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        self.set_context(csv_file=filename)
        self._stats["files_processed"] += 1
        self._stats["rows_processed"] += row_count
        msg = f"Loaded {row_count:,} rows from {filename}"
        if column_count is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({column_count} columns)"
        self.verbose(msg)

    @override
    def log_schema_loaded(self, field_count: int, source: str | None = None) -> None:
        msg = f"Loaded {field_count} schema fields"
        if source:
            msg += f" from {source}"
        self.verbose(msg)

    @override
    def log_mapping_summary(
        self, mapped_count: int, header_count: int, unmapped: list[str]
    ) -> None:
        self._stats["headers_mapped"] += mapped_count
        self.verbose(f"Mapped {mapped_count} of {header_count} columns")
        if unmapped and self.verbosity >= LogLevel.VERBOSE:
            listed = ", ".join(unmapped[:MAX_LISTED_HEADERS])
            if len(unmapped) > MAX_LISTED_HEADERS:
                listed += f" (+{len(unmapped) - MAX_LISTED_HEADERS} more)"
            self.verbose(f"Unmapped: {escape(listed)}")

    @override
    def log_validation_issues(self, issues: list[ValidationIssue]) -> None:
        if not issues:
            self.verbose("No validation issues")
            return
        errors = sum(1 for issue in issues if issue.is_error)
        warnings = len(issues) - errors
        self.verbose(f"Validation: {errors} error(s), {warnings} warning(s)")
        for issue in issues:
            self.debug(f"  {escape(str(issue))}")

    @override
    def log_records_generated(
        self, record_count: int, output_path: Path | None = None
    ) -> None:
        self._stats["records_generated"] += record_count
        if output_path is not None:
            self.success(f"Wrote {record_count:,} DPP records to {output_path}")
        else:
            self.verbose(f"Generated {record_count:,} DPP records")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Processing Statistics:[/dim]")
            self.console.print(
                f"[dim]  Files processed: {self._stats['files_processed']}[/dim]"
            )
            self.console.print(
                f"[dim]  Rows processed: {self._stats['rows_processed']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Columns mapped: {self._stats['headers_mapped']}[/dim]"
            )
            self.console.print(
                f"[dim]  Records generated: {self._stats['records_generated']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.csv_file:
            parts.append(self._context.csv_file)
        if self._context.operation:
            parts.append(self._context.operation)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
