from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...validators.mapping_validators import ValidationSeverity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import (
        AutoMapResponse,
        GenerateResponse,
        ProfileResponse,
    )
    from ...validators.mapping_validators import ValidationIssue

_SEVERITY_STYLES = {
    ValidationSeverity.ERROR: "red",
    ValidationSeverity.WARNING: "yellow",
}


class MappingPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present_profile(self, response: ProfileResponse) -> None:
        table = Table(title=f"Column Profile ({response.row_count:,} rows)")
        table.add_column("Column", style="cyan")
        table.add_column("Type")
        table.add_column("Format", style="dim")
        for header in response.headers:
            info = response.column_types.get(header)
            if info is None:
                continue
            table.add_row(escape(header), info.type, info.format or "")
        self.console.print(table)

    def present_mapping(self, response: AutoMapResponse) -> None:
        table = Table(title="Suggested Mapping")
        table.add_column("Column", style="cyan")
        table.add_column("Target Path", style="green")
        table.add_column("Score", justify="right")
        table.add_column("Column Type", style="dim")
        for column in response.columns:
            path = escape(column.path) if column.path else "[dim]unmapped[/dim]"
            score = f"{column.score:.2f}" if column.score is not None else ""
            column_type = column.column_type.describe() if column.column_type else ""
            table.add_row(escape(column.header), path, score, column_type)
        self.console.print(table)
        self.console.print(
            f"[bold]Mapped {response.mapped_count} of {len(response.columns)} columns[/bold]"
        )
        if response.issues:
            self.console.print()
            self.present_issues(response.issues)

    def present_issues(self, issues: Sequence[ValidationIssue]) -> None:
        if not issues:
            self.console.print("[green]✓[/green] No validation issues")
            return
        table = Table(title="Validation Issues")
        table.add_column("Rule", style="cyan", no_wrap=True)
        table.add_column("Severity")
        table.add_column("Column")
        table.add_column("Message")
        for issue in issues:
            style = _SEVERITY_STYLES.get(issue.severity, "")
            table.add_row(
                issue.rule_id,
                (
                    f"[{style}]{issue.severity.value}[/{style}]"
                    if style
                    else issue.severity.value
                ),
                escape(issue.header or ""),
                escape(issue.message),
            )
        self.console.print(table)
        errors = sum(1 for issue in issues if issue.is_error)
        self.console.print(
            f"[bold]{errors} error(s), {len(issues) - errors} warning(s)[/bold]"
        )

    def present_generation(self, response: GenerateResponse) -> None:
        sectors = ", ".join(response.sectors)
        self.console.print(
            f"[bold]Generated {response.record_count:,} records[/bold] (sectors: {escape(sectors)})"
        )
        if response.output_path is not None:
            self.console.print(f"[bold]Output:[/bold] {response.output_path}")
