"""Generate command - Materialize DPP JSON-LD records from a CSV file."""

from __future__ import annotations

import json
from pathlib import Path

import click

from ...application.models import GenerateRequest
from ..helpers import (
    build_use_case,
    config_option,
    console,
    csv_argument,
    err_console,
    verbose_option,
)
from ..logging_config import get_logger
from ..presenters.mapping import MappingPresenter


@click.command()
@csv_argument
@click.option(
    "--mapping",
    "mapping_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Mapping config JSON (header -> path)",
)
@click.option(
    "--sector",
    "sectors",
    multiple=True,
    help="Sector context to include (repeatable, e.g. --sector battery)",
)
@click.option(
    "--fields",
    "fields_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Validate against these schema fields before generating",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the records to this JSON file (default: print to stdout)",
)
@click.option(
    "--force",
    is_flag=True,
    help="Generate even when validation reports errors",
)
@config_option
@verbose_option
def generate_command(
    csv_file: Path,
    mapping_file: Path,
    sectors: tuple[str, ...],
    fields_file: Path | None,
    output_file: Path | None,
    force: bool,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Generate one DPP record per row of CSV_FILE.

    Each record carries an @context list with the core context followed by
    one context per selected sector. Sectors fall back to those stored in
    the mapping config, then to DPP_SECTORS / [generate] sectors.

    Examples:

    \b
        dpp-csv-mapper generate products.csv --mapping mapping.json \\
            --sector battery --output passports.json
    """
    # Records printed to stdout must stay parseable JSON
    out_console = console if output_file is not None else err_console
    use_case = build_use_case(
        verbose=verbose, config_file=config_file, output_console=out_console
    )
    response = use_case.generate(
        GenerateRequest(
            csv_path=csv_file,
            mapping_path=mapping_file,
            sectors=list(sectors),
            fields_path=fields_file,
            output_path=output_file,
            force=force,
        )
    )
    if response.issues:
        MappingPresenter(out_console).present_issues(response.issues)
    if not response.success:
        raise click.ClickException(response.error or "Generation failed")

    if output_file is None:
        click.echo(json.dumps(response.records, indent=2, ensure_ascii=False))
        return
    MappingPresenter(out_console).present_generation(response)
    get_logger().log_final_stats()
