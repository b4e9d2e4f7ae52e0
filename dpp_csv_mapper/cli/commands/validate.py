"""Validate command - Check a saved mapping against the schema and the data."""

from __future__ import annotations

from pathlib import Path

import click

from ...application.models import ValidateRequest
from ..helpers import (
    build_use_case,
    config_option,
    console,
    csv_argument,
    verbose_option,
)
from ..presenters.mapping import MappingPresenter


@click.command()
@csv_argument
@click.option(
    "--fields",
    "fields_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with the flattened DPP schema fields",
)
@click.option(
    "--mapping",
    "mapping_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Mapping config JSON (header -> path)",
)
@config_option
@verbose_option
def validate_command(
    csv_file: Path,
    fields_file: Path,
    mapping_file: Path,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Validate a mapping for CSV_FILE.

    Reports missing required fields, conflicting oneOf alternatives,
    type mismatches, values outside enumerations and unknown paths.
    Exits with status 1 when any error is found.

    Examples:

    \b
        dpp-csv-mapper validate products.csv --fields fields.json --mapping mapping.json
    """
    use_case = build_use_case(verbose=verbose, config_file=config_file)
    response = use_case.validate(
        ValidateRequest(
            csv_path=csv_file, fields_path=fields_file, mapping_path=mapping_file
        )
    )
    if not response.success:
        raise click.ClickException(response.error or "Validation failed")
    MappingPresenter(console).present_issues(response.issues)
    if response.has_errors:
        raise click.ClickException(
            f"Validation failed with {response.error_count} errors"
        )
