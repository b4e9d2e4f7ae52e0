"""Profile command - Show the inferred type of every CSV column."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ...application.models import ProfileRequest
from ..helpers import (
    build_use_case,
    config_option,
    console,
    csv_argument,
    verbose_option,
)
from ..presenters.mapping import MappingPresenter

if TYPE_CHECKING:
    from pathlib import Path


@click.command()
@csv_argument
@click.option(
    "--sample-limit",
    type=click.IntRange(min=1),
    help="Number of non-empty values inspected per column (default: 100)",
)
@config_option
@verbose_option
def profile_command(
    csv_file: Path,
    sample_limit: int | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Infer the content type of each column in CSV_FILE.

    Every column is classified as boolean, integer, number or string; string
    columns may additionally carry a format (date-time, email, uri,
    uri-reference). Columns without values are reported as empty.

    Examples:

    \b
        dpp-csv-mapper profile products.csv
    """
    use_case = build_use_case(verbose=verbose, config_file=config_file)
    response = use_case.profile(
        ProfileRequest(csv_path=csv_file, sample_limit=sample_limit)
    )
    if not response.success:
        raise click.ClickException(response.error or "Profiling failed")
    MappingPresenter(console).present_profile(response)
