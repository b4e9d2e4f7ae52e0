"""Map command - Suggest a header to schema field mapping for a CSV file."""

from __future__ import annotations

from pathlib import Path

import click

from ...application.models import AutoMapRequest
from ..helpers import (
    build_use_case,
    config_option,
    console,
    csv_argument,
    verbose_option,
)
from ..logging_config import get_logger
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
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the resulting mapping config to this JSON file",
)
@click.option(
    "--existing",
    "existing_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Keep the assignments of an earlier mapping and only fill the gaps",
)
@click.option(
    "--score-cutoff",
    type=click.FloatRange(min=0.0, min_open=True),
    help="Ignore header/field pairs scoring at or above this value (default: 5.0)",
)
@config_option
@verbose_option
def map_command(
    csv_file: Path,
    fields_file: Path,
    output_file: Path | None,
    existing_file: Path | None,
    score_cutoff: float | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Auto-map the headers of CSV_FILE onto DPP schema field paths.

    Headers are scored against every field (exact, synonym, leaf, fuzzy,
    acronym and token matches) and assigned greedily, best score first.
    Headers landing on array fields get item indices from the numbers in
    their names, e.g. "Documents 2 Title" -> documents[1].title.

    Examples:

    \b
        dpp-csv-mapper map products.csv --fields fields.json

    \b
        # Save the mapping for later generation
        dpp-csv-mapper map products.csv --fields fields.json --output mapping.json
    """
    use_case = build_use_case(verbose=verbose, config_file=config_file)
    response = use_case.auto_map(
        AutoMapRequest(
            csv_path=csv_file,
            fields_path=fields_file,
            existing_mapping_path=existing_file,
            output_path=output_file,
            score_cutoff=score_cutoff,
        )
    )
    if not response.success:
        raise click.ClickException(response.error or "Mapping failed")
    MappingPresenter(console).present_mapping(response)
    get_logger().log_final_stats()
