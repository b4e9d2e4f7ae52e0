"""Helper functions shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ..application.mapping_use_case import CsvMappingUseCase
from ..config import ConfigLoader
from ..infrastructure.container import DependencyContainer
from .logging_config import create_logger

console = Console()
# Diagnostics go here when stdout carries machine-readable output
err_console = Console(stderr=True)

config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a dpp_csv_mapper.toml config file (default: ./dpp_csv_mapper.toml)",
)
verbose_option = click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
csv_argument = click.argument(
    "csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def build_use_case(
    *,
    verbose: int,
    config_file: Path | None = None,
    output_console: Console | None = None,
) -> CsvMappingUseCase:
    target = output_console or console
    runtime_config = ConfigLoader.load(config_file=config_file)
    logger = create_logger(console=target, verbosity=verbose)
    container = DependencyContainer(
        verbose=verbose, console=target, config=runtime_config, logger=logger
    )
    return container.create_mapping_use_case()
