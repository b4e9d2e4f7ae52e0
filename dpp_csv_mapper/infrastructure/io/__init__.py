"""Infrastructure I/O layer.

Adapters for reading CSV exports and writing JSON output.
"""

from .csv_reader import CSVReader, CSVReadOptions, table_from_frame
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DataWriteError,
    MapperInfrastructureError,
)
from .json_writer import JSONRecordWriter, write_json

__all__ = [
    "CSVReader",
    "CSVReadOptions",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DataWriteError",
    "JSONRecordWriter",
    "MapperInfrastructureError",
    "table_from_frame",
    "write_json",
]
