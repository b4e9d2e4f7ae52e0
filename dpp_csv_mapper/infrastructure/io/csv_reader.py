from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from ...domain.entities.csv_table import CSVTable
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(slots=True)
class CSVReadOptions:
    normalize_headers: bool = True
    dtype: Any = str
    encoding: str = "utf-8"
    delimiter: str = ","


def table_from_frame(df: pd.DataFrame, source: str | None = None) -> CSVTable:
    headers = [str(col) for col in df.columns]
    rows = [
        {
            header: "" if pd.isna(value) else str(value)
            for header, value in zip(headers, values)
        }
        for values in df.itertuples(index=False, name=None)
    ]
    return CSVTable(headers=headers, rows=rows, source=source)


class CSVReader:
    pass

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            df = pd.read_csv(
                path,
                dtype=options.dtype,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding=options.encoding,
                sep=options.delimiter,
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except Exception as e:
            raise DataParseError(f"Unexpected error reading {path}: {e}") from e
        if df.shape[1] == 0:
            raise DataParseError(f"CSV file has no columns: {path}")
        if options.normalize_headers:
            df = self._normalize_headers(df)
        return df

    def read_table(self, path: Path, options: CSVReadOptions | None = None) -> CSVTable:
        return table_from_frame(self.read(path, options), source=path.name)

    def _normalize_headers(self, df: pd.DataFrame) -> pd.DataFrame:
        df.columns = [str(col).strip() for col in df.columns]
        return df
