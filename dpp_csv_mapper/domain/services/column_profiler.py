"""Column content profiling.

Infers a semantic type/format for one CSV column from sample values so that
incompatible target fields can be flagged. Classification is all-or-nothing:
a single disqualifying value drops the column to the next, less specific
tier (boolean > integer > number > date-time > email > uri > uri-reference >
string).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
import re

import pandas as pd

from ...constants import BOOLEAN_LITERALS, ColumnTypes, Defaults, Formats, Patterns
from ..entities.column_types import ColumnTypeInfo
from .coercion import is_blank, parse_finite_number

_DATE_RE = re.compile(Patterns.ISO_DATE_TIME, re.IGNORECASE | re.ASCII)
_EMAIL_RE = re.compile(Patterns.EMAIL)
_URI_RE = re.compile(Patterns.URI, re.IGNORECASE)
_URI_REFERENCE_RE = re.compile(Patterns.URI_REFERENCE, re.IGNORECASE)

EMPTY = ColumnTypeInfo(type=ColumnTypes.EMPTY)

Rows = Iterable[Mapping[str, object]] | pd.DataFrame


def column_values(rows: Rows, header: str) -> Iterator[object]:
    if isinstance(rows, pd.DataFrame):
        if header in rows.columns:
            yield from rows[header].tolist()
        return
    for row in rows:
        yield row.get(header)


def sample_values(rows: Rows, header: str, limit: int = Defaults.SAMPLE_LIMIT) -> list[str]:
    """Return up to ``limit`` non-empty values of ``header``, trimmed."""
    samples: list[str] = []
    for value in column_values(rows, header):
        if len(samples) >= limit:
            break
        if is_blank(value):
            continue
        text = str(value).strip()
        if text:
            samples.append(text)
    return samples


def classify_values(values: list[str]) -> ColumnTypeInfo:
    if not values:
        return EMPTY

    all_boolean = all_integer = all_number = True
    all_date = all_email = all_uri = all_uri_ref = True

    for text in values:
        if text.lower() not in BOOLEAN_LITERALS:
            all_boolean = False
        number = parse_finite_number(text)
        if number is None:
            all_number = all_integer = False
        elif not number.is_integer():
            all_integer = False
        if not _DATE_RE.fullmatch(text):
            all_date = False
        if not _EMAIL_RE.fullmatch(text):
            all_email = False
        if not _URI_RE.fullmatch(text):
            all_uri = False
        if not _URI_REFERENCE_RE.fullmatch(text):
            all_uri_ref = False

    if all_boolean:
        return ColumnTypeInfo(type=ColumnTypes.BOOLEAN)
    if all_integer:
        return ColumnTypeInfo(type=ColumnTypes.INTEGER)
    if all_number:
        return ColumnTypeInfo(type=ColumnTypes.NUMBER)
    if all_date:
        return ColumnTypeInfo(type=ColumnTypes.STRING, format=Formats.DATE_TIME)
    if all_email:
        return ColumnTypeInfo(type=ColumnTypes.STRING, format=Formats.EMAIL)
    if all_uri:
        return ColumnTypeInfo(type=ColumnTypes.STRING, format=Formats.URI)
    if all_uri_ref:
        return ColumnTypeInfo(type=ColumnTypes.STRING, format=Formats.URI_REFERENCE)
    return ColumnTypeInfo(type=ColumnTypes.STRING)


def analyze_column(
    rows: Rows | None, header: str | None, *, limit: int = Defaults.SAMPLE_LIMIT
) -> ColumnTypeInfo:
    """Infer the type of one column.

    Args:
        rows: Row dicts (header -> raw string) or a DataFrame
        header: Column to analyze
        limit: Maximum number of non-empty values to inspect

    Returns:
        The inferred ColumnTypeInfo; ``empty`` when no value is present
    """
    if rows is None or not header:
        return EMPTY
    return classify_values(sample_values(rows, header, limit))


def profile_columns(
    rows: Rows, headers: Iterable[str], *, limit: int = Defaults.SAMPLE_LIMIT
) -> dict[str, ColumnTypeInfo]:
    if not isinstance(rows, pd.DataFrame):
        rows = list(rows)
    return {header: analyze_column(rows, header, limit=limit) for header in headers}
