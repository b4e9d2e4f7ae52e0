from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import ColumnTypes, Formats

if TYPE_CHECKING:
    from ..entities.column_types import ColumnTypeInfo
    from ..entities.schema_field import SchemaField

NUMERIC_RANGES = frozenset({"double", "float", "decimal"})
INTEGER_RANGES = frozenset({"integer", "int"})
DATE_RANGES = frozenset({"dateTime", "date"})
URI_RANGES = frozenset({"anyURI"})

ARRAY_COLUMN_TYPES = frozenset(
    {ColumnTypes.STRING, ColumnTypes.NUMBER, ColumnTypes.INTEGER}
)

# Column type -> field types it may populate.
TYPE_MATRIX: dict[str, frozenset[str]] = {
    ColumnTypes.BOOLEAN: frozenset({"boolean", "string"}),
    ColumnTypes.INTEGER: frozenset({"integer", "number", "string"}),
    ColumnTypes.NUMBER: frozenset({"number", "string"}),
    ColumnTypes.STRING: frozenset({"string"}),
}


def _range_allows(term: str, column_type: str, column_format: str | None) -> bool:
    if term in NUMERIC_RANGES:
        return column_type in (ColumnTypes.NUMBER, ColumnTypes.INTEGER)
    if term in INTEGER_RANGES:
        return column_type == ColumnTypes.INTEGER
    if term == "boolean":
        return column_type == ColumnTypes.BOOLEAN
    if term in DATE_RANGES:
        return column_type == ColumnTypes.STRING and column_format in Formats.DATE_FORMATS
    if term in URI_RANGES:
        return column_type == ColumnTypes.STRING and column_format in (
            Formats.URI,
            Formats.URI_REFERENCE,
        )
    return True


def _type_from_range(term: str | None) -> str | None:
    if term is None:
        return None
    if term in NUMERIC_RANGES:
        return "number"
    if term in INTEGER_RANGES:
        return "integer"
    if term == "boolean":
        return "boolean"
    # Dates, URIs and custom classes (enumerations) are carried as strings.
    return "string"


def _format_allows(field_format: str, column_format: str | None) -> bool:
    if field_format in Formats.DATE_FORMATS:
        return column_format in Formats.DATE_FORMATS
    if field_format == Formats.EMAIL:
        return column_format == Formats.EMAIL
    if field_format == Formats.URI:
        return column_format == Formats.URI
    if field_format == Formats.URI_REFERENCE:
        return column_format in (Formats.URI, Formats.URI_REFERENCE)
    return True


def is_type_compatible(
    column_info: ColumnTypeInfo | None, field: SchemaField | None
) -> bool:
    """Decide whether a profiled column may populate ``field``.

    Unknown information is treated as compatible so weakly typed
    suggestions stay visible.
    """
    if column_info is None or field is None:
        return True
    column_type = column_info.type
    column_format = column_info.format
    if column_type == ColumnTypes.EMPTY:
        return True

    field_type = field.primary_type
    if field_type == "array":
        return column_type in ARRAY_COLUMN_TYPES

    range_term = field.ontology.range_term if field.ontology else None
    if range_term is not None and not _range_allows(
        range_term, column_type, column_format
    ):
        return False

    if field_type is None:
        field_type = _type_from_range(range_term)
        if field_type is None:
            return True

    allowed = TYPE_MATRIX.get(column_type)
    if allowed is not None and field_type not in allowed:
        return False

    if field_type == "string" and field.format:
        return _format_allows(field.format, column_format)
    return True
