"""Domain entities for CSV to DPP mapping."""

from .column_types import ColumnTypeInfo, ColumnTypes
from .csv_table import CSVTable
from .mapping import (
    ConflictGroup,
    IndexedSuggestion,
    MappingConfig,
    MatchCandidate,
    merge_mappings,
)
from .schema_field import OneOfTag, OntologyInfo, SchemaField, coerce_field, index_fields

__all__ = [
    "ColumnTypeInfo",
    "ColumnTypes",
    "CSVTable",
    "ConflictGroup",
    "IndexedSuggestion",
    "MappingConfig",
    "MatchCandidate",
    "OneOfTag",
    "OntologyInfo",
    "SchemaField",
    "coerce_field",
    "index_fields",
    "merge_mappings",
]
