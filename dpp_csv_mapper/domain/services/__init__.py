"""Domain services.

Business logic services that operate on domain entities.
"""

from .column_profiler import analyze_column, profile_columns
from .constraint_validator import (
    find_conflicts,
    find_missing_required_fields,
    strip_indices,
    validate_value,
)
from .mapping import (
    MappingEngine,
    build_mapping,
    compute_match_score,
    find_best_match,
    find_used_indices,
    list_target_suggestions,
    suggest_indexed_paths,
)
from .record_materializer import (
    build_context,
    compact_arrays,
    generate_records,
    set_property,
)
from .type_compatibility import is_type_compatible

__all__ = [
    "MappingEngine",
    "analyze_column",
    "build_context",
    "build_mapping",
    "compact_arrays",
    "compute_match_score",
    "find_best_match",
    "find_conflicts",
    "find_missing_required_fields",
    "find_used_indices",
    "generate_records",
    "is_type_compatible",
    "list_target_suggestions",
    "profile_columns",
    "set_property",
    "strip_indices",
    "suggest_indexed_paths",
    "validate_value",
]
