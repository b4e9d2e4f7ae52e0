"""Mapping services for DPP field suggestion.

This package provides the core business logic for mapping CSV headers
to DPP schema field paths using heuristic scoring and greedy assignment.
"""

from .engine import (
    MappingEngine,
    build_mapping,
    find_used_indices,
    list_target_suggestions,
    suggest_indexed_paths,
)
from .scorer import compute_match_score, find_best_match

__all__ = [
    "MappingEngine",
    "build_mapping",
    "compute_match_score",
    "find_best_match",
    "find_used_indices",
    "list_target_suggestions",
    "suggest_indexed_paths",
]
