"""Mapping validation rules."""

from .mapping_validators import (
    MappingValidator,
    ValidationCategory,
    ValidationContext,
    ValidationIssue,
    ValidationRule,
    ValidationSeverity,
    has_blocking_issues,
)

__all__ = [
    "MappingValidator",
    "ValidationCategory",
    "ValidationContext",
    "ValidationIssue",
    "ValidationRule",
    "ValidationSeverity",
    "has_blocking_issues",
]
