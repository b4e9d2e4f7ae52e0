"""Validation rules for CSV to DPP mappings.

This module turns the raw constraint checks into reportable issues:
- Required schema fields that no header populates (MAP001)
- Mutually exclusive oneOf branches mapped together (MAP002)
- Columns whose content does not fit the target field type (MAP003)
- Values outside a field's enumeration (MAP004)
- Target paths that the schema does not know (MAP005)

Errors block record generation; warnings are advisory.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..constants import Defaults
from ..domain.entities.column_types import ColumnTypeInfo
from ..domain.entities.schema_field import SchemaField, coerce_field, index_fields
from ..domain.services.column_profiler import Rows, analyze_column, column_values
from ..domain.services.constraint_validator import (
    find_conflicts,
    find_missing_required_fields,
    strip_indices,
    validate_value,
)
from ..domain.services.coercion import is_blank
from ..domain.services.type_compatibility import is_type_compatible

MAX_EXAMPLES = 3


class ValidationSeverity(str, Enum):
    """Validation issue severity levels."""

    ERROR = "Error"  # Blocks generation
    WARNING = "Warning"  # Should be reviewed


class ValidationCategory(str, Enum):
    PRESENCE = "Presence"
    CONSISTENCY = "Consistency"
    FORMAT = "Format"
    TERMINOLOGY = "Terminology"
    STRUCTURE = "Structure"


@dataclass
class ValidationIssue:
    """Represents a validation issue found in a mapping."""

    rule_id: str  # e.g., "MAP001"
    severity: ValidationSeverity
    category: ValidationCategory
    message: str
    header: str | None = None
    path: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.severity == ValidationSeverity.ERROR

    def __str__(self) -> str:
        """Format issue for display."""
        parts = [f"[{self.rule_id}] {self.severity.value}: {self.message}"]
        if self.header:
            parts.append(f"Header: {self.header}")
        if self.path:
            parts.append(f"Path: {self.path}")
        return " | ".join(parts)


@dataclass
class ValidationContext:
    """Everything a rule may look at for one mapping."""

    mapping: dict[str, str]
    fields: list[SchemaField]
    field_map: dict[str, SchemaField]
    rows: Rows | None = None
    column_types: dict[str, ColumnTypeInfo] = field(default_factory=dict)
    sample_limit: int = Defaults.SAMPLE_LIMIT

    def active_items(self) -> list[tuple[str, str]]:
        return [(header, path) for header, path in self.mapping.items() if path]

    def field_for(self, path: str) -> SchemaField | None:
        return self.field_map.get(strip_indices(path))

    def column_type(self, header: str) -> ColumnTypeInfo | None:
        info = self.column_types.get(header)
        if info is None and self.rows is not None:
            info = analyze_column(self.rows, header, limit=self.sample_limit)
            self.column_types[header] = info
        return info


class ValidationRule:
    """Base class for mapping validation rules."""

    def __init__(
        self,
        rule_id: str,
        severity: ValidationSeverity,
        category: ValidationCategory,
    ):
        self.rule_id = rule_id
        self.severity = severity
        self.category = category

    def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        """Execute the validation rule and return any issues found."""
        raise NotImplementedError("Subclasses must implement validate()")

    def create_issue(
        self,
        message: str,
        header: str | None = None,
        path: str | None = None,
        **details: Any,
    ) -> ValidationIssue:
        return ValidationIssue(
            rule_id=self.rule_id,
            severity=self.severity,
            category=self.category,
            message=message,
            header=header,
            path=path,
            details=details,
        )


class MissingRequiredFieldValidator(ValidationRule):
    """MAP001: Required field is not populated by any header."""

    def __init__(self):
        super().__init__(
            rule_id="MAP001",
            severity=ValidationSeverity.ERROR,
            category=ValidationCategory.PRESENCE,
        )

    def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        missing = find_missing_required_fields(context.mapping, context.fields)
        return [
            self.create_issue(
                message=f"Required field `{path}` is not mapped", path=path
            )
            for path in missing
        ]


class OneOfConflictValidator(ValidationRule):
    """MAP002: More than one branch of a oneOf group is mapped."""

    def __init__(self):
        super().__init__(
            rule_id="MAP002",
            severity=ValidationSeverity.ERROR,
            category=ValidationCategory.CONSISTENCY,
        )

    def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        issues = []
        for group in find_conflicts(context.mapping, context.field_map):
            listed = ", ".join(f"`{path}`" for path in group)
            issues.append(
                self.create_issue(
                    message=f"Only one of these alternatives may be mapped: {listed}",
                    path=group[0],
                    paths=list(group),
                )
            )
        return issues


class TypeCompatibilityValidator(ValidationRule):
    """MAP003: Column content does not fit the target field type."""

    def __init__(self):
        super().__init__(
            rule_id="MAP003",
            severity=ValidationSeverity.WARNING,
            category=ValidationCategory.FORMAT,
        )

    def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        issues = []
        for header, path in context.active_items():
            schema_field = context.field_for(path)
            if schema_field is None:
                continue
            column_info = context.column_type(header)
            if is_type_compatible(column_info, schema_field):
                continue
            expected = _describe_field(schema_field)
            found = column_info.describe() if column_info else "unknown"
            issues.append(
                self.create_issue(
                    message=(
                        f"Column '{header}' looks like {found} but `{path}` "
                        f"expects {expected}"
                    ),
                    header=header,
                    path=path,
                    column_type=found,
                    field_type=expected,
                )
            )
        return issues


class EnumValueValidator(ValidationRule):
    """MAP004: Column holds values outside the field's enumeration."""

    def __init__(self):
        super().__init__(
            rule_id="MAP004",
            severity=ValidationSeverity.ERROR,
            category=ValidationCategory.TERMINOLOGY,
        )

    def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        issues = []
        if context.rows is None:
            return issues

        for header, path in context.active_items():
            schema_field = context.field_for(path)
            if schema_field is None or schema_field.allowed_values is None:
                continue

            invalid_count = 0
            examples: list[str] = []
            for value in column_values(context.rows, header):
                if is_blank(value):
                    continue
                text = str(value).strip()
                if validate_value(text, schema_field):
                    continue
                invalid_count += 1
                if text not in examples and len(examples) < MAX_EXAMPLES:
                    examples.append(text)

            if invalid_count > 0:
                sample = ", ".join(f"'{value}'" for value in examples)
                issues.append(
                    self.create_issue(
                        message=(
                            f"Column '{header}' has {invalid_count} value(s) not "
                            f"allowed for `{path}` (e.g. {sample})"
                        ),
                        header=header,
                        path=path,
                        invalid_count=invalid_count,
                        examples=examples,
                        allowed=list(schema_field.allowed_values),
                    )
                )
        return issues


class UnknownPathValidator(ValidationRule):
    """MAP005: Target path is not part of the schema."""

    def __init__(self):
        super().__init__(
            rule_id="MAP005",
            severity=ValidationSeverity.WARNING,
            category=ValidationCategory.STRUCTURE,
        )

    def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        if not context.field_map:
            return []
        return [
            self.create_issue(
                message=f"Column '{header}' is mapped to unknown path `{path}`",
                header=header,
                path=path,
            )
            for header, path in context.active_items()
            if context.field_for(path) is None
        ]


def _describe_field(schema_field: SchemaField) -> str:
    field_type = schema_field.primary_type
    if field_type is None and schema_field.ontology is not None:
        field_type = schema_field.ontology.range_term
    if field_type is None:
        return "any value"
    if schema_field.format:
        return f"{field_type} ({schema_field.format})"
    return field_type


class MappingValidator:
    """Runs every mapping rule and collects the issues.

    Example:
        >>> validator = MappingValidator()
        >>> issues = validator.validate({"EAN": "identifiers.gtin"}, fields)
        >>> has_blocking_issues(issues)
        False
    """

    def __init__(self, *, sample_limit: int = Defaults.SAMPLE_LIMIT):
        self.sample_limit = sample_limit
        self.rules: list[ValidationRule] = []
        self._register_default_rules()

    def _register_default_rules(self) -> None:
        self.rules.extend(
            [
                MissingRequiredFieldValidator(),
                OneOfConflictValidator(),
                TypeCompatibilityValidator(),
                EnumValueValidator(),
                UnknownPathValidator(),
            ]
        )

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a custom validation rule."""
        self.rules.append(rule)

    def validate(
        self,
        mapping: Mapping[str, str | None],
        fields: Iterable[SchemaField | str],
        rows: Rows | None = None,
        column_types: Mapping[str, ColumnTypeInfo] | None = None,
    ) -> list[ValidationIssue]:
        """Validate a mapping against the schema and, optionally, the data.

        Args:
            mapping: Header -> target path; empty paths are unmapped
            fields: Flattened schema fields
            rows: CSV rows used for type and enumeration checks
            column_types: Precomputed profiles; missing ones are derived
                from ``rows``

        Returns:
            Issues in rule order (MAP001 first)
        """
        schema_fields = [coerce_field(f) for f in fields]
        if rows is not None and not hasattr(rows, "columns"):
            rows = list(rows)
        context = ValidationContext(
            mapping={header: path for header, path in mapping.items() if path},
            fields=schema_fields,
            field_map=index_fields(schema_fields),
            rows=rows,
            column_types=dict(column_types or {}),
            sample_limit=self.sample_limit,
        )

        all_issues: list[ValidationIssue] = []
        for rule in self.rules:
            try:
                all_issues.extend(rule.validate(context))
            except Exception as e:
                all_issues.append(
                    ValidationIssue(
                        rule_id=rule.rule_id,
                        severity=ValidationSeverity.WARNING,
                        category=ValidationCategory.STRUCTURE,
                        message=f"Validation rule failed: {e}",
                    )
                )
        return all_issues


def has_blocking_issues(issues: Iterable[ValidationIssue]) -> bool:
    return any(issue.is_error for issue in issues)

