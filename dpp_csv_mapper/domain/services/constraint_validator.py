"""Mapping constraint checks: oneOf conflicts and missing required fields.

Both checks are recomputed from scratch for every mapping. oneOf groups are
evaluated per object instance, so ``items[0]`` and ``items[1]`` are separate
scopes; required fields are only demanded once their parent object is being
built by the mapping.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import re

from ...constants import Patterns
from ..entities.mapping import ConflictGroup
from ..entities.schema_field import SchemaField, coerce_field, index_fields
from .coercion import js_string

_INDEX_RE = re.compile(Patterns.ARRAY_INDEX)


def strip_indices(path: str) -> str:
    return _INDEX_RE.sub("", path)


def _mapped_paths(mapping: Mapping[str, str | None] | None) -> list[str]:
    if not mapping:
        return []
    return [path for path in mapping.values() if path]


@dataclass(slots=True)
class _GroupState:
    paths: list[str] = field(default_factory=list)
    indices: set[int] = field(default_factory=set)


def _instance_scope(owner: str, path: str) -> str:
    if owner != "root" and path.startswith(owner + "["):
        match = re.match(f"^{re.escape(owner)}\\[\\d+\\]", path)
        if match:
            return match.group(0)
    return owner


def find_conflicts(
    mapping: Mapping[str, str | None] | None,
    schema_field_map: Mapping[str, SchemaField] | Iterable[SchemaField] | None,
) -> list[ConflictGroup]:
    """Find oneOf groups with more than one branch populated in one instance.

    Args:
        mapping: Current header -> path mapping; empty paths are ignored
        schema_field_map: Fields keyed by un-indexed path (a plain field
            list is indexed on the fly)

    Returns:
        One deduplicated path list per conflicting group and scope
    """
    if not mapping or schema_field_map is None:
        return []
    if not isinstance(schema_field_map, Mapping):
        schema_field_map = index_fields(schema_field_map)

    paths = _mapped_paths(mapping)
    if len(paths) < 2:
        return []

    scopes: dict[str, dict[str, _GroupState]] = {}
    for path in paths:
        schema_field = schema_field_map.get(strip_indices(path))
        if schema_field is None or not schema_field.one_of:
            continue
        for tag in schema_field.one_of:
            scope = _instance_scope(tag.owner, path)
            group = scopes.setdefault(scope, {}).setdefault(tag.group_id, _GroupState())
            group.paths.append(path)
            group.indices.add(tag.index)

    conflicts: list[ConflictGroup] = []
    for groups in scopes.values():
        for group in groups.values():
            if len(group.indices) > 1:
                conflicts.append(list(dict.fromkeys(group.paths)))
    return conflicts


def _is_array_field(schema_field: SchemaField | None) -> bool:
    if schema_field is None:
        return False
    return schema_field.is_array or schema_field.is_array_container


def _has_child(path: str, candidates: Iterable[str]) -> bool:
    prefix = path + "."
    return any(candidate.startswith(prefix) for candidate in candidates)


def _is_constructed(object_path: str, stripped_paths: set[str]) -> bool:
    if not object_path:
        return True
    segments = object_path.split(".")
    for depth in range(1, len(segments) + 1):
        prefix = ".".join(segments[:depth])
        if prefix in stripped_paths or _has_child(prefix, stripped_paths):
            return True
    return False


def find_missing_required_fields(
    mapping: Mapping[str, str | None] | None,
    schema_fields: Iterable[SchemaField | str] | None,
) -> list[str]:
    """List required field paths the mapping leaves unpopulated.

    With an empty mapping only root-level requirements are reported. For
    fields inside arrays, every used item index (plus the first ``minItems``
    indices) must populate the required leaf, e.g. ``items[1].name``.
    """
    if schema_fields is None:
        return []
    fields = [coerce_field(f) for f in schema_fields]
    paths = _mapped_paths(mapping)

    if not paths:
        return [f.path for f in fields if f.required and "." not in f.path]

    by_path = {f.path: f for f in fields}
    raw_paths = set(paths)
    stripped_paths = {strip_indices(path) for path in paths}
    missing: list[str] = []

    for schema_field in fields:
        if not schema_field.required:
            continue
        parent_path = schema_field.parent_path
        parent = by_path.get(parent_path) if parent_path else None

        if _is_array_field(parent):
            missing.extend(
                _missing_in_array(schema_field, parent, paths, raw_paths)
            )
            continue

        if schema_field.is_array_container and not schema_field.min_items:
            continue
        if not _is_constructed(parent_path, stripped_paths):
            continue
        if schema_field.path in stripped_paths:
            continue
        if _has_child(schema_field.path, stripped_paths):
            continue
        missing.append(schema_field.path)

    return list(dict.fromkeys(missing))


def _missing_in_array(
    schema_field: SchemaField,
    parent: SchemaField,
    paths: list[str],
    raw_paths: set[str],
) -> list[str]:
    array_root = parent.path
    leaf = schema_field.path[len(array_root) + 1 :]
    pattern = re.compile(f"^{re.escape(array_root)}\\[(\\d+)\\]")

    used: set[int] = set()
    touched = False
    for path in paths:
        match = pattern.match(path)
        if match:
            used.add(int(match.group(1)))
        elif path == array_root or path.startswith(array_root + "."):
            touched = True

    if used:
        indices = used | set(range(parent.min_items or 0))
        missing: list[str] = []
        for index in sorted(indices):
            candidate = f"{array_root}[{index}].{leaf}"
            if candidate in raw_paths or _has_child(candidate, raw_paths):
                continue
            missing.append(candidate)
        return missing

    if touched:
        if schema_field.path in raw_paths or _has_child(schema_field.path, raw_paths):
            return []
        return [schema_field.path]
    return []


def validate_value(value: object, schema_field: SchemaField | None) -> bool:
    """Check a single raw value against the field's enumeration, if any."""
    if value is None or value == "":
        return True
    if schema_field is None:
        return True
    allowed = schema_field.allowed_values
    if allowed is None:
        return True
    return js_string(value) in allowed
