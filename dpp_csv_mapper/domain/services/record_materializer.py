"""Apply a finished mapping to CSV rows to produce DPP JSON-LD records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re
from typing import Any

from ...constants import ContextUrls
from .coercion import parse_finite_number, to_json_number

_BRACKET_INDEX_RE = re.compile("\\[(\\d+)\\]")
_MISSING = object()


def _is_index(key: str) -> bool:
    return key.isascii() and key.isdigit()


def build_context(
    sectors: Iterable[str] | str, base_url: str = ContextUrls.BASE
) -> list[str]:
    if isinstance(sectors, str):
        sectors = [sectors]
    contexts = [base_url + ContextUrls.CORE_FILE]
    contexts.extend(
        base_url + ContextUrls.SECTOR_TEMPLATE.format(sector=sector)
        for sector in sectors
    )
    return contexts


def coerce_value(value: object) -> object:
    if value == "true":
        return True
    if value == "false":
        return False
    if isinstance(value, str):
        number = parse_finite_number(value)
        if number is not None:
            return to_json_number(number)
    return value


def _child_container(next_key: str) -> list[Any] | dict[str, Any]:
    return [] if _is_index(next_key) else {}


def _descend(current: object, key: str, next_key: str) -> object:
    if isinstance(current, list):
        if not _is_index(key):
            return None
        index = int(key)
        if index >= len(current):
            current.extend([None] * (index + 1 - len(current)))
        if current[index] is None:
            current[index] = _child_container(next_key)
        return current[index]
    if isinstance(current, dict):
        if key not in current or current[key] is None:
            current[key] = _child_container(next_key)
        return current[key]
    return None


def set_property(target: dict[str, Any], path: str, value: object) -> None:
    """Set ``value`` at a dot/bracket path, creating containers on demand.

    ``items[2].name`` and ``items.2.name`` are equivalent. Empty strings and
    None are not written. A path running through an existing scalar is
    ignored.
    """
    if value is None or value == "":
        return
    keys = _BRACKET_INDEX_RE.sub(".\\1", path).split(".")
    current: object = target
    for key, next_key in zip(keys, keys[1:]):
        current = _descend(current, key, next_key)
        if current is None:
            return

    last = keys[-1]
    if isinstance(current, list):
        if not _is_index(last):
            return
        index = int(last)
        if index >= len(current):
            current.extend([None] * (index + 1 - len(current)))
        current[index] = value
    elif isinstance(current, dict):
        current[last] = value


def compact_arrays(value: Any) -> Any:
    """Drop holes (None) from every list, recursively, keeping order."""
    if isinstance(value, list):
        return [compact_arrays(item) for item in value if item is not None]
    if isinstance(value, dict):
        for key in value:
            value[key] = compact_arrays(value[key])
    return value


def materialize_row(
    row: Mapping[str, object], mapping: Mapping[str, str | None], context: list[str]
) -> dict[str, Any]:
    record: dict[str, Any] = {"@context": list(context)}
    for header, path in mapping.items():
        if not path or not path.strip():
            continue
        value = row.get(header, _MISSING)
        if value is _MISSING:
            continue
        set_property(record, path, coerce_value(value))
    return compact_arrays(record)


def generate_records(
    rows: Iterable[Mapping[str, object]] | None,
    mapping: Mapping[str, str | None] | None,
    sectors: Iterable[str] | str | None,
    *,
    context_base: str = ContextUrls.BASE,
) -> list[dict[str, Any]]:
    """Build one DPP record per CSV row.

    Args:
        rows: Row dicts keyed by header, values as raw strings
        mapping: Header -> target path; empty paths are skipped
        sectors: Selected sector identifiers (or a single one)
        context_base: Base URL of the JSON-LD context documents

    Returns:
        Records in row order, each with its ``@context`` list
    """
    if rows is None or mapping is None or sectors is None:
        return []
    context = build_context(sectors, context_base)
    return [materialize_row(row, mapping, context) for row in rows]
