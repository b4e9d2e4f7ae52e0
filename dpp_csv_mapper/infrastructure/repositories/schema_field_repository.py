"""Loading of flattened DPP schema field descriptors.

The field list is produced upstream by flattening the DPP JSON schemas; this
repository only reads it back. Both a bare JSON list and an object with a
``fields`` key are accepted, and descriptors may use the camelCase keys
(``isArray``, ``minItems``, ``oneOf``) of the browser tooling.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from ...domain.entities.schema_field import SchemaField
from ..io.exceptions import DataParseError, DataSourceNotFoundError


class SchemaFieldLoadError(DataParseError):
    pass


class SchemaFieldRepository:
    """File-backed access to schema fields, cached per resolved path."""

    def __init__(self) -> None:
        self._cache: dict[Path, list[SchemaField]] = {}

    def load_fields(self, path: str | Path) -> list[SchemaField]:
        file_path = Path(path).resolve()
        if file_path not in self._cache:
            self._cache[file_path] = load_schema_fields(file_path)
        return list(self._cache[file_path])

    def clear_cache(self) -> None:
        self._cache.clear()


def parse_schema_fields(data: object) -> list[SchemaField]:
    if isinstance(data, dict):
        data = data.get("fields")
    if not isinstance(data, list):
        raise SchemaFieldLoadError(
            "Schema fields must be a JSON list or an object with a 'fields' list"
        )
    fields: list[SchemaField] = []
    seen: set[str] = set()
    for entry in data:
        if isinstance(entry, str):
            field = SchemaField(path=entry)
        else:
            field = SchemaField.model_validate(entry)
        if field.path in seen:
            raise SchemaFieldLoadError(f"Duplicate schema field path: {field.path}")
        seen.add(field.path)
        fields.append(field)
    return fields


def load_schema_fields(path: str | Path) -> list[SchemaField]:
    file_path = Path(path)
    if not file_path.exists():
        raise DataSourceNotFoundError(f"Schema fields file not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        return parse_schema_fields(data)
    except json.JSONDecodeError as exc:
        raise SchemaFieldLoadError(f"Invalid JSON in {file_path}: {exc}") from exc
    except ValidationError as exc:
        raise SchemaFieldLoadError(
            f"Invalid schema field in {file_path}: {exc}"
        ) from exc
