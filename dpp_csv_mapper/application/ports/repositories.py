from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.csv_table import CSVTable
    from ...domain.entities.mapping import MappingConfig
    from ...domain.entities.schema_field import SchemaField


@runtime_checkable
class CSVReaderPort(Protocol):
    pass

    def read_table(self, path: Path) -> CSVTable: ...


@runtime_checkable
class SchemaFieldRepositoryPort(Protocol):
    pass

    def load_fields(self, path: str | Path) -> list[SchemaField]: ...


@runtime_checkable
class MappingConfigRepositoryPort(Protocol):
    pass

    def load(self, path: str | Path) -> MappingConfig: ...

    def save(self, config: MappingConfig, path: str | Path) -> None: ...
