from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .schema_field import SchemaField

ConflictGroup = list[str]
SuggestionType = Literal["existing", "new", "scalar"]


class MappingConfig(BaseModel):
    mappings: dict[str, str] = Field(default_factory=dict)
    sectors: list[str] = Field(default_factory=list)

    @property
    def mapped_paths(self) -> list[str]:
        return [path for path in self.mappings.values() if path]

    def active(self) -> dict[str, str]:
        return {header: path for header, path in self.mappings.items() if path}

    def with_headers(self, headers: list[str]) -> MappingConfig:
        """Return a copy listing every header, unmapped ones as ``""``."""
        complete = {header: self.mappings.get(header, "") for header in headers}
        for header, path in self.mappings.items():
            complete.setdefault(header, path)
        return MappingConfig(mappings=complete, sectors=list(self.sectors))

    @classmethod
    def from_payload(cls, payload: object) -> MappingConfig:
        if isinstance(payload, Mapping) and isinstance(
            payload.get("mappings"), Mapping
        ):
            return cls.model_validate(payload)
        return cls.model_validate({"mappings": payload})


@dataclass(slots=True)
class MatchCandidate:
    header: str
    field: SchemaField
    score: float


@dataclass(frozen=True, slots=True)
class IndexedSuggestion:
    value: str
    type: SuggestionType
    index: int


def merge_mappings(base: MappingConfig, extra: Mapping[str, str]) -> MappingConfig:
    merged = dict(base.mappings)
    for header, path in extra.items():
        if not merged.get(header):
            merged[header] = path
    base.mappings = merged
    return base
