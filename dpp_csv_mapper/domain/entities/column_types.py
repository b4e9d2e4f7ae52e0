from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ColumnTypeInfo:
    type: str
    format: str | None = None

    def as_dict(self) -> dict[str, str]:
        payload = {"type": self.type}
        if self.format:
            payload["format"] = self.format
        return payload

    def describe(self) -> str:
        return f"{self.type} ({self.format})" if self.format else self.type


ColumnTypes = Mapping[str, ColumnTypeInfo]
