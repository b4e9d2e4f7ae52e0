from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field


class OneOfTag(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    group_id: str = Field(alias="groupId")
    index: int

    @property
    def owner(self) -> str:
        return self.group_id.split("#")[0] or "root"


class OntologyInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    range: str | None = None
    unit: str | None = None
    enum: list[str] | None = None
    label: str | None = None
    description: str | None = None

    @property
    def range_term(self) -> str | None:
        """Local name of the range, e.g. ``double`` for ``xsd:double``."""
        if not self.range:
            return None
        term = self.range.rsplit("#", 1)[-1]
        if term.startswith("xsd:"):
            term = term[len("xsd:") :]
        return term


class SchemaField(BaseModel):
    """A flattened target schema field addressed by a dotted path."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: str
    type: str | list[str] | None = None
    format: str | None = None
    enum: list[str] | None = None
    required: bool = False
    is_array: bool = Field(default=False, alias="isArray")
    min_items: int | None = Field(default=None, alias="minItems")
    one_of: list[OneOfTag] = Field(default_factory=list, alias="oneOf")
    ontology: OntologyInfo | None = None

    @property
    def primary_type(self) -> str | None:
        if isinstance(self.type, list):
            for member in self.type:
                if member and member != "null":
                    return member
            return None
        return self.type

    @property
    def is_array_container(self) -> bool:
        return self.primary_type == "array"

    @property
    def parent_path(self) -> str:
        if "." not in self.path:
            return ""
        return self.path.rsplit(".", 1)[0]

    @property
    def leaf(self) -> str:
        return self.path.rsplit(".", 1)[-1]

    @property
    def array_root(self) -> str:
        return self.path.split(".")[0]

    @property
    def allowed_values(self) -> list[str] | None:
        if self.enum is not None:
            return self.enum
        if self.ontology is not None:
            return self.ontology.enum
        return None


def coerce_field(field: SchemaField | str) -> SchemaField:
    if isinstance(field, SchemaField):
        return field
    return SchemaField(path=field)


def index_fields(fields: Iterable[SchemaField | str]) -> dict[str, SchemaField]:
    indexed: dict[str, SchemaField] = {}
    for field in fields:
        coerced = coerce_field(field)
        indexed[coerced.path] = coerced
    return indexed
