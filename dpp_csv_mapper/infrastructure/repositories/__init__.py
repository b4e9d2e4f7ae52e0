"""Repository implementations for mapping configs and schema fields."""

from .mapping_config_repository import (
    MappingConfigLoadError,
    MappingConfigSaveError,
    MappingConfigRepository,
    load_mapping_config,
    save_mapping_config,
)
from .schema_field_repository import (
    SchemaFieldLoadError,
    SchemaFieldRepository,
    load_schema_fields,
    parse_schema_fields,
)

__all__ = [
    "MappingConfigLoadError",
    "MappingConfigSaveError",
    "MappingConfigRepository",
    "SchemaFieldLoadError",
    "SchemaFieldRepository",
    "load_mapping_config",
    "load_schema_fields",
    "parse_schema_fields",
    "save_mapping_config",
]
