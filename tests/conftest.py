import json
from pathlib import Path

import pytest

from dpp_csv_mapper.domain.entities.schema_field import SchemaField

_CONFIG_ENV_VARS = (
    "DPP_CONTEXT_BASE_URL",
    "DPP_SAMPLE_LIMIT",
    "DPP_SCORE_CUTOFF",
    "DPP_SECTORS",
)


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer DPP_* settings from leaking into the tests."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def product_fields() -> list[SchemaField]:
    return [
        SchemaField(path="identifiers.gtin", type="string", required=True),
        SchemaField(path="tradeName", type="string"),
        SchemaField(path="physicalDimensions.weight", type="number"),
        SchemaField(path="documents", type="array", isArray=True),
        SchemaField(path="documents.title", type="string", isArray=True, required=True),
        SchemaField(path="documents.url", type="string", format="uri", isArray=True),
        SchemaField(
            path="granularity", type="string", enum=["Item", "Batch", "Model"]
        ),
    ]


@pytest.fixture
def product_csv(tmp_path: Path) -> Path:
    csv_file = tmp_path / "products.csv"
    csv_file.write_text(
        "EAN,Weight,Documents 1 Title,Documents 2 Title\n"
        "4006381333931,10.5,Manual,Safety Sheet\n"
        "4006381333948,7,Guide,\n",
        encoding="utf-8",
    )
    return csv_file


@pytest.fixture
def fields_file(tmp_path: Path, product_fields: list[SchemaField]) -> Path:
    path = tmp_path / "fields.json"
    payload = [field.model_dump(by_alias=True, exclude_none=True) for field in product_fields]
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
