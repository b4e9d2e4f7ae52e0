"""DPP CSV Mapper package.

Tools for turning flat product CSV exports into Digital Product Passport
(DPP) JSON-LD records.

Features:
- Column type profiling
- Heuristic header to schema field mapping
- oneOf conflict and required field checks
- JSON-LD record generation with sector contexts
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("dpp-csv-mapper")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from dpp_csv_mapper.domain.entities.schema_field import SchemaField
from dpp_csv_mapper.domain.services.column_profiler import analyze_column
from dpp_csv_mapper.domain.services.mapping import build_mapping
from dpp_csv_mapper.domain.services.record_materializer import generate_records

__all__ = [
    "__version__",
    "SchemaField",
    "analyze_column",
    "build_mapping",
    "generate_records",
]
