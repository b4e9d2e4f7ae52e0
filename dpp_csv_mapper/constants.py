from typing import ClassVar


class Defaults:
    SAMPLE_LIMIT = 100
    SCORE_CUTOFF = 5.0
    CONFIG_FILE = "dpp_csv_mapper.toml"


class ContextUrls:
    BASE = "https://dpp-keystone.org/spec/contexts/v1/"
    CORE_FILE = "dpp-core.context.jsonld"
    SECTOR_TEMPLATE = "dpp-{sector}.context.jsonld"


class Scores:
    EXACT = 0.0
    SYNONYM = 0.05
    LEAF = 0.1
    FUZZY_BASE = 1.0
    TOKEN_BASE = 0.2
    TOKEN_WEIGHT = 5.0
    TOKEN_MIN_JACCARD = 0.4
    ACRONYM_MIN_HEADER_LETTERS = 3


class ColumnTypes:
    EMPTY = "empty"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"


class Formats:
    DATE_TIME = "date-time"
    DATE = "date"
    EMAIL = "email"
    URI = "uri"
    URI_REFERENCE = "uri-reference"
    DATE_FORMATS: ClassVar[tuple[str, ...]] = ("date-time", "date")


class Patterns:
    ISO_DATE_TIME = "\\d{4}-\\d{2}-\\d{2}(T\\d{2}:\\d{2}(:\\d{2}(\\.\\d+)?)?(Z|[+-]\\d{2}:?\\d{2})?)?"
    EMAIL = "[^\\s@]+@[^\\s@]+\\.[^\\s@]+"
    URI = "[a-z][a-z0-9+.-]*:\\S+"
    URI_REFERENCE = "([a-z][a-z0-9+.-]*:\\S+|/\\S*)"
    JS_DECIMAL = "[+-]?(\\d+\\.?\\d*|\\.\\d+)([eE][+-]?\\d+)?"
    ARRAY_INDEX = "\\[\\d+\\]"
    HEADER_NUMBER = "[0-9]+"


BOOLEAN_LITERALS: frozenset[str] = frozenset(
    {"true", "false", "0", "1", "yes", "no"}
)

# Lowercase industry terms -> canonical DPP field paths.
SYNONYM_MAP: dict[str, str] = {
    "ean": "identifiers.gtin",
    "gtin": "identifiers.gtin",
    "brand": "tradeName",
    "manufacturer": "manufacturer.name",
    "expiry": "lifespan.manufactureDate",
    "weight": "physicalDimensions.weight",
    "width": "physicalDimensions.width",
    "height": "physicalDimensions.height",
    "depth": "physicalDimensions.depth",
    "length": "physicalDimensions.length",
}
