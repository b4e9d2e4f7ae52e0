import math
import re

from ...constants import Patterns

_JS_DECIMAL_RE = re.compile(Patterns.JS_DECIMAL, re.ASCII)


def parse_finite_number(text: str) -> float | None:
    """Parse ``text`` the way a JavaScript ``Number()`` call reads decimals.

    Surrounding whitespace is ignored. Returns None for blanks, non-numeric
    text and values that overflow to infinity.
    """
    stripped = text.strip()
    if not stripped or not _JS_DECIMAL_RE.fullmatch(stripped):
        return None
    value = float(stripped)
    if not math.isfinite(value):
        return None
    return value


def to_json_number(value: float) -> int | float:
    if value.is_integer():
        return int(value)
    return value


def is_blank(value: object) -> bool:
    if value is None or value == "":
        return True
    return isinstance(value, float) and math.isnan(value)


def js_string(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
