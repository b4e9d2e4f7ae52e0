import re

from rapidfuzz.distance import Levenshtein

_NON_ALNUM_RE = re.compile("[^a-z0-9]")
_CAMEL_BOUNDARY_RE = re.compile("([a-z])([A-Z])")
_TOKEN_SPLIT_RE = re.compile("[.\\s_-]+")
_UPPER_SPLIT_RE = re.compile("(?=[A-Z])")
_UPPER_RE = re.compile("[A-Z]")


def normalize_text(text: str) -> str:
    return _NON_ALNUM_RE.sub("", text.replace("%", "Percentage").lower())


def tokenize(text: str | None) -> set[str]:
    if not text:
        return set()
    spaced = _CAMEL_BOUNDARY_RE.sub("\\1 \\2", text.replace("%", "Percentage"))
    tokens: set[str] = set()
    for part in _TOKEN_SPLIT_RE.split(spaced):
        clean = _NON_ALNUM_RE.sub("", part.lower())
        if clean:
            tokens.add(clean)
    return tokens


def generate_acronym(text: str | None) -> str:
    if not text:
        return ""
    if " " in text:
        parts = text.split(" ")
    else:
        parts = _UPPER_SPLIT_RE.split(text)
    return "".join(part[:1].lower() for part in parts)


def generate_path_acronym(path: str | None) -> str:
    if not path:
        return ""
    pieces: list[str] = []
    for segment in path.split("."):
        if len(segment) < 4 and not _UPPER_RE.search(segment):
            pieces.append(segment)
        else:
            pieces.append(generate_acronym(segment))
    return "".join(pieces)


def levenshtein_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def jaccard_similarity(left: set[str], right: set[str]) -> float | None:
    union = left | right
    if not union:
        return None
    return len(left & right) / len(union)


def leaf_segment(path: str) -> str:
    return path.split(".")[-1]
