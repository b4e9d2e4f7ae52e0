"""Header to field-path match scoring.

Scores are distances: 0 is a perfect match, lower is better and
``math.inf`` means no usable signal. The first three tiers (exact path,
synonym, exact leaf) short-circuit; the fuzzy, acronym and token tiers
compete and the best qualifying candidate wins.
"""

from __future__ import annotations

from collections.abc import Iterable
import math

from ....constants import SYNONYM_MAP, Scores
from ...entities.schema_field import SchemaField
from .utils import (
    generate_acronym,
    generate_path_acronym,
    jaccard_similarity,
    leaf_segment,
    levenshtein_distance,
    normalize_text,
    tokenize,
)


def fuzzy_threshold(header_length: int) -> int:
    if header_length <= 4:
        return 0
    if header_length <= 8:
        return 1
    return 3


def acronym_threshold(acronym_length: int) -> int:
    if acronym_length < 4:
        return 0
    return min(2, acronym_length // 3)


def compute_match_score(header: str | None, field_path: str | None) -> float:
    """Score how well ``header`` describes ``field_path``.

    Args:
        header: Raw CSV column header
        field_path: Dot separated schema path, e.g. ``physicalDimensions.weight``

    Returns:
        Match distance, ``math.inf`` when no tier qualifies
    """
    if not header or not field_path:
        return math.inf

    normalized_header = normalize_text(header)
    normalized_field = normalize_text(field_path)
    normalized_leaf = normalize_text(leaf_segment(field_path))

    if normalized_field == normalized_header:
        return Scores.EXACT

    for term, target in SYNONYM_MAP.items():
        if normalize_text(term) == normalized_header and field_path == target:
            return Scores.SYNONYM

    if normalized_leaf == normalized_header:
        return Scores.LEAF

    best = math.inf

    fuzzy_distance = min(
        levenshtein_distance(normalized_header, normalized_leaf),
        levenshtein_distance(normalized_header, normalized_field),
    )
    if fuzzy_distance <= fuzzy_threshold(len(normalized_header)):
        best = min(best, Scores.FUZZY_BASE + fuzzy_distance)

    best = min(best, _acronym_score(header, field_path, normalized_header))
    best = min(best, _token_score(header, field_path))
    return best


def _acronym_score(header: str, field_path: str, normalized_header: str) -> float:
    header_acronym = generate_acronym(header)
    field_acronym = normalize_text(generate_path_acronym(field_path))

    distance = levenshtein_distance(normalized_header, field_acronym)
    # Short header acronyms ("c" for "Category") match far too much.
    if len(header_acronym) >= Scores.ACRONYM_MIN_HEADER_LETTERS:
        distance = min(
            distance,
            levenshtein_distance(normalize_text(header_acronym), field_acronym),
        )
    if distance <= acronym_threshold(len(field_acronym)):
        return Scores.FUZZY_BASE + distance
    return math.inf


def _token_score(header: str, field_path: str) -> float:
    jaccard = jaccard_similarity(tokenize(header), tokenize(field_path))
    if jaccard is None or jaccard < Scores.TOKEN_MIN_JACCARD:
        return math.inf
    return Scores.TOKEN_BASE + (1 - jaccard) * Scores.TOKEN_WEIGHT


def find_best_match(
    header: str | None, fields: Iterable[SchemaField | str] | None
) -> str | None:
    """Best single path for one header, ignoring every other header.

    Prefer ``build_mapping`` for a whole CSV; this is a local optimum only.
    """
    if not header or not fields:
        return None
    best_path: str | None = None
    best_score = math.inf
    for field in fields:
        path = field.path if isinstance(field, SchemaField) else field
        score = compute_match_score(header, path)
        if score < best_score:
            best_score = score
            best_path = path
    return best_path
