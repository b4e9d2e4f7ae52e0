"""Global greedy mapping engine for CSV headers to DPP field paths.

This module provides the MappingEngine class which scores every header
against every schema field, assigns the best pairs first and then resolves
array indices for headers that landed on array fields.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re

from ....constants import Defaults, Patterns
from ...entities.mapping import IndexedSuggestion, MatchCandidate
from ...entities.schema_field import SchemaField, coerce_field
from .scorer import compute_match_score

_HEADER_NUMBER_RE = re.compile(Patterns.HEADER_NUMBER)


class MappingEngine:
    """Engine for building a header -> field path mapping.

    Assignment is greedy by ascending score, not a globally optimal
    matching: ties keep header-then-field enumeration order.

    Example:
        >>> engine = MappingEngine(fields)
        >>> mapping = engine.build(["EAN", "Weight"])
        >>> mapping["EAN"]
        'identifiers.gtin'
    """

    def __init__(
        self,
        fields: Iterable[SchemaField | str],
        *,
        score_cutoff: float = Defaults.SCORE_CUTOFF,
    ) -> None:
        """Initialize the mapping engine.

        Args:
            fields: Flattened schema fields, or bare (non-array) paths
            score_cutoff: Pairs scoring at or above this are never considered
        """
        self.fields: list[SchemaField] = [coerce_field(f) for f in fields]
        self.score_cutoff = score_cutoff
        self._array_paths: set[str] = {f.path for f in self.fields if f.is_array}

    def candidates(self, headers: Iterable[str]) -> list[MatchCandidate]:
        """Score all pairs and return the hopeful ones, best first."""
        candidates: list[MatchCandidate] = []
        for header in headers:
            for field in self.fields:
                score = compute_match_score(header, field.path)
                if score < self.score_cutoff:
                    candidates.append(
                        MatchCandidate(header=header, field=field, score=score)
                    )
        candidates.sort(key=lambda candidate: candidate.score)
        return candidates

    def build(self, headers: Iterable[str]) -> dict[str, str]:
        """Build the header -> path mapping.

        Args:
            headers: CSV headers in file order

        Returns:
            Mapping for every header that received a field; unmatched
            headers are absent
        """
        mapping: dict[str, str] = {}
        used_fields: set[str] = set()

        for candidate in self.candidates(headers):
            if candidate.header in mapping:
                continue
            path = candidate.field.path
            if not candidate.field.is_array and path in used_fields:
                continue
            mapping[candidate.header] = path
            used_fields.add(path)

        self._apply_array_indices(mapping)
        return mapping

    def _apply_array_indices(self, mapping: dict[str, str]) -> None:
        headers_by_root: dict[str, list[str]] = {}
        for header, path in mapping.items():
            if path in self._array_paths:
                headers_by_root.setdefault(path.split(".")[0], []).append(header)

        for root, headers in headers_by_root.items():
            id_groups: dict[int, list[str]] = {}
            unnumbered: list[str] = []
            for header in headers:
                # First digit run wins: "Item2024Name 3" groups under 2024.
                match = _HEADER_NUMBER_RE.search(header)
                if match:
                    id_groups.setdefault(int(match.group(0)), []).append(header)
                else:
                    unnumbered.append(header)

            current_index = 0
            for group_id in sorted(id_groups):
                for header in id_groups[group_id]:
                    mapping[header] = _with_root_index(mapping[header], root, current_index)
                current_index += 1

            group_paths: set[str] = set()
            for header in sorted(unnumbered):
                path = mapping[header]
                if path in group_paths:
                    current_index += 1
                    group_paths.clear()
                group_paths.add(path)
                mapping[header] = _with_root_index(path, root, current_index)


def _with_root_index(path: str, root: str, index: int) -> str:
    parts = path.split(".")
    parts[0] = f"{root}[{index}]"
    return ".".join(parts)


def build_mapping(
    headers: Iterable[str] | None,
    fields: Iterable[SchemaField | str] | None,
    *,
    score_cutoff: float = Defaults.SCORE_CUTOFF,
) -> dict[str, str]:
    if headers is None or fields is None:
        return {}
    return MappingEngine(fields, score_cutoff=score_cutoff).build(headers)


def find_used_indices(mapping: Mapping[str, str] | None, array_root: str) -> set[int]:
    """Collect the ``n`` of every ``array_root[n]...`` path in the mapping."""
    indices: set[int] = set()
    if not mapping or not array_root:
        return indices
    pattern = re.compile(f"^{re.escape(array_root)}\\[(\\d+)\\]")
    for path in mapping.values():
        if not path:
            continue
        match = pattern.match(path)
        if match:
            indices.add(int(match.group(1)))
    return indices


def suggest_indexed_paths(
    field: SchemaField | str, used_indices: Iterable[int]
) -> list[IndexedSuggestion]:
    """Offer to join each existing array item, then to start a new one.

    Args:
        field: Target field; scalars yield a single ``scalar`` suggestion
        used_indices: Indices already used for the field's array root

    Returns:
        ``existing`` suggestions in ascending index order plus one ``new``
    """
    field = coerce_field(field)
    if not field.is_array:
        return [IndexedSuggestion(value=field.path, type="scalar", index=-1)]

    root, _, rest = field.path.partition(".")
    suffix = f".{rest}" if rest else ""
    ordered = sorted(set(used_indices))
    suggestions = [
        IndexedSuggestion(value=f"{root}[{idx}]{suffix}", type="existing", index=idx)
        for idx in ordered
    ]
    next_index = ordered[-1] + 1 if ordered else 0
    suggestions.append(
        IndexedSuggestion(value=f"{root}[{next_index}]{suffix}", type="new", index=next_index)
    )
    return suggestions


def list_target_suggestions(
    fields: Iterable[SchemaField | str],
    mapping: Mapping[str, str],
    *,
    current_value: str = "",
    filter_text: str = "",
) -> list[IndexedSuggestion]:
    """Targets a header may still be pointed at, given the other headers.

    Paths already taken by another header are hidden, except the header's
    own ``current_value``. Matching on ``filter_text`` is a case-insensitive
    substring test.
    """
    needle = filter_text.lower()
    taken = {path for path in mapping.values() if path and path != current_value}
    suggestions: list[IndexedSuggestion] = []
    for field in (coerce_field(f) for f in fields):
        if field.is_array:
            used = find_used_indices(mapping, field.array_root)
            options = suggest_indexed_paths(field, used)
        else:
            options = [IndexedSuggestion(value=field.path, type="scalar", index=-1)]
        for option in options:
            if option.value != current_value and option.value in taken:
                continue
            if needle in option.value.lower():
                suggestions.append(option)
    return suggestions
