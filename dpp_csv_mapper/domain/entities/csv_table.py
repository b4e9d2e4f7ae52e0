from dataclasses import dataclass, field


@dataclass(slots=True)
class CSVTable:
    """Parsed CSV content: ordered headers plus one dict per data row.

    Values are kept as the raw strings found in the file; empty cells are
    ``""``.
    """

    headers: list[str]
    rows: list[dict[str, str]] = field(default_factory=list)
    source: str | None = None

    @property
    def row_count(self) -> int:
        return len(self.rows)
