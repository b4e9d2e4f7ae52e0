import json
from pathlib import Path
from typing import Any

from .exceptions import DataWriteError


def write_json(payload: Any, path: str | Path) -> Path:
    """Write ``payload`` as indented UTF-8 JSON, creating parent folders."""
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
    except (OSError, TypeError, ValueError) as exc:
        raise DataWriteError(f"Failed to write {file_path}: {exc}") from exc
    return file_path


class JSONRecordWriter:
    pass

    def write(self, records: list[dict[str, Any]], path: str | Path) -> Path:
        return write_json(records, path)
