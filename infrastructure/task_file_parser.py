from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from core import Task


class TaskFileParser:
    """Reads and writes `<id>.task` files.

    Layout: a YAML front-matter block between `---` lines holding the row
    fields, followed by the description as the body.
    """

    @staticmethod
    def _coerce_id(value: Any, field: str) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError(f"{field} must be an integer, got {value!r}")
        return int(value)

    @classmethod
    def _coerce_parent(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        return cls._coerce_id(value, "parent")

    @staticmethod
    def _coerce_timestamp(value: Any) -> str:
        """YAML may load ISO timestamps as datetime objects; keep them as strings."""
        if value is None:
            return ""
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return str(value)

    @classmethod
    def parse(cls, filepath: Path) -> Optional[Task]:
        """Parse a task file; None when the file is missing or has no front matter.

        Raises ValueError (or yaml.YAMLError) for malformed metadata.
        """
        if not filepath.exists():
            return None
        content = filepath.read_text(encoding="utf-8")
        parts = content.split("---", 2)
        if len(parts) < 3:
            return None
        metadata = yaml.safe_load(parts[1]) or {}
        if not isinstance(metadata, dict):
            raise ValueError(f"front matter of {filepath.name} is not a mapping")
        body = parts[2].removeprefix("\n").removesuffix("\n")
        return Task(
            id=cls._coerce_id(metadata["id"], "id") if "id" in metadata else int(filepath.stem),
            description=body,
            complete=bool(metadata.get("complete", False)),
            parent=cls._coerce_parent(metadata.get("parent")),
        )

    @classmethod
    def created_at(cls, filepath: Path) -> str:
        if not filepath.exists():
            return ""
        parts = filepath.read_text(encoding="utf-8").split("---", 2)
        if len(parts) < 3:
            return ""
        metadata = yaml.safe_load(parts[1]) or {}
        return cls._coerce_timestamp(metadata.get("created_at"))

    @staticmethod
    def to_file_content(task: Task, created_at: str = "") -> str:
        metadata = {
            "id": task.id,
            "parent": task.parent,
            "complete": task.complete,
        }
        if created_at:
            metadata["created_at"] = created_at
        header = yaml.safe_dump(metadata, allow_unicode=True, sort_keys=False)
        return f"---\n{header}---\n{task.description}\n"
