"""Utility functions for PolySkill."""

import json
from pathlib import Path
from typing import Any


def dump_json(obj: Any) -> str:
    """Serialize to pretty-printed JSON (two-space indent, UTF-8 kept as-is)."""
    return json.dumps(obj, indent=2, ensure_ascii=False)


def write_json(path: Path, obj: Any) -> Path:
    """Write pretty-printed JSON to a file and return the path."""
    path.write_text(dump_json(obj), encoding="utf-8")
    return path


def scoped_name_to_dirname(name: str) -> str:
    """Turn a scoped skill name into a single path segment.

    ``@acme/weather`` becomes ``@acme__weather``.
    """
    return name.replace("/", "__")


def truncate_string(s: str, max_length: int = 200) -> str:
    """Truncate string to max length with ellipsis."""
    if len(s) <= max_length:
        return s
    return s[:max_length - 3] + "..."
