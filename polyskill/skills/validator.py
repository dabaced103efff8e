"""JSON Schema validation for skill manifests and tool definitions.

Both schemas ship inside the package (``polyskill/schemas``) and are
compiled once at import time. Validation never raises for decoded JSON
input: the result carries a validity flag and every violated constraint.

Usage::

    result = validate_manifest(json.loads(raw))
    if not result.valid:
        for line in result.errors:
            print(line)   # e.g. "/version: '1.0.0garbage' does not match ..."
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"


def _load_schema(file_name: str) -> dict[str, Any]:
    """Load a bundled JSON schema."""
    with open(SCHEMA_DIR / file_name, encoding="utf-8") as f:
        return json.load(f)


MANIFEST_SCHEMA = _load_schema("skill-manifest.schema.json")
TOOLS_SCHEMA = _load_schema("tool-definition.schema.json")

Draft7Validator.check_schema(MANIFEST_SCHEMA)
Draft7Validator.check_schema(TOOLS_SCHEMA)

_manifest_validator = Draft7Validator(
    MANIFEST_SCHEMA, format_checker=Draft7Validator.FORMAT_CHECKER
)
_tools_validator = Draft7Validator(
    TOOLS_SCHEMA, format_checker=Draft7Validator.FORMAT_CHECKER
)

# Scoped skill name rule, shared with the scaffolder prompts
SKILL_NAME_PATTERN: str = MANIFEST_SCHEMA["properties"]["name"]["pattern"]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one document."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def _run(validator: Draft7Validator, data: Any) -> ValidationResult:
    errors = [
        f"{_pointer(error.absolute_path)}: {error.message}"
        for error in validator.iter_errors(data)
    ]
    if not errors:
        return ValidationResult(valid=True)
    return ValidationResult(valid=False, errors=errors)


def _escape(part: Any) -> str:
    return str(part).replace("~", "~0").replace("/", "~1")


def _pointer(path) -> str:
    """Render an error path as an RFC 6901 JSON pointer, ``/`` for the document root."""
    if not path:
        return "/"
    return "".join(f"/{_escape(part)}" for part in path)


def validate_manifest(data: Any) -> ValidationResult:
    """Validate a decoded ``skill.json`` document.

    Args:
        data: Any decoded JSON value

    Returns:
        ValidationResult listing every violated constraint
    """
    return _run(_manifest_validator, data)


def validate_tools(data: Any) -> ValidationResult:
    """Validate a decoded ``tools.json`` document.

    Args:
        data: Any decoded JSON value

    Returns:
        ValidationResult listing every violated constraint
    """
    return _run(_tools_validator, data)
