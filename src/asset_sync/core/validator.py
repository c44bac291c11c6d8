"""JSON Schema checks for asset header fields.

This module loads the header schema shipped with the package and checks
individual header values against it. The validation engine turns the
resulting errors into pass/warn/fail outcomes.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

# Path to the schema file (relative to this module)
SCHEMA_PATH = Path(__file__).parent / "schemas" / "agent_header.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def required_fields() -> list[str]:
    """Header keys the schema marks as required."""
    return list(load_schema().get("required", []))


def allowed_values(field_name: str) -> list[str]:
    """Enumerated values for a field, or an empty list if it has none."""
    return list(load_schema()["properties"].get(field_name, {}).get("enum", []))


def field_error(field_name: str, value: str) -> ValidationError | None:
    """Check one header value against its property schema.

    Args:
        field_name: Header key, e.g. 'name'
        value: Raw string value from the header block

    Returns:
        The first schema violation, or None if the value conforms. The
        error's ``validator`` attribute names the failed keyword
        ('pattern', 'minLength', 'enum', ...).
    """
    subschema = load_schema()["properties"].get(field_name)
    if subschema is None:
        return None

    validator = jsonschema.Draft7Validator(subschema)
    return next(iter(validator.iter_errors(value)), None)
