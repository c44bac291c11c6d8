"""Core utilities for asset documents.

This package contains header parsing, type definitions and the
schema checks used by both the catalog and the validation engine.
"""

from .header import HEADER_DELIMITER, HeaderBlock, parse_header, read_header_field
from .types import CopyStatus, OutcomeStatus
from .validator import allowed_values, field_error, load_schema, required_fields

__all__ = [
    "CopyStatus",
    "HEADER_DELIMITER",
    "HeaderBlock",
    "OutcomeStatus",
    "allowed_values",
    "field_error",
    "load_schema",
    "parse_header",
    "read_header_field",
    "required_fields",
]
