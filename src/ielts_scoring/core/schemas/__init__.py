"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_payload,
    normalize_keys,
    ValidationError,
    SCHEMA_NAMES,
)

__all__ = [
    "validate_payload",
    "normalize_keys",
    "ValidationError",
    "SCHEMA_NAMES",
]
