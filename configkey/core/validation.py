"""
configkey.core.validation

Boundary validation functions.

Design: Validate at API boundaries, trust internally.
All validation functions raise ValidationError on failure.
"""

import re
from typing import Any, Sequence

from .exceptions import ValidationError

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def validate_hex_digest(
    value: Any,
    name: str = "digest",
    length: int = 64,
    lowercase: bool = True,
) -> None:
    """Validate value is a hex-encoded digest.
    
    Args:
        value: Candidate digest string.
        name: Name for error messages.
        length: Expected number of hex characters (64 for SHA-256).
        lowercase: Reject upper-case hex digits.
    
    Raises:
        ValidationError: If value is not a hex string of the expected length.
    """
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {type(value).__name__}")
    if len(value) != length or not _HEX_DIGITS.fullmatch(value):
        raise ValidationError(f"{name} must be {length} hex characters, got {value!r}")
    if lowercase and value != value.lower():
        raise ValidationError(f"{name} must be lower-case hex, got {value!r}")


def validate_non_empty_string(value: Any, name: str = "value") -> None:
    """Validate value is a string with non-whitespace content."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must be a non-empty string, got {value!r}")


def validate_header_name(value: Any, name: str = "header") -> None:
    """Validate value is usable as an HTTP header name (token characters only)."""
    validate_non_empty_string(value, name)
    if not re.fullmatch(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+", value):
        raise ValidationError(f"{name} is not a valid header name: {value!r}")


def validate_unique_elements(seq: Sequence, name: str = "sequence") -> None:
    """Validate all elements in sequence are unique."""
    if len(seq) != len(set(seq)):
        seen = set()
        duplicates = set()
        for item in seq:
            if item in seen:
                duplicates.add(item)
            seen.add(item)
        raise ValidationError(f"{name} contains duplicates: {sorted(duplicates)}")
