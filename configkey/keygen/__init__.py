"""
configkey.keygen

Config Key generation and request-hash checks.

Exports:
- generate / generate_from_file / canonicalize
- Request hash validation
"""

from .generator import (
    canonicalize,
    generate,
    generate_from_file,
)

from .access import (
    request_hash,
    validate_config_key,
    validate_browser_exam_keys,
    AccessValidator,
)

__all__ = [
    # Generation
    "canonicalize",
    "generate",
    "generate_from_file",
    # Access checks
    "request_hash",
    "validate_config_key",
    "validate_browser_exam_keys",
    "AccessValidator",
]
