"""
configkey.core

Core infrastructure for configkey.

Exports:
- Exception classes
- Node, document and key types
- Validation utilities
- Logging helpers
"""

from .exceptions import (
    ConfigKeyError,
    MalformedDocumentError,
    ConfigError,
    ValidationError,
)

from .types import (
    ConfigNode,
    DictNode,
    ArrayNode,
    StringNode,
    IntegerNode,
    RealNode,
    BooleanNode,
    DataNode,
    DateNode,
    ConfigDocument,
    ConfigKey,
    to_node,
)

from .validation import (
    validate_hex_digest,
    validate_non_empty_string,
    validate_header_name,
    validate_unique_elements,
)

from .logging import get_logger, configure_logging

__all__ = [
    # Exceptions
    "ConfigKeyError",
    "MalformedDocumentError",
    "ConfigError",
    "ValidationError",
    # Types
    "ConfigNode",
    "DictNode",
    "ArrayNode",
    "StringNode",
    "IntegerNode",
    "RealNode",
    "BooleanNode",
    "DataNode",
    "DateNode",
    "ConfigDocument",
    "ConfigKey",
    "to_node",
    # Validation
    "validate_hex_digest",
    "validate_non_empty_string",
    "validate_header_name",
    "validate_unique_elements",
    # Logging
    "get_logger",
    "configure_logging",
]
