"""
configkey

Config Key derivation for Safe Exam Browser configuration files.

    >>> from configkey import generate
    >>> generate(open("exam.seb", "rb").read()).hash
"""

from .core.exceptions import ConfigKeyError, MalformedDocumentError, ConfigError, ValidationError
from .core.types import ConfigDocument, ConfigKey
from .plist import parse, to_xml, PropertyList
from .keygen import canonicalize, generate, generate_from_file

__version__ = "0.1.0"

__all__ = [
    "ConfigKeyError",
    "MalformedDocumentError",
    "ConfigError",
    "ValidationError",
    "ConfigDocument",
    "ConfigKey",
    "parse",
    "to_xml",
    "PropertyList",
    "canonicalize",
    "generate",
    "generate_from_file",
]
