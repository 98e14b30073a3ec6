"""
configkey.core.exceptions

All custom exceptions for configkey.

Design: Fail fast and loud with informative errors.
"""


class ConfigKeyError(Exception):
    """Base exception for all configkey errors."""
    pass


class MalformedDocumentError(ConfigKeyError):
    """Input is not a well-formed, dict-rooted plist document.
    
    Raised before any hashing happens, so no partial Config Key
    is ever produced from a corrupt document.
    """
    
    PREFIX = "Invalid PList XML string, representing SEB config"
    
    def __init__(self, reason: str = ""):
        self.reason = reason
        message = f"{self.PREFIX}: {reason}" if reason else self.PREFIX
        super().__init__(message)


class ConfigError(ConfigKeyError):
    """Configuration invalid or missing.
    
    Raised when settings files are malformed or required fields are absent.
    """
    pass


class ValidationError(ConfigKeyError):
    """Input validation failed.
    
    Raised when hash strings, header names or key lists fail boundary checks.
    """
    pass
