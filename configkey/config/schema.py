"""
configkey.config.schema

Configuration schemas using dataclasses.

Design: All config fields have explicit types. Defaults only at top level.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..core.exceptions import ValidationError
from ..core.validation import (
    validate_header_name,
    validate_hex_digest,
    validate_non_empty_string,
    validate_unique_elements,
)


@dataclass
class GeneratorConfig:
    """Config Key generation settings.
    
    These must match what the client does; changing them changes every key.
    """
    excluded_keys: Tuple[str, ...] = ("originatorVersion",)
    prune_empty_dicts: bool = True
    
    def __post_init__(self):
        self.excluded_keys = tuple(self.excluded_keys)
        if any(not isinstance(k, str) for k in self.excluded_keys):
            raise ValueError("excluded_keys must contain only strings")


@dataclass
class AccessConfig:
    """Request header checks against the Config Key and Browser Exam Keys.
    
    basic_header and basic_header_token identify the exam browser when
    neither key is available (client-side configuration, no allow-list).
    """
    config_key_header: str = "X-SafeExamBrowser-ConfigKeyHash"
    browser_exam_key_header: str = "X-SafeExamBrowser-RequestHash"
    allowed_browser_exam_keys: List[str] = field(default_factory=list)
    basic_header: str = "User-Agent"
    basic_header_token: str = "SEB"
    
    def __post_init__(self):
        try:
            validate_header_name(self.config_key_header, "config_key_header")
            validate_header_name(self.browser_exam_key_header, "browser_exam_key_header")
            validate_header_name(self.basic_header, "basic_header")
            validate_non_empty_string(self.basic_header_token, "basic_header_token")
            keys = [k.strip().lower() for k in self.allowed_browser_exam_keys]
            for key in keys:
                validate_hex_digest(key, "allowed_browser_exam_keys entry")
            validate_unique_elements(keys, "allowed_browser_exam_keys")
        except (ValidationError, AttributeError) as e:
            raise ValueError(str(e))
        self.allowed_browser_exam_keys = keys


@dataclass
class LoggingConfig:
    """Log output for command-line use."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
    
    def __post_init__(self):
        if self.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {self.level}")
        self.level = self.level.upper()


@dataclass
class ConfigKeySettings:
    """Top-level configuration.
    
    This is the ONLY place defaults are composed.
    All sub-configs receive explicit values.
    """
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    access: AccessConfig = field(default_factory=AccessConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
