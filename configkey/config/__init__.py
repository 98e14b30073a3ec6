"""
configkey.config

Configuration management for configkey.

Exports:
- Config schemas
- Loading/saving utilities
- Hashing helpers
"""

from .schema import (
    ConfigKeySettings,
    GeneratorConfig,
    AccessConfig,
    LoggingConfig,
)

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

from .hashing import (
    sha256_hex,
    settings_fingerprint,
)

__all__ = [
    # Schemas
    "ConfigKeySettings",
    "GeneratorConfig",
    "AccessConfig",
    "LoggingConfig",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
    # Hashing
    "sha256_hex",
    "settings_fingerprint",
]
