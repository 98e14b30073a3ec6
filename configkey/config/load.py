"""
configkey.config.load

Config loading and validation.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import ConfigKeySettings, GeneratorConfig, AccessConfig, LoggingConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> ConfigKeySettings:
    """Load configuration from YAML file."""
    path = Path(path)
    
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    
    # An empty file means all defaults
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config in {path} must be a mapping, got {type(raw).__name__}")
    
    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> ConfigKeySettings:
    """Create ConfigKeySettings from dictionary."""
    unknown = set(d) - {"generator", "access", "logging"}
    if unknown:
        raise ConfigError(f"Unknown config sections: {sorted(unknown)}")
    
    try:
        generator_dict = dict(d.get("generator") or {})
        
        # YAML has no tuples
        if "excluded_keys" in generator_dict:
            generator_dict["excluded_keys"] = tuple(generator_dict["excluded_keys"] or ())
        
        generator = GeneratorConfig(**generator_dict)
        access = AccessConfig(**(d.get("access") or {}))
        logging_config = LoggingConfig(**(d.get("logging") or {}))
        
        return ConfigKeySettings(
            generator=generator,
            access=access,
            logging=logging_config,
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(config: ConfigKeySettings, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    d = config_to_dict(config)
    
    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: ConfigKeySettings) -> Dict[str, Any]:
    """Convert ConfigKeySettings to dictionary."""
    return {
        "generator": {
            "excluded_keys": list(config.generator.excluded_keys),
            "prune_empty_dicts": config.generator.prune_empty_dicts,
        },
        "access": {
            "config_key_header": config.access.config_key_header,
            "browser_exam_key_header": config.access.browser_exam_key_header,
            "allowed_browser_exam_keys": list(config.access.allowed_browser_exam_keys),
            "basic_header": config.access.basic_header,
            "basic_header_token": config.access.basic_header_token,
        },
        "logging": {
            "level": config.logging.level,
            "format": config.logging.format,
        },
    }
