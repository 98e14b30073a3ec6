"""
configkey.config.hashing

SHA-256 helpers shared by the key generator and the access checks.
"""

import hashlib
import json
from typing import Union

from .schema import ConfigKeySettings
from .load import config_to_dict


def sha256_hex(data: Union[bytes, str]) -> str:
    """Lowercase hex SHA-256 of data. Strings are hashed as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def settings_fingerprint(config: ConfigKeySettings) -> str:
    """Compute deterministic hash of the settings themselves.
    
    The command-line script logs it so a printed key can be traced back
    to the settings that produced it.
    
    Returns:
        16-character hex string.
    """
    d = config_to_dict(config)
    json_str = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return sha256_hex(json_str)[:16]
