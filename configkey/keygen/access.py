"""
configkey.keygen.access

Request-hash checks for incoming exam browser requests.

The browser does not send its keys directly. For every request it sends
sha256(url + key) in a header, so a captured header only works for the
page it was captured on.
"""

from typing import Iterable, Mapping, Optional
from urllib.parse import urldefrag

from ..config.hashing import sha256_hex
from ..config.schema import AccessConfig
from ..core.logging import get_logger
from ..core.types import ConfigKey
from ..core.validation import validate_non_empty_string

logger = get_logger(__name__)


def request_hash(url: str, key: str) -> str:
    """Hash the browser sends for a request to url made with key.

    The URL fragment is never sent to the server, so it is not hashed.
    """
    validate_non_empty_string(url, "url")
    page_url, _fragment = urldefrag(url)
    return sha256_hex(page_url + key)


def _header_matches(header_value: Optional[str], url: str, key: str) -> bool:
    if not header_value:
        return False
    return header_value.strip().lower() == request_hash(url, key.lower())


def validate_config_key(header_value: Optional[str], url: str, config_key: ConfigKey) -> bool:
    """Check a Config Key request hash header for url."""
    return _header_matches(header_value, url, config_key.hash)


def validate_browser_exam_keys(
    header_value: Optional[str],
    url: str,
    allowed_keys: Iterable[str],
) -> bool:
    """Check a Browser Exam Key request hash against an allow-list."""
    return any(_header_matches(header_value, url, key.strip()) for key in allowed_keys)


class AccessValidator:
    """Validates request headers against expected keys.

    Usage:
        validator = AccessValidator(AccessConfig(allowed_browser_exam_keys=[...]))
        ok = validator.validate(headers, url, config_key)
    """

    def __init__(self, config: Optional[AccessConfig] = None):
        self.config = config or AccessConfig()

    @staticmethod
    def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
        lowered = name.lower()
        for header, value in headers.items():
            if header.lower() == lowered:
                return value
        return None

    def check_config_key(self, headers: Mapping[str, str], url: str, config_key: ConfigKey) -> bool:
        value = self._get_header(headers, self.config.config_key_header)
        ok = validate_config_key(value, url, config_key)
        if not ok:
            logger.debug(f"Config Key check failed for {url} (header present: {value is not None})")
        return ok

    def check_browser_exam_keys(self, headers: Mapping[str, str], url: str) -> bool:
        value = self._get_header(headers, self.config.browser_exam_key_header)
        ok = validate_browser_exam_keys(value, url, self.config.allowed_browser_exam_keys)
        if not ok:
            logger.debug(f"Browser Exam Key check failed for {url} (header present: {value is not None})")
        return ok

    def check_basic_header(self, headers: Mapping[str, str]) -> bool:
        """Check the request comes from the exam browser at all.

        Weaker than either key check: the header is not bound to a key or URL.
        """
        value = self._get_header(headers, self.config.basic_header)
        ok = value is not None and self.config.basic_header_token in value
        if not ok:
            logger.debug(f"Basic header check failed (header present: {value is not None})")
        return ok

    def validate(
        self,
        headers: Mapping[str, str],
        url: str,
        config_key: Optional[ConfigKey] = None,
    ) -> bool:
        """Grant access if every configured check passes.

        The Config Key check runs only when a key is given, the Browser
        Exam Key check only when keys are allow-listed. With neither (the
        client uses its own configuration and nothing is allow-listed),
        only the basic header check applies.
        """
        if config_key is None and not self.config.allowed_browser_exam_keys:
            return self.check_basic_header(headers)
        if config_key is not None and not self.check_config_key(headers, url, config_key):
            return False
        if self.config.allowed_browser_exam_keys and not self.check_browser_exam_keys(headers, url):
            return False
        return True
