"""
configkey.keygen.generator

Config Key generation.

Pipeline: parse -> drop excluded root keys -> canonical form -> SHA-256.
A pure function of the input bytes and the generator settings; safe to
call from any number of threads.
"""

from pathlib import Path
from typing import Optional, Union

from ..config.hashing import sha256_hex
from ..config.schema import GeneratorConfig
from ..core.exceptions import ConfigError
from ..core.logging import get_logger
from ..core.types import ConfigDocument, ConfigKey
from ..plist.parser import parse
from .canonical import render

logger = get_logger(__name__)

DocumentInput = Union[bytes, str, None, ConfigDocument]


def canonicalize(document: DocumentInput, config: Optional[GeneratorConfig] = None) -> bytes:
    """Return the canonical bytes that a Config Key is the hash of.

    Args:
        document: Raw plist (bytes or text, empty for all defaults) or an
            already parsed ConfigDocument.
        config: Generator settings. Defaults to GeneratorConfig().

    Raises:
        MalformedDocumentError: If the document cannot be parsed.
    """
    config = config or GeneratorConfig()

    if not isinstance(document, ConfigDocument):
        document = parse(document)

    excluded = [k for k in config.excluded_keys if k in document]
    if excluded:
        logger.debug(f"Excluding root keys from Config Key: {excluded}")
        document = document.without(*excluded)

    text = render(document, prune_empty_dicts=config.prune_empty_dicts)
    return text.encode("utf-8")


def generate(document: DocumentInput, config: Optional[GeneratorConfig] = None) -> ConfigKey:
    """Generate the Config Key for a document.

    Example:
        >>> generate("").hash
        '4f53cda18c2baa0c0354bb5f9a3ecbe5ed12ab4d8e11ba873c2f11161202b945'

    Raises:
        MalformedDocumentError: If the document cannot be parsed. Nothing is
            hashed in that case.
    """
    canonical_form = canonicalize(document, config)
    key = ConfigKey(canonical_form=canonical_form, hash=sha256_hex(canonical_form))
    logger.debug(f"Config Key {key.hash} from {len(canonical_form)} canonical bytes")
    return key


def generate_from_file(
    path: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
) -> ConfigKey:
    """Read a .seb (plist XML) file and generate its Config Key."""
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    return generate(path.read_bytes(), config)
