#!/usr/bin/env python3
"""
Compute Config Keys for .seb files

Usage:
    python scripts/config_key.py exam.seb
    python scripts/config_key.py exam.seb other.seb --canonical
    python scripts/config_key.py exam.seb --url https://lms.example.com/mod/quiz/view.php?id=3
    python scripts/config_key.py exam.seb --config configs/configkey.yaml --verbose
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from configkey.config.hashing import settings_fingerprint
from configkey.config.load import load_config
from configkey.config.schema import ConfigKeySettings
from configkey.core.exceptions import ConfigError, MalformedDocumentError
from configkey.core.logging import configure_logging, get_logger
from configkey.keygen.access import request_hash
from configkey.keygen.generator import generate_from_file

logger = get_logger("configkey.scripts.config_key")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compute the Config Key of Safe Exam Browser config files")
    parser.add_argument("files", nargs="+", help="Unencrypted .seb (plist XML) files")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML settings file")
    parser.add_argument("--canonical", action="store_true", help="Also print the canonical form")
    parser.add_argument("--url", type=str, default=None, help="Also print the request hash for this URL")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        settings = load_config(args.config) if args.config else ConfigKeySettings()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    configure_logging("DEBUG" if args.verbose else settings.logging.level, settings.logging.format)
    logger.info(f"Settings fingerprint {settings_fingerprint(settings)} (excluded keys: {list(settings.generator.excluded_keys)})")

    status = 0
    for name in args.files:
        try:
            key = generate_from_file(name, settings.generator)
        except (ConfigError, MalformedDocumentError) as e:
            logger.error(f"{name}: {e}")
            status = 1
            continue

        print(f"{key.hash}  {name}")
        if args.canonical:
            print(key.canonical_form.decode("utf-8"))
        if args.url:
            print(f"{request_hash(args.url, key.hash)}  {args.url}")

    return status


if __name__ == "__main__":
    sys.exit(main())
