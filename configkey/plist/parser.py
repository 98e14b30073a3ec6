"""
configkey.plist.parser

Parse plist XML into a ConfigDocument.

Parsing is purely structural: the grammar (element names, nesting,
leaf text) is checked, setting names and values are not.
"""

import base64
import binascii
import math
import re
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Dict, Optional, Union

from ..core.exceptions import MalformedDocumentError
from ..core.logging import get_logger
from ..core.types import (
    ArrayNode,
    BooleanNode,
    ConfigDocument,
    ConfigNode,
    DataNode,
    DateNode,
    DictNode,
    IntegerNode,
    RealNode,
    StringNode,
)

logger = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_REAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse(data: Union[bytes, str, None]) -> ConfigDocument:
    """Parse a plist XML document.

    Args:
        data: Document as bytes or text. Empty input (or None) is the
            empty document, i.e. every setting left at its default.

    Returns:
        Parsed ConfigDocument.

    Raises:
        MalformedDocumentError: If the input is not well-formed XML, is not
            a dict-rooted plist, or holds a leaf the grammar disallows.
    """
    if not data:
        logger.debug("Empty input, using empty document")
        return ConfigDocument()

    # Text is already decoded; expat ignores its encoding declaration.
    # Only bytes are decoded according to the declaration.
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedDocumentError(f"not well-formed XML ({e})") from e

    if root.tag != "plist":
        raise MalformedDocumentError(f"root element is <{root.tag}>, expected <plist>")
    _check_no_text(root)

    children = list(root)
    if len(children) != 1 or children[0].tag != "dict":
        found = ", ".join(f"<{c.tag}>" for c in children) or "nothing"
        raise MalformedDocumentError(f"<plist> must contain a single <dict>, found {found}")

    document = ConfigDocument(root=_parse_dict(children[0]))
    logger.debug(f"Parsed plist with {len(document)} root keys ({len(data)} {'chars' if isinstance(data, str) else 'bytes'})")
    return document


def _parse_node(element: ET.Element) -> ConfigNode:
    tag = element.tag

    if tag == "dict":
        return _parse_dict(element)
    if tag == "array":
        _check_no_text(element)
        return ArrayNode(tuple(_parse_node(child) for child in element))

    if len(element):
        raise MalformedDocumentError(f"<{tag}> may not contain child elements")
    text = element.text or ""

    if tag == "string":
        return StringNode(text)
    if tag == "integer":
        return IntegerNode(_parse_integer(text))
    if tag == "real":
        return RealNode(_parse_real(text))
    if tag in ("true", "false"):
        if text.strip():
            raise MalformedDocumentError(f"<{tag}/> may not contain text")
        return BooleanNode(tag == "true")
    if tag == "data":
        return DataNode(_parse_data(text))
    if tag == "date":
        return DateNode(_parse_date(text))

    raise MalformedDocumentError(f"unknown element <{tag}>")


def _parse_dict(element: ET.Element) -> DictNode:
    _check_no_text(element)
    children = list(element)

    if len(children) % 2:
        raise MalformedDocumentError("<dict> has a <key> without a value")

    entries: Dict[str, ConfigNode] = {}
    for key_element, value_element in zip(children[::2], children[1::2]):
        if key_element.tag != "key":
            raise MalformedDocumentError(f"expected <key> in <dict>, found <{key_element.tag}>")
        if value_element.tag == "key":
            raise MalformedDocumentError("<dict> has a <key> without a value")
        if len(key_element):
            raise MalformedDocumentError("<key> may not contain child elements")

        key = key_element.text or ""
        if key in entries:
            # Last write wins; position of the first occurrence is kept
            logger.debug(f"Duplicate key {key!r} in <dict>, keeping last value")
        entries[key] = _parse_node(value_element)

    return DictNode(entries)


def _check_no_text(element: ET.Element) -> None:
    """Containers may only hold whitespace between their child elements."""
    if element.text and element.text.strip():
        raise MalformedDocumentError(f"unexpected text in <{element.tag}>")
    for child in element:
        if child.tail and child.tail.strip():
            raise MalformedDocumentError(f"unexpected text after <{child.tag}>")


def _parse_integer(text: str) -> int:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        raise MalformedDocumentError(f"<integer> is not a decimal integer: {text!r}")
    return int(text)


def _parse_real(text: str) -> float:
    text = text.strip()
    if not _REAL.fullmatch(text):
        raise MalformedDocumentError(f"<real> is not a number: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise MalformedDocumentError(f"<real> is out of range: {text!r}")
    return value


def _parse_data(text: str) -> bytes:
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedDocumentError(f"<data> is not valid base64 ({e})") from e


def _parse_date(text: str) -> datetime:
    text = text.strip()
    try:
        value = datetime.strptime(text, DATE_FORMAT)
    except ValueError as e:
        raise MalformedDocumentError(f"<date> is not an ISO 8601 UTC timestamp: {text!r}") from e
    return value.replace(tzinfo=timezone.utc)


def is_valid_document(data: Optional[Union[bytes, str]]) -> bool:
    """Check whether data parses as a dict-rooted plist.

    For callers that only need a yes/no answer, e.g. form validation
    in a host application.
    """
    try:
        parse(data)
    except MalformedDocumentError:
        return False
    return True
