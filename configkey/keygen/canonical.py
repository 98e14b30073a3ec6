"""
configkey.keygen.canonical

Canonical form of a configuration document.

The canonical form is the compact JSON-style text the exam browser
builds from its own settings before hashing them:

- no whitespace or line breaks
- dict keys sorted case-insensitively at every level, lowercase first
  on ties (allowWlan before allowWLAN)
- empty dicts dropped from their parent dict
- an empty dict that remains (the root, or an array element) is written []
- strings and keys copied verbatim between quotes, nothing is escaped
- data as base64, dates as ISO 8601 UTC

Any change here changes every Config Key.
"""

import base64
from decimal import Decimal
from typing import List, Optional, Tuple

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
from ..plist.parser import DATE_FORMAT

EMPTY_DICT = "[]"


def sort_key(key: str) -> Tuple[str, str]:
    """Case-insensitive ordering with a total tie-break.

    Keys equal up to case are ordered lowercase first, which makes the
    result independent of the order keys appear in the source.
    """
    return (key.lower(), key.swapcase())


def render(document: ConfigDocument, prune_empty_dicts: bool = True) -> str:
    """Render a document in canonical form."""
    text = _render_dict(document.root, prune_empty_dicts)
    return EMPTY_DICT if text is None else text


def _render_dict(node: DictNode, prune: bool) -> Optional[str]:
    """Render a dict, or return None when it ends up empty."""
    parts: List[str] = []
    for key in sorted(node.entries, key=sort_key):
        child = node.entries[key]
        if isinstance(child, DictNode):
            value = _render_dict(child, prune)
            if value is None:
                if prune:
                    continue
                value = EMPTY_DICT
        else:
            value = _render_node(child, prune)
        parts.append(f'"{key}":{value}')

    if not parts:
        return None
    return "{" + ",".join(parts) + "}"


def _render_node(node: ConfigNode, prune: bool) -> str:
    if isinstance(node, DictNode):
        value = _render_dict(node, prune)
        return EMPTY_DICT if value is None else value
    if isinstance(node, ArrayNode):
        return "[" + ",".join(_render_node(item, prune) for item in node.items) + "]"
    if isinstance(node, StringNode):
        return f'"{node.value}"'
    if isinstance(node, BooleanNode):
        return "true" if node.value else "false"
    if isinstance(node, IntegerNode):
        return str(node.value)
    if isinstance(node, RealNode):
        return format_real(node.value)
    if isinstance(node, DataNode):
        return '"' + base64.b64encode(node.value).decode("ascii") + '"'
    if isinstance(node, DateNode):
        return '"' + node.value.strftime(DATE_FORMAT) + '"'
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def format_real(value: float) -> str:
    """Shortest round-trip decimal for a real.

    Whole numbers keep a trailing .0. Exponent form (1.0e+25) is used
    only for exponents of 17 and up or below -4.
    """
    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if 0 <= power < 17:
        return format(Decimal(text), "f") + ".0"
    if "." not in mantissa:
        mantissa += ".0"
    return f"{mantissa}e{power:+d}"
