"""
configkey.plist.writer

Serialize a ConfigDocument back to Apple plist XML.
"""

import base64
from typing import List
from xml.sax.saxutils import escape

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
from .parser import DATE_FORMAT

XML_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
)


def to_xml(document: ConfigDocument) -> str:
    """Render a document as plist XML.

    Output uses tab indentation and keeps the document's key order,
    so it parses back to an equal document.
    """
    lines: List[str] = []
    _write_node(document.root, 0, lines)
    return XML_HEADER + '<plist version="1.0">\n' + "\n".join(lines) + "\n</plist>\n"


def _write_node(node: ConfigNode, depth: int, lines: List[str]) -> None:
    indent = "\t" * depth

    if isinstance(node, DictNode):
        if not node.entries:
            lines.append(f"{indent}<dict/>")
            return
        lines.append(f"{indent}<dict>")
        for key, child in node.entries.items():
            lines.append(f"{indent}\t<key>{escape(key)}</key>")
            _write_node(child, depth + 1, lines)
        lines.append(f"{indent}</dict>")
    elif isinstance(node, ArrayNode):
        if not node.items:
            lines.append(f"{indent}<array/>")
            return
        lines.append(f"{indent}<array>")
        for child in node.items:
            _write_node(child, depth + 1, lines)
        lines.append(f"{indent}</array>")
    elif isinstance(node, BooleanNode):
        lines.append(f"{indent}<{'true' if node.value else 'false'}/>")
    elif isinstance(node, StringNode):
        lines.append(f"{indent}<string>{escape(node.value)}</string>")
    elif isinstance(node, IntegerNode):
        lines.append(f"{indent}<integer>{node.value}</integer>")
    elif isinstance(node, RealNode):
        lines.append(f"{indent}<real>{node.value!r}</real>")
    elif isinstance(node, DataNode):
        lines.append(f"{indent}<data>{base64.b64encode(node.value).decode('ascii')}</data>")
    elif isinstance(node, DateNode):
        lines.append(f"{indent}<date>{node.value.strftime(DATE_FORMAT)}</date>")
    else:
        raise TypeError(f"Unknown node type: {type(node).__name__}")
