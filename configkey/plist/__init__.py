"""
configkey.plist

Plist XML reading and writing.

Exports:
- parse / is_valid_document: XML to ConfigDocument
- to_xml: ConfigDocument to XML
- PropertyList: editable document
"""

from .parser import parse, is_valid_document
from .writer import to_xml
from .property_list import PropertyList

__all__ = [
    "parse",
    "is_valid_document",
    "to_xml",
    "PropertyList",
]
