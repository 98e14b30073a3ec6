"""
configkey.core.types

Core data types for configkey.

A plist document is a tree of tagged nodes. Every node is an immutable
dataclass carrying exactly one tag, so serializers dispatch on the node
class and never have to guess a scalar's type.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple

from .validation import validate_hex_digest


class ConfigNode:
    """Base class for all plist nodes."""

    tag: ClassVar[str] = ""

    def to_python(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class DictNode(ConfigNode):
    """Mapping from string key to node.

    Attributes:
        entries: Key/node pairs in source order. Keys are unique.
    """
    entries: Dict[str, ConfigNode] = field(default_factory=dict)

    tag: ClassVar[str] = "dict"

    # Holds a dict, so instances are not hashable
    __hash__ = None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def get(self, key: str) -> Optional[ConfigNode]:
        return self.entries.get(key)

    def items(self):
        return self.entries.items()

    def to_python(self) -> Dict[str, Any]:
        return {key: node.to_python() for key, node in self.entries.items()}


@dataclass(frozen=True)
class ArrayNode(ConfigNode):
    """Ordered sequence of nodes."""
    items: Tuple[ConfigNode, ...] = ()

    tag: ClassVar[str] = "array"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ConfigNode]:
        return iter(self.items)

    def to_python(self) -> list:
        return [node.to_python() for node in self.items]


@dataclass(frozen=True)
class StringNode(ConfigNode):
    value: str

    tag: ClassVar[str] = "string"

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerNode(ConfigNode):
    value: int

    tag: ClassVar[str] = "integer"

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class RealNode(ConfigNode):
    value: float

    tag: ClassVar[str] = "real"

    def __post_init__(self):
        if math.isnan(self.value) or math.isinf(self.value):
            raise ValueError(f"real value must be finite, got {self.value}")

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class BooleanNode(ConfigNode):
    """Boolean leaf. Source tag is <true/> or <false/>."""
    value: bool

    tag: ClassVar[str] = "boolean"

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class DataNode(ConfigNode):
    """Binary payload, already base64-decoded."""
    value: bytes

    tag: ClassVar[str] = "data"

    def to_python(self) -> bytes:
        return self.value


@dataclass(frozen=True)
class DateNode(ConfigNode):
    """Timestamp leaf. Always timezone-aware UTC."""
    value: datetime

    tag: ClassVar[str] = "date"

    def __post_init__(self):
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))
        else:
            object.__setattr__(self, "value", self.value.astimezone(timezone.utc))

    def to_python(self) -> datetime:
        return self.value


def to_node(value: Any) -> ConfigNode:
    """Convert a plain Python value into a node.

    Raises:
        TypeError: If the value has no plist representation.
    """
    if isinstance(value, ConfigNode):
        return value
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return BooleanNode(value)
    if isinstance(value, int):
        return IntegerNode(value)
    if isinstance(value, float):
        return RealNode(value)
    if isinstance(value, str):
        return StringNode(value)
    if isinstance(value, (bytes, bytearray)):
        return DataNode(bytes(value))
    if isinstance(value, datetime):
        return DateNode(value)
    if isinstance(value, dict):
        return DictNode({str(k): to_node(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return ArrayNode(tuple(to_node(v) for v in value))
    raise TypeError(f"Cannot represent {type(value).__name__} as a plist node")


@dataclass(frozen=True)
class ConfigDocument:
    """A parsed plist configuration document. The root is always a dict."""
    root: DictNode = field(default_factory=DictNode)

    __hash__ = None

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def keys(self) -> Tuple[str, ...]:
        return tuple(self.root.entries)

    def get(self, key: str) -> Optional[ConfigNode]:
        return self.root.get(key)

    def without(self, *keys: str) -> "ConfigDocument":
        """Return a copy with the given root keys removed."""
        entries = {k: v for k, v in self.root.entries.items() if k not in keys}
        return ConfigDocument(root=DictNode(entries))

    def to_python(self) -> Dict[str, Any]:
        return self.root.to_python()

    @classmethod
    def from_python(cls, settings: Dict[str, Any]) -> "ConfigDocument":
        root = to_node(settings)
        if not isinstance(root, DictNode):
            raise TypeError(f"Document root must be a dict, got {type(settings).__name__}")
        return cls(root=root)


@dataclass(frozen=True)
class ConfigKey:
    """The Config Key of a document.

    Attributes:
        canonical_form: Exact bytes that were hashed. Diagnostic use only.
        hash: Lowercase hex SHA-256 of canonical_form.
    """
    canonical_form: bytes
    hash: str

    def __post_init__(self):
        validate_hex_digest(self.hash, name="hash")

    def __str__(self) -> str:
        return self.hash

    def matches(self, expected: str) -> bool:
        """Compare against an expected hash, ignoring case and surrounding whitespace."""
        if not expected:
            return False
        return expected.strip().lower() == self.hash
