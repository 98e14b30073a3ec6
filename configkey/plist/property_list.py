"""
configkey.plist.property_list

Editable view over a plist document.

Host applications build .seb files from their own settings (templates
plus per-quiz overrides). PropertyList lets them read and change root
elements and then export XML or compute the Config Key of the result.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ..config.schema import GeneratorConfig
from ..core.types import ConfigDocument, ConfigKey, ConfigNode, DictNode, to_node
from ..keygen.generator import canonicalize, generate
from .parser import parse
from .writer import to_xml


class PropertyList:
    """A mutable plist with a dict root.

    Usage:
        plist = PropertyList(xml)
        plist.set("allowQuit", False)
        plist.delete("hashedQuitPassword")
        xml = plist.to_xml()
        key = plist.config_key()
    """

    def __init__(self, xml: Union[bytes, str, None] = ""):
        """
        Args:
            xml: Initial plist XML. Empty means an empty dict.

        Raises:
            MalformedDocumentError: If xml is not a dict-rooted plist.
        """
        self._entries: Dict[str, ConfigNode] = dict(parse(xml).root.entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def get(self, key: str) -> Optional[Any]:
        """Plain Python value of a root element, or None if absent."""
        node = self._entries.get(key)
        return None if node is None else node.to_python()

    def set(self, key: str, value: Any) -> None:
        """Add a root element or replace an existing one."""
        if not isinstance(key, str):
            raise TypeError(f"Key must be a string, got {type(key).__name__}")
        self._entries[key] = to_node(value)

    def update(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.set(key, value)

    def delete(self, key: str) -> None:
        """Remove a root element. Missing keys are ignored."""
        self._entries.pop(key, None)

    def delete_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.delete(key)

    @property
    def document(self) -> ConfigDocument:
        """Snapshot of the current contents."""
        return ConfigDocument(root=DictNode(dict(self._entries)))

    def to_xml(self) -> str:
        return to_xml(self.document)

    def to_json(self, config: Optional[GeneratorConfig] = None) -> str:
        """Canonical form used for the Config Key."""
        return canonicalize(self.document, config).decode("utf-8")

    def config_key(self, config: Optional[GeneratorConfig] = None) -> ConfigKey:
        return generate(self.document, config)
