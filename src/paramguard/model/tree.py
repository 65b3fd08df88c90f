"""Format-agnostic configuration tree with depth-agnostic field search.

Every parsed configuration file, whatever its on-disk format, becomes one
``ConfigTree``. Rule predicates never address values by position; they ask
whether a key occurs *anywhere* in the tree and, if so, which values it
holds. A key that recurs at several nesting depths yields one candidate per
occurrence.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from paramguard.constants.parsing import IN_MEMORY_SOURCE
from paramguard.exceptions import ConfigParseError

PATH_SEPARATOR: str = "."


@dataclass(frozen=True)
class ConfigTree:
    """Root mapping of one scanned configuration file.

    The root is exposed read-only; nested containers are shared with the
    decoder output and must not be mutated by callers.
    """

    data: Mapping[str, Any]
    source: str = IN_MEMORY_SOURCE

    @classmethod
    def from_mapping(cls, data: Any, source: str = IN_MEMORY_SOURCE) -> ConfigTree:
        """Wrap a decoded mapping, rejecting any other root type and cyclic nesting."""
        if not isinstance(data, Mapping):
            raise ConfigParseError(f"Configuration root in {source} must be a mapping, got {type(data).__name__}")
        _reject_cycles(data, source)
        return cls(data=MappingProxyType(dict(data)), source=source)

    def field_exists(self, name: str) -> bool:
        """Return True if any mapping at any depth has a key equal to ``name``."""
        for _ in _iter_field_values(self.data, name):
            return True
        return False

    def collect_values(self, name: str) -> list[Any]:
        """Return every value stored under ``name`` across all depths."""
        return list(_iter_field_values(self.data, name))

    def content_corpus(self) -> str:
        """Return every string leaf and string sequence element, space-joined."""
        return " ".join(_iter_strings(self.data))

    def value_at_path(self, path: str) -> tuple[bool, Any]:
        """Strict dotted-path lookup returning ``(found, value)``."""
        current: Mapping[str, Any] = self.data
        parts = path.split(PATH_SEPARATOR)
        for index, part in enumerate(parts):
            if part not in current:
                return False, None
            value = current[part]
            if index == len(parts) - 1:
                return True, value
            if not isinstance(value, Mapping):
                return False, None
            current = value
        return False, None


def _iter_field_values(data: Mapping[str, Any], name: str) -> Iterator[Any]:
    """Depth-first walk yielding the value of every key equal to ``name``.

    Only mappings are descended into; mappings inside sequences are not searched.
    """
    for key, value in data.items():
        if key == name:
            yield value
        if isinstance(value, Mapping):
            yield from _iter_field_values(value, name)


def _iter_strings(data: Mapping[str, Any]) -> Iterator[str]:
    for value in data.values():
        if isinstance(value, str):
            yield value
        elif isinstance(value, Mapping):
            yield from _iter_strings(value)
        elif isinstance(value, list | tuple):
            for item in value:
                if isinstance(item, str):
                    yield item


def _reject_cycles(root: Mapping[str, Any], source: str) -> None:
    """Raise ConfigParseError when a container contains itself, as YAML aliases allow.

    Repeated but acyclic aliases are accepted; only containers on the
    current descent path count as a cycle.
    """
    ancestors: set[int] = set()
    # (container, entering) pairs; the second visit pops the container off the path
    stack: list[tuple[Any, bool]] = [(root, True)]
    while stack:
        node, entering = stack.pop()
        if not entering:
            ancestors.discard(id(node))
            continue
        if id(node) in ancestors:
            raise ConfigParseError(f"Configuration in {source} contains a self-referencing alias")
        ancestors.add(id(node))
        stack.append((node, False))
        children = node.values() if isinstance(node, Mapping) else node
        stack.extend((child, True) for child in children if isinstance(child, Mapping | list | tuple))
