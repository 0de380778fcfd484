"""A set of nodes keyed by their path-like names."""

from __future__ import annotations

from pathlib import PurePath
from typing import Any, Iterator, Optional


def _key(name: Any) -> PurePath:
    return PurePath(name)


def _name_of(node: Any) -> PurePath:
    name = node.name
    if callable(name):
        name = name()
    return _key(name)


class NodeSet:
    """Nodes identified by name; no two nodes may share a name."""

    def __init__(self) -> None:
        self._nodes: dict[PurePath, Any] = {}

    def add_if_absent(self, node: Any) -> None:
        """Add the node unless a node with its name is already present."""
        self._nodes.setdefault(_name_of(node), node)

    def add(self, node: Any) -> None:
        """Add the node; raise ValueError if its name is already present."""
        key = _name_of(node)
        if key in self._nodes:
            raise ValueError(f"failed to add node: {key} already present")
        self._nodes[key] = node

    def remove(self, node: Any) -> None:
        """Remove the node with this node's name; raise KeyError if absent."""
        key = _name_of(node)
        if key not in self._nodes:
            raise KeyError(f"failed to remove node: {key} not present")
        del self._nodes[key]

    def remove_if_present(self, node: Any) -> None:
        self._nodes.pop(_name_of(node), None)

    def find(self, name: Any) -> Optional[Any]:
        """Return the node with the given name, or None."""
        return self._nodes.get(_key(name))

    def __contains__(self, name: Any) -> bool:
        return _key(name) in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the nodes in name order."""
        for key in sorted(self._nodes):
            yield self._nodes[key]