"""Value tree model for parsed translation sources.

A value tree is a closed union of two shapes: a Leaf holding a message
template, or a Node mapping keys to subtrees.
"""

from dataclasses import dataclass, field
from datetime import date, time
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union


@dataclass(frozen=True)
class Leaf:
    """A translation template.

    Attributes:
        text: Template string, possibly containing %{name} placeholders.
    """

    text: str

    def get_path(self, segments: Sequence[str]) -> Optional["ValueTree"]:
        # A leaf has no children to descend into.
        return None if segments else self


@dataclass(frozen=True)
class Node:
    """A group of keyed subtrees.

    Attributes:
        children: Read-only mapping of key to subtree.
    """

    children: Mapping[str, "ValueTree"] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def get(self, key: str) -> Optional["ValueTree"]:
        return self.children.get(key)

    def get_path(self, segments: Sequence[str]) -> Optional["ValueTree"]:
        """Descend one segment at a time.

        Args:
            segments: Key path segments.

        Returns:
            The subtree at the path, or None if a segment is absent or a
            Leaf is reached before the path is exhausted.
        """
        current: ValueTree = self
        for segment in segments:
            if not isinstance(current, Node):
                return None
            child = current.get(segment)
            if child is None:
                return None
            current = child
        return current


ValueTree = Union[Leaf, Node]


def _convert(data: Any) -> Optional[ValueTree]:
    if isinstance(data, (Leaf, Node)):
        return data
    if isinstance(data, str):
        return Leaf(data)
    if isinstance(data, bool):
        return Leaf(str(data).lower())
    if isinstance(data, (int, float)):
        return Leaf(str(data))
    # datetime is a subclass of date
    if isinstance(data, (date, time)):
        return Leaf(data.isoformat())
    if data is None:
        return None
    if isinstance(data, Mapping):
        items = ((str(key), value) for key, value in data.items())
    elif isinstance(data, (list, tuple)):
        items = ((str(index), value) for index, value in enumerate(data))
    else:
        raise ValueError(f"Unsupported translation value of type {type(data).__name__}")

    children = {}
    for key, value in items:
        child = _convert(value)
        # A key without a value (e.g. "greeting:" in YAML) counts as absent.
        if child is not None:
            children[key] = child
    return Node(children)


def from_data(data: Any) -> ValueTree:
    """Convert generic parsed data (JSON, YAML, TOML) into a value tree.

    Strings become leaves; numbers, booleans and dates become leaves of
    their text form; mappings become nodes; lists become nodes keyed by
    index. A None root (an empty file) becomes an empty node, while nested
    None values are dropped so the key stays undefined.

    Args:
        data: Parsed data.

    Returns:
        Equivalent value tree.

    Raises:
        ValueError: If data holds a value of any other type.
    """
    tree = _convert(data)
    return Node() if tree is None else tree
