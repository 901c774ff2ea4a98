"""Translation tree model.

A translation resource is parsed once into ``Leaf`` and ``Branch`` nodes so
traversal never has to inspect raw values to tell them apart.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union


@dataclass(frozen=True)
class Leaf:
    """Terminal translation entry."""
    value: Any = None

    @property
    def text(self):
        """The value when it is a string, otherwise None."""
        return self.value if isinstance(self.value, str) else None


@dataclass(frozen=True)
class Branch:
    """Internal node mapping raw keys to child nodes, in insertion order."""
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)


TreeNode = Union[Leaf, Branch]


def parse_tree(data: Any) -> TreeNode:
    """Build a tree from parsed JSON/YAML data.

    Mappings become branches; everything else (strings, numbers, booleans,
    None, lists) is an opaque leaf.
    """
    if isinstance(data, (Leaf, Branch)):
        return data
    if isinstance(data, Mapping):
        return Branch({str(key): parse_tree(value) for key, value in data.items()})
    return Leaf(data)
