"""Flatten translation trees into dot-delimited key paths."""

import re
from typing import Any, Iterator, List, Optional, Set, Tuple

import structlog

from .tree import Branch, Leaf, TreeNode, parse_tree

logger = structlog.get_logger(__name__)

REFERENCE_PATTERN = re.compile(r"\$t\((.*?)\)")
QUOTE_PATTERN = re.compile(r"['\"]")


def key_segment(key: str) -> str:
    """Path segment for a raw key: the text before the first underscore.

    Plural variants such as ``title_one``/``title_other`` collapse onto ``title``.
    """
    return key.split("_")[0]


def extract_reference(value: Any) -> Optional[str]:
    """Return the key a ``$t(key)`` value forwards to, if any.

    Only the first reference in a value is honoured.
    """
    if not isinstance(value, str):
        return None
    match = REFERENCE_PATTERN.search(value)
    if not match:
        return None
    return QUOTE_PATTERN.sub("", match.group(1))


def collect_references(node: TreeNode) -> Set[str]:
    """Collect every key referenced via ``$t(...)`` anywhere in the tree."""
    references: Set[str] = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Branch):
            stack.extend(current.children.values())
            continue
        reference = extract_reference(current.text)
        if reference is not None:
            references.add(reference)
    return references


def _walk(node: TreeNode, path: Tuple[str, ...]) -> Iterator[str]:
    if isinstance(node, Leaf):
        yield ".".join(path)
        return
    for key, child in node.children.items():
        yield from _walk(child, path + (key_segment(key),))


def flatten(node: TreeNode, exclude: Optional[Set[str]] = None) -> List[str]:
    """List the key path of every leaf in enumeration order.

    Args:
        node: Tree to flatten
        exclude: Key paths to drop from the result

    Returns:
        Dot-joined key paths; duplicates from collapsed plural keys are kept
    """
    keys = list(_walk(node, ()))
    if exclude:
        keys = [key for key in keys if key not in exclude]
    return keys


def traverse(node: Any, code_check: bool = False) -> List[str]:
    """Flatten a translation tree.

    With ``code_check`` enabled, keys that some value forwards to through
    ``$t(key)`` are left out, wherever in the tree the reference sits.
    """
    tree = parse_tree(node)
    if not code_check:
        return flatten(tree)

    references = collect_references(tree)
    if references:
        logger.debug("Found forwarding references", count=len(references))
    return flatten(tree, exclude=references)
