"""Translation tree flattening and key comparison."""

from .checker import (
    CheckDirection,
    CheckResult,
    Outcome,
    check_missing_keys_in_code,
    check_missing_keys_in_translation,
    classify,
    missing_keys_in_code,
    missing_keys_in_translation,
    report,
    run_checks,
)
from .traverse import collect_references, extract_reference, flatten, key_segment, traverse
from .tree import Branch, Leaf, TreeNode, parse_tree

__all__ = [
    "Branch",
    "CheckDirection",
    "CheckResult",
    "Leaf",
    "Outcome",
    "TreeNode",
    "check_missing_keys_in_code",
    "check_missing_keys_in_translation",
    "classify",
    "collect_references",
    "extract_reference",
    "flatten",
    "key_segment",
    "missing_keys_in_code",
    "missing_keys_in_translation",
    "parse_tree",
    "report",
    "run_checks",
    "traverse",
]
