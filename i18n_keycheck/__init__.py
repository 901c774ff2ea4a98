"""Cross-check translation resources against the keys referenced in code."""

__version__ = "0.1.0"

from .config import CheckerConfig, ErrorLevel, load_config
from .errors import ConfigurationError, KeycheckError, LoaderError, ValidationError
from .localization import (
    CheckDirection,
    CheckResult,
    Outcome,
    check_missing_keys_in_code,
    check_missing_keys_in_translation,
    classify,
    collect_references,
    flatten,
    missing_keys_in_code,
    missing_keys_in_translation,
    parse_tree,
    report,
    run_checks,
    traverse,
)

__all__ = [
    "__version__",
    "CheckDirection",
    "CheckResult",
    "CheckerConfig",
    "ConfigurationError",
    "ErrorLevel",
    "KeycheckError",
    "LoaderError",
    "Outcome",
    "ValidationError",
    "check_missing_keys_in_code",
    "check_missing_keys_in_translation",
    "classify",
    "collect_references",
    "flatten",
    "load_config",
    "missing_keys_in_code",
    "missing_keys_in_translation",
    "parse_tree",
    "report",
    "run_checks",
    "traverse",
]
