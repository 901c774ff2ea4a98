"""Compare translation keys with the keys referenced in code.

Each direction is computed by a pure ``check_*`` function returning a
CheckResult. ``report`` renders a result through the logger and raises
ValidationError for fatal outcomes; ``missing_keys_in_translation`` and
``missing_keys_in_code`` combine the two steps.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping, Sequence, Union

import structlog

from ..config import CheckerConfig, ErrorLevel, build_config
from ..errors import ValidationError
from .traverse import traverse

logger = structlog.get_logger(__name__)


class CheckDirection(str, Enum):
    """Which side of the comparison is missing the keys."""
    TRANSLATION = "translation"
    CODE = "code"


class Outcome(str, Enum):
    """Report outcome of a single check."""
    SKIPPED = "skipped"
    SUCCESS = "success"
    WARNING = "warning"
    FATAL = "fatal"


@dataclass(frozen=True)
class CheckResult:
    """Result of one directional check."""
    direction: CheckDirection
    missing_keys: List[str]
    outcome: Outcome

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.SKIPPED, Outcome.SUCCESS)

    @property
    def message(self) -> str:
        """Formatted listing of the missing keys."""
        return format_missing_keys(self.direction, self.missing_keys)


def format_missing_keys(direction: CheckDirection, missing_keys: Sequence[str]) -> str:
    return f"Missing keys in {direction.value}:\n{json.dumps(list(missing_keys), indent=2)}"


def classify(missing_keys: Sequence[str], error_level: ErrorLevel) -> Outcome:
    """Map the number of missing keys and the error level to an outcome."""
    error_level = ErrorLevel(error_level)
    if error_level is ErrorLevel.OFF:
        return Outcome.SKIPPED
    if not missing_keys:
        return Outcome.SUCCESS
    if error_level is ErrorLevel.ERROR:
        return Outcome.FATAL
    return Outcome.WARNING


def _as_config(config: Union[CheckerConfig, Mapping[str, Any]]) -> CheckerConfig:
    if isinstance(config, CheckerConfig):
        return config
    return build_config(dict(config))


def _difference(keys: Iterable[str], known: Iterable[str], ignored: Iterable[str]) -> List[str]:
    known = set(known)
    ignored = set(ignored)
    return [key for key in keys if key not in known and key not in ignored]


def check_missing_keys_in_translation(
    translation: Any, code_keys: Sequence[str], config: Union[CheckerConfig, Mapping[str, Any]]
) -> CheckResult:
    """Find keys referenced in code that the translation tree does not define."""
    config = _as_config(config)
    translation_keys = traverse(translation)
    missing = _difference(code_keys, translation_keys, config.ignore_keys)
    return CheckResult(
        direction=CheckDirection.TRANSLATION,
        missing_keys=missing,
        outcome=classify(missing, config.error_level),
    )


def check_missing_keys_in_code(
    translation: Any, code_keys: Sequence[str], config: Union[CheckerConfig, Mapping[str, Any]]
) -> CheckResult:
    """Find translation keys that no code references.

    Entries that only forward to another key through ``$t(...)`` exclude their
    target from the translation key set.
    """
    config = _as_config(config)
    translation_keys = traverse(translation, code_check=True)
    missing = _difference(translation_keys, code_keys, config.ignore_keys)
    return CheckResult(
        direction=CheckDirection.CODE,
        missing_keys=missing,
        outcome=classify(missing, config.error_level),
    )


def report(result: CheckResult) -> CheckResult:
    """Log a check result; raise ValidationError when it is fatal."""
    if result.outcome is Outcome.SKIPPED:
        return result

    log = logger.bind(direction=result.direction.value)
    log.info(f"Checking for missing keys in {result.direction.value}")

    if result.outcome is Outcome.SUCCESS:
        log.info("No missing keys found")
    elif result.outcome is Outcome.WARNING:
        log.warning(result.message, missing_keys=result.missing_keys, count=len(result.missing_keys))
    else:
        log.error(result.message, missing_keys=result.missing_keys, count=len(result.missing_keys))
        raise ValidationError(
            result.message,
            direction=result.direction.value,
            missing_keys=result.missing_keys,
        )
    return result


def missing_keys_in_translation(
    translation: Any, code_keys: Sequence[str], config: CheckerConfig
) -> CheckResult:
    """Check and report keys missing from the translation tree."""
    return report(check_missing_keys_in_translation(translation, code_keys, config))


def missing_keys_in_code(
    translation: Any, code_keys: Sequence[str], config: CheckerConfig
) -> CheckResult:
    """Check and report translation keys unused by code."""
    return report(check_missing_keys_in_code(translation, code_keys, config))


def run_checks(
    translation: Any,
    code_keys: Sequence[str],
    config: CheckerConfig,
    directions: Sequence[CheckDirection] = (CheckDirection.TRANSLATION, CheckDirection.CODE),
) -> List[CheckResult]:
    """Run the requested checks in order; the first fatal one raises."""
    checks = {
        CheckDirection.TRANSLATION: missing_keys_in_translation,
        CheckDirection.CODE: missing_keys_in_code,
    }
    return [checks[CheckDirection(direction)](translation, code_keys, config) for direction in directions]
