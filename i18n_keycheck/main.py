"""Command line entry point for i18n-keycheck."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import structlog

from . import __version__
from .config import ErrorLevel, load_config
from .errors import KeycheckError, ValidationError
from .loaders import load_code_keys, load_translation
from .localization import CheckDirection, run_checks

SEPARATOR = "-" * 40

logger = structlog.get_logger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if debug else logging.INFO

    # Clear any existing handlers to prevent duplication
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=True)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="i18n-keycheck",
        description="Cross-check a translation file against the keys used in code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"i18n-keycheck {__version__}"
    )
    parser.add_argument("translation", type=Path, help="Translation file (JSON or YAML)")
    parser.add_argument(
        "code_keys", type=Path, help="Keys used in code (JSON array or one key per line)"
    )
    parser.add_argument("--config-file", type=Path, help="Path to configuration file")
    parser.add_argument(
        "--error-level",
        choices=[level.value for level in ErrorLevel],
        help="Override the configured error level",
    )
    parser.add_argument(
        "--ignore-key",
        action="append",
        default=[],
        dest="ignore_keys",
        help="Key to ignore in both directions (repeatable)",
    )
    parser.add_argument(
        "--direction",
        choices=["translation", "code", "both"],
        default="both",
        help="Which check to run",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def _directions(choice: str) -> List[CheckDirection]:
    if choice == "both":
        return [CheckDirection.TRANSLATION, CheckDirection.CODE]
    return [CheckDirection(choice)]


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Run the checks and return the process exit code."""
    args = parse_args(argv)
    setup_logging(args.debug)

    try:
        config = load_config(args.config_file).with_overrides(
            error_level=args.error_level, ignore_keys=args.ignore_keys
        )
        translation = load_translation(args.translation)
        code_keys = load_code_keys(args.code_keys)

        for direction in _directions(args.direction):
            run_checks(translation, code_keys, config, directions=[direction])
            if config.error_level is not ErrorLevel.OFF:
                print(SEPARATOR)
    except ValidationError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1
    except KeycheckError as e:
        logger.error("Key check failed", **e.to_dict())
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
