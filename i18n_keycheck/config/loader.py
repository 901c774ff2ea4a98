"""Load checker configuration from JSON or YAML files."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import structlog
import yaml
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigurationError
from .settings import CheckerConfig

logger = structlog.get_logger(__name__)

CONFIG_SECTION = "keycheck"
YAML_SUFFIXES = (".yml", ".yaml")


def _read_config_file(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e


def build_config(data: Optional[Dict[str, Any]]) -> CheckerConfig:
    """Validate raw configuration data into a CheckerConfig.

    Args:
        data: Mapping with ``errorLevel``/``ignoreKeys`` (or snake_case)
            entries, optionally nested under a ``keycheck`` section

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the data is not a mapping or fails validation
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping")

    if CONFIG_SECTION in data:
        data = data[CONFIG_SECTION] or {}

    try:
        return CheckerConfig.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid configuration: {first.get('msg')}", config_key=config_key or None
        ) from e


def load_config(path: Optional[Union[str, Path]] = None) -> CheckerConfig:
    """Load configuration from a file, or return defaults when no path is given."""
    if path is None:
        logger.debug("No configuration file given, using defaults")
        return CheckerConfig()

    path = Path(path)
    config = build_config(_read_config_file(path))
    logger.info(
        "Loaded configuration",
        file=str(path),
        error_level=config.error_level.value,
        ignored=len(config.ignore_keys),
    )
    return config
