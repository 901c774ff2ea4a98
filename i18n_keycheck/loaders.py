"""Read translation resources and code key lists from disk."""

import json
from pathlib import Path
from typing import List, Union

import structlog
import yaml

from .errors import LoaderError
from .localization.tree import Branch, parse_tree

logger = structlog.get_logger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


def _load_structured(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except FileNotFoundError as e:
        raise LoaderError(f"File not found: {path}", path=str(path)) from e
    except OSError as e:
        raise LoaderError(f"Cannot read {path}: {e}", path=str(path)) from e
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to parse {path}: {e}", path=str(path)) from e


def load_translation(path: Union[str, Path]) -> Branch:
    """Load a JSON or YAML translation file into a tree.

    Args:
        path: Translation resource path

    Returns:
        Root branch of the translation tree

    Raises:
        LoaderError: If the file is missing, malformed or not a mapping
    """
    path = Path(path)
    data = _load_structured(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise LoaderError(f"Translation file must contain an object: {path}", path=str(path))

    tree = parse_tree(data)
    logger.info("Loaded translations", file=str(path), top_level_keys=len(tree))
    return tree


def load_code_keys(path: Union[str, Path]) -> List[str]:
    """Load code keys from a JSON array or a plain one-key-per-line file.

    In text files blank lines and lines starting with ``#`` are skipped.
    """
    path = Path(path)
    if path.suffix.lower() == ".json" or path.suffix.lower() in YAML_SUFFIXES:
        data = _load_structured(path)
        if not isinstance(data, list) or not all(isinstance(key, str) for key in data):
            raise LoaderError(f"Code key file must contain a list of strings: {path}", path=str(path))
        keys = data
    else:
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise LoaderError(f"File not found: {path}", path=str(path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise LoaderError(f"Cannot read {path}: {e}", path=str(path)) from e
        keys = [
            line.strip()
            for line in content.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]

    logger.info("Loaded code keys", file=str(path), count=len(keys))
    return keys
