"""
Pytest configuration and fixtures for i18n-keycheck tests.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog

from i18n_keycheck.config import CheckerConfig, ErrorLevel


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore default logging configuration after each test."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def translation() -> dict:
    """Sample translation resource."""
    return {
        "common": {
            "save": "Save",
            "cancel": "Cancel",
        },
        "title_one": "Item",
        "title_other": "Items",
        "greeting": "$t(welcome)",
        "welcome": "Hello",
    }


@pytest.fixture
def code_keys() -> list:
    """Keys referenced by the sample application."""
    return ["common.save", "common.cancel", "title", "greeting"]


@pytest.fixture
def make_config():
    """Helper to build checker configuration."""
    def _make_config(error_level: str = "warn", ignore_keys=None) -> CheckerConfig:
        return CheckerConfig(error_level=ErrorLevel(error_level), ignore_keys=ignore_keys or [])
    return _make_config


@pytest.fixture
def create_test_file(temp_dir: Path):
    """Helper to create test files."""
    def _create_file(filename: str, content="") -> Path:
        file_path = temp_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _create_file
