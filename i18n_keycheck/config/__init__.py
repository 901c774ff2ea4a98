"""Configuration for i18n-keycheck."""

from .loader import build_config, load_config
from .settings import CheckerConfig, ErrorLevel

__all__ = ["CheckerConfig", "ErrorLevel", "build_config", "load_config"]
