"""
Error handling for i18n-keycheck.

ValidationError is the only error the checks themselves raise; the others
come from the configuration and input loaders.
"""

from .exceptions import (
    KeycheckError,
    ConfigurationError,
    LoaderError,
    ValidationError,
)

__all__ = [
    "KeycheckError",
    "ConfigurationError",
    "LoaderError",
    "ValidationError",
]
