"""
Error hierarchy for i18n-keycheck.

Every error raised by the checker or its loaders derives from KeycheckError,
so callers (the CLI, a CI wrapper) can catch a single base type.
"""

from typing import Any, Dict, List, Optional


class KeycheckError(Exception):
    """
    Base exception for all i18n-keycheck errors.

    Carries a machine readable error code and a context dictionary
    alongside the human readable message.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
        }


class ConfigurationError(KeycheckError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            context={"config_key": config_key},
            **kwargs
        )
        self.config_key = config_key


class LoaderError(KeycheckError):
    """Translation or code key input could not be read."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            context={"path": path},
            **kwargs
        )
        self.path = path


class ValidationError(KeycheckError):
    """Missing keys detected while the error level is set to ``error``."""

    def __init__(
        self,
        message: str,
        direction: Optional[str] = None,
        missing_keys: Optional[List[str]] = None,
        **kwargs
    ):
        missing_keys = list(missing_keys or [])
        super().__init__(
            message,
            context={"direction": direction, "missing_keys": missing_keys},
            **kwargs
        )
        self.direction = direction
        self.missing_keys = missing_keys
