"""
Unit tests for the error hierarchy.
"""

from i18n_keycheck.errors import (
    ConfigurationError,
    KeycheckError,
    LoaderError,
    ValidationError,
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    def test_keycheck_error_creation(self):
        """Test basic KeycheckError creation."""
        error = KeycheckError(message="Test error", error_code="TEST_ERROR")

        assert error.message == "Test error"
        assert error.error_code == "TEST_ERROR"
        assert isinstance(error.context, dict)
        assert str(error) == "Test error"

    def test_default_error_code(self):
        """Test error code defaults to the class name."""
        assert LoaderError("boom").error_code == "LoaderError"

    def test_error_to_dict(self):
        """Test error serialization."""
        error = KeycheckError(message="Test error", context={"key": "value"})

        error_dict = error.to_dict()

        assert error_dict["error_type"] == "KeycheckError"
        assert error_dict["message"] == "Test error"
        assert error_dict["context"]["key"] == "value"

    def test_subclasses(self):
        """Test all errors share the base class."""
        for error_class in (ConfigurationError, LoaderError, ValidationError):
            assert issubclass(error_class, KeycheckError)

    def test_configuration_error(self):
        """Test ConfigurationError specifics."""
        error = ConfigurationError("Invalid config", config_key="errorLevel")

        assert error.config_key == "errorLevel"
        assert error.context["config_key"] == "errorLevel"

    def test_loader_error(self):
        """Test LoaderError specifics."""
        error = LoaderError("Missing file", path="en.json")
        assert error.context["path"] == "en.json"

    def test_validation_error(self):
        """Test ValidationError carries direction and keys."""
        error = ValidationError(
            "Missing keys in code",
            direction="code",
            missing_keys=["a.b"],
        )

        assert error.direction == "code"
        assert error.missing_keys == ["a.b"]
        assert error.context == {"direction": "code", "missing_keys": ["a.b"]}
