"""
Basic tests for modoc-common package

Smoke tests for the error hierarchy, constants and structured logger.
"""

import json

import pytest
from modoc_common import (
    # Errors
    ModocError,
    ValidationError,
    ConfigurationError,
    RenderError,
    ResolutionError,
    ParseError,
    ExecutionError,
    # Constants
    ENTRY_FRAGMENT,
    RESOURCE_MODES,
    # Logger
    configure_logging,
    get_logger,
)


class TestErrors:
    """Test error classes"""

    def test_validation_error(self):
        """Test ValidationError"""
        error = ValidationError("Test error")
        assert error.code == "VALIDATION_ERROR"
        assert error.message == "Test error"
        assert "Test error" in str(error)

    def test_configuration_error(self):
        """Test ConfigurationError"""
        error = ConfigurationError("No fragments")
        assert error.code == "CONFIGURATION_ERROR"
        assert isinstance(error, ModocError)

    def test_render_errors_share_base(self):
        """Resolution, parse and execution errors are all RenderErrors"""
        for cls in (ResolutionError, ParseError, ExecutionError):
            assert issubclass(cls, RenderError)
            assert issubclass(cls, ModocError)

    def test_render_error_codes(self):
        assert ResolutionError("x").code == "RESOLUTION_ERROR"
        assert ParseError("x").code == "PARSE_ERROR"
        assert ExecutionError("x").code == "EXECUTION_ERROR"

    def test_custom_code(self):
        error = ModocError("Boom", code="CUSTOM")
        assert error.code == "CUSTOM"

    def test_error_to_dict(self):
        """Test error serialization"""
        error = ValidationError("Test")
        error_dict = error.to_dict()
        assert error_dict["error"] == "ValidationError"
        assert error_dict["code"] == "VALIDATION_ERROR"
        assert error_dict["message"] == "Test"

    def test_parse_error_to_dict_includes_location(self):
        error = ParseError("Bad syntax", fragment="header", lineno=3)
        error_dict = error.to_dict()
        assert error_dict["fragment"] == "header"
        assert error_dict["lineno"] == 3

    def test_resolution_error_keeps_fragment(self):
        error = ResolutionError("Missing", fragment="all")
        assert error.fragment == "all"


class TestConstants:
    """Test constants"""

    def test_entry_fragment(self):
        assert ENTRY_FRAGMENT == "all"

    def test_resource_modes(self):
        assert "managed" in RESOURCE_MODES
        assert "data" in RESOURCE_MODES


class TestLogger:
    """Test structured logger"""

    def test_logger_namespace(self):
        logger = get_logger("sdk.templates")
        assert logger.name == "modoc.sdk.templates"

    def test_logger_keeps_modoc_prefix(self):
        assert get_logger("modoc.cli").name == "modoc.cli"

    def test_text_format_appends_context(self, log_stream):
        configure_logging("debug", stream=log_stream)
        get_logger("test").info("Rendering", entry="all", fragments=2)

        line = log_stream.getvalue().strip()
        assert "Rendering" in line
        assert "entry='all'" in line
        assert "fragments=2" in line

    def test_json_format(self, log_stream):
        configure_logging("info", json_format=True, stream=log_stream)
        get_logger("test").warning("Duplicate fragment", fragment="header")

        record = json.loads(log_stream.getvalue().strip())
        assert record["level"] == "warning"
        assert record["message"] == "Duplicate fragment"
        assert record["fragment"] == "header"

    def test_level_filters_records(self, log_stream):
        configure_logging("error", stream=log_stream)
        get_logger("test").info("Hidden")
        assert log_stream.getvalue() == ""

    def test_invalid_level(self, log_stream):
        with pytest.raises(ConfigurationError):
            configure_logging("verbose", stream=log_stream)
