"""Unit tests for configuration and logging setup.

Tests cover:
- Render settings defaults and validation
- Logger configuration with console and file handlers
"""

import logging

import pytest


class TestRenderSettings:
    """Tests for RenderSettings."""

    def test_defaults(self):
        """Test that the default depth is the shared bounce budget."""
        from whitted.config import MAX_DEPTH, RenderSettings

        settings = RenderSettings()
        assert settings.max_depth == MAX_DEPTH
        assert settings.log_every == 1

    def test_zero_depth_allowed(self):
        """Test that primary-only rendering is a valid setting."""
        from whitted.config import RenderSettings

        assert RenderSettings(max_depth=0).max_depth == 0

    @pytest.mark.parametrize("kwargs", [{"max_depth": -1}, {"log_every": 0}])
    def test_invalid_values_raise(self, kwargs):
        """Test that negative depths and non-positive intervals are rejected."""
        from whitted.config import RenderSettings

        with pytest.raises(ValueError):
            RenderSettings(**kwargs)


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture
    def logger_name(self, request):
        """A logger name unique to the test, with handlers removed afterwards."""
        name = f"whitted.tests.{request.node.name}"
        yield name
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_console_handler(self, logger_name):
        """Test that a console handler is attached at the requested level."""
        from whitted.logging_config import setup_logging

        logger = setup_logging(logger_name, level="debug")
        assert logger.name == logger_name
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, logger_name):
        """Test that an unrecognised level name means INFO."""
        from whitted.logging_config import setup_logging

        logger = setup_logging(logger_name, level="chatty")
        assert logger.level == logging.INFO

    def test_file_handler(self, logger_name, tmp_path):
        """Test logging to a rotating file in a new directory."""
        from whitted.logging_config import setup_logging

        log_file = tmp_path / "logs" / "render.log"
        logger = setup_logging(logger_name, level="INFO", log_file=log_file)
        logger.info("hello from the tracer")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "hello from the tracer" in log_file.read_text()
