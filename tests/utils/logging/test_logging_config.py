# ABOUTME: Tests for logging configuration module
# ABOUTME: Validates dual-mode logging setup and the stdlib/structlog bridge into loguru

import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import structlog
from loguru import logger

from design_intel.utils.logging.config import (
    InterceptHandler,
    LoggingMode,
    configure_logging,
    detect_logging_mode,
    get_logging_status,
)


class TestLoggingMode:
    """Test the LoggingMode constants."""

    def test_logging_mode_constants(self):
        assert LoggingMode.INTERACTIVE == "interactive"
        assert LoggingMode.PRODUCTION == "production"


class TestDetectLoggingMode:
    """Test logging mode detection logic."""

    def test_detect_mode_from_env_interactive(self):
        with patch.dict(os.environ, {"DESIGN_INTEL_LOG_MODE": "interactive"}):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_env_production(self):
        with patch.dict(os.environ, {"DESIGN_INTEL_LOG_MODE": "PRODUCTION"}):
            assert detect_logging_mode() == LoggingMode.PRODUCTION

    def test_detect_mode_from_env_invalid(self):
        with (
            patch.dict(os.environ, {"DESIGN_INTEL_LOG_MODE": "invalid"}),
            patch("sys.stdout.isatty", return_value=True),
        ):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_tty_production(self):
        with patch.dict(os.environ, {}, clear=True), patch("sys.stdout.isatty", return_value=False):
            assert detect_logging_mode() == LoggingMode.PRODUCTION


class TestConfigureLogging:
    """Test logging configuration functionality."""

    def teardown_method(self):
        logger.remove()
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)
        logging.captureWarnings(False)
        structlog.reset_defaults()

    def test_configure_interactive_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO")
        structlog.get_logger("design_intel.test").info("Wrote bundle", entries=3)
        logger.complete()

        main_log = tmp_path / "logs" / "design-intel.log"
        assert main_log.exists()
        content = main_log.read_text(encoding="utf-8")
        assert "event='Wrote bundle'" in content
        assert "entries=3" in content
        assert "design_intel.test" in content

    def test_configure_production_mode_writes_json_to_stderr(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")
        logging.getLogger("design_intel.pipeline").warning("Bundle failed validation")

        captured = capsys.readouterr()
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["record"]["message"] == "Bundle failed validation"
        assert record["record"]["level"]["name"] == "WARNING"
        assert captured.out == ""
        assert not (tmp_path / "logs").exists()

    def test_records_name_the_calling_function(self, capsys):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")
        structlog.get_logger("design_intel.test").info("From structlog")
        logging.getLogger("design_intel.test").info("From stdlib")

        lines = capsys.readouterr().err.strip().splitlines()
        records = [json.loads(line)["record"] for line in lines[-2:]]
        for record in records:
            assert record["function"] == "test_records_name_the_calling_function"
            assert record["file"]["name"] == "test_logging_config.py"

    def test_configure_custom_log_level(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(handler, InterceptHandler) for handler in root_logger.handlers)

    def test_level_filters_records(self, capsys):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="WARNING")
        structlog.get_logger("design_intel.test").info("Hidden")

        assert "Hidden" not in capsys.readouterr().err

    def test_configure_custom_log_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        custom_log_file = tmp_path / "custom.log"

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO", log_file=str(custom_log_file))
        structlog.get_logger("design_intel.test").info("Custom destination")
        logger.complete()

        assert "Custom destination" in custom_log_file.read_text(encoding="utf-8")


class TestGetLoggingStatus:
    """Test logging status reporting."""

    def test_get_status_interactive_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        Path("logs").mkdir()

        with patch("design_intel.utils.logging.config.detect_logging_mode", return_value=LoggingMode.INTERACTIVE):
            status = get_logging_status()

        assert status["mode"] == LoggingMode.INTERACTIVE
        assert status["log_directory"] is not None
        assert status["log_files"]["main"].endswith("design-intel.log")
        assert status["log_files"]["json"].endswith("design-intel.json")
        assert status["log_files"]["errors"].endswith("errors.log")
        assert status["stream"] is None

    def test_get_status_production_mode(self):
        with patch("design_intel.utils.logging.config.detect_logging_mode", return_value=LoggingMode.PRODUCTION):
            status = get_logging_status()

        assert status["mode"] == LoggingMode.PRODUCTION
        assert status["log_files"] == {"main": None, "json": None, "errors": None}
        assert status["stream"] == "stderr"
