"""Unit tests for core/logging.py"""

import pytest
from loguru import logger


def test_logging_import():
    """Test that logging module imports successfully."""
    from proxysheet.core.logging import setup_logging, get_logger

    assert setup_logging is not None
    assert get_logger is not None


def test_setup_logging():
    """Test that setup_logging initializes logging."""
    from proxysheet.core.logging import setup_logging

    # Should not raise
    setup_logging()


def test_logger_has_loguru_methods():
    """Test that returned logger has Loguru methods."""
    from proxysheet.core.logging import get_logger

    test_logger = get_logger(__name__)

    assert hasattr(test_logger, "debug")
    assert hasattr(test_logger, "info")
    assert hasattr(test_logger, "warning")
    assert hasattr(test_logger, "error")
    assert hasattr(test_logger, "exception")


def test_logging_to_file(tmp_path):
    """Test that file logging creates the log directory and a log file."""
    from proxysheet.config import ProxySheetSettings
    from proxysheet.core.logging import setup_logging, get_logger

    logs_dir = tmp_path / "logs"
    setup_logging(ProxySheetSettings(log_to_file=True, logs_dir=logs_dir))
    get_logger("test_file").info("File message")
    logger.remove()

    assert logs_dir.exists()
    assert any(logs_dir.glob("proxy-sheet_*"))


def test_log_operation_records_completion():
    """log_operation should log start and completion."""
    from proxysheet.core.logging import log_operation

    messages = []
    sink_id = logger.add(messages.append, format="{message}")
    try:
        with log_operation("Batch lookup", names=3):
            pass
    finally:
        logger.remove(sink_id)

    assert any("Batch lookup [names=3] starting" in m for m in messages)
    assert any("completed in" in m for m in messages)


def test_log_operation_does_not_suppress():
    """log_operation should log failures and re-raise."""
    from proxysheet.core.logging import log_operation

    messages = []
    sink_id = logger.add(messages.append, format="{message}")
    try:
        with pytest.raises(RuntimeError):
            with log_operation("Batch lookup"):
                raise RuntimeError("boom")
    finally:
        logger.remove(sink_id)

    assert any("failed after" in m and "boom" in m for m in messages)


def test_log_rotation_settings():
    """Test that log rotation settings are configured."""
    from proxysheet.config import get_settings

    settings = get_settings()

    assert settings.log_rotation == "10 MB"
    assert settings.log_retention == "10 days"
