from io import StringIO

import pytest

from gas_report.logging import GasReportLogger, LogLevel, get_logger, logger


def test_set_level_by_name(debug_logs):
    assert logger.level == LogLevel.DEBUG
    logger.set_level("info")
    assert logger.level == LogLevel.INFO


def test_set_level_unknown_name():
    with pytest.raises(KeyError):
        logger.set_level("LOUD")


def test_logs_to_file():
    stream = StringIO()
    test_logger = GasReportLogger(get_logger("gas_report_test", file=stream), fmt="")
    test_logger.warning("Block limit is low")
    assert "WARNING: Block limit is low" in stream.getvalue()


def test_handlers_are_replaced():
    stream = StringIO()
    get_logger("gas_report_replace")
    _logger = get_logger("gas_report_replace", file=stream)
    assert len(_logger.handlers) == 1
    _logger.error("boom")
    assert "boom" in stream.getvalue()
