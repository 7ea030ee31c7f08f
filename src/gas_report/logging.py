import logging
from enum import IntEnum
from typing import IO, Optional, Union

import click


class LogLevel(IntEnum):
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG


CLICK_STYLE_KWARGS = {
    LogLevel.ERROR: dict(fg="bright_red"),
    LogLevel.WARNING: dict(fg="bright_red"),
    LogLevel.INFO: dict(fg="blue"),
    LogLevel.DEBUG: dict(fg="blue"),
}
DEFAULT_LOG_LEVEL = LogLevel.WARNING.name
DEFAULT_LOG_FORMAT = "%(levelname)s: %(message)s"


class ClickHandler(logging.Handler):
    def __init__(self, echo_kwargs: Optional[dict] = None):
        super().__init__()
        self.echo_kwargs = echo_kwargs or {}

    def emit(self, record):
        try:
            level = LogLevel(record.levelno)
        except ValueError:
            level = None

        if level is not None and level in CLICK_STYLE_KWARGS:
            record.levelname = click.style(record.levelname, **CLICK_STYLE_KWARGS[level])

        try:
            msg = self.format(record)
            click.echo(msg, **self.echo_kwargs)
        except Exception:
            self.handleError(record)


class GasReportLogger:
    """
    A thin wrapper around the ``gas_report`` stdlib logger that
    writes through click so log lines share the terminal with the report.
    """

    def __init__(self, _logger: logging.Logger, fmt: str):
        self.error = _logger.error
        self.warning = _logger.warning
        self.info = _logger.info
        self.debug = _logger.debug
        self._logger = _logger
        self.fmt = fmt

    @classmethod
    def create(cls, fmt: Optional[str] = None, file: Optional[IO] = None) -> "GasReportLogger":
        fmt = fmt or DEFAULT_LOG_FORMAT
        _logger = get_logger("gas_report", fmt=fmt, file=file)
        return cls(_logger, fmt)

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level: Union[str, int]):
        """
        Change the global gas-report logging level.

        Args:
            level (str | int): The name of the level or the value of the log-level.
        """
        if isinstance(level, str):
            level = LogLevel[level.upper()].value

        self._logger.setLevel(level)


def _format_logger(
    _logger: logging.Logger, fmt: str, file: Optional[IO] = None
) -> logging.Logger:
    echo_kwargs = {"err": True} if file is None else {"file": file}
    handler = ClickHandler(echo_kwargs=echo_kwargs)
    handler.setFormatter(logging.Formatter(fmt))

    # Remove existing handler(s)
    for existing_handler in _logger.handlers[:]:
        if isinstance(existing_handler, ClickHandler):
            _logger.removeHandler(existing_handler)

    _logger.addHandler(handler)
    return _logger


def get_logger(name: str, fmt: Optional[str] = None, file: Optional[IO] = None) -> logging.Logger:
    """
    Get a logger with the given ``name`` and configure it for usage with click.

    Args:
        name (str): The name of the logger.
        fmt (Optional[str]): The format of the logger. Defaults to the gas-report
          default log format.
        file (Optional[IO]): Where to echo log lines. Defaults to ``stderr``.

    Returns:
        ``logging.Logger``
    """
    _logger = logging.getLogger(name)
    _logger.setLevel(DEFAULT_LOG_LEVEL)
    _logger.propagate = False
    return _format_logger(_logger, fmt=fmt or DEFAULT_LOG_FORMAT, file=file)


logger = GasReportLogger.create()

__all__ = ["ClickHandler", "get_logger", "logger", "LogLevel"]
