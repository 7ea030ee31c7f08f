from typing import Optional

from pydantic import ValidationError


class GasReportException(Exception):
    """
    An exception raised by the gas reporter.
    """

    def __init__(self, message):
        if not message.endswith("."):
            message = f"{message}."
        super().__init__(message)


class SnapshotError(GasReportException):
    """
    Raised when a gas-data snapshot violates its own invariants,
    such as a record whose call count does not match its gas data.
    """

    def __init__(self, message: str, base_error: Optional[ValidationError] = None):
        self.base_error = base_error
        if base_error is not None:
            details = "; ".join(_describe(e) for e in base_error.errors())
            message = f"{message}: {details}"

        super().__init__(message)


class ConfigError(GasReportException):
    """
    Raised when the report options cannot be resolved.
    """

    def __init__(self, message: str, base_error: Optional[ValidationError] = None):
        self.base_error = base_error
        if base_error is not None:
            details = "; ".join(_describe(e) for e in base_error.errors())
            message = f"{message}: {details}"

        super().__init__(message)


class TableLayoutError(GasReportException):
    """
    Raised when a row does not fill the table's columns exactly.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row spans {actual} columns but the table has {expected}")


def _describe(error: dict) -> str:
    location = ".".join(str(p) for p in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location} ({message})" if location else message
