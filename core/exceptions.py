"""
Custom exceptions for bank transfer file reading.
"""
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class CashFlowerException(Exception):
    """Base exception for all bank transfer reader errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SourceNotFoundError(CashFlowerException):
    """Raised when the input file does not exist."""
    pass


class ExportError(CashFlowerException):
    """Raised when Excel export fails."""
    pass


class ConfigurationError(CashFlowerException):
    """Raised when configuration is invalid."""
    pass


class ErrorCode(Enum):
    """Stable error codes of the ABN AMRO tab format, with their message templates."""

    WRONG_NUMBER_OF_TABS = ("CFE_ABN_001", "Wrong number ({0}) of TABs in line : {1}")
    INVALID_CURRENCY = ("CFE_ABN_002", "No valid currency ({0}) given.")
    INVALID_TRANSACTION_DATE = ("CFE_ABN_003", "No valid transaction date ({0}) given.")
    INVALID_INITIAL_BALANCE = (
        "CFE_ABN_004",
        "Failed to parse the initial balance ({0}) because of the following exception: {1}",
    )
    INVALID_FINAL_BALANCE = (
        "CFE_ABN_005",
        "Failed to parse the final balance ({0}) because of the following exception: {1}",
    )
    INVALID_INTEREST_DATE = ("CFE_ABN_006", "No valid interest date ({0}) given.")
    INVALID_AMOUNT = (
        "CFE_ABN_007",
        "Failed to parse the amount ({0}) because of the following exception: {1}",
    )

    def __init__(self, code: str, template: str):
        self.code = code
        self.template = template

    def format(self, *values: Any) -> str:
        return self.template.format(*values)


class LineValidationError(CashFlowerException):
    """
    Raised when a line does not conform to the ABN AMRO tab format.

    The kind of failure is carried by ``code``; ``values`` holds the raw
    text that caused it.
    """

    def __init__(self, code: ErrorCode, *values: Any):
        self.code = code
        self.values: Tuple[Any, ...] = values
        super().__init__(
            code.format(*values),
            details={"code": code.code, "values": list(values)},
        )
