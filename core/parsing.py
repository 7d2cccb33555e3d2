"""
Line parsing for ABN AMRO tab-delimited transaction exports.

Line layout (8 fields, no header):
AccountNumber, Currency, TransactionDate, InitialBalance, FinalBalance,
InterestDate, Amount, <unused>
"""
from datetime import date
from decimal import Decimal
from typing import List

from core.exceptions import ErrorCode, LineValidationError
from core.normalize import (
    format_abn_amro_date,
    format_abn_amro_decimal,
    parse_abn_amro_date,
    parse_abn_amro_decimal,
)
from core.schema import BankTransferLine

TAB_DELIMITER = "\t"
EXPECTED_FIELD_COUNT = 8
CURRENCY = "EUR"

# Field positions
ACCOUNT_NUMBER = 0
CURRENCY_CODE = 1
TRANSACTION_DATE = 2
INITIAL_BALANCE = 3
FINAL_BALANCE = 4
INTEREST_DATE = 5
AMOUNT = 6


def parse_line(line: str) -> BankTransferLine:
    """
    Parse one line of an ABN AMRO tab export.

    Fields are validated in file order and the first failure is raised.

    Args:
        line: Raw line without its line terminator

    Returns:
        Parsed transfer

    Raises:
        LineValidationError: If the line does not conform to the format
    """
    parts = line.split(TAB_DELIMITER)
    _validate_number_of_parts(line, parts)
    _validate_currency(parts[CURRENCY_CODE])

    transaction_date = _retrieve_date(parts[TRANSACTION_DATE], ErrorCode.INVALID_TRANSACTION_DATE)
    initial_balance = _retrieve_decimal(parts[INITIAL_BALANCE], ErrorCode.INVALID_INITIAL_BALANCE)
    final_balance = _retrieve_decimal(parts[FINAL_BALANCE], ErrorCode.INVALID_FINAL_BALANCE)
    interest_date = _retrieve_date(parts[INTEREST_DATE], ErrorCode.INVALID_INTEREST_DATE)
    amount = _retrieve_decimal(parts[AMOUNT], ErrorCode.INVALID_AMOUNT)

    return BankTransferLine(
        account_number=parts[ACCOUNT_NUMBER],
        transaction_date=transaction_date,
        initial_balance=initial_balance,
        final_balance=final_balance,
        interest_date=interest_date,
        amount=amount,
    )


def format_line(transfer: BankTransferLine, reserved: str = "") -> str:
    """Write a transfer back as an ABN AMRO tab export line."""
    return TAB_DELIMITER.join([
        transfer.account_number,
        CURRENCY,
        format_abn_amro_date(transfer.transaction_date),
        format_abn_amro_decimal(transfer.initial_balance),
        format_abn_amro_decimal(transfer.final_balance),
        format_abn_amro_date(transfer.interest_date),
        format_abn_amro_decimal(transfer.amount),
        reserved,
    ])


def get_number_of_tabs(parts: List[str]) -> int:
    return len(parts) - 1


def _validate_number_of_parts(line: str, parts: List[str]) -> None:
    if len(parts) != EXPECTED_FIELD_COUNT:
        raise LineValidationError(ErrorCode.WRONG_NUMBER_OF_TABS, get_number_of_tabs(parts), line)


def _validate_currency(currency: str) -> None:
    if currency != CURRENCY:
        raise LineValidationError(ErrorCode.INVALID_CURRENCY, currency)


def _retrieve_date(text: str, code: ErrorCode) -> date:
    try:
        return parse_abn_amro_date(text)
    except ValueError:
        raise LineValidationError(code, text) from None


def _retrieve_decimal(text: str, code: ErrorCode) -> Decimal:
    try:
        return parse_abn_amro_decimal(text)
    except ValueError as e:
        raise LineValidationError(code, text, str(e)) from e
