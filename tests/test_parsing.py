"""
Unit tests for the ABN AMRO line parser.
"""
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.exceptions import ErrorCode, LineValidationError
from core.parsing import format_line, parse_line
from core.schema import BankTransferLine

VALID_LINE = "NL12ABNA0123456789\tEUR\t20230115\t1500,00\t1750,50\t20230116\t250,50\tX"


def make_line(**overrides):
    fields = {
        "account": "NL12ABNA0123456789",
        "currency": "EUR",
        "transaction_date": "20230115",
        "initial_balance": "1500,00",
        "final_balance": "1750,50",
        "interest_date": "20230116",
        "amount": "250,50",
        "reserved": "X",
    }
    fields.update(overrides)
    return "\t".join(fields.values())


def test_parse_valid_line():
    transfer = parse_line(VALID_LINE)

    assert transfer.account_number == "NL12ABNA0123456789"
    assert transfer.transaction_date == date(2023, 1, 15)
    assert transfer.initial_balance == Decimal("1500.00")
    assert transfer.final_balance == Decimal("1750.50")
    assert transfer.interest_date == date(2023, 1, 16)
    assert transfer.amount == Decimal("250.50")


def test_parse_negative_amount():
    transfer = parse_line(make_line(amount="-123,45"))
    assert transfer.amount == Decimal("-123.45")


def test_reserved_field_is_ignored():
    assert parse_line(make_line(reserved="")) == parse_line(make_line(reserved="anything\xa0at all"))


def test_account_number_is_not_validated():
    assert parse_line(make_line(account="")).account_number == ""


def test_parsed_transfer_is_immutable():
    transfer = parse_line(VALID_LINE)
    with pytest.raises(ValidationError):
        transfer.amount = Decimal("0")


def test_format_line_parses_back():
    transfer = BankTransferLine(
        account_number="NL91ABNA0417164300",
        transaction_date=date(2022, 12, 31),
        initial_balance=Decimal("-10.05"),
        final_balance=Decimal("0.00"),
        interest_date=date(2023, 1, 2),
        amount=Decimal("10.05"),
    )
    assert parse_line(format_line(transfer)) == transfer


@pytest.mark.parametrize("line,tabs", [
    ("", 0),
    ("NL12ABNA0123456789\tEUR\t20230115", 2),
    ("NL12ABNA0123456789\tEUR\t20230115\t1500,00\t1750,50\t20230116\t250,50", 6),
    (VALID_LINE + "\textra", 8),
    (VALID_LINE + "\t", 8),
])
def test_wrong_number_of_tabs(line, tabs):
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(line)

    exc = exc_info.value
    assert exc.code is ErrorCode.WRONG_NUMBER_OF_TABS
    assert exc.values == (tabs, line)
    assert exc.message == f"Wrong number ({tabs}) of TABs in line : {line}"


def test_consecutive_tabs_keep_empty_fields():
    # seven empty fields plus the account: right count, empty currency
    with pytest.raises(LineValidationError) as exc_info:
        parse_line("NL12\t\t\t\t\t\t\t")
    assert exc_info.value.code is ErrorCode.INVALID_CURRENCY
    assert exc_info.value.values == ("",)


@pytest.mark.parametrize("currency", ["USD", "eur", " EUR", "EUR "])
def test_invalid_currency(currency):
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(make_line(currency=currency))

    exc = exc_info.value
    assert exc.code is ErrorCode.INVALID_CURRENCY
    assert exc.values == (currency,)
    assert exc.details["code"] == "CFE_ABN_002"


@pytest.mark.parametrize("raw", ["20230230", "2023-02-15", "15-01-2023", ""])
def test_invalid_transaction_date(raw):
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(make_line(transaction_date=raw))

    exc = exc_info.value
    assert exc.code is ErrorCode.INVALID_TRANSACTION_DATE
    assert exc.values == (raw,)
    assert exc.message == f"No valid transaction date ({raw}) given."


def test_invalid_interest_date():
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(make_line(interest_date="20230230"))

    assert exc_info.value.code is ErrorCode.INVALID_INTEREST_DATE
    assert exc_info.value.details == {"code": "CFE_ABN_006", "values": ["20230230"]}


@pytest.mark.parametrize("field,code,label", [
    ("initial_balance", ErrorCode.INVALID_INITIAL_BALANCE, "initial balance"),
    ("final_balance", ErrorCode.INVALID_FINAL_BALANCE, "final balance"),
    ("amount", ErrorCode.INVALID_AMOUNT, "amount"),
])
def test_decimal_with_dot(field, code, label):
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(make_line(**{field: "12.50"}))

    exc = exc_info.value
    assert exc.code is code
    assert exc.values == ("12.50", "ABN AMRO decimal numbers never contain dots.")
    assert exc.message == (
        f"Failed to parse the {label} (12.50) because of the following exception: "
        "ABN AMRO decimal numbers never contain dots."
    )


def test_decimal_without_comma():
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(make_line(final_balance="1250"))

    assert exc_info.value.code is ErrorCode.INVALID_FINAL_BALANCE
    assert exc_info.value.values[1] == "ABN AMRO decimals always contain one comma."


def test_decimal_with_dot_and_comma_fails_on_dot():
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(make_line(amount="1.250,75"))

    assert exc_info.value.code is ErrorCode.INVALID_AMOUNT
    assert exc_info.value.values[1] == "ABN AMRO decimal numbers never contain dots."


def test_decimal_with_letters():
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(make_line(initial_balance="12,5a"))

    assert exc_info.value.code is ErrorCode.INVALID_INITIAL_BALANCE
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_first_failing_field_wins():
    line = make_line(currency="USD", transaction_date="bad", amount="bad")
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(line)
    assert exc_info.value.code is ErrorCode.INVALID_CURRENCY

    line = make_line(initial_balance="1250", final_balance="1.0", interest_date="bad")
    with pytest.raises(LineValidationError) as exc_info:
        parse_line(line)
    assert exc_info.value.code is ErrorCode.INVALID_INITIAL_BALANCE
