"""
Field decoders for the ABN AMRO tab format.
Dates are fixed YYYYMMDD text, amounts use a comma as decimal separator.
Both decoders depend only on the raw text, never on the process locale.
"""
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

ABN_AMRO_DATE_FORMAT = "%Y%m%d"

_DATE_PATTERN = re.compile(r"[0-9]{8}")

# Invariant convention after the comma is swapped for a point:
# optional sign, digits with a single decimal point, no grouping, no exponent.
_INVARIANT_DECIMAL_PATTERN = re.compile(r"\s*[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)\s*")


def parse_abn_amro_date(text: str) -> date:
    """
    Parse a date written as exactly eight digits, YYYYMMDD.

    Args:
        text: Raw date field

    Returns:
        Calendar date

    Raises:
        ValueError: If the text is not eight digits or not a real date
    """
    # strptime alone accepts shorter fields such as "2023115"
    if not _DATE_PATTERN.fullmatch(text):
        raise ValueError(f"'{text}' does not match the date pattern YYYYMMDD.")
    return datetime.strptime(text, ABN_AMRO_DATE_FORMAT).date()


def parse_abn_amro_decimal(text: str) -> Decimal:
    """
    Parse an ABN AMRO amount such as ``-1500,25``.

    The text must contain a comma and must not contain a dot. The comma is
    replaced by a decimal point and the result parsed as an invariant
    decimal number.

    Raises:
        ValueError: With a message describing why the text was rejected
    """
    if "." in text:
        raise ValueError("ABN AMRO decimal numbers never contain dots.")

    if "," not in text:
        raise ValueError("ABN AMRO decimals always contain one comma.")

    invariant = text.replace(",", ".")
    if not _INVARIANT_DECIMAL_PATTERN.fullmatch(invariant):
        raise ValueError(f"'{text}' is not a valid decimal number.")

    try:
        return Decimal(invariant.strip())
    except InvalidOperation:
        raise ValueError(f"'{text}' is not a valid decimal number.")


def format_abn_amro_decimal(value: Decimal) -> str:
    """Write a decimal back in the ABN AMRO comma convention."""
    text = format(value, "f")
    if "." not in text:
        text += ".00"
    return text.replace(".", ",")


def format_abn_amro_date(value: date) -> str:
    """Write a date back as YYYYMMDD."""
    return value.strftime(ABN_AMRO_DATE_FORMAT)
