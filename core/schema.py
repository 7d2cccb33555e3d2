"""
Pydantic models for parsed bank transfers and read results.
"""
from datetime import date
from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class BankTransferLine(BaseModel):
    """One transaction parsed from an ABN AMRO tab export line."""
    model_config = ConfigDict(frozen=True)

    account_number: str
    transaction_date: date
    initial_balance: Decimal
    final_balance: Decimal
    interest_date: date
    amount: Decimal


class LineError(BaseModel):
    """A line that failed validation, recorded instead of raised."""
    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1, description="1-based line number in the source file")
    code: str = Field(..., description="Stable error code, e.g. CFE_ABN_001")
    message: str
    values: Tuple[str, ...] = ()


class TransferReadReport(BaseModel):
    """Outcome of reading one file."""
    model_config = ConfigDict(frozen=True)

    source: str
    transfers: Tuple[BankTransferLine, ...] = ()
    errors: Tuple[LineError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def lines_parsed(self) -> int:
        return len(self.transfers) + len(self.errors)


TRANSFER_COLUMNS = list(BankTransferLine.model_fields.keys())
