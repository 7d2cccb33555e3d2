"""
Tabular views and Excel export of parsed bank transfers.
"""
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from core.config import get_settings
from core.exceptions import ExportError
from core.logger import setup_logger
from core.schema import TRANSFER_COLUMNS, BankTransferLine

logger = setup_logger(__name__)

MONEY_COLUMNS = ("initial_balance", "final_balance", "amount")


def transfers_to_dataframe(transfers: Iterable[BankTransferLine]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per transfer, in input order.

    Amounts stay ``Decimal`` and dates stay ``date`` (object columns).
    """
    rows = [transfer.model_dump() for transfer in transfers]
    return pd.DataFrame(rows, columns=TRANSFER_COLUMNS)


def export_to_excel(
    transfers: Iterable[BankTransferLine],
    output_path: str,
    sheet_name: str = "Transfers"
) -> str:
    """
    Export parsed transfers to an Excel workbook.

    Args:
        transfers: Parsed transfers
        output_path: Output file path
        sheet_name: Worksheet name

    Returns:
        Path to created file

    Raises:
        ExportError: If the workbook cannot be written
    """
    df = transfers_to_dataframe(transfers)

    # xlsxwriter has no Decimal type
    for column in MONEY_COLUMNS:
        df[column] = df[column].astype(float)

    logger.info(f"Exporting {len(df)} transfers to {output_path}")

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with pd.ExcelWriter(output_path, engine="xlsxwriter", date_format="yyyy-mm-dd") as writer:
            df.to_excel(writer, sheet_name=sheet_name, index=False)

            workbook = writer.book
            worksheet = writer.sheets[sheet_name]

            money_format = workbook.add_format({"num_format": "#,##0.00"})
            for idx, col in enumerate(df.columns):
                max_len = max([len(col)] + [len(str(v)) for v in df[col]])
                if col in MONEY_COLUMNS:
                    worksheet.set_column(idx, idx, max_len + 2, money_format)
                else:
                    worksheet.set_column(idx, idx, max_len + 2)

        logger.info(f"Successfully exported to {output_path}")
        return output_path

    except Exception as e:
        logger.error(f"Failed to export Excel: {e}")
        raise ExportError(
            "Failed to export to Excel",
            details={"output_path": output_path, "error": str(e)}
        )


def create_output_filename(source: str, base_path: Optional[str] = None) -> str:
    """
    Create a timestamped output filename for a source file.

    Args:
        source: Path of the statement that was read
        base_path: Base directory path (defaults to configured export path)

    Returns:
        Full output file path
    """
    if base_path is None:
        base_path = get_settings().export_path

    Path(base_path).mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    filename = f"{Path(source).stem}_transfers_{timestamp}.xlsx"

    return str(Path(base_path) / filename)
