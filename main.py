"""
Command line entry point for reading ABN AMRO tab exports.

Usage:
    python main.py statement.tab [--collect-errors] [--output [transfers.xlsx]]
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from core.config import get_settings
from core.exceptions import ConfigurationError, ExportError, LineValidationError, SourceNotFoundError
from core.exporters import create_output_filename, export_to_excel, transfers_to_dataframe
from core.logger import setup_logger
from services.transfer_service import COLLECT, BankTransferReader

PROJECT_ROOT = Path(__file__).parent

EXIT_OK = 0
EXIT_SOURCE_NOT_FOUND = 1
EXIT_INVALID_LINES = 2
EXIT_FAILURE = 3

AUTO_OUTPUT = ""

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read an ABN AMRO tab-delimited export and print its transfers")
    parser.add_argument("path", help="Path of the tab-delimited export file")
    parser.add_argument(
        "--collect-errors",
        action="store_true",
        help="Keep reading after an invalid line and report every error",
    )
    parser.add_argument(
        "--output",
        nargs="?",
        const=AUTO_OUTPUT,
        default=None,
        help="Also export the transfers to this .xlsx file (a timestamped file under EXPORT_PATH when no path is given)",
    )
    return parser


def load_settings():
    """Load settings, turning validation failures into a ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid configuration", details={"errors": e.errors()})


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    env_file = PROJECT_ROOT / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    try:
        settings = load_settings()
        policy = COLLECT if args.collect_errors else settings.error_policy

        report = BankTransferReader(args.path, settings=settings).read(policy)

        df = transfers_to_dataframe(report.transfers)
        if len(df):
            print(df.to_string(index=False))

        for error in report.errors:
            logger.error(f"Line {error.line_number}: [{error.code}] {error.message}")

        if args.output is not None:
            output_path = create_output_filename(args.path) if args.output == AUTO_OUTPUT else args.output
            export_to_excel(report.transfers, output_path)

        return EXIT_OK if report.ok else EXIT_INVALID_LINES

    except SourceNotFoundError as e:
        logger.error(e.message)
        return EXIT_SOURCE_NOT_FOUND

    except LineValidationError as e:
        logger.error(f"[{e.code.code}] {e.message}")
        return EXIT_INVALID_LINES

    except (ConfigurationError, ExportError) as e:
        logger.error(e.message)
        if e.details:
            logger.error(f"Details: {e.details}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
