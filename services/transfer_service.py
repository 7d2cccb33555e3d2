"""
Reading ABN AMRO tab exports from disk.
Opens the file, feeds each line to the line parser and applies the error policy.
"""
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Tuple

from core.config import Settings, get_settings
from core.exceptions import LineValidationError, SourceNotFoundError
from core.logger import setup_logger
from core.parsing import parse_line
from core.schema import BankTransferLine, LineError, TransferReadReport

logger = setup_logger(__name__)

HALT = "halt"
COLLECT = "collect"


class BankTransferReader:
    """Reader for one ABN AMRO tab-delimited export file."""

    def __init__(self, file_path: str, settings: Optional[Settings] = None):
        """
        Initialize reader.

        Args:
            file_path: Path of the export file
            settings: Settings to use (defaults to the global settings)
        """
        self.file_path = str(file_path)
        self.settings = settings or get_settings()

    def get_bank_transfers(self) -> List[BankTransferLine]:
        """
        Parse every line of the file.

        Returns:
            Transfers in file order

        Raises:
            SourceNotFoundError: If the file doesn't exist
            LineValidationError: For the first line that fails to parse
        """
        logger.info(f"Reading bank transfers from {self.file_path}")
        transfers = list(self.iter_bank_transfers())
        logger.info(f"Read {len(transfers)} transfers from {self.file_path}")
        return transfers

    def iter_bank_transfers(self) -> Iterator[BankTransferLine]:
        """
        Yield transfers one line at a time, stopping at the first invalid line.

        The file is closed when the iterator finishes, raises or is closed.

        Raises:
            SourceNotFoundError: Immediately, if the file doesn't exist
        """
        self._check_source()
        return self._parse_lines()

    def _parse_lines(self) -> Iterator[BankTransferLine]:
        with self._open() as file:
            for line_number, line in self._iter_lines(file):
                try:
                    yield parse_line(line)
                except LineValidationError as e:
                    logger.error(f"Line {line_number} of {self.file_path} failed with {e.code.code}")
                    logger.debug(e.message)
                    raise

    def collect_bank_transfers(self) -> TransferReadReport:
        """
        Parse every line, recording failures instead of stopping at them.

        Raises:
            SourceNotFoundError: If the file doesn't exist
        """
        logger.info(f"Reading bank transfers from {self.file_path} (collecting errors)")
        self._check_source()
        transfers: List[BankTransferLine] = []
        errors: List[LineError] = []

        with self._open() as file:
            for line_number, line in self._iter_lines(file):
                try:
                    transfers.append(parse_line(line))
                except LineValidationError as e:
                    logger.warning(f"Line {line_number} failed with {e.code.code}")
                    logger.debug(e.message)
                    errors.append(LineError(
                        line_number=line_number,
                        code=e.code.code,
                        message=e.message,
                        values=tuple(str(v) for v in e.values),
                    ))

        logger.info(
            f"Read {len(transfers)} transfers from {self.file_path} "
            f"({len(errors)} invalid lines)"
        )
        return TransferReadReport(
            source=self.file_path,
            transfers=tuple(transfers),
            errors=tuple(errors),
        )

    def read(self, policy: Optional[str] = None) -> TransferReadReport:
        """
        Read the file with the given error policy.

        Args:
            policy: "halt" or "collect"; defaults to the configured error policy

        Returns:
            Report of the read; under "halt" it never holds errors
        """
        policy = (policy or self.settings.error_policy).lower()
        if policy == COLLECT:
            return self.collect_bank_transfers()
        if policy == HALT:
            return TransferReadReport(
                source=self.file_path,
                transfers=tuple(self.get_bank_transfers()),
            )
        raise ValueError(f"Unknown error policy: {policy}")

    def _check_source(self) -> None:
        if not Path(self.file_path).is_file():
            raise SourceNotFoundError(
                f"File not found: {self.file_path}",
                details={"file_path": self.file_path}
            )

    def _open(self) -> TextIO:
        return open(self.file_path, "r", encoding=self.settings.file_encoding)

    def _iter_lines(self, file: TextIO) -> Iterator[Tuple[int, str]]:
        """Yield (line_number, line) pairs with the line terminator removed."""
        for line_number, raw_line in enumerate(file, start=1):
            line = raw_line.rstrip("\n")
            if not line and self.settings.skip_blank_lines:
                logger.debug(f"Skipping blank line {line_number}")
                continue
            logger.debug(f"Parsing line {line_number}: {line!r}")
            yield line_number, line
