"""Append-only session ledger stored as sessions.csv."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from iceland.errors import ParseError, StorageError
from iceland.fileio import append_csv_row
from iceland.models import LEDGER_HEADER, LedgerScan, SessionRecord
from iceland.workspace import sessions_path

logger = logging.getLogger(__name__)


class SessionLedger:
    def __init__(self, root: Path):
        self.path = sessions_path(root)

    def exists(self) -> bool:
        return self.path.exists()

    def append(self, record: SessionRecord) -> None:
        """Add one completed session. Existing rows are never touched."""
        try:
            append_csv_row(self.path, record.to_row(), LEDGER_HEADER)
        except OSError as e:
            raise StorageError(f"Could not append to {self.path}: {e}") from e
        logger.debug("ledger append: %s", record.to_row())

    def scan(self) -> LedgerScan:
        """Read every row, skipping (and reporting) the ones that fail to parse."""
        result = LedgerScan()
        for line_no, row, error in self._rows():
            if error is not None:
                message = f"line {line_no}: {error}"
                logger.warning("skipping ledger %s", message)
                result.skipped.append(message)
            else:
                result.records.append(row)
        return result

    def load_all(self, strict: bool = False) -> list[SessionRecord]:
        """All records in append order. With *strict*, the first bad row raises ParseError."""
        if not strict:
            return self.scan().records
        records = []
        for line_no, row, error in self._rows():
            if error is not None:
                raise ParseError(f"{self.path.name} line {line_no}: {error}")
            records.append(row)
        return records

    def _rows(self):
        if not self.path.exists():
            return
        try:
            with open(self.path, encoding="utf-8", newline="") as f:
                reader = csv.reader(f)
                for row in reader:
                    line_no = reader.line_num
                    if not row or not any(cell.strip() for cell in row):
                        continue
                    if line_no == 1 and [c.strip() for c in row] == list(LEDGER_HEADER):
                        continue
                    try:
                        yield line_no, SessionRecord.from_row(row), None
                    except ParseError as e:
                        yield line_no, None, str(e)
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        except csv.Error as e:
            raise ParseError(f"{self.path.name} is not valid CSV: {e}") from e
