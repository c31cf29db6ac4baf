"""
Workbook Reader

Opens supplier .xlsx exports with openpyxl and yields each row as a list
of strings. Extractors only ever see this interface:

    workbook.name            - file name, for messages
    workbook.sheet_names     - worksheet names in workbook order
    workbook.rows(sheet)     - iterator of List[str]; sheet=None is the first sheet

Trailing empty cells are dropped, so ``len(row)`` is the number of columns
the row actually fills. Fixed-position lookups rely on that.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from openpyxl import load_workbook

from ..common.errors import FileOpenError, RowReadError, SheetNotFoundError

logger = logging.getLogger(__name__)


def cell_to_str(value: Any) -> str:
    """
    Render a cell value the way it reads in the spreadsheet.

    Numeric IDs and quantities come back from openpyxl as floats, so
    integral floats lose their ``.0``.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_row(values: Iterable[Any]) -> List[str]:
    """Convert cells to strings and drop trailing empty cells."""
    row = [cell_to_str(v) for v in values]
    while row and row[-1] == "":
        row.pop()
    return row


class SourceWorkbook:
    """A supplier workbook opened from disk."""

    def __init__(self, path: str | Path, kind: str = "source"):
        """
        Open the workbook.

        Args:
            path: Path to an .xlsx file
            kind: Source kind, used in error messages

        Raises:
            FileOpenError: If the file is missing or not a readable workbook
        """
        self.path = Path(path)
        self.kind = kind
        self.name = str(path)
        try:
            self._workbook = load_workbook(self.path, read_only=True, data_only=True)
        except Exception as e:
            raise FileOpenError(self.name, kind, e) from e
        logger.info("Loaded %s workbook: %s", kind, self.name)

    @property
    def sheet_names(self) -> List[str]:
        return list(self._workbook.sheetnames)

    def rows(self, sheet: Optional[str] = None) -> Iterator[List[str]]:
        """
        Iterate the rows of a sheet.

        Raises:
            SheetNotFoundError: If the sheet does not exist
            RowReadError: If reading fails part-way through
        """
        if sheet is None:
            if not self.sheet_names:
                raise SheetNotFoundError(self.name, "<first>")
            sheet = self.sheet_names[0]
        if sheet not in self.sheet_names:
            raise SheetNotFoundError(self.name, sheet)

        worksheet = self._workbook[sheet]
        try:
            for values in worksheet.iter_rows(values_only=True):
                yield normalize_row(values)
        except Exception as e:
            raise RowReadError(self.name, f"failed reading sheet '{sheet}': {e}") from e

    def close(self) -> None:
        """Release the underlying file handle."""
        self._workbook.close()

    def __enter__(self) -> SourceWorkbook:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SourceWorkbook({self.kind}, {self.name!r})"


class InMemoryWorkbook:
    """
    Same interface as SourceWorkbook over plain Python lists.

    Usage:
        wb = InMemoryWorkbook("sales.xlsx", {"Sheet1": [["P1", "Shirt"]]})
        pipeline.add_source("sales_info", wb)
    """

    def __init__(self, name: str, sheets: Dict[str, Sequence[Sequence[Any]]]):
        self.name = name
        self._sheets = {title: [list(r) for r in rows] for title, rows in sheets.items()}

    @property
    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def rows(self, sheet: Optional[str] = None) -> Iterator[List[str]]:
        if sheet is None:
            if not self._sheets:
                raise SheetNotFoundError(self.name, "<first>")
            sheet = self.sheet_names[0]
        if sheet not in self._sheets:
            raise SheetNotFoundError(self.name, sheet)
        for values in self._sheets[sheet]:
            yield normalize_row(values)

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"InMemoryWorkbook({self.name!r})"


def open_workbook(path: str | Path, kind: str = "source") -> SourceWorkbook:
    """Open a supplier workbook, raising FileOpenError on failure."""
    return SourceWorkbook(path, kind)
