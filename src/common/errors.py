"""
Error types for the catalogue merge.

Every failure is fail-fast: raised at the first problem and propagated
to the caller. No retries, no partial results.
"""

from typing import Optional


class CatalogMergeError(Exception):
    """Base exception for all catalogue merge errors."""

    def __init__(self, message: str = "", details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class FileOpenError(CatalogMergeError):
    """Raised when a source workbook cannot be opened."""

    def __init__(self, filename: str, kind: str = "source", cause: Optional[BaseException] = None):
        message = f"cannot read {kind} input from ({filename})"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(
            message=message,
            details={"filename": filename, "kind": kind},
        )
        self.filename = filename


class RowReadError(CatalogMergeError):
    """Raised when iterating the rows of a sheet fails mid-scan."""

    def __init__(self, filename: str, message: str):
        super().__init__(
            message=f"{filename}: {message}",
            details={"filename": filename},
        )
        self.filename = filename


class SheetNotFoundError(RowReadError):
    """Raised when a workbook has no sheet with the expected name."""

    def __init__(self, filename: str, sheet: str):
        super().__init__(filename, f"sheet '{sheet}' not found")
        self.details["sheet"] = sheet
        self.sheet = sheet


class RowTooShortError(CatalogMergeError):
    """Raised when a sales row does not reach a required column."""

    def __init__(self, filename: str, sheet: str, row_number: int, required: int, actual: int,
                 column: str = ""):
        needed = f"need {required} columns" + (f" (through column {column})" if column else "")
        super().__init__(
            message=f"row too short in {filename} [{sheet}] row {row_number}: {needed}, got {actual}",
            details={
                "filename": filename,
                "sheet": sheet,
                "row": row_number,
                "required": required,
                "actual": actual,
                "column": column,
            },
        )
        self.row_number = row_number


class PipelineStateError(CatalogMergeError):
    """Raised when a single-use pipeline is processed a second time."""
    pass
