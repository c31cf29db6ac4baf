"""
Column layouts of the supplier workbooks.

Each export is read by position, not by header name. The positions live
here, one SheetLayout per source kind, so a supplier moving a column is a
one-line change.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from openpyxl.utils import get_column_letter


@dataclass(frozen=True)
class SheetLayout:
    """
    Where to find fields in one kind of supplier sheet.

    Attributes:
        sheet: Worksheet name; None means the first sheet of the workbook
        header_rows: Rows skipped at the top of every workbook
        columns: Logical field name -> zero-based column index
    """
    sheet: Optional[str]
    header_rows: int = 0
    columns: Mapping[str, int] = field(default_factory=dict)

    def index(self, name: str) -> int:
        """Zero-based column index of a field."""
        try:
            return self.columns[name]
        except KeyError:
            raise KeyError(f"Layout has no column '{name}'") from None

    def min_width(self, *names: str) -> int:
        """Smallest row length that holds every named field."""
        return max(self.index(name) for name in names) + 1

    def letter(self, name: str) -> str:
        """Spreadsheet column letter of a field (for messages)."""
        return get_column_letter(self.index(name) + 1)


EXCLUSION_LAYOUT = SheetLayout(
    sheet=None,
    columns={'product_id': 0},
)

SALES_LAYOUT = SheetLayout(
    sheet='Sheet1',
    header_rows=4,
    columns={
        'product_id': 0,
        'name_prefix': 1,
        'name_suffix': 3,
        'quantity': 7,
    },
)

MEDIA_LAYOUT = SheetLayout(
    sheet='Sheet1',
    header_rows=5,
    columns={'product_id': 0},
)

BASIC_INFO_LAYOUT = SheetLayout(
    sheet='Sheet1',
    columns={
        'product_id': 0,
        'description': 3,
    },
)

# Price exports come from a different tool and name their sheet "Sheet"
PRICE_LAYOUT = SheetLayout(
    sheet='Sheet',
    columns={
        'product_id': 0,
        'price': 7,
    },
)

# Product gallery, up to nine URLs in consecutive columns
MEDIA_IMAGE_COLUMNS = tuple(range(4, 13))

# Colour variants: colour id at i, its image URL at i + 1
MEDIA_COLOR_COLUMNS = tuple(range(15, 60, 2))
