"""
Shopee XLSX Exporter

Writes merged products into the Shopee mass-upload sheet layout.
Each colour variant gets its own sheet row; all rows of one product share
a group number in column A so the marketplace links them as variations.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Any, Dict, Iterable, List, Union

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from ..common.constants import (
    MAX_PRODUCT_IMAGES,
    NO_BRAND,
    PACKAGE_HEIGHT,
    PACKAGE_LENGTH,
    PACKAGE_WEIGHT,
    PACKAGE_WIDTH,
)
from ..models import OutputRow, VariantColor

logger = logging.getLogger(__name__)

OUTPUT_SHEET = "Sheet1"

# Logical field -> column letter in the mass-upload template
OUTPUT_COLUMNS: Dict[str, str] = {
    'group': 'A',
    'name': 'C',
    'brand': 'Q',
    'description': 'X',
    'weight': 'AD',
    'length': 'AE',
    'width': 'AF',
    'height': 'AG',
    'color_id': 'AI',
    'color_image_url': 'AN',
    'quantity': 'AW',
    'price': 'BA',
}

# Product gallery slots D..L
IMAGE_COLUMNS: List[str] = [get_column_letter(4 + i) for i in range(MAX_PRODUCT_IMAGES)]


class OutputSheet:
    """
    Write-side collaborator: a single worksheet addressed by cell.

    Usage:
        sheet = OutputSheet()
        sheet.set_cell("C1", "Shirt Red")
        sheet.save("output.xlsx")
    """

    def __init__(self, title: str = OUTPUT_SHEET):
        self._workbook = Workbook()
        self._worksheet = self._workbook.active
        self._worksheet.title = title

    @property
    def title(self) -> str:
        return self._worksheet.title

    def set_cell(self, address: str, value: Any) -> None:
        """
        Write a value to a cell.

        Strings are always stored as text, even when they start with "=",
        and control characters the xlsx format cannot hold are dropped.
        """
        cell = self._worksheet[address]
        if isinstance(value, str):
            cleaned = ILLEGAL_CHARACTERS_RE.sub("", value)
            if cleaned != value:
                logger.debug("Dropped control characters from %s", address)
            cell.value = cleaned
            cell.data_type = "s"
        else:
            cell.value = value

    def get_cell(self, address: str) -> Any:
        return self._worksheet[address].value

    def save(self, target: Union[str, Path, IO[bytes]]) -> None:
        """
        Save the workbook to a path or a binary stream.

        Parent directories of a path target are created.
        """
        if isinstance(target, (str, Path)):
            os.makedirs(os.path.dirname(os.fspath(target)) or '.', exist_ok=True)
        self._workbook.save(target)


class ShopeeXLSXExporter:
    """
    Lays merged products out on the Shopee upload sheet.

    Usage:
        exporter = ShopeeXLSXExporter()
        rows_written = exporter.write_rows(output_rows, sheet)
    """

    def __init__(self, columns: Dict[str, str] = None, image_columns: List[str] = None):
        self.columns = dict(columns or OUTPUT_COLUMNS)
        self.image_columns = list(image_columns or IMAGE_COLUMNS)

    def variant_cells(self, group: int, sheet_row: int, product: OutputRow,
                      color: VariantColor) -> Dict[str, Any]:
        """
        Cell values for one variant row.

        Args:
            group: Group number shared by all variants of the product
            sheet_row: 1-based sheet row to write
            product: Merged product
            color: The variant this row represents

        Returns:
            Ordered mapping of cell address -> value
        """
        col = self.columns
        cells: Dict[str, Any] = {f"{col['group']}{sheet_row}": group,
                                 f"{col['name']}{sheet_row}": product.name}

        for letter, url in zip(self.image_columns, product.image_urls):
            cells[f"{letter}{sheet_row}"] = url

        cells.update({
            f"{col['brand']}{sheet_row}": NO_BRAND,
            f"{col['description']}{sheet_row}": product.description,
            f"{col['weight']}{sheet_row}": PACKAGE_WEIGHT,
            f"{col['length']}{sheet_row}": PACKAGE_LENGTH,
            f"{col['width']}{sheet_row}": PACKAGE_WIDTH,
            f"{col['height']}{sheet_row}": PACKAGE_HEIGHT,
            f"{col['quantity']}{sheet_row}": product.quantity,
            f"{col['price']}{sheet_row}": product.price,
            f"{col['color_id']}{sheet_row}": color.color_id,
            f"{col['color_image_url']}{sheet_row}": color.image_url,
        })
        return cells

    def write_rows(self, products: Iterable[OutputRow], sheet: OutputSheet,
                   start_row: int = 1) -> int:
        """
        Emit one sheet row per colour of every product.

        A product without colours produces no rows but still takes a group
        number, so group numbers follow the product order.

        Returns:
            Number of sheet rows written
        """
        sheet_row = start_row
        group = 1

        for product in products:
            if not product.colors:
                logger.debug("No colour variants for %s, nothing written", product.product_id)
                group += 1
                continue
            if len(product.image_urls) > len(self.image_columns):
                logger.warning("%s has %d images, only %d written",
                               product.product_id, len(product.image_urls), len(self.image_columns))

            for color in product.colors:
                for address, value in self.variant_cells(group, sheet_row, product, color).items():
                    sheet.set_cell(address, value)
                sheet_row += 1
            group += 1

        return sheet_row - start_row
