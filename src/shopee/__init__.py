"""
Shopee marketplace output.

Modules:
    xlsx_exporter - Mass-upload sheet layout and the openpyxl output sheet
"""

from .xlsx_exporter import (
    IMAGE_COLUMNS,
    OUTPUT_COLUMNS,
    OUTPUT_SHEET,
    OutputSheet,
    ShopeeXLSXExporter,
)

__all__ = [
    'ShopeeXLSXExporter',
    'OutputSheet',
    'OUTPUT_COLUMNS',
    'IMAGE_COLUMNS',
    'OUTPUT_SHEET',
]
