"""
Supplier workbook sources.

Modules:
    workbook - openpyxl-backed reader yielding rows of strings
    layout - column positions per supplier sheet
    extractors - lookup builders (images, colours, descriptions, prices, exclusions)
"""

from .extractors import (
    extract_descriptions,
    extract_exclusions,
    extract_media,
    extract_prices,
    iter_data_rows,
    parse_color_zone,
)
from .layout import (
    BASIC_INFO_LAYOUT,
    EXCLUSION_LAYOUT,
    MEDIA_COLOR_COLUMNS,
    MEDIA_IMAGE_COLUMNS,
    MEDIA_LAYOUT,
    PRICE_LAYOUT,
    SALES_LAYOUT,
    SheetLayout,
)
from .workbook import InMemoryWorkbook, SourceWorkbook, open_workbook

__all__ = [
    # Reader
    'SourceWorkbook',
    'InMemoryWorkbook',
    'open_workbook',
    # Layouts
    'SheetLayout',
    'EXCLUSION_LAYOUT',
    'SALES_LAYOUT',
    'MEDIA_LAYOUT',
    'BASIC_INFO_LAYOUT',
    'PRICE_LAYOUT',
    'MEDIA_IMAGE_COLUMNS',
    'MEDIA_COLOR_COLUMNS',
    # Extractors
    'iter_data_rows',
    'parse_color_zone',
    'extract_exclusions',
    'extract_media',
    'extract_descriptions',
    'extract_prices',
]
