"""
Lookup Extractors

Each extractor scans one kind of supplier workbook and returns a fresh
ProductID-keyed lookup. Extractors are independent of each other; the
pipeline runs them all before the join pass. Any reader error propagates
immediately and aborts the extractor.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from ..models import VariantColor
from .layout import (
    BASIC_INFO_LAYOUT,
    EXCLUSION_LAYOUT,
    MEDIA_COLOR_COLUMNS,
    MEDIA_IMAGE_COLUMNS,
    MEDIA_LAYOUT,
    PRICE_LAYOUT,
    SheetLayout,
)

logger = logging.getLogger(__name__)


def iter_data_rows(workbook, layout: SheetLayout) -> Iterator[Tuple[int, List[str]]]:
    """
    Yield (sheet row number, row) after the layout's header block.

    The header skip restarts for every workbook. Empty rows are dropped.
    Row numbers are 1-based, as shown in the spreadsheet.
    """
    rows = workbook.rows(layout.sheet)
    for row_number, row in enumerate(islice(rows, layout.header_rows, None), layout.header_rows + 1):
        if not row:
            continue
        yield row_number, row


def extract_exclusions(workbooks: Iterable) -> Set[str]:
    """Collect the first-column ProductID of every row (no header skip)."""
    excluded: Set[str] = set()
    id_col = EXCLUSION_LAYOUT.index('product_id')

    for workbook in workbooks:
        for _, row in iter_data_rows(workbook, EXCLUSION_LAYOUT):
            excluded.add(row[id_col])

    logger.info("Exclusion list: %d product IDs", len(excluded))
    return excluded


def parse_color_zone(row: List[str]) -> List[VariantColor]:
    """
    Read colour id / image URL pairs from a media row.

    The zone ends at the first empty colour id or at the end of the row.
    """
    colors = []
    for i in MEDIA_COLOR_COLUMNS:
        if i >= len(row) or row[i] == "":
            break
        image_url = row[i + 1] if i + 1 < len(row) else ""
        colors.append(VariantColor(color_id=row[i], image_url=image_url))
    return colors


def extract_media(workbooks: Iterable) -> Tuple[Dict[str, List[str]], Dict[str, List[VariantColor]]]:
    """
    Build the image URL and variant colour lookups from media workbooks.

    Short rows yield fewer image URLs, never an error. When a product
    appears on several media rows the last row's gallery is kept while
    colours from every row accumulate.

    Returns:
        (image_urls, colors) keyed by ProductID
    """
    image_urls: Dict[str, List[str]] = {}
    colors: Dict[str, List[VariantColor]] = {}
    id_col = MEDIA_LAYOUT.index('product_id')

    for workbook in workbooks:
        for _, row in iter_data_rows(workbook, MEDIA_LAYOUT):
            product_id = row[id_col]
            image_urls[product_id] = [row[i] for i in MEDIA_IMAGE_COLUMNS if i < len(row)]

            row_colors = parse_color_zone(row)
            if row_colors:
                colors.setdefault(product_id, []).extend(row_colors)

    logger.info("Media: %d products with images, %d with colour variants",
                len(image_urls), len(colors))
    return image_urls, colors


def extract_descriptions(workbooks: Iterable) -> Dict[str, str]:
    """Map ProductID to description; rows without a description column are skipped."""
    descriptions: Dict[str, str] = {}
    id_col = BASIC_INFO_LAYOUT.index('product_id')
    desc_col = BASIC_INFO_LAYOUT.index('description')
    min_width = BASIC_INFO_LAYOUT.min_width('product_id', 'description')

    for workbook in workbooks:
        for _, row in iter_data_rows(workbook, BASIC_INFO_LAYOUT):
            if len(row) < min_width:
                continue
            descriptions[row[id_col]] = row[desc_col]

    logger.info("Basic info: %d descriptions", len(descriptions))
    return descriptions


def extract_prices(workbooks: Iterable) -> Dict[str, str]:
    """
    Map ProductID to price.

    Workbooks are applied in order, so a later price file overrides an
    earlier one for the same product.
    """
    prices: Dict[str, str] = {}
    id_col = PRICE_LAYOUT.index('product_id')
    price_col = PRICE_LAYOUT.index('price')
    min_width = PRICE_LAYOUT.min_width('product_id', 'price')

    for workbook in workbooks:
        for _, row in iter_data_rows(workbook, PRICE_LAYOUT):
            if len(row) < min_width:
                continue
            product_id = row[id_col]
            if product_id in prices and prices[product_id] != row[price_col]:
                logger.debug("Price for %s overridden by %s: %s -> %s",
                             product_id, workbook.name, prices[product_id], row[price_col])
            prices[product_id] = row[price_col]

    logger.info("Price info: %d prices", len(prices))
    return prices
