"""
Catalogue Merge Pipeline

Joins supplier exports into one Shopee mass-upload sheet:

    load workbooks -> build lookup tables -> join sales rows -> emit variant rows

A pipeline instance runs once. Load every source, call ``process()``, then
``write()`` the result. Any error aborts the run; an aborted run's output
must be discarded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Dict, Iterable, List, Optional, Union

from ..common.config_loader import SOURCE_KINDS, SourceManifest
from ..common.errors import FileOpenError, PipelineStateError, RowTooShortError
from ..models import LookupTables, MergeSummary, OutputRow
from ..shopee import OutputSheet, ShopeeXLSXExporter
from ..sources import (
    SALES_LAYOUT,
    extract_descriptions,
    extract_exclusions,
    extract_media,
    extract_prices,
    iter_data_rows,
    open_workbook,
)

logger = logging.getLogger(__name__)

SOURCE_LABELS = {
    'exclude_product_ids': 'exclude product id',
    'sales_info': 'sale info',
    'media_info': 'media info',
    'basic_info': 'basic info',
    'price_info': 'price info',
}


def build_name(row: List[str]) -> str:
    """Product name: the two name columns of a sales row joined by a space."""
    return f"{row[SALES_LAYOUT.index('name_prefix')]} {row[SALES_LAYOUT.index('name_suffix')]}"


class CatalogMergePipeline:
    """
    Single-use merge of supplier workbooks into a Shopee upload sheet.

    Usage:
        pipeline = CatalogMergePipeline()
        pipeline.load_sales_info(["sales-info-001.xlsx"])
        pipeline.load_media_info(["media-info-001.xlsx"])
        ...
        summary = pipeline.process()
        pipeline.write("output.xlsx")
    """

    def __init__(self, exporter: Optional[ShopeeXLSXExporter] = None):
        self.sources: Dict[str, list] = {kind: [] for kind in SOURCE_KINDS}
        self.exporter = exporter or ShopeeXLSXExporter()
        self.output = OutputSheet()
        self.summary: Optional[MergeSummary] = None
        self._processed = False

    # -- loading -----------------------------------------------------------

    def add_source(self, kind: str, workbook) -> None:
        """Attach an already-open workbook as a source of the given kind."""
        if kind not in self.sources:
            raise ValueError(f"Unknown source kind: {kind}")
        self._check_not_processed()
        self.sources[kind].append(workbook)

    def _load(self, kind: str, filenames: Iterable[Union[str, Path]]) -> None:
        for name in filenames:
            self.add_source(kind, open_workbook(name, SOURCE_LABELS[kind]))

    def load_exclude_product_ids(self, filenames: Iterable[Union[str, Path]]) -> None:
        self._load('exclude_product_ids', filenames)

    def load_sales_info(self, filenames: Iterable[Union[str, Path]]) -> None:
        self._load('sales_info', filenames)

    def load_media_info(self, filenames: Iterable[Union[str, Path]]) -> None:
        self._load('media_info', filenames)

    def load_basic_info(self, filenames: Iterable[Union[str, Path]]) -> None:
        self._load('basic_info', filenames)

    def load_price_info(self, filenames: Iterable[Union[str, Path]]) -> None:
        """Load price workbooks; later files override earlier ones."""
        self._load('price_info', filenames)

    def load_manifest(self, manifest: SourceManifest) -> None:
        """Load every source listed in a manifest, in manifest order."""
        try:
            for kind in SOURCE_KINDS:
                self._load(kind, manifest.paths_for(kind))
        except FileOpenError:
            self.close()
            raise

    # -- processing --------------------------------------------------------

    def build_lookups(self) -> LookupTables:
        """Run every extractor over its sources."""
        image_urls, colors = extract_media(self.sources['media_info'])
        lookups = LookupTables(
            image_urls=image_urls,
            colors=colors,
            descriptions=extract_descriptions(self.sources['basic_info']),
            prices=extract_prices(self.sources['price_info']),
            excluded=frozenset(extract_exclusions(self.sources['exclude_product_ids'])),
        )
        logger.debug("Lookup sizes: %s", lookups.sizes())
        return lookups

    def build_output_rows(self, lookups: LookupTables,
                          summary: Optional[MergeSummary] = None) -> List[OutputRow]:
        """
        Join sales rows against the lookups.

        The first sales row for a product wins, across all sales files;
        later rows for the same product are ignored. Excluded products are
        never built. Rows come back in order of first appearance.

        Raises:
            RowTooShortError: If a sales row has no quantity column
        """
        summary = summary if summary is not None else MergeSummary()
        built: Dict[str, OutputRow] = {}
        excluded_seen = set()
        id_col = SALES_LAYOUT.index('product_id')
        qty_col = SALES_LAYOUT.index('quantity')
        min_width = SALES_LAYOUT.min_width('product_id', 'name_prefix', 'name_suffix', 'quantity')

        for workbook in self.sources['sales_info']:
            for row_number, row in iter_data_rows(workbook, SALES_LAYOUT):
                product_id = row[id_col]

                if product_id in built:
                    summary.duplicates += 1
                    logger.debug("Duplicate sales row for %s in %s row %d, ignored",
                                 product_id, workbook.name, row_number)
                    continue

                if product_id in lookups.excluded:
                    if product_id not in excluded_seen:
                        excluded_seen.add(product_id)
                        logger.debug("Excluded product %s", product_id)
                    continue

                if len(row) < min_width:
                    raise RowTooShortError(workbook.name, SALES_LAYOUT.sheet, row_number,
                                           min_width, len(row), SALES_LAYOUT.letter('quantity'))

                built[product_id] = OutputRow(
                    product_id=product_id,
                    name=build_name(row),
                    description=lookups.descriptions.get(product_id, ""),
                    image_urls=list(lookups.image_urls.get(product_id, [])),
                    price=lookups.prices.get(product_id, ""),
                    quantity=row[qty_col],
                    colors=list(lookups.colors.get(product_id, [])),
                )

        summary.excluded = len(excluded_seen)
        summary.products = len(built)
        return list(built.values())

    def process(self) -> MergeSummary:
        """
        Build lookups, join, and lay the rows out on the output sheet.

        Returns:
            MergeSummary with run counters

        Raises:
            PipelineStateError: If the pipeline already ran
        """
        self._check_not_processed()
        self._processed = True
        summary = MergeSummary()

        try:
            lookups = self.build_lookups()
            rows = self.build_output_rows(lookups, summary)

            summary.colorless_products = sum(1 for r in rows if not r.colors)
            if summary.colorless_products:
                logger.warning("%d products have no colour variants and produce no rows",
                               summary.colorless_products)

            summary.rows_written = self.exporter.write_rows(rows, self.output)
            self.summary = summary
        finally:
            self.close()

        logger.info("Merged %d products into %d rows (%d excluded, %d duplicate sales rows)",
                    summary.products, summary.rows_written, summary.excluded, summary.duplicates)
        return summary

    def write(self, target: Union[str, Path, IO[bytes]]) -> None:
        """Save the output workbook to a path or binary stream."""
        if self.summary is None:
            raise PipelineStateError("Pipeline has no completed run to write")
        self.output.save(target)
        if isinstance(target, (str, Path)):
            logger.info("Wrote %s", target)

    def close(self) -> None:
        """Close every loaded source workbook."""
        for workbooks in self.sources.values():
            for workbook in workbooks:
                workbook.close()

    def _check_not_processed(self) -> None:
        if self._processed:
            raise PipelineStateError("Pipeline already processed; create a new one for another run")
