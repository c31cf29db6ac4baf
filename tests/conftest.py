"""Shared test fixtures."""

from pathlib import Path

import pytest
from openpyxl import Workbook

from src.models import OutputRow, VariantColor
from src.sources import InMemoryWorkbook, open_workbook

SALES_HEADER = [["Sales report"], ["Shop: demo"], ["Period: 2021-07"], ["ID", "Name", "", "Model"]]
MEDIA_HEADER = [["Media info"], ["v1"], ["required"], ["hint"], ["ID"]]


def sales_row(product_id, prefix="Shirt", suffix="Cotton", quantity="10"):
    """Sales row: ID, name prefix, filler, name suffix, fillers, quantity at index 7."""
    return [product_id, prefix, "-", suffix, "-", "-", "-", quantity]


def price_row(product_id, price):
    """Price row with the price in the eighth column."""
    return [product_id, "name", "-", "-", "-", "-", "-", price]


def basic_info_row(product_id, description):
    return [product_id, "name", "category", description]


IMAGE_SLOTS = 9


def media_row(product_id, images=(), colors=()):
    """
    Media row with images from index 4 and colour pairs from index 15.

    When colours follow, the nine image slots (4..12) are written in full,
    unused ones blank, and indices 13-14 hold non-image filler.
    """
    row = [product_id, "a", "b", "c"] + list(images)
    if colors:
        row += [""] * (IMAGE_SLOTS - len(images)) + ["note", "note"]
        for color_id, image_url in colors:
            row += [color_id, image_url]
    return row


@pytest.fixture
def make_xlsx(tmp_path):
    """Factory writing an .xlsx with the given {sheet title: rows} to tmp_path."""
    def _make(filename, sheets):
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            for row in rows:
                ws.append(row)
        path = tmp_path / filename
        wb.save(path)
        return path
    return _make


@pytest.fixture
def sales_workbook():
    return InMemoryWorkbook("sales-info-001.xlsx", {
        "Sheet1": SALES_HEADER + [
            sales_row("P1", "Shirt", "Red", "10"),
            sales_row("P2", "Hat", "Wool", "3"),
            sales_row("P3", "Sock", "Pair", "7"),
        ],
    })


@pytest.fixture
def media_workbook():
    return InMemoryWorkbook("media-info-001.xlsx", {
        "Sheet1": MEDIA_HEADER + [
            media_row("P1", ["p1-0.jpg", "p1-1.jpg"], [("red", "p1-red.jpg"), ("blue", "p1-blue.jpg")]),
            media_row("P2", ["p2-0.jpg"], [("grey", "p2-grey.jpg")]),
            media_row("P3", ["p3-0.jpg"], [("white", "p3-white.jpg")]),
        ],
    })


@pytest.fixture
def basic_info_workbook():
    return InMemoryWorkbook("basic-info-001.xlsx", {
        "Sheet1": [
            basic_info_row("P1", "Soft cotton shirt"),
            basic_info_row("P2", "Warm wool hat"),
        ],
    })


@pytest.fixture
def price_workbook():
    return InMemoryWorkbook("discount_nominate_1000-1.xlsx", {
        "Sheet": [
            price_row("P1", "199"),
            price_row("P2", "89"),
            price_row("P3", "25"),
        ],
    })


@pytest.fixture
def exclusion_workbook():
    return InMemoryWorkbook("basic-info-001-bk.xlsx", {
        "Sheet1": [["P3"]],
    })


@pytest.fixture
def output_row():
    return OutputRow(
        product_id="P1",
        name="Shirt Red",
        description="Soft cotton shirt",
        image_urls=["p1-0.jpg", "p1-1.jpg"],
        price="199",
        quantity="10",
        colors=[VariantColor("red", "p1-red.jpg"), VariantColor("blue", "p1-blue.jpg")],
    )


class FailingSheet:
    """Worksheet stand-in whose row iteration fails after the given rows."""

    def __init__(self, rows, error):
        self._rows = rows
        self._error = error

    def iter_rows(self, values_only=False):
        yield from (tuple(r) for r in self._rows)
        raise self._error


class FailingBook:
    """openpyxl workbook stand-in holding FailingSheet objects."""

    def __init__(self, sheets):
        self._sheets = sheets
        self.closed = False

    @property
    def sheetnames(self):
        return list(self._sheets)

    def __getitem__(self, title):
        return self._sheets[title]

    def close(self):
        self.closed = True


@pytest.fixture
def failing_source(make_xlsx, monkeypatch):
    """Factory for a SourceWorkbook whose sheet read fails part-way through."""
    def _make(filename, sheet, rows, error, kind="source"):
        wb = open_workbook(make_xlsx(filename, {sheet: []}), kind)
        wb.close()
        monkeypatch.setattr(wb, "_workbook", FailingBook({sheet: FailingSheet(rows, error)}))
        return wb
    return _make
