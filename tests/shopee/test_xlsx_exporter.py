"""Tests for src/shopee/xlsx_exporter.py"""

import io

import pytest
from openpyxl import load_workbook

from src.models import OutputRow, VariantColor
from src.shopee.xlsx_exporter import (
    IMAGE_COLUMNS,
    OUTPUT_COLUMNS,
    OutputSheet,
    ShopeeXLSXExporter,
)


@pytest.fixture
def exporter():
    return ShopeeXLSXExporter()


@pytest.fixture
def sheet():
    return OutputSheet()


class TestColumnMap:
    def test_image_slots_d_to_l(self):
        assert IMAGE_COLUMNS == ["D", "E", "F", "G", "H", "I", "J", "K", "L"]

    def test_fixed_addresses(self):
        assert OUTPUT_COLUMNS["group"] == "A"
        assert OUTPUT_COLUMNS["name"] == "C"
        assert OUTPUT_COLUMNS["brand"] == "Q"
        assert OUTPUT_COLUMNS["description"] == "X"
        assert OUTPUT_COLUMNS["color_id"] == "AI"
        assert OUTPUT_COLUMNS["color_image_url"] == "AN"
        assert OUTPUT_COLUMNS["quantity"] == "AW"
        assert OUTPUT_COLUMNS["price"] == "BA"


class TestVariantCells:
    def test_values(self, exporter, output_row):
        cells = exporter.variant_cells(3, 7, output_row, output_row.colors[1])
        assert cells["A7"] == 3
        assert cells["C7"] == "Shirt Red"
        assert cells["D7"] == "p1-0.jpg"
        assert cells["E7"] == "p1-1.jpg"
        assert "F7" not in cells
        assert cells["Q7"] == "No brand/DD good"
        assert cells["X7"] == "Soft cotton shirt"
        assert (cells["AD7"], cells["AE7"], cells["AF7"], cells["AG7"]) == ("0.5", "20", "25", "2")
        assert cells["AW7"] == "10"
        assert cells["BA7"] == "199"
        assert cells["AI7"] == "blue"
        assert cells["AN7"] == "p1-blue.jpg"


class TestWriteRows:
    def test_one_row_per_colour_sharing_group(self, exporter, sheet, output_row):
        written = exporter.write_rows([output_row], sheet)
        assert written == 2
        assert sheet.get_cell("A1") == sheet.get_cell("A2") == 1
        assert sheet.get_cell("C1") == sheet.get_cell("C2") == "Shirt Red"
        assert sheet.get_cell("AI1") == "red"
        assert sheet.get_cell("AI2") == "blue"
        assert sheet.get_cell("AN2") == "p1-blue.jpg"

    def test_group_increments_per_product(self, exporter, sheet, output_row):
        other = OutputRow(product_id="P2", name="Hat Wool", colors=[VariantColor("grey", "g.jpg")])
        exporter.write_rows([output_row, other], sheet)
        assert [sheet.get_cell(f"A{r}") for r in (1, 2, 3)] == [1, 1, 2]
        assert sheet.get_cell("C3") == "Hat Wool"

    def test_colourless_product_writes_nothing(self, exporter, sheet, output_row):
        bare = OutputRow(product_id="P0", name="Bare")
        written = exporter.write_rows([bare, output_row], sheet)
        assert written == 2
        assert sheet.get_cell("C1") == "Shirt Red"
        assert sheet.get_cell("A1") == 2

    def test_start_row(self, exporter, sheet, output_row):
        exporter.write_rows([output_row], sheet, start_row=2)
        assert sheet.get_cell("C1") is None
        assert sheet.get_cell("C2") == "Shirt Red"

    def test_control_character_in_description_does_not_abort(self, exporter, sheet, output_row):
        output_row.description = "line\x0bbreak"
        assert exporter.write_rows([output_row], sheet) == 2
        assert sheet.get_cell("X2") == "linebreak"

    def test_extra_images_not_written(self, exporter, sheet):
        row = OutputRow(
            product_id="P5", name="Many", image_urls=[f"{i}.jpg" for i in range(11)],
            colors=[VariantColor("red", "r.jpg")],
        )
        exporter.write_rows([row], sheet)
        assert sheet.get_cell("L1") == "8.jpg"
        assert sheet.get_cell("M1") is None


class TestOutputSheet:
    def test_save_to_stream(self, sheet):
        sheet.set_cell("C1", "Shirt Red")
        buffer = io.BytesIO()
        sheet.save(buffer)
        buffer.seek(0)
        ws = load_workbook(buffer)["Sheet1"]
        assert ws["C1"].value == "Shirt Red"

    def test_equals_prefixed_text_stays_text(self, sheet):
        sheet.set_cell("C1", '=HYPERLINK("x") Red')
        sheet.set_cell("X1", "=1+1")
        buffer = io.BytesIO()
        sheet.save(buffer)
        buffer.seek(0)
        ws = load_workbook(buffer)["Sheet1"]
        assert ws["C1"].data_type == "s"
        assert ws["C1"].value == '=HYPERLINK("x") Red'
        assert ws["X1"].data_type == "s"
        assert ws["X1"].value == "=1+1"

    def test_numbers_keep_numeric_type(self, sheet):
        sheet.set_cell("A1", 3)
        assert sheet.get_cell("A1") == 3

    def test_control_characters_dropped(self, sheet):
        sheet.set_cell("X1", "line\x0bbreak")
        assert sheet.get_cell("X1") == "linebreak"
        sheet.save(io.BytesIO())

    def test_save_creates_parent_dirs(self, sheet, tmp_path):
        target = tmp_path / "out" / "upload.xlsx"
        sheet.set_cell("A1", 1)
        sheet.save(target)
        assert target.exists()
