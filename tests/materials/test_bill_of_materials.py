# File: tests/materials/test_bill_of_materials.py
"""Tests for the bill of materials and its CSV export."""

import csv
import io

import pytest

from deck_designer.config.framing import POST_HEIGHT
from deck_designer.config.spacing import DeckColor, SpacingConfig
from deck_designer.core.errors import InvalidSpacingError
from deck_designer.framing_elements import layout
from deck_designer.materials import bill_of_materials
from deck_designer.materials.bill_of_materials import (
    CSV_HEADER,
    BillOfMaterials,
    bom_to_csv,
    compute_bom,
)


class TestComputeBom:

    def test_twelve_meter_square(self, square_12m):
        bom = compute_bom(square_12m, SpacingConfig())
        assert bom.deck_area_m2 == pytest.approx(144.0)
        assert bom.total_boards == 170
        assert bom.total_fasteners == 340
        assert bom.joist_count == 40
        assert bom.joist_length == pytest.approx(12.0)
        assert bom.beam_count == 5
        assert bom.beam_length == pytest.approx(12.0)
        assert bom.post_count == 25
        assert bom.post_length == POST_HEIGHT
        assert bom.railing_length == 0.0

    def test_twelve_foot_square(self, square_12ft):
        bom = compute_bom(square_12ft, SpacingConfig())
        assert bom.joist_count == 13
        assert bom.beam_count == 2
        assert bom.post_count == 4
        assert bom.total_boards == 16

    def test_counts_include_edge_members(self, square_12ft, default_config):
        deck_layout = layout(square_12ft, default_config)
        bom = compute_bom(square_12ft, default_config)
        assert bom.post_count == len(deck_layout.posts)
        assert bom.joist_count == len(deck_layout.joists) + 2

    def test_railing_length_is_perimeter(self, l_shape):
        bom = compute_bom(l_shape, SpacingConfig(has_railings=True))
        assert bom.railing_length == pytest.approx(32.0)

    def test_fasteners_are_two_per_board(self, l_shape):
        bom = compute_bom(l_shape, SpacingConfig())
        assert bom.total_fasteners == 2 * bom.total_boards

    def test_square_feet(self, square_12m):
        bom = compute_bom(square_12m)
        assert bom.deck_area_sqft == pytest.approx(144.0 * 3.28084 ** 2)

    @pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (600, 0)]])
    def test_fewer_than_three_points(self, points):
        bom = compute_bom(points, SpacingConfig(has_railings=True))
        assert bom.is_empty
        assert bom.total_fasteners == 0
        assert bom.deck_area_m2 == 0.0

    def test_collinear_points(self):
        bom = compute_bom([(0, 0), (100, 0), (200, 0)], SpacingConfig(has_railings=True))
        assert bom.is_empty
        assert bom.errors == []

    def test_invalid_spacing_raises(self, square_12m):
        with pytest.raises(InvalidSpacingError):
            compute_bom(square_12m, {"beam_spacing": -2})

    def test_failure_returns_zeroed_bom(self, square_12m, monkeypatch):
        def explode(*args, **kwargs):
            raise ZeroDivisionError("boom")

        monkeypatch.setattr(bill_of_materials, "pack_deck_boards", explode)
        bom = compute_bom(square_12m, SpacingConfig(deck_color="Khaki"))
        assert bom.is_empty
        assert bom.deck_color == DeckColor.KHAKI
        assert bom.errors == ["bill of materials failed: boom"]


class TestBomLines:

    def test_line_order(self, square_12m):
        bom = compute_bom(square_12m, SpacingConfig(has_railings=True))
        items = [line.item for line in bom.to_lines()]
        assert items == ["Deck Board", "Joists", "Beams", "Posts", "Railing", "Fasteners"]

    def test_railing_row_omitted_without_railings(self, square_12m):
        items = [line.item for line in compute_bom(square_12m).to_lines()]
        assert "Railing" not in items

    def test_details(self, square_12m):
        lines = {line.item: line for line in compute_bom(square_12m).to_lines()}
        assert lines["Joists"].details == "2x8 x 12.0 m"
        assert lines["Beams"].details == "4x8 x 12.0 m"
        assert lines["Posts"].details == "4x4 x 2.4384 m"
        assert lines["Fasteners"].details == "Hidden Fasteners"

    def test_to_dict(self, square_12m):
        data = compute_bom(square_12m, SpacingConfig(deck_color="Hazelnut")).to_dict()
        assert data["total_boards"] == 170
        assert data["deck_color"] == "Hazelnut"
        assert data["boards"] == [{"length_m": 6.096, "length_ft": 20, "count": 170}]
        assert data["lines"][0]["item"] == "Deck Board"


class TestBomToCsv:

    def test_document(self, square_12m):
        bom = compute_bom(square_12m, SpacingConfig(has_railings=True, deck_color="Khaki"))
        text = bom_to_csv(bom)
        assert text.splitlines() == [
            "Item,Quantity,Unit,Details",
            'Deck Board,170,Each,"American Pro PVC 1"" x 5.5"" x 20 ft (Khaki)"',
            "Joists,40,Each,2x8 x 12.0 m",
            "Beams,5,Each,4x8 x 12.0 m",
            "Posts,25,Each,4x4 x 2.4384 m",
            "Railing,48.0,Meters,Standard Railing",
            "Fasteners,340,Each,Hidden Fasteners",
        ]

    def test_parses_back_with_csv_reader(self, l_shape):
        rows = list(csv.reader(io.StringIO(bom_to_csv(compute_bom(l_shape)))))
        assert rows[0] == CSV_HEADER
        assert rows[1][3].startswith('American Pro PVC 1" x 5.5"')

    def test_color_override(self, square_12m):
        bom = compute_bom(square_12m, SpacingConfig())
        text = bom_to_csv(bom, deck_color="hazelnut")
        assert "(Hazelnut)" in text
        assert bom.deck_color == DeckColor.DRIFTWOOD

    def test_empty_bom(self):
        text = bom_to_csv(BillOfMaterials())
        assert text.splitlines()[0] == "Item,Quantity,Unit,Details"
        assert "Joists,0,Each,2x8 x 0.0 m" in text.splitlines()
