# File: tests/materials/test_board_packing.py
"""Tests for deck board quantity estimation."""

import math

import pytest

from deck_designer.materials.board_packing import BoardRequirement, pack_deck_boards
from deck_designer.materials.decking_profiles import (
    BOARD_WIDTH,
    DECK_BOARD,
    STOCK_LENGTHS,
    get_stock_length,
    stock_lengths_descending,
)


class TestStockLengths:

    def test_longest_first(self):
        names = [s.name for s in stock_lengths_descending()]
        assert names == ["20ft", "16ft", "12ft"]

    def test_lengths_in_feet(self):
        assert STOCK_LENGTHS["20ft"].length_feet == pytest.approx(20.0, abs=1e-4)

    def test_get_stock_length(self):
        assert get_stock_length(4.8768).name == "16ft"
        with pytest.raises(KeyError):
            get_stock_length(5.0)

    def test_board_description(self):
        text = DECK_BOARD.describe(STOCK_LENGTHS["20ft"], "Khaki")
        assert text == 'American Pro PVC 1" x 5.5" x 20 ft (Khaki)'


class TestPackDeckBoards:

    def test_144_square_meters(self):
        """One pass of 20 ft boards covers the whole area."""
        board_area = 6.096 * 0.1397
        expected = math.ceil(144 / board_area)
        assert expected == 170

        boards = pack_deck_boards(144.0)
        assert len(boards) == 1
        assert boards[0].stock.name == "20ft"
        assert boards[0].count == 170
        assert boards[0].coverage_m2 >= 144.0

    def test_zero_area(self):
        assert pack_deck_boards(0.0) == []

    def test_small_area_rounds_up(self):
        boards = pack_deck_boards(0.1)
        assert [(b.stock.name, b.count) for b in boards] == [("20ft", 1)]

    def test_custom_stock_lengths(self):
        boards = pack_deck_boards(144.0, stock_lengths=[STOCK_LENGTHS["12ft"]])
        assert boards[0].count == math.ceil(144.0 / (3.6576 * BOARD_WIDTH))

    def test_stock_lengths_are_sorted_longest_first(self):
        boards = pack_deck_boards(10.0, stock_lengths=[STOCK_LENGTHS["12ft"], STOCK_LENGTHS["16ft"]])
        assert boards[0].stock.name == "16ft"

    def test_requirement_to_dict(self):
        data = BoardRequirement(STOCK_LENGTHS["16ft"], 3).to_dict()
        assert data == {"length_m": 4.8768, "length_ft": 16, "count": 3}
