"""
Tests for adjacent-size resolution.
"""

import pytest

from fitgauge.core.adjacent import get_adjacent_sizes
from fitgauge.models.schemas import EdgeCase

STOCK = ["S", "M", "L"]


class TestNormal:

    def test_middle_size(self):
        adj = get_adjacent_sizes("M", STOCK)
        assert (adj.tight, adj.regular, adj.comfortable) == ("S", "M", "L")

    def test_smallest_has_no_tight(self):
        adj = get_adjacent_sizes("S", STOCK)
        assert (adj.tight, adj.regular, adj.comfortable) == ("", "S", "M")

    def test_largest_has_no_comfortable(self):
        adj = get_adjacent_sizes("L", STOCK)
        assert (adj.tight, adj.regular, adj.comfortable) == ("M", "L", "")

    def test_unsorted_vendor_spelling(self):
        adj = get_adjacent_sizes("M", ["Large", "Medium", "X-Small", "Small"])
        assert (adj.tight, adj.regular, adj.comfortable) == ("Small", "Medium", "Large")

    def test_skips_gaps_in_stock(self):
        adj = get_adjacent_sizes("M", ["XS", "M", "2XL"])
        assert (adj.tight, adj.comfortable) == ("XS", "2XL")

    def test_single_size(self):
        adj = get_adjacent_sizes("M", ["M"])
        assert (adj.tight, adj.regular, adj.comfortable) == ("", "M", "")


class TestEdgeCases:

    def test_too_small(self):
        adj = get_adjacent_sizes("S", ["L", "S", "M"], EdgeCase.too_small)
        assert (adj.tight, adj.regular, adj.comfortable) == ("", "", "S")

    def test_too_large(self):
        adj = get_adjacent_sizes("L", ["L", "S", "M"], EdgeCase.too_large)
        assert (adj.tight, adj.regular, adj.comfortable) == ("L", "", "")

    def test_unrecognized_labels_are_not_the_largest(self):
        adj = get_adjacent_sizes("M", ["S", "M", "One Size"], EdgeCase.too_large)
        assert adj.tight == "M"

    def test_unrecognized_labels_are_not_the_smallest(self):
        adj = get_adjacent_sizes("M", ["Petite", "M", "L"], EdgeCase.too_small)
        assert adj.comfortable == "M"


class TestEmptyStock:

    def test_edge_cases_use_standard_range(self):
        small = get_adjacent_sizes("M", [], EdgeCase.too_small)
        large = get_adjacent_sizes("M", [], EdgeCase.too_large)
        assert (small.tight, small.regular, small.comfortable) == ("", "", "YS")
        assert (large.tight, large.regular, large.comfortable) == ("4XL", "", "")

    def test_normal_uses_standard_range(self):
        adj = get_adjacent_sizes("M", [])
        assert (adj.tight, adj.regular, adj.comfortable) == ("S", "M", "L")


class TestInvariant:

    @pytest.mark.parametrize("stock", [
        ["S", "M", "L"],
        ["XS", "XL", "3XL"],
        ["small", "Medium", "LARGE", "OS"],
        ["M"],
    ])
    @pytest.mark.parametrize("edge", list(EdgeCase))
    def test_results_drawn_from_stock(self, stock, edge):
        for base in stock:
            adj = get_adjacent_sizes(base, stock, edge)
            for label in (adj.regular, adj.tight, adj.comfortable):
                assert label == "" or label in stock
