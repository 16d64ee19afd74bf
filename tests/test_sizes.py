"""
Tests for size label normalization and canonical ordering.
"""

import pytest

from fitgauge.core.sizes import (
    SIZE_ORDER,
    normalize_size_label,
    same_size,
    size_bounds,
    size_index,
    sort_sizes,
)

VENDOR_LABELS = [
    "xs", "X-Small", "extra small", "Small", "sm", "Medium", "med", "Large",
    "lg", "X-Large", "xlarge", "Extra Large", "XXL", "2x", "xx-large",
    "XXXL", "3X", "4x", "xxxxl", "Youth Small", "youth m", "YL", "youth xl",
    "OS", "one size", "  32  ", "8", "", "weird-size",
]


class TestNormalize:

    @pytest.mark.parametrize("raw,expected", [
        ("X-Large", "XL"),
        ("XL", "XL"),
        ("xlarge", "XL"),
        ("extra  large", "XL"),
        ("XXL", "2XL"),
        ("2X", "2XL"),
        ("xxx-large", "3XL"),
        ("youth large", "YL"),
        (" medium ", "M"),
    ])
    def test_known_spellings(self, raw, expected):
        assert normalize_size_label(raw) == expected

    def test_unknown_label_uppercased_verbatim(self):
        assert normalize_size_label("one size") == "ONE SIZE"
        assert normalize_size_label("32") == "32"

    @pytest.mark.parametrize("raw", VENDOR_LABELS + list(SIZE_ORDER))
    def test_idempotent(self, raw):
        once = normalize_size_label(raw)
        assert normalize_size_label(once) == once

    def test_canonical_labels_map_to_themselves(self):
        for label in SIZE_ORDER:
            assert normalize_size_label(label) == label


class TestOrdering:

    def test_index_uses_normalized_label(self):
        assert size_index("xlarge") == size_index("XL")
        assert size_index("XXL") == SIZE_ORDER.index("2XL")

    def test_unknown_has_no_index(self):
        assert size_index("OS") is None

    def test_youth_sorts_before_adult(self):
        assert sort_sizes(["S", "YL", "XXXS", "YS"]) == ["YS", "YL", "XXXS", "S"]

    def test_unknown_labels_last_in_encounter_order(self):
        assert sort_sizes(["L", "foo", "S", "bar", "XXL"]) == ["S", "L", "XXL", "foo", "bar"]

    def test_vendor_spelling_preserved(self):
        assert sort_sizes(["Large", "small", "Medium"]) == ["small", "Medium", "Large"]

    def test_order_is_total(self):
        assert sort_sizes(reversed(SIZE_ORDER)) == list(SIZE_ORDER)

    def test_same_size(self):
        assert same_size("X-Large", "xl")
        assert not same_size("L", "XL")


class TestSizeBounds:

    def test_recognized_labels_bound_the_range(self):
        assert size_bounds(["One Size", "M", "small", "Tall"]) == ("small", "M")

    def test_only_unrecognized_labels(self):
        assert size_bounds(["Tall", "Petite"]) == ("Tall", "Petite")

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            size_bounds([])
