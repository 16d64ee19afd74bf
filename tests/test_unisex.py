"""
Tests for unisex size-table synthesis.
"""

from fitgauge.core.unisex import average_measurements, build_unisex_sizes
from fitgauge.models.schemas import PointMeasurement, RangeMeasurement, SizeEntry

from conftest import make_entry


class TestAverageMeasurements:

    def test_ranges_average_bounds(self):
        result = average_measurements(RangeMeasurement(min=90, max=96), RangeMeasurement(min=84, max=90))
        assert result == RangeMeasurement(min=87, max=93)

    def test_points_average(self):
        result = average_measurements(PointMeasurement(value=73), PointMeasurement(value=65))
        assert result == PointMeasurement(value=69)

    def test_rounds_to_one_decimal(self):
        result = average_measurements(RangeMeasurement(min=90.34, max=96), RangeMeasurement(min=84, max=90.12))
        assert result == RangeMeasurement(min=87.2, max=93.1)

    def test_collapses_to_point(self):
        result = average_measurements(RangeMeasurement(min=90.0, max=90.04), RangeMeasurement(min=90.0, max=90.0))
        assert result == PointMeasurement(value=90.0)

    def test_point_with_range(self):
        result = average_measurements(PointMeasurement(value=93), RangeMeasurement(min=90, max=96))
        assert result == RangeMeasurement(min=91.5, max=94.5)

    def test_identical_values_unchanged(self):
        same = PointMeasurement(value=39.37)
        assert average_measurements(same, PointMeasurement(value=39.37)).value == 39.37
        rng = RangeMeasurement(min=33.86, max=35.83)
        assert average_measurements(rng, RangeMeasurement(min=33.86, max=35.83)) == rng


class TestBuildUnisexSizes:

    def test_shared_label_is_averaged(self):
        men = [make_entry("M", chest=(90, 96))]
        women = [make_entry("M", chest=(84, 90))]
        (m,) = build_unisex_sizes(men, women)
        assert m.label == "M"
        assert m.measurements["chest"] == RangeMeasurement(min=87, max=93)

    def test_one_sided_labels_copied(self):
        men = [make_entry("M", chest=(90, 96)), make_entry("2XL", chest=(112, 120))]
        women = [make_entry("XS", chest=(78, 83)), make_entry("M", chest=(84, 90))]
        result = build_unisex_sizes(men, women)
        assert [e.label for e in result] == ["XS", "M", "2XL"]
        assert result[0] == women[0]
        assert result[2] == men[1]

    def test_key_present_on_one_side_copied(self):
        men = [make_entry("L", chest=(97, 104), waist=(86, 91))]
        women = [make_entry("L", chest=(94, 101))]
        (entry,) = build_unisex_sizes(men, women)
        assert entry.measurements["waist"] == RangeMeasurement(min=86, max=91)
        assert entry.measurements["chest"] == RangeMeasurement(min=95.5, max=102.5)

    def test_labels_matched_by_normalized_spelling(self):
        men = [make_entry("XXL", chest=(112, 120))]
        women = [make_entry("2XL", chest=(106, 114))]
        result = build_unisex_sizes(men, women)
        assert len(result) == 1
        assert result[0].measurements["chest"] == RangeMeasurement(min=109, max=117)

    def test_canonical_order_with_unknown_labels_appended(self):
        men = [make_entry("OS", chest=(80, 120)), make_entry("L", chest=(97, 104)), make_entry("S", chest=(86, 91))]
        women = [make_entry("Tall", chest=(80, 120)), make_entry("XS", chest=(78, 83))]
        result = build_unisex_sizes(men, women)
        assert [e.label for e in result] == ["XS", "S", "L", "OS", "Tall"]

    def test_identical_tables_are_a_no_op(self):
        table = [
            SizeEntry(label="S", measurements={"chest": PointMeasurement(value=35.43)}),
            SizeEntry(label="M", measurements={"chest": RangeMeasurement(min=35.83, max=38.19)}),
        ]
        assert build_unisex_sizes(table, list(table)) == table

    def test_empty_inputs(self):
        assert build_unisex_sizes([], []) == []
