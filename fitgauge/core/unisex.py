"""
Unisex size-table synthesis.

Many brands publish only men's and women's charts.  A unisex table is
built on demand by averaging the two per size label:

  • label in both tables  → average every measurement key
  • label in one table    → copied unchanged

Range bounds are averaged independently and rounded to one decimal.
If the rounded bounds coincide the result collapses to a point value.
"""

from __future__ import annotations

from fitgauge.core.sizes import normalize_size_label, sort_sizes
from fitgauge.models.schemas import (
    Measurement,
    PointMeasurement,
    RangeMeasurement,
    SizeEntry,
)


def _bounds(m: Measurement) -> tuple[float, float]:
    if isinstance(m, RangeMeasurement):
        return m.min, m.max
    return m.value, m.value


def average_measurements(a: Measurement, b: Measurement) -> Measurement:
    """Average two targets for the same key and size."""
    if a == b:
        return a

    if isinstance(a, PointMeasurement) and isinstance(b, PointMeasurement):
        return PointMeasurement(value=round((a.value + b.value) / 2, 1))

    a_min, a_max = _bounds(a)
    b_min, b_max = _bounds(b)
    lo = round((a_min + b_min) / 2, 1)
    hi = round((a_max + b_max) / 2, 1)
    if lo == hi:
        return PointMeasurement(value=lo)
    return RangeMeasurement(min=lo, max=hi)


def _merge_entries(men: SizeEntry, women: SizeEntry) -> SizeEntry:
    measurements: dict[str, Measurement] = {}
    keys = list(men.measurements) + [k for k in women.measurements if k not in men.measurements]
    for key in keys:
        m = men.measurements.get(key)
        w = women.measurements.get(key)
        if m is not None and w is not None:
            measurements[key] = average_measurements(m, w)
        else:
            measurements[key] = m if m is not None else w
    return SizeEntry(label=men.label, measurements=measurements)


def build_unisex_sizes(
    men_sizes: list[SizeEntry],
    women_sizes: list[SizeEntry],
) -> list[SizeEntry]:
    """Combine men's and women's entries into one unisex table."""
    men_by_label = {normalize_size_label(e.label): e for e in men_sizes}
    women_by_label = {normalize_size_label(e.label): e for e in women_sizes}

    labels: list[str] = []
    for entry in [*men_sizes, *women_sizes]:
        norm = normalize_size_label(entry.label)
        if norm not in labels:
            labels.append(norm)

    result: list[SizeEntry] = []
    for norm in sort_sizes(labels):
        men = men_by_label.get(norm)
        women = women_by_label.get(norm)
        if men is not None and women is not None:
            result.append(_merge_entries(men, women))
        else:
            result.append(men if men is not None else women)
    return result
