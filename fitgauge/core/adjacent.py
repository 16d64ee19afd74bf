"""
Adjacent-size resolution.

Turns one chosen base size into the regular / comfortable / tight
triple, using only sizes the garment is actually stocked in.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitgauge.core.sizes import SIZE_ORDER, same_size, size_bounds, sort_sizes
from fitgauge.models.schemas import EdgeCase


@dataclass(frozen=True)
class AdjacentSizes:
    regular: str
    comfortable: str  # one size up, "" if none
    tight: str  # one size down, "" if none


def get_adjacent_sizes(
    base_size: str,
    available_sizes: list[str],
    edge_case: EdgeCase = EdgeCase.normal,
) -> AdjacentSizes:
    """
    Derive the three-tier recommendation around `base_size`.

    too_small → only a comfortable fit in the smallest size.
    too_large → only a tight fit in the largest size.
    An empty stock list falls back to the canonical size range.
    """
    stocked = list(available_sizes) or list(SIZE_ORDER)

    if edge_case == EdgeCase.too_small:
        return AdjacentSizes(regular="", comfortable=size_bounds(stocked)[0], tight="")

    if edge_case == EdgeCase.too_large:
        return AdjacentSizes(regular="", comfortable="", tight=size_bounds(stocked)[1])

    ordered = sort_sizes(stocked)
    idx = next((i for i, s in enumerate(ordered) if same_size(s, base_size)), None)
    if idx is None:
        return AdjacentSizes(regular=base_size, comfortable=base_size, tight=base_size)

    tight = ordered[idx - 1] if idx > 0 else ""
    comfortable = ordered[idx + 1] if idx + 1 < len(ordered) else ""
    return AdjacentSizes(regular=ordered[idx], comfortable=comfortable, tight=tight)
