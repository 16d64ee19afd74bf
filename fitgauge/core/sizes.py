"""
Size label normalization and canonical ordering.

Vendors spell the same size many ways ("X-Large", "XL", "xlarge").
Every comparison in the engine goes through `normalize_size_label`
and `size_index`, so the canonical order below is the single source
of truth for "smaller" and "larger".
"""

from __future__ import annotations

from typing import Iterable

# Youth sizes sit below the adult range.
SIZE_ORDER: tuple[str, ...] = (
    "YS", "YM", "YL", "YXL",
    "XXXS", "XXS", "XS", "S", "M", "L", "XL", "2XL", "3XL", "4XL",
)

_SIZE_RANK: dict[str, int] = {label: i for i, label in enumerate(SIZE_ORDER)}

# Keys are uppercase with single spaces; values must be members of SIZE_ORDER.
_ALIASES: dict[str, str] = {
    # Extra small
    "X-SMALL": "XS", "XSMALL": "XS", "EXTRA SMALL": "XS", "EXTRA-SMALL": "XS",
    "XX-SMALL": "XXS", "XXSMALL": "XXS", "2XS": "XXS",
    "XXX-SMALL": "XXXS", "XXXSMALL": "XXXS", "3XS": "XXXS",
    # Small / medium / large
    "SMALL": "S", "SM": "S",
    "MEDIUM": "M", "MED": "M",
    "LARGE": "L", "LG": "L",
    # Extra large
    "X-LARGE": "XL", "XLARGE": "XL", "EXTRA LARGE": "XL", "EXTRA-LARGE": "XL",
    # 2XL
    "XXL": "2XL", "2X": "2XL", "XX-LARGE": "2XL", "XXLARGE": "2XL",
    "2X-LARGE": "2XL", "XX LARGE": "2XL",
    # 3XL
    "XXXL": "3XL", "3X": "3XL", "XXX-LARGE": "3XL", "XXXLARGE": "3XL",
    "3X-LARGE": "3XL",
    # 4XL
    "XXXXL": "4XL", "4X": "4XL", "XXXX-LARGE": "4XL", "XXXXLARGE": "4XL",
    # Youth
    "YOUTH SMALL": "YS", "YOUTH S": "YS",
    "YOUTH MEDIUM": "YM", "YOUTH M": "YM",
    "YOUTH LARGE": "YL", "YOUTH L": "YL",
    "YOUTH XL": "YXL", "YOUTH X-LARGE": "YXL",
}


def normalize_size_label(label: str) -> str:
    """
    Map a vendor size label to its canonical spelling.

    Unrecognized labels come back uppercased with whitespace collapsed,
    which keeps the function idempotent.
    """
    s = " ".join(label.upper().split())
    return _ALIASES.get(s, s)


def size_index(label: str) -> int | None:
    """Position of a label in the canonical order, or None if unknown."""
    return _SIZE_RANK.get(normalize_size_label(label))


def size_sort_key(label: str) -> int:
    rank = size_index(label)
    return rank if rank is not None else len(SIZE_ORDER)


def sort_sizes(labels: Iterable[str]) -> list[str]:
    """Sort labels small → large; unknown labels go last in encounter order."""
    return sorted(labels, key=size_sort_key)


def size_bounds(labels: Iterable[str]) -> tuple[str, str]:
    """
    Smallest and largest of `labels`.

    Unrecognized labels ("One Size", "32") only count when no label is
    recognized.  Raises ValueError on an empty input.
    """
    ordered = sort_sizes(labels)
    if not ordered:
        raise ValueError("size_bounds() needs at least one label")
    known = [s for s in ordered if size_index(s) is not None] or ordered
    return known[0], known[-1]


def same_size(a: str, b: str) -> bool:
    return normalize_size_label(a) == normalize_size_label(b)
