"""
Brand size-guide repository and per-item guide collection.

Architecture
────────────
A **SizeGuideIndex** is built once from the bundled cm and inch JSON
files and is read-only afterwards.  It maps

    (brand, category, gender) → (cm entries, inch entries)

For a catalog item, `collect_size_guide` picks the best (category,
gender) combo the brand publishes, synthesizes a unisex table when the
brand only has gendered ones, and filters both unit tables down to the
sizes the item is stocked in.

Combo priority
──────────────
  a. declared category + declared gender
  b. declared category + unisex
  c. declared category + men
  d. declared category, any gender
  e. tops + declared gender
  f. tops, any gender
  g. first combo the brand lists
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from fitgauge.config import ItemConfig, config
from fitgauge.core.sizes import normalize_size_label
from fitgauge.core.unisex import build_unisex_sizes
from fitgauge.models.schemas import (
    Category,
    Combo,
    GuideGender,
    Item,
    Measurement,
    PointMeasurement,
    RangeMeasurement,
    SizeEntry,
    SizeGuide,
    Unit,
)

logger = logging.getLogger(__name__)

# Women's numeric sizing for brands in `ItemConfig.numeric_size_brands`.
NUMERIC_TO_LETTER: dict[str, str] = {
    "0": "XXS",
    "2": "XS",
    "4": "S",
    "6": "S",
    "8": "M",
    "10": "L",
    "12": "L",
    "14": "XL",
    "16": "2XL",
}

_GuideKey = tuple[str, Category, GuideGender]


class SizeGuideDataError(ValueError):
    """Raised when bundled reference data is malformed."""


# ── Loading ────────────────────────────────────────────────────────────

def _parse_measurement(raw: dict[str, Any], where: str) -> Measurement:
    if "min" in raw and "max" in raw:
        return RangeMeasurement(min=float(raw["min"]), max=float(raw["max"]))
    if "value" in raw:
        return PointMeasurement(value=float(raw["value"]))
    raise SizeGuideDataError(f"{where}: measurement needs 'value' or 'min'/'max', got {raw!r}")


def _parse_entries(raw_brand: dict[str, Any], where: str) -> tuple[SizeEntry, ...]:
    entries = []
    for raw_size in raw_brand.get("sizes", []):
        label = raw_size["label"]
        measurements = {
            key: _parse_measurement(value, f"{where} size {label} key {key}")
            for key, value in raw_size.get("measurements", {}).items()
        }
        entries.append(SizeEntry(label=label, measurements=measurements))
    return tuple(entries)


def _parse_key(raw_brand: dict[str, Any]) -> tuple[_GuideKey, str]:
    brand = raw_brand["brand"]
    where = f"{brand}/{raw_brand.get('clothing_type')}/{raw_brand.get('gender')}"
    try:
        category = Category(raw_brand["clothing_type"].lower())
        gender = GuideGender(raw_brand["gender"].lower())
    except (KeyError, ValueError) as exc:
        raise SizeGuideDataError(f"{where}: unknown clothing_type or gender") from exc
    return (brand.lower(), category, gender), where


class SizeGuideIndex:
    """Read-only index of brand size guides in cm and inch."""

    def __init__(
        self,
        tables: Mapping[_GuideKey, Mapping[Unit, tuple[SizeEntry, ...]]],
        combos: Mapping[str, tuple[Combo, ...]],
        display_names: Mapping[str, str],
    ):
        self._tables = MappingProxyType(dict(tables))
        self._combos = MappingProxyType(dict(combos))
        self._display_names = MappingProxyType(dict(display_names))

    @classmethod
    def from_data(cls, cm_data: dict[str, Any], inch_data: dict[str, Any]) -> SizeGuideIndex:
        """Build an index from the parsed JSON documents."""
        tables: dict[_GuideKey, dict[Unit, tuple[SizeEntry, ...]]] = {}
        combos: dict[str, list[Combo]] = {}
        display_names: dict[str, str] = {}

        for unit, data in ((Unit.cm, cm_data), (Unit.inch, inch_data)):
            for raw_brand in data.get("brands", []):
                key, where = _parse_key(raw_brand)
                brand_lower, category, gender = key
                tables.setdefault(key, {})[unit] = _parse_entries(raw_brand, f"{where} ({unit.value})")
                display_names.setdefault(brand_lower, raw_brand["brand"])
                combo = Combo(category=category, gender=gender)
                brand_combos = combos.setdefault(brand_lower, [])
                if combo not in brand_combos:
                    brand_combos.append(combo)

        frozen_tables = {k: MappingProxyType(v) for k, v in tables.items()}
        frozen_combos = {k: tuple(v) for k, v in combos.items()}
        logger.info(
            "Loaded size guide index: %d brands, %d tables",
            len(frozen_combos), len(frozen_tables),
        )
        return cls(frozen_tables, frozen_combos, display_names)

    @classmethod
    def from_files(cls, cm_path: Path, inch_path: Path) -> SizeGuideIndex:
        cm_data = json.loads(Path(cm_path).read_text(encoding="utf-8"))
        inch_data = json.loads(Path(inch_path).read_text(encoding="utf-8"))
        return cls.from_data(cm_data, inch_data)

    # ── Queries ──

    def brands(self) -> list[str]:
        return sorted(self._display_names.values())

    def display_name(self, brand: str) -> str | None:
        return self._display_names.get(brand.lower())

    def available_combos(self, brand: str) -> list[Combo]:
        """Every (category, gender) the brand publishes, in file order."""
        return list(self._combos.get(brand.lower(), ()))

    def get(
        self,
        brand: str,
        category: Category,
        gender: GuideGender,
        unit: Unit = Unit.cm,
    ) -> list[SizeEntry] | None:
        tables = self._tables.get((brand.lower(), category, gender))
        if tables is None:
            return None
        return list(tables.get(unit, ()))

    def has(self, brand: str, category: Category, gender: GuideGender) -> bool:
        return (brand.lower(), category, gender) in self._tables


def load_default_index() -> SizeGuideIndex:
    """Load the bundled reference tables named in the configuration."""
    return SizeGuideIndex.from_files(
        config.data.size_guides_cm_path,
        config.data.size_guides_inch_path,
    )


# ── Item classification ────────────────────────────────────────────────

def resolve_category(item: Item, item_config: ItemConfig | None = None) -> Category:
    """Declared category from item type, overridden by keywords in the name."""
    icfg = item_config or config.items
    name = item.name.lower()

    category = Category.bottoms if item.type.strip().lower() == "bottoms" else Category.tops
    if any(kw in name for kw in icfg.bottom_keywords):
        category = Category.bottoms

    if (
        category == Category.tops
        and item.brand.strip().lower() in icfg.sweater_brands
        and "sweater" in name
    ):
        category = Category.sweater
    return category


def resolve_gender(item: Item) -> GuideGender:
    g = item.gender.strip().lower().replace("'", "")
    if g in ("men", "mens"):
        return GuideGender.men
    if g in ("women", "womens"):
        return GuideGender.women
    return GuideGender.unisex


def select_combo(
    item: Item,
    combos: list[Combo],
    item_config: ItemConfig | None = None,
) -> Combo:
    """Pick the best-matching combo following the fixed priority cascade."""
    if not combos:
        raise ValueError(f"No size guide combos available for brand {item.brand!r}")

    category = resolve_category(item, item_config)
    gender = resolve_gender(item)

    rules = (
        lambda c: c.category == category and c.gender == gender,
        lambda c: c.category == category and c.gender == GuideGender.unisex,
        lambda c: c.category == category and c.gender == GuideGender.men,
        lambda c: c.category == category,
        lambda c: c.category == Category.tops and c.gender == gender,
        lambda c: c.category == Category.tops,
    )
    for rule in rules:
        match = next((c for c in combos if rule(c)), None)
        if match is not None:
            return match
    return combos[0]


# ── Collection ─────────────────────────────────────────────────────────

def stocked_spellings(
    brand: str,
    gender: GuideGender,
    available_sizes: list[str],
    item_config: ItemConfig | None = None,
) -> dict[str, str]:
    """
    Map each guide label (normalized) to the stocked label that sells it.

    Women's numeric sizes of numeric-size brands are translated through
    NUMERIC_TO_LETTER.  When several stocked labels share a letter
    ("4" and "6" are both S) the first one in stock order wins.
    """
    icfg = item_config or config.items
    numeric = (
        gender == GuideGender.women
        and brand.strip().lower() in icfg.numeric_size_brands
    )
    spellings: dict[str, str] = {}
    for size in available_sizes:
        label = size.strip()
        if numeric and label in NUMERIC_TO_LETTER:
            label = NUMERIC_TO_LETTER[label]
        spellings.setdefault(normalize_size_label(label), size)
    return spellings


def filter_by_availability(entries: list[SizeEntry], stocked: set[str]) -> list[SizeEntry]:
    """Keep entries whose normalized label is among the stocked labels."""
    return [e for e in entries if normalize_size_label(e.label) in stocked]


def collect_size_guide(
    index: SizeGuideIndex,
    item: Item,
    item_config: ItemConfig | None = None,
) -> SizeGuide | None:
    """
    Collect the size guide for an item, filtered to its stocked sizes.

    Returns None if the brand has no guide, or if a unisex item has
    neither a men's nor a women's table to synthesize from.
    """
    icfg = item_config or config.items
    combos = index.available_combos(item.brand)
    if not combos:
        logger.debug("No size guide for brand %r", item.brand)
        return None

    selected = select_combo(item, combos, icfg)
    declared_gender = resolve_gender(item)

    if declared_gender == GuideGender.unisex and selected.gender != GuideGender.unisex:
        men_cm = index.get(item.brand, selected.category, GuideGender.men, Unit.cm)
        women_cm = index.get(item.brand, selected.category, GuideGender.women, Unit.cm)
        if men_cm is None and women_cm is None:
            logger.warning(
                "Brand %r has no men's or women's %s table to build a unisex guide",
                item.brand, selected.category.value,
            )
            return None
        men_in = index.get(item.brand, selected.category, GuideGender.men, Unit.inch) or []
        women_in = index.get(item.brand, selected.category, GuideGender.women, Unit.inch) or []
        gender = GuideGender.unisex
        cm = build_unisex_sizes(men_cm or [], women_cm or [])
        inch = build_unisex_sizes(men_in, women_in)
        logger.debug("Synthesized unisex %s guide for %s", selected.category.value, item.brand)
    else:
        gender = selected.gender
        cm = index.get(item.brand, selected.category, gender, Unit.cm) or []
        inch = index.get(item.brand, selected.category, gender, Unit.inch) or []

    if not cm and not inch:
        return None

    if item.available_sizes:
        stocked = set(stocked_spellings(item.brand, gender, item.available_sizes, icfg))
        cm = filter_by_availability(cm, stocked)
        inch = filter_by_availability(inch, stocked)

    return SizeGuide(
        brand=index.display_name(item.brand) or item.brand,
        category=selected.category,
        gender=gender,
        cm=cm,
        inch=inch,
    )
