"""
Clothing size recommendation engine.

Architecture
────────────
Two matchers share one output shape (SizeRecommendation):

  • **Guided**: a brand size guide exists.  Every stocked size is
    scored against the shopper's estimated measurements.
  • **Unguided**: no guide.  A chest circumference estimate is
    looked up in a coarse per-gender threshold table.

Both hand a base size and an edge-case flag to the adjacent-size
resolver, which produces the regular / comfortable / tight triple.

Guided classification
─────────────────────
For each (size, measurement) pair the shopper is

    smaller   body < min                (garment loose there)
    in_range  min ≤ body ≤ max
    larger    body > max                (garment tight there)

Point targets use value ± tolerance as the range.  Length is inverted:
a garment at least as long as the body is in range, a shorter one is
"larger" (the shopper needs a bigger size).

Selection, smallest size first:
  1. every measurement in range                         → high
  2. larger count ≤ max_larger_ratio × total            → medium
  3. otherwise the largest size, edge case too_large    → low
If the smallest size is "smaller" on every measurement, the shopper is
below the brand's range: edge case too_small, confidence low.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fitgauge.config import SizingConfig, config
from fitgauge.core.adjacent import get_adjacent_sizes
from fitgauge.core.estimator import estimate, parse_measurement_key
from fitgauge.core.size_guides import stocked_spellings
from fitgauge.core.sizes import (
    SIZE_ORDER,
    normalize_size_label,
    same_size,
    size_bounds,
    size_index,
    size_sort_key,
    sort_sizes,
)
from fitgauge.models.schemas import (
    BodyComposition,
    Confidence,
    EdgeCase,
    FitResult,
    Gender,
    GuideGender,
    Measurement,
    MeasurementKey,
    Method,
    PointMeasurement,
    SizeEntry,
    SizeGuide,
    SizeRecommendation,
    UserMeasurements,
)

logger = logging.getLogger(__name__)


# ── Per-measurement classification ─────────────────────────────────────

def classify_fit(
    user_value: float,
    measurement: Measurement,
    key: MeasurementKey | None = None,
    tolerance: float | None = None,
) -> FitResult:
    """Compare one estimated body dimension against one size target."""
    tol = config.sizing.point_tolerance if tolerance is None else tolerance

    if isinstance(measurement, PointMeasurement):
        lo, hi = measurement.value - tol, measurement.value + tol
        garment_length = measurement.value
    else:
        lo, hi = measurement.min, measurement.max
        garment_length = measurement.min

    if key == MeasurementKey.length:
        return FitResult.in_range if user_value <= garment_length else FitResult.larger

    if user_value < lo:
        return FitResult.smaller
    if user_value > hi:
        return FitResult.larger
    return FitResult.in_range


@dataclass
class SizeAnalysis:
    label: str
    in_range: int = 0
    smaller: int = 0
    larger: int = 0

    @property
    def total(self) -> int:
        return self.in_range + self.smaller + self.larger

    @property
    def all_in_range(self) -> bool:
        return self.total > 0 and self.in_range == self.total

    @property
    def all_smaller(self) -> bool:
        return self.total > 0 and self.smaller == self.total


def analyze_size(
    user: UserMeasurements,
    entry: SizeEntry,
    tolerance: float | None = None,
) -> SizeAnalysis:
    """Count smaller / in-range / larger over every supported key of one size."""
    analysis = SizeAnalysis(label=entry.label)
    for raw_key, measurement in entry.measurements.items():
        key = parse_measurement_key(raw_key)
        if key is None:
            continue
        body = estimate(user.height, user.weight, key, user.gender, user.body_composition)
        fit = classify_fit(body, measurement, key, tolerance)
        if fit == FitResult.in_range:
            analysis.in_range += 1
        elif fit == FitResult.smaller:
            analysis.smaller += 1
        else:
            analysis.larger += 1
    return analysis


# ── Guided matcher ─────────────────────────────────────────────────────

def _stocked_spelling(label: str, spellings: dict[str, str]) -> str:
    if not label:
        return label
    return spellings.get(normalize_size_label(label), label)


def identify_size_with_guide(
    user: UserMeasurements,
    guide: SizeGuide,
    sizing: SizingConfig | None = None,
    available_sizes: list[str] | None = None,
) -> SizeRecommendation:
    """
    Pick the best stocked size by scoring each guide entry.

    Labels are reported in the stocked spelling from `available_sizes`
    (numeric women's sizes included) when one matches, otherwise as the
    guide spells them.
    """
    scfg = sizing or config.sizing

    if not guide.cm:
        adj = get_adjacent_sizes("M", list(SIZE_ORDER))
        return SizeRecommendation(
            regular=adj.regular,
            comfortable=adj.comfortable,
            tight=adj.tight,
            confidence=Confidence.low,
            method=Method.size_guide,
            notes="Empty size guide; suggesting sizes from the standard range.",
        )

    entries = sorted(guide.cm, key=lambda e: size_sort_key(e.label))
    available = [e.label for e in entries]
    analyses = [analyze_size(user, e, scfg.point_tolerance) for e in entries]

    for a in analyses:
        logger.debug(
            "Size %s: in_range=%d smaller=%d larger=%d",
            a.label, a.in_range, a.smaller, a.larger,
        )

    smallest, largest = size_bounds(available)
    best = largest
    confidence = Confidence.low
    edge_case = EdgeCase.normal

    optimal = next((a for a in analyses if a.all_in_range), None)
    if optimal is not None:
        best, confidence = optimal.label, Confidence.high
    else:
        acceptable = next(
            (a for a in analyses if a.total > 0 and a.larger <= scfg.max_larger_ratio * a.total),
            None,
        )
        if acceptable is not None:
            best, confidence = acceptable.label, Confidence.medium
        else:
            edge_case = EdgeCase.too_large

    if next(a for a in analyses if a.label == smallest).all_smaller:
        edge_case = EdgeCase.too_small
        best, confidence = smallest, Confidence.low

    spellings = stocked_spellings(guide.brand, guide.gender, available_sizes or [])
    shown = _stocked_spelling(best, spellings)
    if edge_case == EdgeCase.too_small:
        notes = f"Person is smaller than available sizes. {shown} will fit loosely."
    elif edge_case == EdgeCase.too_large:
        notes = f"Person is larger than available sizes. {shown} will fit tightly."
    else:
        notes = f"Matched using {guide.brand} {guide.category.value} size guide"

    logger.debug("Guided match: %s (%s, %s)", best, confidence.value, edge_case.value)
    adj = get_adjacent_sizes(best, available, edge_case)
    return SizeRecommendation(
        regular=_stocked_spelling(adj.regular, spellings),
        comfortable=_stocked_spelling(adj.comfortable, spellings),
        tight=_stocked_spelling(adj.tight, spellings),
        confidence=confidence,
        method=Method.size_guide,
        notes=notes,
    )


# ── Unguided matcher ───────────────────────────────────────────────────

# Upper bound of chest circumference (cm) → size.  "A-B" straddles two sizes.
CHEST_SIZES: dict[GuideGender, tuple[tuple[float, str], ...]] = {
    GuideGender.men: (
        (83.5, "XS"), (88.5, "XS-S"), (95, "S"), (103, "M"),
        (112, "L"), (122, "XL"), (999, "2XL"),
    ),
    GuideGender.women: (
        (83.5, "XS"), (88.5, "S"), (95, "S-M"), (103, "M-L"),
        (112, "L-XL"), (122, "XL-2XL"), (999, "2XL"),
    ),
    GuideGender.unisex: (
        (83.5, "XS"), (88.5, "XS-S"), (95, "S"), (103, "M"),
        (112, "L"), (122, "XL"), (999, "2XL"),
    ),
}


def estimate_chest(height: float, weight: float, gender: Gender) -> float:
    """Chest circumference (cm) from the weight/height ratio."""
    male = weight * 240 / height
    female = weight * 260 / height
    if gender == Gender.male:
        return male
    if gender == Gender.female:
        return female
    return (male + female) / 2


def lookup_size_from_chest(
    chest: float,
    clothing_gender: GuideGender = GuideGender.unisex,
    body_composition: BodyComposition = BodyComposition.average,
) -> str:
    """Threshold lookup; lean builds size down in a straddle bucket."""
    table = CHEST_SIZES[clothing_gender]
    raw = next((size for bound, size in table if chest < bound), table[-1][1])
    if "-" in raw:
        smaller, larger = raw.split("-", 1)
        return smaller if body_composition == BodyComposition.lean else larger
    return raw


def identify_size_with_estimation(
    user: UserMeasurements,
    clothing_gender: GuideGender = GuideGender.unisex,
    available_sizes: list[str] | None = None,
) -> SizeRecommendation:
    """Fallback when no size guide exists: chest lookup snapped to stock."""
    stocked = list(available_sizes or [])
    candidates = stocked if stocked else list(SIZE_ORDER)
    ordered = sort_sizes(candidates)

    chest = estimate_chest(user.height, user.weight, user.gender)
    target = lookup_size_from_chest(chest, clothing_gender, user.body_composition)

    target_idx = size_index(target)
    known = [(size_index(s), s) for s in ordered if size_index(s) is not None]
    smallest, largest = size_bounds(ordered)

    notes = (
        f"Estimated from chest {chest:.1f}cm (height: {user.height:g}cm, "
        f"weight: {user.weight:g}kg, build: {user.body_composition.value})"
    )
    if not stocked:
        notes += "; no stocked sizes listed, using the standard range"

    edge_case = EdgeCase.normal
    base = target
    if known and target_idx < size_index(smallest):
        edge_case = EdgeCase.too_small
        base = smallest
        notes = f"Person is smaller than available sizes. {base} will fit loosely."
    elif known and target_idx > size_index(largest):
        edge_case = EdgeCase.too_large
        base = largest
        notes = f"Person is larger than available sizes. {base} will fit tightly."
    elif not any(same_size(s, target) for s in ordered):
        if known:
            base = min(known, key=lambda pair: abs(pair[0] - target_idx))[1]
        else:
            base = ordered[len(ordered) // 2]

    logger.debug("Chest %.1f → %s, base %s (%s)", chest, target, base, edge_case.value)
    adj = get_adjacent_sizes(base, candidates, edge_case)
    return SizeRecommendation(
        regular=adj.regular,
        comfortable=adj.comfortable,
        tight=adj.tight,
        confidence=Confidence.medium,
        method=Method.estimation,
        notes=notes,
    )


# ── Dispatcher ─────────────────────────────────────────────────────────

def identify_size(
    user: UserMeasurements,
    guide: SizeGuide | None,
    clothing_gender: GuideGender = GuideGender.unisex,
    available_sizes: list[str] | None = None,
) -> SizeRecommendation:
    """Guided match when a non-empty guide exists, chest estimation otherwise."""
    if guide is not None and guide.cm:
        return identify_size_with_guide(user, guide, available_sizes=available_sizes)
    return identify_size_with_estimation(user, clothing_gender, available_sizes)
