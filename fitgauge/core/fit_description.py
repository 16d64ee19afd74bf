"""
Fit describer.

Compares estimated body measurements against one size-guide entry and
produces short fit phrases ("chest slightly tight. runs normal.") that
downstream try-on prompts use to render the garment realistically.

Each measurement is placed on a five-step scale from its fit ratio

    ratio = (body − min) / (max − min)

    ratio < −0.5     loose
    ratio < −0.05    slightly loose
    ratio ≤ 1.05     normal
    ratio ≤ 1.5      slightly tight
    otherwise        tight

`intensity_shift` nudges every tier (clamped to the scale), which lets
the caller exaggerate the tight / comfortable variants.
"""

from __future__ import annotations

from fitgauge.config import config
from fitgauge.core.estimator import parse_measurement_key
from fitgauge.models.schemas import (
    Category,
    EstimatedMeasurement,
    FitType,
    Measurement,
    MeasurementKey,
    PointMeasurement,
    SizeEntry,
)

TOP_DESCRIPTORS: dict[MeasurementKey, tuple[str, ...]] = {
    MeasurementKey.chest: (
        "chest visibly loose", "chest slightly loose", "chest normal",
        "chest slightly tight", "chest visibly tight",
    ),
    MeasurementKey.waist: (
        "waist visibly loose", "waist slightly loose", "waist normal",
        "waist slightly tight", "waist visibly tight",
    ),
    MeasurementKey.shoulders: (
        "shoulders visibly wide", "shoulders slightly wide", "shoulders normal",
        "shoulders slightly narrow", "shoulders visibly narrow",
    ),
}

LEG_DESCRIPTORS: tuple[str, ...] = (
    "legs visibly loose", "legs slightly loose", "legs normal",
    "legs slightly tight", "legs visibly tight",
)

BOTTOM_WAIST_POSITION: dict[FitType, str] = {
    FitType.tight: "waistband pulled up high at the natural waist",
    FitType.regular: "waistband at mid-hip level",
    FitType.comfortable: "waistband dropped low, sitting on the hips",
}

TOP_LENGTH: dict[FitType, str] = {
    FitType.tight: "runs small",
    FitType.regular: "runs normal",
    FitType.comfortable: "runs large",
}

_SKIPPED = {MeasurementKey.length, MeasurementKey.inseam}


def fit_ratio(user_value: float, measurement: Measurement) -> float:
    """Position of the body value within the target range (0 = min, 1 = max)."""
    if isinstance(measurement, PointMeasurement):
        tol = config.sizing.point_tolerance
        lo, hi = measurement.value - tol, measurement.value + tol
    else:
        lo, hi = measurement.min, measurement.max

    if hi == lo:
        if user_value < lo:
            return -0.5
        if user_value > hi:
            return 1.5
        return 0.5
    return (user_value - lo) / (hi - lo)


def ratio_to_tier(ratio: float) -> int:
    if ratio < -0.5:
        return 0
    if ratio < -0.05:
        return 1
    if ratio <= 1.05:
        return 2
    if ratio <= 1.5:
        return 3
    return 4


def _find_target(entry: SizeEntry, key: MeasurementKey) -> Measurement | None:
    for raw_key, measurement in entry.measurements.items():
        if parse_measurement_key(raw_key) == key:
            return measurement
    return None


def _tier(user_value: float, measurement: Measurement, shift: int) -> int:
    return max(0, min(4, ratio_to_tier(fit_ratio(user_value, measurement)) + shift))


def describe_fit(
    user_measurements: list[EstimatedMeasurement],
    size_entry: SizeEntry,
    fit_type: FitType,
    intensity_shift: int = 0,
    category: Category = Category.tops,
    clothing_type: str = "",
    clothing_name: str = "",
) -> str:
    """Build a ". "-joined fit description, or "" if nothing applies."""
    is_bottoms = category == Category.bottoms
    parts: list[str] = []
    used: set[MeasurementKey] = set()
    legs_done = False

    if is_bottoms:
        parts.append(BOTTOM_WAIST_POSITION[fit_type])

    for m in user_measurements:
        key = m.key
        if key in _SKIPPED or key in used:
            continue

        if is_bottoms:
            if key in (MeasurementKey.hips, MeasurementKey.thigh) and not legs_done:
                target = _find_target(size_entry, key)
                if target is None:
                    continue
                parts.append(LEG_DESCRIPTORS[_tier(m.value, target, intensity_shift)])
                legs_done = True
            # waist position is fixed per fit type for bottoms
            continue

        descriptors = TOP_DESCRIPTORS.get(key)
        target = _find_target(size_entry, key)
        if descriptors is None or target is None:
            continue
        parts.append(descriptors[_tier(m.value, target, intensity_shift)])
        used.add(key)

    is_dress = "dress" in clothing_type.lower() or "dress" in clothing_name.lower()
    if not is_bottoms and not is_dress:
        parts.append(TOP_LENGTH[fit_type])

    if not parts:
        return ""
    return ". ".join(parts) + "."
