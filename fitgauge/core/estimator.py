"""
Anthropometric estimator.

Model
─────
Every supported body dimension is an affine function of height H (cm)
and weight W (kg), optionally scaled by a body-composition factor F:

    F = 0.85  lean     (athletic build)
    F = 1.00  average
    F = 1.25  soft     (higher body fat)

Separate coefficient sets exist for male and female bodies.  When the
photo classifier could not decide, the estimate is the arithmetic mean
of the two:

    d_unknown = (d_male + d_female) / 2

Coefficients are population-level regressions.  They give a best-effort
starting point for size matching, not a tape measurement.

Keys without a formula (e.g. "sleeve") return None and callers skip them.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from fitgauge.core.units import cm_to_inch
from fitgauge.models.schemas import (
    BodyComposition,
    EstimatedMeasurement,
    Gender,
    MeasurementKey,
    Unit,
)

logger = logging.getLogger(__name__)

BODY_COMPOSITION_FACTOR: dict[BodyComposition, float] = {
    BodyComposition.lean: 0.85,
    BodyComposition.average: 1.00,
    BodyComposition.soft: 1.25,
}

# Female chest offset replaces the multiplicative factor for that key.
_FEMALE_CHEST_DELTA: dict[BodyComposition, float] = {
    BodyComposition.lean: -5.0,
    BodyComposition.average: 0.0,
    BodyComposition.soft: 1.0,
}

_KEY_ALIASES: dict[str, MeasurementKey] = {
    "shoulder": MeasurementKey.shoulders,
    "shoulder_width": MeasurementKey.shoulders,
    "hip": MeasurementKey.hips,
    "body_length": MeasurementKey.length,
}

DISPLAY_ORDER: tuple[MeasurementKey, ...] = (
    MeasurementKey.chest,
    MeasurementKey.shoulders,
    MeasurementKey.waist,
    MeasurementKey.hips,
    MeasurementKey.length,
    MeasurementKey.inseam,
    MeasurementKey.thigh,
)

DISPLAY_NAMES: dict[MeasurementKey, str] = {
    MeasurementKey.chest: "Chest",
    MeasurementKey.shoulders: "Shoulders",
    MeasurementKey.waist: "Waist",
    MeasurementKey.hips: "Hips",
    MeasurementKey.length: "Length",
    MeasurementKey.inseam: "Inseam",
    MeasurementKey.thigh: "Thigh",
}

Formula = Callable[[float, float, BodyComposition], float]


# ── Formula tables ─────────────────────────────────────────────────────

def _factor(comp: BodyComposition) -> float:
    return BODY_COMPOSITION_FACTOR[comp]


MALE_FORMULAS: dict[MeasurementKey, Formula] = {
    MeasurementKey.chest: lambda H, W, c: 0.24 * H + 0.76 * W,
    MeasurementKey.waist: lambda H, W, c: 0.16 * H + 0.68 * W,
    MeasurementKey.hips: lambda H, W, c: (0.28 * H + 0.40 * W + 20) * (0.93 + 0.07 * _factor(c)),
    MeasurementKey.length: lambda H, W, c: 0.405 * H,
    MeasurementKey.shoulders: lambda H, W, c: (0.45 * H + 0.30 * (W - 70) + 30) * (0.92 + 0.08 * _factor(c)),
    MeasurementKey.inseam: lambda H, W, c: 0.45 * H * (0.99 + 0.01 * _factor(c)),
    MeasurementKey.thigh: lambda H, W, c: (0.25 * H + 0.12 * (W - 70) + 10) * (0.90 + 0.10 * _factor(c)),
}

FEMALE_FORMULAS: dict[MeasurementKey, Formula] = {
    MeasurementKey.chest: lambda H, W, c: 0.16 * H + 1.08 * W + 1 + _FEMALE_CHEST_DELTA[c],
    MeasurementKey.waist: lambda H, W, c: 0.225 * H + 0.61 * W,
    MeasurementKey.hips: lambda H, W, c: (0.30 * H + 0.50 * W + 22) * (0.91 + 0.09 * _factor(c)),
    MeasurementKey.length: lambda H, W, c: 0.385 * H,
    MeasurementKey.shoulders: lambda H, W, c: (0.42 * H + 0.20 * (W - 60) + 22) * (0.93 + 0.07 * _factor(c)),
    MeasurementKey.inseam: lambda H, W, c: 0.46 * H * (0.99 + 0.01 * _factor(c)),
    MeasurementKey.thigh: lambda H, W, c: (0.24 * H + 0.15 * (W - 60) + 12) * (0.88 + 0.12 * _factor(c)),
}


def parse_measurement_key(key: str | MeasurementKey) -> MeasurementKey | None:
    """Resolve a size-guide key ("Shoulder Width", "hips") to a MeasurementKey."""
    if isinstance(key, MeasurementKey):
        return key
    normalized = "_".join(key.lower().split())
    if normalized in _KEY_ALIASES:
        return _KEY_ALIASES[normalized]
    try:
        return MeasurementKey(normalized)
    except ValueError:
        return None


# ── Estimation ─────────────────────────────────────────────────────────

def estimate(
    height: float,
    weight: float,
    key: str | MeasurementKey,
    gender: Gender = Gender.unknown,
    body_composition: BodyComposition = BodyComposition.average,
) -> float | None:
    """
    Estimate one body dimension in cm.

    Returns None when `key` has no formula.
    """
    mkey = parse_measurement_key(key)
    if mkey is None:
        return None

    if gender == Gender.male:
        return MALE_FORMULAS[mkey](height, weight, body_composition)
    if gender == Gender.female:
        return FEMALE_FORMULAS[mkey](height, weight, body_composition)

    male = MALE_FORMULAS[mkey](height, weight, body_composition)
    female = FEMALE_FORMULAS[mkey](height, weight, body_composition)
    return (male + female) / 2


def estimate_measurements(
    height: float,
    weight: float,
    keys: Iterable[str | MeasurementKey],
    gender: Gender = Gender.unknown,
    body_composition: BodyComposition = BodyComposition.average,
    unit: Unit = Unit.cm,
) -> list[EstimatedMeasurement]:
    """
    Estimate a set of dimensions for display.

    Keys are deduplicated, ordered chest → thigh, and values rounded
    to one decimal in the requested unit.  Unsupported keys are dropped.
    """
    wanted: set[MeasurementKey] = set()
    for key in keys:
        mkey = parse_measurement_key(key)
        if mkey is None:
            logger.debug("Skipping unsupported measurement key %r", key)
            continue
        wanted.add(mkey)

    results: list[EstimatedMeasurement] = []
    for mkey in DISPLAY_ORDER:
        if mkey not in wanted:
            continue
        value_cm = estimate(height, weight, mkey, gender, body_composition)
        value = cm_to_inch(value_cm) if unit == Unit.inch else value_cm
        results.append(EstimatedMeasurement(
            key=mkey,
            name=DISPLAY_NAMES[mkey],
            value=round(value, 1),
            unit=unit,
        ))
    return results
