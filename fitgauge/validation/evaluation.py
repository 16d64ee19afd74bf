"""
Validation framework: compare estimated measurements and recommended
sizes against ground truth collected from fitted shoppers.

Design
──────
1. Ground truth is loaded from a CSV file with columns:
     shopper_id, height_cm, weight_kg, gender, body_composition,
     measurement, truth_cm

2. **Estimator error metrics:**
   • Mean Absolute Error (MAE)
   • Root Mean Squared Error (RMSE)
   • Mean Bias Error (MBE) — directional, indicates systematic over/under
   • 95th-percentile error — worst-case bound
   • Per-measurement breakdown

3. **Size agreement:** share of shoppers whose recommended regular size
   equals the size they kept after trying the garment on.  Shoppers the
   engine flagged as out of range (empty regular) count as misses.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from fitgauge.core.estimator import estimate
from fitgauge.core.sizes import same_size
from fitgauge.models.schemas import (
    BodyComposition,
    Gender,
    SizeRecommendation,
    UserMeasurements,
)

logger = logging.getLogger(__name__)


# ── Ground truth loading ───────────────────────────────────────────────

@dataclass
class GroundTruthEntry:
    shopper_id: str
    user: UserMeasurements
    measurement: str
    truth_cm: float


def load_ground_truth(path: Path) -> list[GroundTruthEntry]:
    """Load ground-truth body measurements from CSV."""
    entries = []
    with path.open(newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            user = UserMeasurements(
                height=float(row["height_cm"]),
                weight=float(row["weight_kg"]),
                gender=Gender(row.get("gender") or "unknown"),
                body_composition=BodyComposition(row.get("body_composition") or "average"),
            )
            entries.append(GroundTruthEntry(
                shopper_id=row["shopper_id"],
                user=user,
                measurement=row["measurement"],
                truth_cm=float(row["truth_cm"]),
            ))
    logger.info("Loaded %d ground-truth rows from %s", len(entries), path)
    return entries


# ── Error analysis ─────────────────────────────────────────────────────

@dataclass
class ErrorMetrics:
    measurement: str
    n_samples: int
    mae_cm: float       # Mean Absolute Error
    rmse_cm: float      # Root Mean Squared Error
    mbe_cm: float       # Mean Bias Error (positive = over-estimation)
    p95_error_cm: float  # 95th percentile absolute error


@dataclass
class EvaluationReport:
    overall_mae_cm: float
    overall_rmse_cm: float
    per_measurement: list[ErrorMetrics]
    n_total_samples: int
    n_skipped: int  # rows whose measurement has no formula


def evaluate_estimator(ground_truth: list[GroundTruthEntry]) -> EvaluationReport:
    """Estimate every ground-truth row and summarise the errors."""
    errors_by_name: dict[str, list[float]] = {}
    skipped = 0

    for row in ground_truth:
        u = row.user
        predicted = estimate(u.height, u.weight, row.measurement, u.gender, u.body_composition)
        if predicted is None:
            skipped += 1
            continue
        errors_by_name.setdefault(row.measurement, []).append(predicted - row.truth_cm)

    per_measurement: list[ErrorMetrics] = []
    all_errors: list[float] = []

    for name, errors in sorted(errors_by_name.items()):
        arr = np.array(errors)
        abs_arr = np.abs(arr)
        per_measurement.append(ErrorMetrics(
            measurement=name,
            n_samples=len(arr),
            mae_cm=float(np.mean(abs_arr)),
            rmse_cm=float(np.sqrt(np.mean(arr ** 2))),
            mbe_cm=float(np.mean(arr)),
            p95_error_cm=float(np.percentile(abs_arr, 95)),
        ))
        all_errors.extend(errors)

    all_arr = np.array(all_errors)
    overall_mae = float(np.mean(np.abs(all_arr))) if all_errors else 0.0
    overall_rmse = float(np.sqrt(np.mean(all_arr ** 2))) if all_errors else 0.0

    return EvaluationReport(
        overall_mae_cm=round(overall_mae, 3),
        overall_rmse_cm=round(overall_rmse, 3),
        per_measurement=per_measurement,
        n_total_samples=len(all_errors),
        n_skipped=skipped,
    )


# ── Size agreement ─────────────────────────────────────────────────────

def size_agreement(
    recommendations: list[SizeRecommendation],
    kept_sizes: list[str],
) -> float:
    """Fraction of shoppers whose regular recommendation matches the kept size."""
    if len(recommendations) != len(kept_sizes):
        raise ValueError("recommendations and kept_sizes must have the same length")
    if not recommendations:
        return 0.0
    hits = np.array([
        bool(rec.regular) and same_size(rec.regular, kept)
        for rec, kept in zip(recommendations, kept_sizes)
    ])
    return float(np.mean(hits))
