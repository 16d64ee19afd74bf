"""
Tests for the estimator evaluation and size agreement metrics.
"""

import pytest

from fitgauge.models.schemas import Confidence, Gender, Method, SizeRecommendation
from fitgauge.validation.evaluation import (
    evaluate_estimator,
    load_ground_truth,
    size_agreement,
)

CSV = """shopper_id,height_cm,weight_kg,gender,body_composition,measurement,truth_cm
a,175,70,male,average,chest,94.2
b,175,70,male,average,chest,97.2
c,175,70,male,,waist,75.6
d,160,55,,average,sleeve,60
"""


@pytest.fixture
def ground_truth(tmp_path):
    path = tmp_path / "truth.csv"
    path.write_text(CSV)
    return load_ground_truth(path)


def rec(regular: str) -> SizeRecommendation:
    return SizeRecommendation(
        regular=regular, comfortable="", tight="",
        confidence=Confidence.medium, method=Method.estimation,
    )


class TestGroundTruth:

    def test_load(self, ground_truth):
        assert len(ground_truth) == 4
        assert ground_truth[0].user.gender == Gender.male
        assert ground_truth[3].user.gender == Gender.unknown


class TestEvaluateEstimator:

    def test_metrics(self, ground_truth):
        report = evaluate_estimator(ground_truth)
        assert report.n_total_samples == 3
        assert report.n_skipped == 1

        by_name = {m.measurement: m for m in report.per_measurement}
        chest = by_name["chest"]
        # predicted 95.2 → errors +1.0 and -2.0
        assert chest.n_samples == 2
        assert chest.mae_cm == pytest.approx(1.5)
        assert chest.mbe_cm == pytest.approx(-0.5)
        assert chest.rmse_cm == pytest.approx((2.5) ** 0.5)
        assert by_name["waist"].mae_cm == pytest.approx(0.0, abs=1e-9)

    def test_empty(self):
        report = evaluate_estimator([])
        assert report.overall_mae_cm == 0.0
        assert report.per_measurement == []


class TestSizeAgreement:

    def test_fraction(self):
        recs = [rec("M"), rec("Large"), rec(""), rec("S")]
        assert size_agreement(recs, ["m", "L", "S", "M"]) == pytest.approx(0.5)

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            size_agreement([rec("M")], [])

    def test_empty(self):
        assert size_agreement([], []) == 0.0
