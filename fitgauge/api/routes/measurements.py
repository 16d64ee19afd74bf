"""
Measurement estimation endpoint.

Takes height, weight and the classified build and returns estimated
body dimensions for display next to a size guide.
"""

from __future__ import annotations

from fastapi import APIRouter

from fitgauge.core.estimator import estimate_measurements
from fitgauge.models.schemas import MeasurementRequest, MeasurementResponse

router = APIRouter()


@router.post("", response_model=MeasurementResponse)
async def compute_measurements(req: MeasurementRequest):
    user = req.user
    return MeasurementResponse(
        measurements=estimate_measurements(
            user.height,
            user.weight,
            req.keys,
            user.gender,
            user.body_composition,
            unit=req.unit,
        ),
    )
