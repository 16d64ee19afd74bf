"""
Size recommendation endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from fitgauge.api.deps import get_index
from fitgauge.core.estimator import estimate_measurements
from fitgauge.core.size_guides import SizeGuideIndex, collect_size_guide, resolve_gender
from fitgauge.core.size_recommendation import identify_size
from fitgauge.models.schemas import (
    ErrorResponse,
    SizingRequest,
    SizingResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=SizingResponse,
    responses={422: {"model": ErrorResponse}},
)
async def get_sizing(req: SizingRequest, index: SizeGuideIndex = Depends(get_index)):
    """Recommend regular / comfortable / tight sizes for one shopper and item."""
    user, item = req.user, req.item

    guide = collect_size_guide(index, item)
    recommendation = identify_size(
        user,
        guide,
        clothing_gender=resolve_gender(item),
        available_sizes=item.available_sizes,
    )

    keys = list(guide.cm[0].measurements) if guide is not None and guide.cm else []
    measurements = estimate_measurements(
        user.height, user.weight, keys, user.gender, user.body_composition,
    )

    logger.info(
        "Sizing %s %r: regular=%r confidence=%s method=%s",
        item.brand, item.name, recommendation.regular,
        recommendation.confidence.value, recommendation.method.value,
    )

    return SizingResponse(
        recommendation=recommendation,
        size_guide=guide,
        measurements=measurements,
    )
