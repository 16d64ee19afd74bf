"""
Size guide lookup endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from fitgauge.api.deps import get_index
from fitgauge.core.size_guides import SizeGuideIndex
from fitgauge.models.schemas import ErrorResponse, GuideCombosResponse

router = APIRouter()


@router.get(
    "/{brand}",
    response_model=GuideCombosResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_brand_combos(brand: str, index: SizeGuideIndex = Depends(get_index)):
    """List the (category, gender) tables a brand publishes."""
    combos = index.available_combos(brand)
    if not combos:
        raise HTTPException(404, f"No size guide for brand '{brand}'")
    return GuideCombosResponse(brand=index.display_name(brand) or brand, combos=combos)
