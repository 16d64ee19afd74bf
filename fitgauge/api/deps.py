"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from fitgauge.core.size_guides import SizeGuideIndex


def get_index(request: Request) -> SizeGuideIndex:
    """The size guide index built at startup."""
    return request.app.state.size_guides
