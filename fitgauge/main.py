"""
FitGauge FastAPI application.

Endpoints:
  POST /api/v1/sizing          — size recommendation for a shopper and item
  POST /api/v1/measurements    — estimated body measurements
  GET  /api/v1/guides/{brand}  — size guide tables a brand publishes
  GET  /health                 — health check
"""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitgauge.config import config
from fitgauge.api.middleware.auth import require_api_key
from fitgauge.api.routes import guides, measurements, sizing
from fitgauge.core.size_guides import load_default_index
from fitgauge.models.schemas import HealthResponse

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
)

app = FastAPI(
    title=config.app_name,
    version=config.version,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Reference tables are loaded once and shared read-only by every request.
app.state.size_guides = load_default_index()
logging.getLogger(__name__).info(
    "%s %s ready (%d brands)", config.app_name, config.version, len(app.state.size_guides.brands()),
)

# ── Route registration ─────────────────────────────────────────────────

_auth = [Depends(require_api_key)]

app.include_router(sizing.router, prefix="/api/v1/sizing", tags=["sizing"], dependencies=_auth)
app.include_router(measurements.router, prefix="/api/v1/measurements", tags=["measurements"], dependencies=_auth)
app.include_router(guides.router, prefix="/api/v1/guides", tags=["guides"], dependencies=_auth)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", version=config.version)
