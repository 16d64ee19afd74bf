"""
API key authentication dependency.

Keys are read from the FITGAUGE_API_KEYS environment variable
(comma-separated).  With no keys configured, auth is disabled.
"""

from __future__ import annotations

import os
import secrets
from typing import Annotated

from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader

from fitgauge.config import config

_api_key_header = APIKeyHeader(name=config.api_key_header, auto_error=False)


def load_keys() -> set[str]:
    """Load API keys from the FITGAUGE_API_KEYS environment variable."""
    raw = os.environ.get("FITGAUGE_API_KEYS", "")
    return {k.strip() for k in raw.split(",") if k.strip()}


async def require_api_key(
    api_key: Annotated[str | None, Security(_api_key_header)],
) -> str:
    """Dependency: reject requests without a valid API key."""
    valid = load_keys()
    if not valid:
        # No keys configured → auth disabled (development mode)
        return "dev"

    if api_key is None or not any(secrets.compare_digest(api_key, k) for k in valid):
        raise HTTPException(401, "Invalid or missing API key")

    return api_key
