"""Liveness endpoint.

Routes
------
GET /health    → {"status": "OK", "timestamp": "<ISO-8601>"}
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
