"""Broken-link audit endpoint.

Routes
------
POST /api/broken-links    Body: {"url": "https://..."}    → check_broken_links
"""

from __future__ import annotations

import re
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from linkcheck.checker import PageFetchError, check_broken_links

router = APIRouter()

_URL_PATTERN = re.compile(r"^https?://.+")


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class BrokenLinksRequest(BaseModel):
    url: Optional[str] = None


class BrokenLinkModel(BaseModel):
    url: str
    status: int
    text: str
    isExternal: bool


class SummaryModel(BaseModel):
    internalLinks: int
    externalLinks: int
    brokenCount: int
    successRate: int


class BrokenLinksResponse(BaseModel):
    url: str
    totalLinks: int
    workingLinks: int
    brokenLinks: list[BrokenLinkModel]
    warnings: list[str]
    summary: SummaryModel


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body: dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/broken-links",
    response_model=BrokenLinksResponse,
    responses={400: {"description": "Missing or invalid URL"},
               500: {"description": "The page could not be fetched"}},
)
def broken_links_endpoint(body: BrokenLinksRequest) -> Any:
    """Fetch the page at ``url`` and check every link on it.

    Returns the audit report, or an ``{"error", "details"}`` envelope when
    the page itself cannot be retrieved.
    """
    if not body.url:
        return _error(400, "URL is required")
    if not _URL_PATTERN.match(body.url):
        return _error(400, "Invalid URL format. Please include http:// or https://")

    try:
        result = check_broken_links(body.url)
    except PageFetchError as exc:
        print(f"[API] Broken links check error: {exc}")
        return _error(500, "Failed to check broken links", str(exc))
    return result.to_dict()
