"""Read-only view of the legacy redirect table.

The redirects themselves are served by ``LegacyRedirectMiddleware``; these
endpoints let build pipelines and humans inspect the table.
"""

import logging

from fastapi import APIRouter, Query

from schemas import RedirectEntryResponse, RedirectListResponse, RedirectLookupResponse
from services.redirect_service import redirects

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/redirects", tags=["redirects"])


@router.get("", response_model=RedirectListResponse)
async def list_redirects() -> RedirectListResponse:
    """Return every legacy path and its target, in authoring order."""
    entries = [
        RedirectEntryResponse.model_validate(entry) for entry in redirects.entries()
    ]
    return RedirectListResponse(count=len(entries), redirects=entries)


@router.get("/lookup", response_model=RedirectLookupResponse)
async def lookup_redirect(
    path: str = Query(..., min_length=1, description="Legacy path, e.g. /quickstart"),
) -> RedirectLookupResponse:
    """Exact, case-sensitive lookup of a single path."""
    target = redirects.lookup(path)
    logger.debug("redirects.lookup", extra={"path": path, "found": target is not None})
    return RedirectLookupResponse(path=path, target=target, found=target is not None)
