"""Page inspection endpoints.

Routes
------
POST /link-details       Body: {"url": "...", "includeUhf": false}  → {"links": [...]}
POST /extract-urls       Body: {"url": "...", "includeUhf": false}  → {"urls": [...]}
POST /image-details      Body: {"url": "...", "includeUhf": false}  → {"images": [...]}
POST /page-properties    Body: {"url": "...", "includeUhf": false}  → {"metaTags": [...]}
POST /heading-hierarchy  Body: {"url": "...", "includeUhf": false}  → {"headings": [...]}

Every route fails with HTTP 500 when the source page cannot be fetched.
Dead or unreachable links on an otherwise reachable page never fail the
request; they are reported through ``statusCode``/``statusColor``.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from backend import inspector
from backend.errors import DocumentUnavailable

router = APIRouter()

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class InspectRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: HttpUrl
    include_uhf: bool = Field(default=False, alias="includeUhf")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _run(
    fetcher: Callable[[str, bool], Awaitable[T]], body: InspectRequest
) -> T:
    """Await *fetcher* for the request, mapping a missing page to HTTP 500."""
    url_str = str(body.url)
    try:
        return await fetcher(url_str, body.include_uhf)
    except DocumentUnavailable as exc:
        logger.error("Inspection of {} failed: {}", url_str, exc)
        raise HTTPException(
            status_code=500, detail="Failed to fetch page content."
        ) from exc


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/link-details")
async def link_details_endpoint(body: InspectRequest) -> dict[str, Any]:
    """Probe every anchor on the page and return classified link records."""
    records = await _run(inspector.link_details, body)
    return {"links": [r.to_dict() for r in records]}


@router.post("/extract-urls")
async def extract_urls_endpoint(body: InspectRequest) -> dict[str, Any]:
    """Return the page's absolute outbound URLs, unprobed."""
    urls = await _run(inspector.extract_page_urls, body)
    return {"urls": urls}


@router.post("/image-details")
async def image_details_endpoint(body: InspectRequest) -> dict[str, Any]:
    images = await _run(inspector.image_details, body)
    return {"images": [i.to_dict() for i in images]}


@router.post("/page-properties")
async def page_properties_endpoint(body: InspectRequest) -> dict[str, Any]:
    meta_tags = await _run(inspector.page_properties, body)
    return {"metaTags": [m.to_dict() for m in meta_tags]}


@router.post("/heading-hierarchy")
async def heading_hierarchy_endpoint(body: InspectRequest) -> dict[str, Any]:
    headings = await _run(inspector.heading_hierarchy, body)
    return {"headings": [h.to_dict() for h in headings]}
