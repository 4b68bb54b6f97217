"""Batch coordinator: probe and classify every anchor on a page concurrently.

Each anchor becomes one unit of work.  All units are dispatched together
with :func:`asyncio.gather`, which returns results positionally, so the
output order always matches document order regardless of which probe
finishes first.  An :class:`asyncio.Semaphore` bounds the number of
requests in flight.
"""

from __future__ import annotations

import asyncio
from contextlib import AsyncExitStack, nullcontext
from typing import List, Optional

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from backend.config import settings
from backend.errors import DocumentUnavailable
from backend.links.classifier import classify
from backend.links.models import LinkRecord, ProbeOutcome
from backend.links.probe import probe
from backend.page.extractor import extract_anchors
from backend.page.models import Anchor


def _probe_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.probe_timeout,
        follow_redirects=True,
    )


async def _inspect_anchor(
    client: httpx.AsyncClient,
    anchor: Anchor,
    gate: asyncio.Semaphore | nullcontext,
) -> LinkRecord:
    if not anchor.href:
        return classify(anchor, None)
    async with gate:
        try:
            outcome = await probe(client, anchor.href)
        except Exception as exc:
            logger.exception("Unexpected error checking {}", anchor.href)
            outcome = ProbeOutcome(status_code=None, error=str(exc) or type(exc).__name__)
    return classify(anchor, outcome)


async def collect_link_details(
    document: Optional[BeautifulSoup],
    *,
    client: Optional[httpx.AsyncClient] = None,
    concurrency: Optional[int] = None,
) -> List[LinkRecord]:
    """Return one :class:`LinkRecord` per anchor in *document*, in document order.

    Args:
        document: Parsed page tree from the page document provider.
        client: Optional shared client; when omitted one is opened for the
            batch and closed afterwards.
        concurrency: Maximum probes in flight.  Defaults to
            ``settings.probe_concurrency``; ``0`` or less means unbounded.

    Raises:
        DocumentUnavailable: If *document* is ``None``.
    """
    if document is None:
        raise DocumentUnavailable("<document>", "no document to inspect")

    anchors = extract_anchors(document)
    if not anchors:
        return []

    limit = settings.probe_concurrency if concurrency is None else concurrency
    gate = asyncio.Semaphore(limit) if limit > 0 else nullcontext()
    logger.info(
        "Inspecting {} anchor(s) (concurrency={})",
        len(anchors),
        limit if limit > 0 else "unbounded",
    )

    async with AsyncExitStack() as stack:
        if client is None:
            client = await stack.enter_async_context(_probe_client())
        records = await asyncio.gather(
            *(_inspect_anchor(client, anchor, gate) for anchor in anchors)
        )

    unreachable = sum(1 for r in records if r.unreachable)
    if unreachable:
        logger.warning("{} of {} link(s) were unreachable", unreachable, len(records))
    return list(records)
