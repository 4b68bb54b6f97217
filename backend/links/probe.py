"""HTTP probe: one GET per link, redirects followed, never raises on network trouble."""

from __future__ import annotations

import asyncio

import httpx
from loguru import logger

from backend.config import settings
from backend.links.models import ProbeOutcome


def _from_response(url: str, response: httpx.Response) -> ProbeOutcome:
    # response.url is httpx's normalised form; only a followed redirect changes the URL.
    final_url = str(response.url) if response.history else url
    return ProbeOutcome(status_code=response.status_code, final_url=final_url)


async def probe(
    client: httpx.AsyncClient,
    url: str,
    timeout: float | None = None,
) -> ProbeOutcome:
    """Request *url* once and report its status and final destination.

    Any HTTP response, including 4xx/5xx, is a successful probe.  Transport
    failures with no response, and requests running longer than *timeout*
    seconds (``settings.probe_timeout`` by default), produce an outcome with
    ``status_code=None``.

    Raises:
        ValueError: If *url* is empty.
    """
    if not url:
        raise ValueError("probe() requires a non-empty URL")

    limit = settings.probe_timeout if timeout is None else timeout
    try:
        response = await asyncio.wait_for(client.get(url), timeout=limit)
    except httpx.HTTPStatusError as exc:
        return _from_response(url, exc.response)
    except asyncio.TimeoutError:
        logger.warning("Probe timed out after {}s: {}", limit, url)
        return ProbeOutcome(status_code=None, error=f"timed out after {limit}s")
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Probe got no response from {}: {}", url, exc)
        return ProbeOutcome(status_code=None, error=str(exc) or type(exc).__name__)

    logger.debug("Probe {} -> {} ({})", url, response.status_code, response.url)
    return _from_response(url, response)
