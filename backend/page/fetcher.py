"""Page document provider: fetch a URL and hand back a queryable tree."""

from __future__ import annotations

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from backend.config import settings
from backend.errors import DocumentUnavailable


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def parse_document(html: str, include_chrome: bool = True) -> BeautifulSoup:
    """Parse *html* and optionally narrow it to the primary content region.

    When *include_chrome* is ``False`` only the element matching
    ``settings.primary_content_selector`` is kept.  A page without that
    region yields an empty tree rather than an error.
    """
    soup = BeautifulSoup(html, "html.parser")
    if include_chrome:
        return soup

    region = soup.select_one(settings.primary_content_selector)
    if region is None:
        logger.info(
            "Primary content region {!r} not found; using an empty document",
            settings.primary_content_selector,
        )
        return BeautifulSoup("", "html.parser")
    return BeautifulSoup(region.decode_contents(), "html.parser")


async def fetch_document(url: str, include_chrome: bool = True) -> BeautifulSoup:
    """Fetch *url* and return its parsed document tree.

    Raises:
        DocumentUnavailable: If the page cannot be retrieved or the server
            answers with a 4xx/5xx status code.
    """
    logger.info("Fetching page {} (include_chrome={})", url, include_chrome)
    try:
        async with httpx.AsyncClient(
            headers=_default_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            html = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("Error fetching page {}: {}", url, exc)
        raise DocumentUnavailable(url, str(exc)) from exc

    return parse_document(html, include_chrome=include_chrome)
