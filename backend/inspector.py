"""Inspection service: fetch a page once and report one kind of fact about it.

Each function takes the page URL and whether to keep the surrounding
template chrome (``include_uhf``).  :class:`~backend.errors.DocumentUnavailable`
propagates when the page itself cannot be fetched; everything else is
returned as data.
"""

from __future__ import annotations

from typing import List

from backend.links import LinkRecord, collect_link_details
from backend.page import (
    Heading,
    ImageInfo,
    MetaTag,
    extract_headings,
    extract_images,
    extract_meta_tags,
    extract_urls,
    fetch_document,
)


async def link_details(url: str, include_uhf: bool = False) -> List[LinkRecord]:
    document = await fetch_document(url, include_chrome=include_uhf)
    return await collect_link_details(document)


async def extract_page_urls(url: str, include_uhf: bool = False) -> List[str]:
    document = await fetch_document(url, include_chrome=include_uhf)
    return extract_urls(document)


async def image_details(url: str, include_uhf: bool = False) -> List[ImageInfo]:
    document = await fetch_document(url, include_chrome=include_uhf)
    return extract_images(document)


async def page_properties(url: str, include_uhf: bool = False) -> List[MetaTag]:
    document = await fetch_document(url, include_chrome=include_uhf)
    return extract_meta_tags(document)


async def heading_hierarchy(url: str, include_uhf: bool = False) -> List[Heading]:
    document = await fetch_document(url, include_chrome=include_uhf)
    return extract_headings(document)
