"""Page package — source document fetch & fact extraction."""

from backend.page.extractor import (
    extract_anchors,
    extract_headings,
    extract_images,
    extract_meta_tags,
    extract_urls,
)
from backend.page.fetcher import fetch_document, parse_document
from backend.page.models import Anchor, Heading, ImageInfo, MetaTag

__all__ = [
    "fetch_document",
    "parse_document",
    "extract_anchors",
    "extract_urls",
    "extract_images",
    "extract_meta_tags",
    "extract_headings",
    "Anchor",
    "ImageInfo",
    "MetaTag",
    "Heading",
]
