"""Single-pass extraction of page facts from a parsed document tree.

All helpers take a :class:`bs4.BeautifulSoup` (or any ``Tag``) and return
results in document order.
"""

from __future__ import annotations

from typing import List

from bs4 import Tag

from backend.page.models import Anchor, Heading, ImageInfo, MetaTag

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def _attr(element: Tag, name: str) -> str | None:
    """Return attribute *name* as a string, joining multi-valued attributes."""
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return value


def extract_anchors(document: Tag) -> List[Anchor]:
    """Return every ``<a>`` element, with or without an href."""
    return [
        Anchor(
            href=(_attr(a, "href") or "").strip() or None,
            text=a.get_text().strip(),
            aria_label=_attr(a, "aria-label"),
            target=_attr(a, "target"),
            class_names=_attr(a, "class") or "",
        )
        for a in document.find_all("a")
    ]


def extract_urls(document: Tag) -> List[str]:
    """Return absolute (``http``/``https``) hrefs.

    Relative, fragment and ``mailto:`` links are excluded.  Duplicates are
    kept so the list mirrors the page.
    """
    hrefs = (_attr(a, "href") or "" for a in document.select("a[href]"))
    return [href for href in hrefs if href.startswith("http")]


def extract_images(document: Tag) -> List[ImageInfo]:
    """Return ``<img>`` elements that carry a ``src``, with alt-text coverage."""
    images: List[ImageInfo] = []
    for img in document.find_all("img"):
        src = _attr(img, "src")
        if not src:
            continue
        alt = _attr(img, "alt")
        images.append(
            ImageInfo(image_name=src, alt=alt or "No Alt Text", has_alt=bool(alt))
        )
    return images


def extract_meta_tags(document: Tag) -> List[MetaTag]:
    """Return ``<meta>`` elements identified by ``name`` or ``property``."""
    tags: List[MetaTag] = []
    for meta in document.find_all("meta"):
        name = _attr(meta, "name") or _attr(meta, "property")
        if not name:
            continue
        tags.append(MetaTag(name=name, content=_attr(meta, "content") or "No Content"))
    return tags


def extract_headings(document: Tag) -> List[Heading]:
    return [
        Heading(level=h.name, text=h.get_text().strip())
        for h in document.find_all(_HEADING_TAGS)
    ]
