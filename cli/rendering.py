"""Utilities for rendering inspection results in the terminal."""

from __future__ import annotations

from typing import List

import typer

from backend.links.models import LinkRecord
from backend.page.models import Heading, ImageInfo, MetaTag

# Severity / divergence colours mapped onto what terminals can show.
_TERMINAL_COLORS = {
    "green": typer.colors.GREEN,
    "yellow": typer.colors.YELLOW,
    "orange": typer.colors.BRIGHT_RED,
    "red": typer.colors.RED,
    "blue": typer.colors.BLUE,
    "purple": typer.colors.MAGENTA,
}


def _paint(text: str, color: str) -> str:
    fg = _TERMINAL_COLORS.get(color)
    return typer.style(text, fg=fg) if fg else text


def render_links(records: List[LinkRecord]) -> str:
    """Render link records one per line, coloured by severity.

    A redirected link gets a second line showing where it ended up.
    """
    lines: List[str] = []
    for r in records:
        status = "unreachable" if r.unreachable else str(r.status_code)
        label = r.link_text or r.aria_label or "(no text)"
        url = _paint(r.url or "(no href)", r.original_url_color)
        lines.append(
            f"{_paint(f'[{status:>3}]', r.status_color)} {r.link_type:<7} {label!r}  {url}"
        )
        if r.redirected_url and r.redirected_url != r.url:
            lines.append(f"        └── {_paint(r.redirected_url, r.redirected_url_color)}")
    return "\n".join(lines)


def render_images(images: List[ImageInfo]) -> str:
    lines = []
    for img in images:
        mark = _paint("✓", "green") if img.has_alt else _paint("✗", "red")
        lines.append(f"{mark} {img.image_name}  alt={img.alt!r}")
    return "\n".join(lines)


def render_meta_tags(tags: List[MetaTag]) -> str:
    return "\n".join(f"{t.name}: {t.content}" for t in tags)


def render_headings(headings: List[Heading]) -> str:
    """Render headings indented by level (h1 flush left)."""
    lines = []
    for h in headings:
        depth = int(h.level[1]) - 1 if h.level[1:].isdigit() else 0
        lines.append(f"{'  ' * depth}{h.level}: {h.text}")
    return "\n".join(lines)
