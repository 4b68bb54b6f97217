"""Data models for facts extracted from a parsed page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Anchor:
    """A hyperlink element as read from the document tree."""

    href: Optional[str]
    text: str = ""
    aria_label: Optional[str] = None
    target: Optional[str] = None
    class_names: str = ""


@dataclass(frozen=True)
class ImageInfo:
    """An ``<img>`` element and its alt-text coverage."""

    image_name: str
    alt: str
    has_alt: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"imageName": self.image_name, "alt": self.alt, "hasAlt": self.has_alt}


@dataclass(frozen=True)
class MetaTag:
    """A ``<meta>`` element keyed by its ``name`` or ``property`` attribute."""

    name: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "content": self.content}


@dataclass(frozen=True)
class Heading:
    level: str
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "text": self.text}
