"""Data models for the link validation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of a single outbound request to a link.

    ``status_code`` is ``None`` only when no response was received at all
    (DNS failure, refused connection, timeout, unsupported scheme).  Error
    statuses such as 404 or 500 are ordinary outcomes.
    """

    status_code: Optional[int]
    final_url: str = ""
    error: Optional[str] = None

    @property
    def responded(self) -> bool:
        return self.status_code is not None


@dataclass(frozen=True)
class LinkRecord:
    """A fully classified link, ready to be returned to the caller."""

    link_type: str
    link_text: str
    aria_label: str
    url: str
    redirected_url: str
    status_code: int
    target: str
    status_color: str
    original_url_color: str = ""
    redirected_url_color: str = ""
    unreachable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase, JSON-serialisable form used by the API."""
        return {
            "linkType": self.link_type,
            "linkText": self.link_text,
            "ariaLabel": self.aria_label,
            "url": self.url,
            "redirectedUrl": self.redirected_url,
            "statusCode": self.status_code,
            "target": self.target,
            "statusColor": self.status_color,
            "originalUrlColor": self.original_url_color,
            "redirectedUrlColor": self.redirected_url_color,
            "unreachable": self.unreachable,
        }
