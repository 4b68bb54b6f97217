"""Exceptions surfaced to callers of the inspection service.

Per-link network trouble is never raised: unreachable links and 4xx/5xx
responses are represented as data on the resulting ``LinkRecord``.
"""

from __future__ import annotations


class InspectorError(Exception):
    """Base class for all Page Inspector errors."""


class DocumentUnavailable(InspectorError):
    """The source page could not be fetched or parsed at all.

    Fails the whole request; no partial extraction is attempted.
    """

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        message = f"Failed to fetch page content from {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
