"""Pure classification of anchors and probe outcomes into link records.

Nothing here performs I/O; every function is total over its inputs.
"""

from __future__ import annotations

from typing import Optional

from backend.links.models import LinkRecord, ProbeOutcome
from backend.page.models import Anchor

# Checked in order; the first token present wins.
ROLE_TOKENS = ("cta", "button", "link")
UNKNOWN_ROLE = "unknown"

DEFAULT_STATUS = 200

ORIGINAL_URL_COLOR = "blue"
REDIRECTED_URL_COLOR = "purple"


def classify_role(class_names: str) -> str:
    """Map an element's class list to ``cta``, ``button``, ``link`` or ``unknown``."""
    tokens = set(class_names.split())
    for role in ROLE_TOKENS:
        if role in tokens:
            return role
    return UNKNOWN_ROLE


def status_color(status_code: int) -> str:
    """Return the severity tier for *status_code*."""
    if status_code >= 500:
        return "red"
    if status_code >= 400:
        return "orange"
    if status_code >= 300:
        return "yellow"
    return "green"


def classify(anchor: Anchor, outcome: Optional[ProbeOutcome]) -> LinkRecord:
    """Build the :class:`LinkRecord` for *anchor*.

    *outcome* is ``None`` when the anchor has no href and was never probed.
    Such anchors, and anchors whose probe got no response at all, keep the
    default 200/green status and an empty ``redirected_url``.  The latter are
    flagged with ``unreachable=True``.
    """
    status_code = DEFAULT_STATUS
    redirected_url = ""
    original_color = redirected_color = ""
    unreachable = False

    if outcome is not None:
        if outcome.responded:
            status_code = outcome.status_code
            redirected_url = outcome.final_url
            if anchor.href != outcome.final_url:
                original_color = ORIGINAL_URL_COLOR
                redirected_color = REDIRECTED_URL_COLOR
        else:
            unreachable = True

    return LinkRecord(
        link_type=classify_role(anchor.class_names),
        link_text=anchor.text,
        aria_label=anchor.aria_label or "",
        url=anchor.href or "",
        redirected_url=redirected_url,
        status_code=status_code,
        target=anchor.target or "",
        status_color=status_color(status_code),
        original_url_color=original_color,
        redirected_url_color=redirected_color,
        unreachable=unreachable,
    )
