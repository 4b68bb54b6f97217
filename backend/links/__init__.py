"""Links package — probe, classify and collect link details for a page."""

from backend.links.classifier import classify, classify_role, status_color
from backend.links.coordinator import collect_link_details
from backend.links.models import LinkRecord, ProbeOutcome
from backend.links.probe import probe

__all__ = [
    "probe",
    "classify",
    "classify_role",
    "status_color",
    "collect_link_details",
    "LinkRecord",
    "ProbeOutcome",
]
