"""Checker package — page fetch, link extraction, probing & aggregation."""

from linkcheck.checker.audit import check_broken_links
from linkcheck.checker.errors import PageFetchError
from linkcheck.checker.models import AuditResult, CandidateLink, LinkOutcome

__all__ = [
    "check_broken_links",
    "PageFetchError",
    "AuditResult",
    "CandidateLink",
    "LinkOutcome",
]
