"""Data models for the link-checking pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Union


@dataclass(frozen=True)
class CandidateLink:
    """A resolved, qualifying href waiting to be probed."""

    url: str
    text: str
    is_external: bool


@dataclass(frozen=True)
class LinkOutcome:
    """The result of checking one link.

    ``status`` is the HTTP status code received, or ``0`` when no response
    could be obtained at all (DNS, timeout, TLS, malformed URL).
    """

    url: str
    status: int
    text: str
    is_external: bool

    @property
    def is_broken(self) -> bool:
        return self.status == 0 or self.status >= 400

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "status": self.status,
            "text": self.text,
            "isExternal": self.is_external,
        }


# An extracted entry is either something to probe or an already-failed href.
LinkEntry = Union[CandidateLink, LinkOutcome]


@dataclass(frozen=True)
class LinkTallies:
    internal: int = 0
    external: int = 0


@dataclass
class ExtractedLinks:
    """Everything the extractor learned from one page."""

    total_anchors: int
    entries: List[LinkEntry] = field(default_factory=list)
    tallies: LinkTallies = field(default_factory=LinkTallies)
    warnings: List[str] = field(default_factory=list)

    @property
    def candidate_count(self) -> int:
        return len(self.entries)


@dataclass
class DispatchResult:
    """Outcomes for the probed subset, in document order."""

    outcomes: List[LinkOutcome] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AuditSummary:
    internal_links: int
    external_links: int
    broken_count: int
    success_rate: int


@dataclass
class AuditResult:
    """Final report for a single page audit."""

    url: str
    total_links: int
    working_links: int
    broken_links: List[LinkOutcome]
    warnings: List[str]
    summary: AuditSummary

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON shape served by the API."""
        return {
            "url": self.url,
            "totalLinks": self.total_links,
            "workingLinks": self.working_links,
            "brokenLinks": [link.to_dict() for link in self.broken_links],
            "warnings": list(self.warnings),
            "summary": {
                "internalLinks": self.summary.internal_links,
                "externalLinks": self.summary.external_links,
                "brokenCount": self.summary.broken_count,
                "successRate": self.summary.success_rate,
            },
        }
