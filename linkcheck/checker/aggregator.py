"""Reduce probe outcomes into the final :class:`AuditResult`."""

from __future__ import annotations

from linkcheck.checker.models import (
    AuditResult,
    AuditSummary,
    DispatchResult,
    ExtractedLinks,
)


def success_rate(working: int, broken: int) -> int:
    """Percentage of working links, rounded half up; 100 when nothing was checked."""
    checked = working + broken
    if checked == 0:
        return 100
    return int(working * 100 / checked + 0.5)


def aggregate(
    url: str,
    extracted: ExtractedLinks,
    dispatched: DispatchResult,
    max_broken: int,
) -> AuditResult:
    broken = [outcome for outcome in dispatched.outcomes if outcome.is_broken]
    working = len(dispatched.outcomes) - len(broken)

    return AuditResult(
        url=url,
        # Every href-bearing anchor, including the skipped mailto:/tel:/# ones.
        total_links=extracted.total_anchors,
        working_links=working,
        broken_links=broken[:max_broken],
        warnings=[*extracted.warnings, *dispatched.warnings],
        summary=AuditSummary(
            internal_links=extracted.tallies.internal,
            external_links=extracted.tallies.external,
            broken_count=len(broken),
            success_rate=success_rate(working, len(broken)),
        ),
    )
