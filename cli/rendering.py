"""Utilities for rendering audit reports in the CLI."""

from __future__ import annotations

from typing import List

from linkcheck.checker.models import AuditResult, LinkOutcome


def normalize_page_url(raw: str) -> str:
    """Trim *raw* and assume ``https://`` when no http(s) scheme is given."""
    url = raw.strip()
    if not url:
        return ""
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def status_label(status: int) -> str:
    """Human-readable status for a broken link."""
    if status == 0:
        return "Connection failed"
    return str(status)


def _link_line(link: LinkOutcome) -> str:
    scope = "external" if link.is_external else "internal"
    text = f"  {link.text!r}" if link.text else ""
    return f"  [{status_label(link.status):>17}] ({scope}) {link.url}{text}"


def render_report(result: AuditResult) -> str:
    """Render *result* as a plain-text report.

    Returns:
        The multi-line report, without a trailing newline.
    """
    summary = result.summary
    lines: List[str] = [
        f"Broken links report for {result.url}",
        "=" * 72,
        f"Total links    : {result.total_links}",
        f"Working        : {result.working_links}",
        f"Broken         : {summary.broken_count}",
        f"Internal       : {summary.internal_links}",
        f"External       : {summary.external_links}",
        f"Success rate   : {summary.success_rate}%",
    ]

    for warning in result.warnings:
        lines.append(f"⚠️  {warning}")

    lines.append("")
    if result.broken_links:
        shown = len(result.broken_links)
        header = f"Broken links ({shown}"
        if summary.broken_count > shown:
            header += f" of {summary.broken_count}"
        lines.append(header + "):")
        lines.extend(_link_line(link) for link in result.broken_links)
    else:
        lines.append("✅ No broken links found.")

    return "\n".join(lines)
