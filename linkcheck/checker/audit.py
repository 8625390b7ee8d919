"""End-to-end page audit: fetch → extract → probe → aggregate."""

from __future__ import annotations

from typing import Optional

from linkcheck.config import ProbeConfig, settings
from linkcheck.checker.aggregator import aggregate
from linkcheck.checker.dispatcher import dispatch
from linkcheck.checker.errors import PageFetchError
from linkcheck.checker.extractor import extract_links
from linkcheck.checker.fetcher import fetch_page
from linkcheck.checker.models import AuditResult


def check_broken_links(
    url: str,
    *,
    config: Optional[ProbeConfig] = None,
    max_links: Optional[int] = None,
    max_broken: Optional[int] = None,
) -> AuditResult:
    """Audit every outbound link on the page at *url*.

    Args:
        url: Absolute http(s) URL of the page to audit.
        config: Probe settings; defaults to :meth:`ProbeConfig.from_settings`.
        max_links: Cap on links actually probed (``settings.max_links_to_check``).
        max_broken: Cap on broken links listed in the report
            (``settings.max_broken_reported``).

    Raises:
        PageFetchError: If the page itself cannot be fetched.  No partial
            result is produced in that case.
    """
    config = config or ProbeConfig.from_settings()
    if max_links is None:
        max_links = settings.max_links_to_check
    if max_broken is None:
        max_broken = settings.max_broken_reported

    print(f"[FETCH] {url}")
    try:
        html = fetch_page(
            url,
            timeout=settings.page_timeout,
            user_agent=settings.page_user_agent,
        )
    except PageFetchError as exc:
        print(f"[FETCH] ✗ {exc}")
        raise PageFetchError(f"Failed to check broken links: {exc}") from exc

    extracted = extract_links(html, url)
    print(
        f"[FETCH] {extracted.total_anchors} anchor(s), "
        f"{extracted.candidate_count} link(s) to check."
    )
    dispatched = dispatch(extracted.entries, config, max_links)
    return aggregate(url, extracted, dispatched, max_broken)
