"""Link extraction: turns page markup into a list of links worth probing."""

from __future__ import annotations

import re
from typing import List
from urllib.parse import urldefrag, urljoin, urlsplit

from bs4 import BeautifulSoup

from linkcheck.checker.models import (
    CandidateLink,
    ExtractedLinks,
    LinkEntry,
    LinkOutcome,
    LinkTallies,
)

NO_LINKS_WARNING = "No links found on this page to check."

# Hrefs with these prefixes are never counted or probed.
_SKIP_PREFIXES = ("#", "mailto:", "tel:", "javascript:")

# RFC 3986 scheme token.
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _is_skipped(href: str) -> bool:
    return href.lstrip().lower().startswith(_SKIP_PREFIXES)


def resolve_href(href: str, base: str) -> str:
    """Resolve *href* against *base* and drop any fragment.

    Raises:
        ValueError: If *href* cannot be turned into a usable absolute URL,
            e.g. ``ht!tp://bad`` (a scheme-like prefix with illegal
            characters), a broken IPv6 literal, an out-of-range port, or an
            http(s) URL without a host.
    """
    href = href.strip()
    head, sep, _ = href.partition(":")
    if sep and not any(ch in head for ch in "/?#") and not _SCHEME_RE.match(head):
        raise ValueError(f"Invalid URL scheme in {href!r}")

    resolved = urldefrag(urljoin(base, href)).url
    parts = urlsplit(resolved)
    _ = parts.port  # raises ValueError when out of range
    if parts.scheme in ("http", "https") and not parts.hostname:
        raise ValueError(f"Missing host in {href!r}")
    return resolved


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_links(html: str, source_url: str) -> ExtractedLinks:
    """Collect the anchors of *html* that should be checked.

    Entries come back in document order.  Each qualifying href either
    resolves to a :class:`CandidateLink` (deduplicated on its resolved URL)
    or, when it is malformed, to a ready-made broken :class:`LinkOutcome`
    with ``status=0``.  Internal/external tallies cover every resolvable
    qualifying anchor, duplicates included; malformed hrefs are left out of
    the tallies.
    """
    soup = BeautifulSoup(html, "html.parser")
    anchors = soup.find_all("a", href=True)
    source_host = urlsplit(source_url).hostname

    entries: List[LinkEntry] = []
    seen: set[str] = set()
    internal = 0
    external = 0

    for anchor in anchors:
        href = anchor.get("href")
        if not href or _is_skipped(href):
            continue
        text = anchor.get_text().strip()

        try:
            url = resolve_href(href, source_url)
        except ValueError:
            entries.append(LinkOutcome(url=href, status=0, text=text, is_external=False))
            continue

        is_external = urlsplit(url).hostname != source_host
        if is_external:
            external += 1
        else:
            internal += 1

        if url in seen:
            continue
        seen.add(url)
        entries.append(CandidateLink(url=url, text=text, is_external=is_external))

    warnings: List[str] = []
    if not entries:
        warnings.append(NO_LINKS_WARNING)

    return ExtractedLinks(
        total_anchors=len(anchors),
        entries=entries,
        tallies=LinkTallies(internal=internal, external=external),
        warnings=warnings,
    )
