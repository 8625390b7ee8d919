"""Broken-link checker: audit one page's outbound hyperlinks."""

from linkcheck.checker import PageFetchError, check_broken_links

__all__ = ["check_broken_links", "PageFetchError"]
