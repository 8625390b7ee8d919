"""Exceptions raised by the link checker."""

from __future__ import annotations


class PageFetchError(Exception):
    """The source page itself could not be retrieved.

    This is the only failure that aborts an audit; problems with individual
    links are reported as data in the result instead.
    """
