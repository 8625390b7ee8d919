"""HTTP fetcher for the page under audit."""

from __future__ import annotations

import httpx

from linkcheck.checker.errors import PageFetchError


def fetch_page(url: str, *, timeout: float, user_agent: str) -> str:
    """Fetch *url* and return its HTML.

    Redirects are followed; anything other than a 2xx final response is
    treated as a failure, as is any transport error.

    Raises:
        PageFetchError: If the page cannot be retrieved.
    """
    try:
        with httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise PageFetchError(str(exc) or exc.__class__.__name__) from exc
