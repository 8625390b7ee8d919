"""Single-link prober: a HEAD request, then a GET if the HEAD never answers."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as DeadlineExceeded
from typing import Callable

import httpx

from linkcheck.config import ProbeConfig
from linkcheck.checker.models import CandidateLink, LinkOutcome

# Status recorded when no HTTP response could be obtained at all.
CONNECTION_FAILED = 0

# Failures that mean "no status line was received".  An HTTP error status is
# *not* one of these: a 404 or 405 is a perfectly good probe result.
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, DeadlineExceeded)


def _status_only(client: httpx.Client, method: str, url: str) -> int:
    # Streaming stops at the headers; the body is never downloaded.
    with client.stream(method, url) as response:
        return response.status_code


def _request_status(
    method: str,
    url: str,
    *,
    timeout: float,
    max_redirects: int,
    user_agent: str,
    client_factory: Callable[..., httpx.Client],
) -> int:
    """Return the status of one request, bounded by *timeout* wall-clock seconds.

    httpx only applies ``timeout`` to each connect/read step, so a server
    trickling bytes could keep a request alive forever.  The request runs on
    a watchdog thread instead; when the deadline passes the client is closed
    and :class:`DeadlineExceeded` is raised.
    """
    client = client_factory(
        headers={"User-Agent": user_agent},
        timeout=timeout,
        follow_redirects=True,
        max_redirects=max_redirects,
    )
    watchdog = ThreadPoolExecutor(max_workers=1)
    try:
        future = watchdog.submit(_status_only, client, method, url)
        return future.result(timeout=timeout)
    finally:
        watchdog.shutdown(wait=False)
        client.close()


def probe_link(
    candidate: CandidateLink,
    config: ProbeConfig,
    client_factory: Callable[..., httpx.Client] = httpx.Client,
) -> LinkOutcome:
    """Check *candidate* and return exactly one :class:`LinkOutcome`.

    A lightweight ``HEAD`` goes out first.  Only when it fails at the
    transport level (timeout, DNS, refused connection, TLS, redirect loop)
    is a ``GET`` attempted, with its own shorter timeout and redirect cap.
    Each tier is capped at its timeout in total, so a link costs at most
    ``head_timeout + get_timeout`` seconds.  If both tiers fail the outcome
    carries ``status=0``.  Never raises for network problems.
    """
    tiers = (
        ("HEAD", config.head_timeout, config.head_max_redirects),
        ("GET", config.get_timeout, config.get_max_redirects),
    )
    status = CONNECTION_FAILED
    for method, timeout, max_redirects in tiers:
        try:
            status = _request_status(
                method,
                candidate.url,
                timeout=timeout,
                max_redirects=max_redirects,
                user_agent=config.user_agent,
                client_factory=client_factory,
            )
            break
        except _TRANSPORT_ERRORS:
            continue

    return LinkOutcome(
        url=candidate.url,
        status=status,
        text=candidate.text,
        is_external=candidate.is_external,
    )
